"""Factory calibration coefficients."""
import logging
from dataclasses import dataclass

from .registers import CALIB00_LENGTH, CALIB26_LENGTH, REG_CALIB00, REG_CALIB26

logger = logging.getLogger(__name__)


def u16(lo, hi):
    return (hi << 8) | lo


def s16(lo, hi):
    v = (hi << 8) | lo
    return v - 65536 if v & 0x8000 else v


def s8(v):
    return v - 256 if v & 0x80 else v


@dataclass(frozen=True)
class CalibrationData:
    T1: int
    T2: int
    T3: int
    P1: int
    P2: int
    P3: int
    P4: int
    P5: int
    P6: int
    P7: int
    P8: int
    P9: int
    H1: int
    H2: int
    H3: int
    H4: int
    H5: int
    H6: int


def load_calibration(calib00, calib26):
    """Parse the 0x88..0xA1 and 0xE1..0xE7 register blocks.

    H4 and H5 are 12-bit values sharing the nibbles of 0xE5:
    H4 takes its low nibble, H5 its high nibble.
    """
    d, e = calib00, calib26
    if len(d) < CALIB00_LENGTH or len(e) < CALIB26_LENGTH:
        raise ValueError("Calibration blocks too short: %d/%d bytes" % (len(d), len(e)))
    return CalibrationData(
        T1=u16(d[0], d[1]), T2=s16(d[2], d[3]), T3=s16(d[4], d[5]),
        P1=u16(d[6], d[7]), P2=s16(d[8], d[9]), P3=s16(d[10], d[11]),
        P4=s16(d[12], d[13]), P5=s16(d[14], d[15]), P6=s16(d[16], d[17]),
        P7=s16(d[18], d[19]), P8=s16(d[20], d[21]), P9=s16(d[22], d[23]),
        H1=d[25],
        H2=s16(e[0], e[1]), H3=e[2],
        H4=(e[3] << 4) | (e[4] & 0xF),
        H5=(e[5] << 4) | (e[4] >> 4),
        H6=s8(e[6]),
    )


def read_calibration(access):
    cal = load_calibration(access.read_block(REG_CALIB00, CALIB00_LENGTH),
                           access.read_block(REG_CALIB26, CALIB26_LENGTH))
    logger.debug("Calibration loaded: %s", cal)
    return cal
