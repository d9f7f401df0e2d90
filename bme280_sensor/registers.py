"""BME280 register map, setting enums and bit-field helpers."""
from enum import IntEnum

ADDRESS_PRIMARY = 0x76
ADDRESS_SECONDARY = 0x77
ADDRESSES = (ADDRESS_PRIMARY, ADDRESS_SECONDARY)

CHIP_ID = 0x60
RESET_VALUE = 0xB6

REG_CALIB00 = 0x88
REG_ID = 0xD0
REG_RESET = 0xE0
REG_CALIB26 = 0xE1
REG_CTRL_HUM = 0xF2
REG_STATUS = 0xF3
REG_CTRL_MEAS = 0xF4
REG_CONFIG = 0xF5
REG_PRESS_MSB = 0xF7
REG_PRESS_LSB = 0xF8
REG_PRESS_XLSB = 0xF9
REG_TEMP_MSB = 0xFA
REG_TEMP_LSB = 0xFB
REG_TEMP_XLSB = 0xFC
REG_HUM_MSB = 0xFD
REG_HUM_LSB = 0xFE

# 0x88..0xA1: T/P coefficients, one unused byte, then H1
CALIB00_LENGTH = 26
CALIB26_LENGTH = 7

STATUS_MEASURING = 0x08

# (mask, shift) per bit field
MODE = (0x03, 0)
OSRS_P = (0x1C, 2)
OSRS_T = (0xE0, 5)
OSRS_H = (0x07, 0)
FILTER = (0x1C, 2)
STANDBY = (0xE0, 5)


def set_field(old, field, value):
    mask, shift = field
    return (old & ~mask & 0xFF) | ((int(value) << shift) & mask)


def get_field(byte, field):
    mask, shift = field
    return (byte & mask) >> shift


class Mode(IntEnum):
    SLEEP = 0x00
    FORCED = 0x01
    NORMAL = 0x03

    @classmethod
    def decode(cls, bits):
        # 0b01 and 0b10 both select forced mode
        return cls.FORCED if bits in (1, 2) else cls(bits)

    @classmethod
    def from_name(cls, name):
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise ValueError("Unsupported mode: %r" % (name,)) from None


class Oversampling(IntEnum):
    SKIP = 0x00
    X1 = 0x01
    X2 = 0x02
    X4 = 0x03
    X8 = 0x04
    X16 = 0x05

    @property
    def factor(self):
        return 0 if self is Oversampling.SKIP else 1 << (self.value - 1)

    @classmethod
    def decode(cls, bits):
        return cls(min(bits, cls.X16))

    @classmethod
    def from_factor(cls, factor):
        for member in cls:
            if member.factor == factor:
                return member
        raise ValueError("Unsupported oversampling factor: %r" % (factor,))


class Filter(IntEnum):
    OFF = 0x00
    X2 = 0x01
    X4 = 0x02
    X8 = 0x03
    X16 = 0x04

    @property
    def coefficient(self):
        return 0 if self is Filter.OFF else 1 << self.value

    @classmethod
    def decode(cls, bits):
        return cls(min(bits, cls.X16))

    @classmethod
    def from_coefficient(cls, coefficient):
        for member in cls:
            if member.coefficient == coefficient:
                return member
        raise ValueError("Unsupported filter coefficient: %r" % (coefficient,))


_STANDBY_MS = (0.5, 62.5, 125.0, 250.0, 500.0, 1000.0, 10.0, 20.0)


class Standby(IntEnum):
    MS_0_5 = 0x00
    MS_62_5 = 0x01
    MS_125 = 0x02
    MS_250 = 0x03
    MS_500 = 0x04
    MS_1000 = 0x05
    MS_10 = 0x06
    MS_20 = 0x07

    @property
    def milliseconds(self):
        return _STANDBY_MS[self.value]

    @classmethod
    def decode(cls, bits):
        return cls(bits)

    @classmethod
    def from_ms(cls, ms):
        for member in cls:
            if member.milliseconds == float(ms):
                return member
        raise ValueError("Unsupported standby time: %r ms" % (ms,))
