import pytest

from bme280_sensor import load_calibration
from bme280_sensor.calibration import s8, s16, u16

from conftest import CALIB00, CALIB26


def test_datasheet_coefficients(calibration):
    assert (calibration.T1, calibration.T2, calibration.T3) == (27504, 26435, -1000)
    assert (calibration.P1, calibration.P2, calibration.P3) == (36477, -10685, 3024)
    assert (calibration.P4, calibration.P5, calibration.P6) == (2855, 140, -7)
    assert (calibration.P7, calibration.P8, calibration.P9) == (15500, -14600, 6000)


def test_humidity_coefficients(calibration):
    assert calibration.H1 == 75
    assert calibration.H2 == 362
    assert calibration.H3 == 0
    assert calibration.H4 == 313
    assert calibration.H5 == 50
    assert calibration.H6 == 30


def test_h4_h5_share_middle_byte():
    cal = load_calibration(CALIB00, bytes([0, 0, 0, 0xAB, 0xCD, 0xEF, 0]))
    assert cal.H4 == 0xABD
    assert cal.H5 == 0xEFC


def test_signed_byte_and_words():
    cal = load_calibration(CALIB00, bytes([0xFF, 0xFF, 0xFE, 0, 0, 0, 0x80]))
    assert cal.H2 == -1
    assert cal.H3 == 0xFE
    assert cal.H6 == -128
    assert u16(0xFF, 0xFF) == 65535
    assert s16(0x00, 0x80) == -32768
    assert s8(0x7F) == 127


def test_short_block_rejected():
    with pytest.raises(ValueError):
        load_calibration(CALIB00[:24], CALIB26)
