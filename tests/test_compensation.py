import dataclasses

import pytest

from bme280_sensor import (RawSample, altitude, compensate, compensate_humidity, compensate_pressure,
                           compensate_sample, compensate_temperature)
from bme280_sensor.compensation import HUMIDITY_MAX, fine_temperature, raw16, raw20

ADC_T = 519888
ADC_P = 415148
ADC_H = 31000


def test_datasheet_temperature(calibration):
    temp, t_fine = compensate_temperature(ADC_T, calibration)
    assert t_fine == 128422
    assert temp == pytest.approx(25.08, abs=1e-2)


def test_datasheet_pressure(calibration):
    _, t_fine = compensate_temperature(ADC_T, calibration)
    assert compensate_pressure(ADC_P, t_fine, calibration) == pytest.approx(100653.27, abs=2e-2)
    assert compensate_pressure(ADC_P, t_fine, calibration) == 25767233 / 256.0


def test_humidity(calibration):
    _, t_fine = compensate_temperature(ADC_T, calibration)
    assert compensate_humidity(ADC_H, t_fine, calibration) == pytest.approx(60.5547, abs=1e-2)


def test_temperature_is_pure(calibration):
    first = compensate_temperature(ADC_T, calibration)
    for _ in range(5):
        assert compensate_temperature(ADC_T, calibration) == first


def test_temperature_wraps_at_32_bits(calibration):
    cal = dataclasses.replace(calibration, T1=0, T2=32767, T3=0)
    assert fine_temperature(0xFFFFF, cal) == -80


def test_pressure_zero_divisor_returns_zero(calibration):
    cal = dataclasses.replace(calibration, P1=0)
    _, t_fine = compensate_temperature(ADC_T, cal)
    assert compensate_pressure(ADC_P, t_fine, cal) == 0.0


@pytest.mark.parametrize("adc_h", [0, 1, 20000, 40000, 65535])
@pytest.mark.parametrize("t_fine", [-200000, 0, 76800, 128422, 300000])
@pytest.mark.parametrize("coefficients", [
    {},
    dict(H1=255, H2=32767, H3=255, H4=4095, H5=4095, H6=127),
    dict(H1=0, H2=-32768, H3=0, H4=0, H5=0, H6=-128),
    dict(H2=32767, H4=0, H5=0, H6=127),
])
def test_humidity_is_saturated(calibration, adc_h, t_fine, coefficients):
    cal = dataclasses.replace(calibration, **coefficients)
    assert 0.0 <= compensate_humidity(adc_h, t_fine, cal) <= (HUMIDITY_MAX >> 12) / 1024.0


def test_humidity_clamps_to_bounds(calibration):
    _, t_fine = compensate_temperature(ADC_T, calibration)
    assert compensate_humidity(0, t_fine, calibration) == 0.0
    assert compensate_humidity(65535, t_fine, calibration) == 100.0


def test_compensate_tuple(calibration):
    temp, press, hum = compensate(calibration, ADC_T, ADC_P)
    assert temp == pytest.approx(25.08, abs=1e-2)
    assert press == pytest.approx(100653.25, abs=1e-2)
    assert hum is None


def test_compensate_sample(calibration):
    m = compensate_sample(calibration, RawSample(ADC_T, ADC_P, ADC_H))
    assert m.humidity == pytest.approx(60.55, abs=1e-2)


def test_raw_assembly():
    assert raw20(0x7E, 0xED, 0x00) == ADC_T
    assert raw20(0x65, 0x5A, 0xC0) == ADC_P
    assert raw20(0xFF, 0xFF, 0xFF) == 0xFFFFF
    assert raw16(0x79, 0x18) == ADC_H


def test_altitude():
    assert altitude(101325.0) == pytest.approx(0.0, abs=1e-6)
    assert altitude(89874.6) == pytest.approx(1000.0, abs=5.0)


def test_compensate_sample_without_humidity(calibration):
    m = compensate_sample(calibration, RawSample(ADC_T, ADC_P, None))
    assert m.humidity is None
    assert m.temperature == pytest.approx(25.08, abs=1e-2)
