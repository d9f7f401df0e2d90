"""Fixed-point compensation of raw BME280 ADC codes.

Temperature and humidity run on 32-bit signed integers, pressure on
64-bit signed integers; every intermediate wraps like two's-complement
hardware arithmetic. The fine temperature produced by the temperature
step is passed explicitly to the pressure and humidity steps.
"""
from dataclasses import dataclass
from typing import Optional

HUMIDITY_MAX = 419430400


def _i32(v):
    return ((v + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _i64(v):
    return ((v + 0x8000000000000000) & 0xFFFFFFFFFFFFFFFF) - 0x8000000000000000


def _div(a, b):
    # integer division truncating toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@dataclass(frozen=True)
class RawSample:
    temperature: int
    pressure: int
    humidity: int


@dataclass(frozen=True)
class Measurement:
    temperature: float
    pressure: float
    humidity: Optional[float]


def raw20(msb, lsb, xlsb):
    return (msb << 12) | (lsb << 4) | (xlsb >> 4)


def raw16(msb, lsb):
    return (msb << 8) | lsb


def fine_temperature(adc_t, cal):
    var1 = _i32(_i32(_i32((adc_t >> 3) - _i32(cal.T1 << 1)) * cal.T2) >> 11)
    d = _i32((adc_t >> 4) - cal.T1)
    var2 = _i32(_i32(_i32(_i32(d * d) >> 12) * cal.T3) >> 14)
    return _i32(var1 + var2)


def compensate_temperature(adc_t, cal):
    """Return ``(celsius, t_fine)``."""
    t_fine = fine_temperature(adc_t, cal)
    return (_i32(t_fine * 5 + 128) >> 8) / 100.0, t_fine


def compensate_pressure(adc_p, t_fine, cal):
    """Pressure in Pa; 0.0 when the calibration yields a zero divisor."""
    var1 = _i64(t_fine - 128000)
    var2 = _i64(var1 * var1 * cal.P6)
    var2 = _i64(var2 + _i64(_i64(var1 * cal.P5) << 17))
    var2 = _i64(var2 + _i64(cal.P4 << 35))
    var1 = _i64(_i64(_i64(var1 * var1 * cal.P3) >> 8) + _i64(_i64(var1 * cal.P2) << 12))
    var1 = _i64(_i64((1 << 47) + var1) * cal.P1) >> 33
    if var1 == 0:
        return 0.0
    p = _i64(1048576 - adc_p)
    p = _i64(_div(_i64(_i64(_i64(p << 31) - var2) * 3125), var1))
    var1 = _i64(_i64(cal.P9 * (p >> 13) * (p >> 13)) >> 25)
    var2 = _i64(cal.P8 * p) >> 19
    p = _i64(_i64(_i64(p + var1 + var2) >> 8) + _i64(cal.P7 << 4))
    return p / 256.0


def compensate_humidity(adc_h, t_fine, cal):
    """Relative humidity in %RH, saturated to the device range."""
    v = _i32(t_fine - 76800)
    left = _i32(_i32(_i32(_i32(adc_h << 14) - _i32(cal.H4 << 20)) - _i32(cal.H5 * v)) + 16384) >> 15
    inner = _i32(_i32(_i32(_i32(v * cal.H6) >> 10) * _i32(_i32(_i32(v * cal.H3) >> 11) + 32768)) >> 10)
    right = _i32(_i32(_i32(inner + 2097152) * cal.H2) + 8192) >> 14
    v = _i32(left * right)
    v = _i32(v - (_i32(_i32(_i32((v >> 15) * (v >> 15)) >> 7) * cal.H1) >> 4))
    v = min(max(v, 0), HUMIDITY_MAX)
    return (v >> 12) / 1024.0


def compensate(cal, raw_t, raw_p, raw_h=None):
    """Compensate one raw sample, returning ``(temp, press, hum)``.

    ``hum`` is None when no humidity code is given.
    """
    temp, t_fine = compensate_temperature(raw_t, cal)
    press = compensate_pressure(raw_p, t_fine, cal)
    hum = None
    if raw_h is not None:
        hum = compensate_humidity(raw_h, t_fine, cal)
    return temp, press, hum


def compensate_sample(cal, raw):
    temp, press, hum = compensate(cal, raw.temperature, raw.pressure, raw.humidity)
    return Measurement(temperature=temp, pressure=press, humidity=hum)


def altitude(pressure_pa, sea_level_hpa=1013.25):
    return 44330.0 * (1.0 - ((pressure_pa / 100.0) / sea_level_hpa) ** 0.1903)
