"""BME280 device: identification, setup and compensated reads."""
import logging
import time

from smbus2 import SMBus

from .bus import RegisterAccess
from .calibration import read_calibration
from .compensation import (RawSample, altitude, compensate_humidity, compensate_pressure,
                           compensate_sample, compensate_temperature, raw16, raw20)
from .control import Configuration, ConfigurationController
from .errors import BME280Error, BusUnavailable, IdentityMismatch, NotInitialized
from .registers import (ADDRESS_PRIMARY, ADDRESSES, CHIP_ID, REG_HUM_LSB, REG_HUM_MSB,
                        REG_ID, REG_PRESS_LSB, REG_PRESS_MSB, REG_PRESS_XLSB, REG_RESET,
                        REG_STATUS, REG_TEMP_LSB, REG_TEMP_MSB, REG_TEMP_XLSB, RESET_VALUE,
                        STATUS_MEASURING)

logger = logging.getLogger(__name__)


def find_addr(bus):
    """Return ``(address, chip_id)`` of the first responding address, else ``(None, None)``."""
    for a in ADDRESSES:
        try:
            cid = bus.read_byte_data(a, REG_ID)
            return a, cid
        except OSError:
            pass
    return None, None


class BME280:
    """Temperature, pressure and humidity sensor on an I2C bus.

    ``bus`` is an ``SMBus``-like object, or a bus number in which case an
    ``smbus2.SMBus`` is opened and closed by this instance. Not safe for
    concurrent use; callers serialize access to a shared bus.
    """

    def __init__(self, bus, address=ADDRESS_PRIMARY, reset_delay=0.1):
        self._owns_bus = isinstance(bus, int)
        self.bus = SMBus(bus) if self._owns_bus else bus
        self.access = RegisterAccess(self.bus, address)
        self.controller = ConfigurationController(self.access)
        self.reset_delay = reset_delay
        self.calibration = None
        self.last_error = None

    @property
    def address(self):
        return self.access.address

    def initialize(self, configuration=None):
        """Identify, reset, load calibration and apply ``configuration``.

        Raises BusUnavailable, IdentityMismatch, ReadFailure or WriteFailure.
        """
        self.calibration = None
        if not self.access.probe():
            raise BusUnavailable("No device at address 0x%02X" % self.address)
        self._check_identity()
        logger.info("BME280 found at 0x%02X, resetting", self.address)
        self.reset()
        time.sleep(self.reset_delay)
        self._check_identity()
        calibration = read_calibration(self.access)
        self.controller.apply(configuration or Configuration())
        self.calibration = calibration
        logger.info("BME280 at 0x%02X initialized", self.address)
        return True

    def begin(self, configuration=None):
        try:
            self.last_error = None
            return self.initialize(configuration)
        except BME280Error as e:
            logger.error("BME280 initialization failed: %s", e)
            self.last_error = e
            return False

    def _check_identity(self):
        cid = self.chip_id()
        logger.debug("Chip ID read: 0x%02X", cid)
        if cid != CHIP_ID:
            raise IdentityMismatch(cid, CHIP_ID)

    def is_present(self):
        return self.chip_id() == CHIP_ID

    def chip_id(self):
        return self.access.read_register(REG_ID)

    def reset(self):
        self.access.write_register(REG_RESET, RESET_VALUE)

    def is_measuring(self):
        return bool(self.access.read_register(REG_STATUS) & STATUS_MEASURING)

    # configuration

    def set_mode(self, mode):
        self.controller.set_mode(mode)

    def set_oversampling_temperature(self, oversampling):
        self.controller.set_oversampling_temperature(oversampling)

    def set_oversampling_pressure(self, oversampling):
        self.controller.set_oversampling_pressure(oversampling)

    def set_oversampling_humidity(self, oversampling):
        self.controller.set_oversampling_humidity(oversampling)

    def set_filter(self, filter):
        self.controller.set_filter(filter)

    def set_standby_time(self, standby):
        self.controller.set_standby_time(standby)

    @property
    def configuration(self):
        return self.controller.read_back()

    # measurements

    def _calibration(self):
        if self.calibration is None:
            raise NotInitialized("BME280 at 0x%02X is not initialized" % self.address)
        return self.calibration

    def _read20(self, msb, lsb, xlsb):
        r = self.access.read_register
        return raw20(r(msb), r(lsb), r(xlsb))

    def read_raw_temperature(self):
        return self._read20(REG_TEMP_MSB, REG_TEMP_LSB, REG_TEMP_XLSB)

    def read_raw_pressure(self):
        return self._read20(REG_PRESS_MSB, REG_PRESS_LSB, REG_PRESS_XLSB)

    def read_raw_humidity(self):
        r = self.access.read_register
        return raw16(r(REG_HUM_MSB), r(REG_HUM_LSB))

    def read_raw(self):
        return RawSample(temperature=self.read_raw_temperature(),
                         pressure=self.read_raw_pressure(),
                         humidity=self.read_raw_humidity())

    def _temperature(self):
        return compensate_temperature(self.read_raw_temperature(), self._calibration())

    def read_temperature(self):
        """Temperature in degrees Celsius."""
        return self._temperature()[0]

    def read_pressure(self):
        """Pressure in Pa; 0.0 signals an invalid reading."""
        _, t_fine = self._temperature()
        return compensate_pressure(self.read_raw_pressure(), t_fine, self.calibration)

    def read_humidity(self):
        """Relative humidity in %RH."""
        _, t_fine = self._temperature()
        return compensate_humidity(self.read_raw_humidity(), t_fine, self.calibration)

    def read_altitude(self, sea_level_hpa=1013.25):
        return altitude(self.read_pressure(), sea_level_hpa)

    def read_measurement(self):
        return compensate_sample(self._calibration(), self.read_raw())

    def close(self):
        if self._owns_bus:
            self.bus.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
