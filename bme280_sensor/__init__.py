from .calibration import CalibrationData, load_calibration, read_calibration
from .compensation import (Measurement, RawSample, altitude, compensate, compensate_humidity,
                           compensate_pressure, compensate_sample, compensate_temperature)
from .control import Configuration, ConfigurationController
from .device import BME280, find_addr
from .errors import (BME280Error, BusUnavailable, IdentityMismatch, NotInitialized,
                     ReadFailure, WriteFailure)
from .registers import ADDRESS_PRIMARY, ADDRESS_SECONDARY, CHIP_ID, Filter, Mode, Oversampling, Standby
from .settings import SensorSettings, load_settings, settings_from_mapping

__version__ = "0.2.0"
