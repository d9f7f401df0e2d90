"""Operating configuration: power mode, oversampling, filter, standby."""
import logging
from dataclasses import dataclass

from .registers import (FILTER, MODE, OSRS_H, OSRS_P, OSRS_T, REG_CONFIG, REG_CTRL_HUM,
                        REG_CTRL_MEAS, STANDBY, Filter, Mode, Oversampling, Standby,
                        get_field, set_field)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Configuration:
    mode: Mode = Mode.NORMAL
    oversampling_temperature: Oversampling = Oversampling.X16
    oversampling_pressure: Oversampling = Oversampling.X16
    oversampling_humidity: Oversampling = Oversampling.X16
    filter: Filter = Filter.X16
    standby: Standby = Standby.MS_0_5

    @classmethod
    def from_registers(cls, ctrl_hum, ctrl_meas, config):
        return cls(
            mode=Mode.decode(get_field(ctrl_meas, MODE)),
            oversampling_temperature=Oversampling.decode(get_field(ctrl_meas, OSRS_T)),
            oversampling_pressure=Oversampling.decode(get_field(ctrl_meas, OSRS_P)),
            oversampling_humidity=Oversampling.decode(get_field(ctrl_hum, OSRS_H)),
            filter=Filter.decode(get_field(config, FILTER)),
            standby=Standby.decode(get_field(config, STANDBY)),
        )

    def to_registers(self):
        """Return ``(ctrl_hum, ctrl_meas, config)`` register values."""
        ctrl_meas = set_field(0, OSRS_T, self.oversampling_temperature)
        ctrl_meas = set_field(ctrl_meas, OSRS_P, self.oversampling_pressure)
        ctrl_meas = set_field(ctrl_meas, MODE, self.mode)
        config = set_field(set_field(0, FILTER, self.filter), STANDBY, self.standby)
        return set_field(0, OSRS_H, self.oversampling_humidity), ctrl_meas, config


class ConfigurationController:
    """Read-modify-write setters over CTRL_MEAS, CTRL_HUM and CONFIG.

    Each setter only touches its own bit field. There is no rollback:
    a failed write leaves the earlier writes applied.
    """

    def __init__(self, access):
        self.access = access

    def _update(self, reg, field, value):
        old = self.access.read_register(reg)
        new = set_field(old, field, value)
        self.access.write_register(reg, new)
        logger.debug("Register 0x%02X: 0x%02X -> 0x%02X", reg, old, new)

    def set_mode(self, mode):
        self._update(REG_CTRL_MEAS, MODE, Mode(mode))

    def set_oversampling_temperature(self, oversampling):
        self._update(REG_CTRL_MEAS, OSRS_T, Oversampling(oversampling))

    def set_oversampling_pressure(self, oversampling):
        self._update(REG_CTRL_MEAS, OSRS_P, Oversampling(oversampling))

    def set_oversampling_humidity(self, oversampling):
        self.access.write_register(REG_CTRL_HUM, set_field(0, OSRS_H, Oversampling(oversampling)))
        # ctrl_hum only takes effect after the next ctrl_meas write
        self.access.write_register(REG_CTRL_MEAS, self.access.read_register(REG_CTRL_MEAS))

    def set_filter(self, filter):
        self._update(REG_CONFIG, FILTER, Filter(filter))

    def set_standby_time(self, standby):
        self._update(REG_CONFIG, STANDBY, Standby(standby))

    def apply(self, configuration):
        self.set_oversampling_temperature(configuration.oversampling_temperature)
        self.set_oversampling_pressure(configuration.oversampling_pressure)
        self.set_oversampling_humidity(configuration.oversampling_humidity)
        self.set_filter(configuration.filter)
        self.set_standby_time(configuration.standby)
        self.set_mode(configuration.mode)
        logger.info("Applied %s", configuration)

    def read_back(self):
        return Configuration.from_registers(self.access.read_register(REG_CTRL_HUM),
                                            self.access.read_register(REG_CTRL_MEAS),
                                            self.access.read_register(REG_CONFIG))
