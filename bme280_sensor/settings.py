"""YAML-backed settings for the reader and logger scripts."""
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .control import Configuration
from .registers import ADDRESSES, Filter, Mode, Oversampling, Standby


@dataclass
class SensorSettings:
    """
    Bus location, device configuration and polling knobs.

    ``address`` of None means scan the two BME280 addresses.
    """

    bus: int = 1
    address: Optional[int] = None
    mode: str = "normal"
    oversampling_temperature: int = 16
    oversampling_pressure: int = 16
    oversampling_humidity: int = 16
    filter: int = 16
    standby_ms: float = 0.5
    interval: float = 1.0
    sea_level_hpa: float = 1013.25
    csv_path: str = "temperature_log.csv"

    def to_configuration(self) -> Configuration:
        return Configuration(
            mode=Mode.from_name(self.mode),
            oversampling_temperature=Oversampling.from_factor(self.oversampling_temperature),
            oversampling_pressure=Oversampling.from_factor(self.oversampling_pressure),
            oversampling_humidity=Oversampling.from_factor(self.oversampling_humidity),
            filter=Filter.from_coefficient(self.filter),
            standby=Standby.from_ms(self.standby_ms),
        )

    def validated(self) -> SensorSettings:
        """Return a copy with numeric fields coerced; raises ValueError on bad values."""
        address = self.address
        if isinstance(address, str):
            address = int(address, 0)
        if address is not None and address not in ADDRESSES:
            raise ValueError(f"Unsupported BME280 address: {address!r}")
        settings = SensorSettings(
            bus=int(self.bus),
            address=address,
            mode=str(self.mode).lower(),
            oversampling_temperature=int(self.oversampling_temperature),
            oversampling_pressure=int(self.oversampling_pressure),
            oversampling_humidity=int(self.oversampling_humidity),
            filter=int(self.filter),
            standby_ms=float(self.standby_ms),
            interval=max(0.0, float(self.interval)),
            sea_level_hpa=float(self.sea_level_hpa),
            csv_path=str(self.csv_path),
        )
        settings.to_configuration()
        return settings


def settings_from_mapping(data: Mapping[str, Any] | None) -> SensorSettings:
    """Build :class:`SensorSettings` from ``data`` (ignoring unknown keys)."""
    if not data:
        return SensorSettings()
    section = data.get("bme280", data)
    if not isinstance(section, Mapping):
        raise ValueError(f"Expected mapping for bme280 settings, got {type(section).__name__}")
    known = {f.name for f in fields(SensorSettings)}
    payload = {key: section[key] for key in section.keys() & known}
    return SensorSettings(**payload).validated()


def load_settings(path: str | Path | None) -> SensorSettings:
    """
    Load settings from ``path``.

    Missing files fall back to default :class:`SensorSettings`.
    """
    if path is None:
        return SensorSettings()
    cfg_path = Path(path)
    if not cfg_path.exists():
        return SensorSettings()
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return settings_from_mapping(raw)
