#!/usr/bin/env python3

import argparse
import logging
import time

from smbus2 import SMBus

from bme280_sensor import BME280, BME280Error, altitude, find_addr, load_settings

logger = logging.getLogger("read_bme")

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def add_common_args(p):
    p.add_argument("--config", help="YAML settings file (bme280 section)")
    p.add_argument("--bus", type=int, help="I2C bus number")
    p.add_argument("--address", type=lambda s: int(s, 0), help="0x76 or 0x77; scanned when omitted")
    p.add_argument("--interval", type=float, help="seconds between readings")
    p.add_argument("--count", type=int, help="stop after this many readings")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def resolve_settings(args):
    settings = load_settings(args.config)
    for name in ("bus", "address", "interval"):
        value = getattr(args, name)
        if value is not None:
            setattr(settings, name, value)
    return settings.validated()


def open_sensor(bus, settings):
    addr = settings.address
    if addr is None:
        addr, cid = find_addr(bus)
        if addr is None:
            logger.error("No BME280 found at 0x76/0x77")
            return None
        logger.info("Found device at 0x%02X chip id 0x%02X", addr, cid)
    sensor = BME280(bus, addr)
    if not sensor.begin(settings.to_configuration()):
        return None
    return sensor


def main(argv=None):
    p = add_common_args(argparse.ArgumentParser(description="Print BME280 readings"))
    p.add_argument("--sea-level", type=float, help="sea level pressure in hPa")
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)
    try:
        settings = resolve_settings(args)
    except ValueError as e:
        p.error(str(e))
    sea_level = args.sea_level or settings.sea_level_hpa
    i = 0
    with SMBus(settings.bus) as bus:
        sensor = open_sensor(bus, settings)
        if sensor is None:
            return 1
        while args.count is None or i < args.count:
            try:
                m = sensor.read_measurement()
                print("Temperature: %.2f C Pressure: %.2f hPa Humidity: %.2f %% Altitude: %.1f m, %d"
                      % (m.temperature, m.pressure / 100.0, m.humidity, altitude(m.pressure, sea_level), i))
            except BME280Error as e:
                logger.error("Read error: %s", e)
            i = i + 1
            time.sleep(settings.interval)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
