#!/usr/bin/env python3
import argparse
import csv
import logging
import time
from datetime import datetime
from pathlib import Path

from smbus2 import SMBus

from bme280_sensor import BME280Error
from read_bme import LOG_FORMAT, add_common_args, open_sensor, resolve_settings

logger = logging.getLogger("dump_temp")

HEADER = ["timestamp", "temperature_C", "pressure_hPa", "humidity_percent"]


def format_row(timestamp, m):
    return [timestamp.isoformat(), f"{m.temperature:.2f}", f"{m.pressure/100.0:.2f}",
            f"{m.humidity:.2f}" if m.humidity is not None else ""]


def log_measurements(sensor, f, count=None, interval=60.0, now=datetime.now, sleep=time.sleep):
    writer = csv.writer(f)
    i = 0
    while count is None or i < count:
        try:
            m = sensor.read_measurement()
            writer.writerow(format_row(now(), m))
            f.flush()
            logger.info("Logged: %.2f C, %.2f hPa, %.2f %%", m.temperature, m.pressure / 100.0, m.humidity)
        except BME280Error as e:
            logger.error("Read error: %s", e)
        i += 1
        if count is None or i < count:
            sleep(interval)
    return i


def main(argv=None):
    p = add_common_args(argparse.ArgumentParser(description="Append BME280 readings to a CSV file"))
    p.add_argument("--out", help="CSV file to append to")
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format=LOG_FORMAT)
    try:
        settings = resolve_settings(args)
    except ValueError as e:
        p.error(str(e))
    out_path = Path(args.out or settings.csv_path)
    new_file = not out_path.exists()
    with SMBus(settings.bus) as bus, open(out_path, "a", newline="") as f:
        if new_file:
            csv.writer(f).writerow(HEADER)
        sensor = open_sensor(bus, settings)
        if sensor is None:
            return 1
        logger.info("Logging from device at 0x%02X to %s", sensor.address, out_path)
        log_measurements(sensor, f, count=args.count, interval=settings.interval)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
