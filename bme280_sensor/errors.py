"""Exceptions raised by the BME280 driver."""


class BME280Error(Exception):
    pass


class BusUnavailable(BME280Error):
    """Nothing acknowledged at the configured bus address."""


class IdentityMismatch(BME280Error):
    def __init__(self, chip_id, expected):
        super().__init__("Unexpected chip ID 0x%02X, expected 0x%02X" % (chip_id, expected))
        self.chip_id = chip_id
        self.expected = expected


class ReadFailure(BME280Error):
    pass


class WriteFailure(BME280Error):
    pass


class NotInitialized(BME280Error):
    pass
