"""Register access on top of an smbus2-style bus object."""
import logging

from .errors import ReadFailure, WriteFailure

logger = logging.getLogger(__name__)


class RegisterAccess:
    """Byte and block register I/O for one device address.

    ``bus`` is anything exposing the ``smbus2.SMBus`` methods
    ``read_byte_data``, ``write_byte_data``, ``read_i2c_block_data``
    and ``write_quick``; transport problems surface as ``OSError``.
    """

    def __init__(self, bus, address):
        self.bus = bus
        self.address = address

    def probe(self):
        try:
            self.bus.write_quick(self.address)
            return True
        except OSError as e:
            logger.debug("No ack at 0x%02X: %s", self.address, e)
            return False

    def read_register(self, reg):
        # A failed single read reports 0, indistinguishable from a real zero.
        try:
            return self.bus.read_byte_data(self.address, reg) & 0xFF
        except OSError as e:
            logger.warning("Read of register 0x%02X at 0x%02X failed: %s", reg, self.address, e)
            return 0

    def write_register(self, reg, value):
        try:
            self.bus.write_byte_data(self.address, reg, value & 0xFF)
        except OSError as e:
            raise WriteFailure("Write of 0x%02X to register 0x%02X failed: %s" % (value & 0xFF, reg, e)) from e

    def read_block(self, reg, length):
        try:
            data = self.bus.read_i2c_block_data(self.address, reg, length)
        except OSError as e:
            raise ReadFailure("Block read of %d bytes at 0x%02X failed: %s" % (length, reg, e)) from e
        if len(data) != length:
            raise ReadFailure("Block read at 0x%02X returned %d of %d bytes" % (reg, len(data), length))
        return bytes(data)
