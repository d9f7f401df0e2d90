import pytest

from bme280_sensor import load_calibration

# Datasheet worked example for T/P, plus humidity coefficients
# H1=75 H2=362 H3=0 H4=313 H5=50 H6=30
CALIB00 = bytes([
    0x70, 0x6B, 0x43, 0x67, 0x18, 0xFC,
    0x7D, 0x8E, 0x43, 0xD6, 0xD0, 0x0B, 0x27, 0x0B, 0x8C, 0x00,
    0xF9, 0xFF, 0x8C, 0x3C, 0xF8, 0xC6, 0x70, 0x17,
    0x00, 0x4B,
])
CALIB26 = bytes([0x6A, 0x01, 0x00, 0x13, 0x29, 0x03, 0x1E])

# adc_P=415148, adc_T=519888, adc_H=31000
DATA = bytes([0x65, 0x5A, 0xC0, 0x7E, 0xED, 0x00, 0x79, 0x18])


class FakeBus:
    """In-memory BME280 register file with smbus2 method names."""

    def __init__(self, address=0x76, chip_id=0x60):
        self.address = address
        self.regs = [0] * 256
        self.regs[0xD0] = chip_id
        self.regs[0x88:0x88 + len(CALIB00)] = list(CALIB00)
        self.regs[0xE1:0xE1 + len(CALIB26)] = list(CALIB26)
        self.regs[0xF7:0xF7 + len(DATA)] = list(DATA)
        self.writes = []
        self.fail_reads = set()
        self.fail_writes = set()
        self.closed = False

    def _check(self, addr):
        if addr != self.address:
            raise OSError(121, "Remote I/O error")

    def write_quick(self, addr):
        self._check(addr)

    def read_byte_data(self, addr, reg):
        self._check(addr)
        if reg in self.fail_reads:
            raise OSError(5, "Input/output error")
        return self.regs[reg]

    def write_byte_data(self, addr, reg, value):
        self._check(addr)
        if reg in self.fail_writes:
            raise OSError(5, "Input/output error")
        self.writes.append((reg, value))
        if reg == 0xE0:
            if value == 0xB6:
                self.regs[0xF2] = self.regs[0xF4] = self.regs[0xF5] = 0
        else:
            self.regs[reg] = value

    def read_i2c_block_data(self, addr, reg, length):
        self._check(addr)
        if reg in self.fail_reads:
            raise OSError(5, "Input/output error")
        return self.regs[reg:reg + length]

    def close(self):
        self.closed = True


@pytest.fixture
def fake_bus():
    return FakeBus()


@pytest.fixture
def calibration():
    return load_calibration(CALIB00, CALIB26)
