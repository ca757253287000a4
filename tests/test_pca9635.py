import pytest

from embedkit.i2c import I2CBus, I2CError
from embedkit.pca9635 import LedDriverMode, PCA9635

ADDRESS = 0x40


class RegisterBus(I2CBus):
    def __init__(self):
        self.regs = [0] * 32
        self.pointer = 0
        self.writes = []
        self.respond = True

    def write(self, address, data):
        data = bytes(data)
        self.writes.append(data)
        self.pointer = data[0] & 0x1F
        for offset, value in enumerate(data[1:]):
            self.regs[self.pointer + offset] = value

    def read(self, address, count):
        if not self.respond:
            return b""
        return bytes(self.regs[self.pointer : self.pointer + count])


@pytest.fixture
def bus():
    return RegisterBus()


@pytest.fixture
def chip(bus):
    return PCA9635(bus, ADDRESS)


def test_constructor_sets_mode1(bus, chip):
    assert bus.writes[0] == bytes([0x00, 0x81])
    assert chip.read_mode(0) == 0x81


def test_write1_uses_auto_increment_pwm_register(bus, chip):
    chip.write1(5, 200)
    assert bus.writes[-1] == bytes([0x82 + 5, 200])
    assert I2CBus.write_read(bus, ADDRESS, bytes([0x82 + 5]), 1) == bytes([200])


def test_write3_writes_consecutive_channels(bus, chip):
    chip.write3(0, 10, 20, 30)
    assert bus.writes[-1] == bytes([0x82, 10, 20, 30])
    assert I2CBus.write_read(bus, ADDRESS, bytes([0x82]), 3) == bytes([10, 20, 30])


def test_write_n_rejects_overflowing_channels(chip):
    with pytest.raises(ValueError):
        chip.write_n(15, [1, 2])
    with pytest.raises(ValueError):
        chip.write1(16, 1)


def test_mode_registers_round_trip(chip):
    chip.write_mode(1, 0x15)
    assert chip.read_mode(1) == 0x15


def test_invalid_mode_register(chip):
    with pytest.raises(ValueError):
        chip.write_mode(2, 0)
    with pytest.raises(ValueError):
        chip.read_mode(0x12)


@pytest.mark.parametrize("channel", [0, 3, 4, 9, 15])
@pytest.mark.parametrize("mode", list(LedDriverMode))
def test_led_driver_mode_round_trip(chip, channel, mode):
    chip.set_led_driver_mode(channel, mode)
    assert chip.get_led_driver_mode(channel) is mode


def test_led_driver_mode_leaves_neighbours(chip):
    chip.set_led_driver_mode(4, LedDriverMode.PWM)
    chip.set_led_driver_mode(5, LedDriverMode.ON)
    assert chip.get_led_driver_mode(4) is LedDriverMode.PWM
    assert chip.get_led_driver_mode(6) is LedDriverMode.OFF


def test_led_driver_mode_rejects_bad_input(chip):
    with pytest.raises(ValueError):
        chip.set_led_driver_mode(16, LedDriverMode.ON)
    with pytest.raises(ValueError):
        chip.set_led_driver_mode(0, 4)
    with pytest.raises(ValueError):
        chip.get_led_driver_mode(16)


def test_group_pwm_and_freq(bus, chip):
    chip.set_group_pwm(0x40)
    chip.set_group_freq(0x17)
    assert bus.writes[-2] == bytes([0x12, 0x40])
    assert chip.get_group_pwm() == 0x40
    assert chip.get_group_freq() == 0x17


def test_read_failure_raises(bus, chip):
    bus.respond = False
    with pytest.raises(I2CError) as info:
        chip.get_group_pwm()
    assert info.value.code == 0xFF