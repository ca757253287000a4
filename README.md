# embedkit

A collection of small, self-contained helpers for work that is close to the
hardware: waveform generators, bit-level tools for 32-bit floats, running
statistics, compact containers, formatting helpers, an XML writer, and drivers
for a set of common I2C peripherals and the MAX31855 thermocouple converter.

It has no dependencies outside the standard library and supports Python 3.10
and later.

## Installation

```
pip install embedkit
```

To run the tests:

```
pip install "embedkit[test]"
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `embedkit.functiongenerator` | `FunctionGenerator` plus `fgsaw`, `fgtri`, `fgsqr`, `fgsin` and `fgstr` for sawtooth, triangle, square, sine and stair waveforms |
| `embedkit.ieee754` | Inspect and manipulate 32-bit floats: `float_fields`, `dump_float`, `sign`, `exponent`, `mantissa`, `pow2`, `pow2_fast`, `is_nan`, `is_inf`, `is_pos_inf`, `is_neg_inf`, and `float_to_double_packed` / `double_packed_to_float` with a `ByteOrder` |
| `embedkit.mathhelpers` | `sci` for scientific notation, `seconds_to_clock`, `millis_to_clock`, and `weeks` / `days` / `hours` / `minutes` |
| `embedkit.multimap` | `multi_map`, piecewise linear interpolation over a table |
| `embedkit.nibblearray` | `NibbleArray`, a fixed-size array of 4-bit values |
| `embedkit.printers` | `Printer` base and the sinks `PrintCharArray` (fixed capacity), `PrintSize` (counts only) and `PrintString` |
| `embedkit.running_average` | `RunningAverage` over a circular buffer |
| `embedkit.running_median` | `RunningMedian` over a circular buffer (size clamped to 1..19) |
| `embedkit.stopwatch` | `StopWatch` with `Resolution.MILLIS`, `MICROS` or `SECONDS` and a replaceable clock |
| `embedkit.temperature` | `fahrenheit`, `kelvin`, `dew_point`, `dew_point_fast`, `humidex`, `heat_index`, `heat_index_fast`, `heat_index_fast_int` |
| `embedkit.byteset` | `ByteSet`, a set of the values 0..255 with `+`, `-`, `*` for union, difference and intersection and a `first`/`next`/`prev`/`last` cursor |
| `embedkit.troolean` | `Troolean`, three-valued Kleene logic (true, false, unknown) |
| `embedkit.xmlwriter` | `XMLWriter`, a streaming, indenting XML writer with automatic closing tags |
| `embedkit.i2c` | The `I2CBus` interface and `I2CError` |
| `embedkit.pcf8574`, `pca9635`, `pca9685`, `max44009`, `ms5611`, `mcp4725`, `sht31`, `hmc6352` | I2C device drivers |
| `embedkit.max31855` | `decode_frame` and `MAX31855` for thermocouple frames, with `Thermocouple` type factors |

## Examples

### Waveforms

```python
from embedkit.functiongenerator import FunctionGenerator, fgsqr

gen = FunctionGenerator(period=2.0, amplitude=5.0, phase=0.0, y_shift=0.0)
samples = [gen.triangle(t / 10) for t in range(20)]

# The free functions also accept a duty cycle.
level = fgsqr(0.3, period=1.0, amplitude=1.0, phase=0.0, y_shift=0.0, duty_cycle=0.25)
```

### Running statistics

```python
from embedkit.running_average import RunningAverage
from embedkit.running_median import RunningMedian

avg = RunningAverage(10)
med = RunningMedian(7)
for reading in (20.1, 20.4, 35.0, 20.2, 20.3):
    avg.add(reading)
    med.add(reading)

print(avg.average(), avg.standard_deviation())
print(med.median(), med.highest(), med.lowest())
```

Empty buffers give `nan` rather than raising.

### Sets and three-valued logic

```python
from embedkit.byteset import ByteSet
from embedkit.troolean import Troolean

evens = ByteSet(range(0, 256, 2))
small = ByteSet(range(10))
both = evens * small          # intersection
print(list(both), len(evens + small))

t, u = Troolean(1), Troolean(-1)
print(t & u, t | u, ~u)       # unknown true unknown
```

### Writing XML

```python
import io
from embedkit.xmlwriter import XMLWriter

out = io.StringIO()
xml = XMLWriter(out)
xml.header()
xml.tag_open("sensor", name="outdoor")
xml.write_node("temperature", 21.5)   # <temperature>21.50</temperature>
xml.write_node("alarm", False)        # <alarm>false</alarm>
xml.tag_close()
print(out.getvalue())
```

Lines end with CR LF. At most five tags may be open at once and tag names may
be at most 15 characters long.

### Talking to devices

The I2C drivers take an `I2CBus` object, so any transport can be plugged in.
A subclass provides `write(address, data)` and `read(address, count)`;
`write_read` is built from those two. A fake bus is enough to try a driver:

```python
from embedkit.i2c import I2CBus
from embedkit.pcf8574 import PCF8574


class FakeBus(I2CBus):
    def __init__(self):
        self.sent = []

    def write(self, address, data):
        self.sent.append((address, bytes(data)))

    def read(self, address, count):
        return bytes([0b00100000] * count)


bus = FakeBus()
expander = PCF8574(bus, 0x20)
expander.begin(0xFF)
expander.write(3, 0)
print(expander.read(5))   # 1
print(bus.sent)           # [(32, b'\xff'), (32, b'\xf7')]
```

`MAX31855` does not use a bus: it takes a callable that returns the raw 32-bit
frame, and `decode_frame` decodes such a frame on its own. `MS5611`, `SHT31`
and `HMC6352` take a `delay` callable (milliseconds), and `SHT31` and
`StopWatch` take a `clock` callable (seconds), so tests need not wait.

Bus failures raise `I2CError`. Invalid arguments, such as a pin or channel
number out of range, raise `ValueError`.

## What it does not do

embedkit contains no bus transport of its own. It does not open I2C or SPI
devices, GPIO pins or serial ports; to drive real hardware you supply an
`I2CBus` implementation (or, for `MAX31855`, a frame reader) for your platform.
There is no command-line program.