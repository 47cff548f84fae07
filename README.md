# embedkit

A handful of small, dependency-free helpers for code that models or talks
about embedded firmware.

- `embedkit.baudrate`: the `Baudrate` enumeration and `baudrate_value()`,
  which gives the rate in bits per second (`Baudrate.DEFAULT` gives 0; an
  unknown value raises `ValueError`).
- `embedkit.error_messages`: the `ErrorCode` enumeration and
  `error_message()` for a short human-readable text. Values outside the known
  codes give the text of `ErrorCode.UNKNOWN`; `ErrorCode.BUSY` has no text of
  its own and gives `None`.
- `embedkit.colour`: 8-bit integer HSV/RGB conversion (`ColourHsv`,
  `hsv_to_rgb`, `rgb_to_hsv`) on packed `0xRRGGBB` integers, and
  `scale_brightness`.
- `embedkit.math_utils`: `random_range`, `map_value` (unsigned 32-bit
  arithmetic, truncating), `degrees_to_radians`, `radians_to_degrees` and a
  `Pid` controller with integral anti-windup, output saturation and a time
  step clamped to `MAX_PID_DT` (0.5 s).
- `embedkit.float_parts`: `integer_part` and `fractional_part` for printing
  floats digit by digit without float formatting.

## Installation

```
pip install embedkit
```

## Examples

```python
from embedkit.baudrate import Baudrate, baudrate_value

baudrate_value(Baudrate.B115200)   # 115200
```

```python
from embedkit.error_messages import ErrorCode, error_message

error_message(ErrorCode.TIMEOUT)   # "Timeout"
error_message(999)                 # "Unknown error"
```

```python
from embedkit.colour import ColourHsv, hsv_to_rgb, rgb_to_hsv, scale_brightness

hsv_to_rgb(ColourHsv(hue=0, saturation=255, value=255))   # 0xFF0000
rgb_to_hsv(0x00FF00)                                       # ColourHsv(hue=85, saturation=255, value=255)
scale_brightness(200, 50, 100)                             # 100
```

```python
from embedkit.math_utils import Pid, map_value

map_value(512, 0, 1023, 0, 100)   # 50

pid = Pid(kp=1.0, ki=0.1, kd=0.0, integral_limit=10.0, output_min=-5.0, output_max=5.0)
output = pid.update(set_point=1.0, process_value=0.0, dt=0.1)
```

```python
from embedkit.float_parts import integer_part, fractional_part

integer_part(3.14159), fractional_part(3.14159, 2)   # (3, 14)
```

## Errors

Where a helper cannot give a meaningful answer it raises `ValueError`:
an unknown baud rate, an HSV component outside 0..255, `random_range` with
`low > high`, `map_value` with the value outside its input range or an empty
input range, a non-positive `dt` for `Pid.update`, and a `fractional_part`
precision outside 0..5.

## What this package does not do

It holds pure computations only. It does not open serial ports, drive pins,
PWM or ADC channels, and it provides no buffer or queue type for received
data.

## Running the tests

```
pip install embedkit[test]
pytest
```