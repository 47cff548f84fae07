"""Small numeric helpers: random ranges, linear mapping, angles and a PID controller."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

# Largest time step a PID update accepts; longer steps are clamped so that a
# stalled loop does not produce a large jump in the output.
MAX_PID_DT = 0.5

_U32_MASK = 0xFFFFFFFF


def random_range(low: int, high: int) -> int:
    """Return a random integer ``n`` with ``low <= n <= high``.

    Raises ValueError if ``low`` is greater than ``high``.
    """
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    return random.randint(low, high)


def map_value(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly map ``value`` from ``in_min..in_max`` onto ``out_min..out_max``.

    The arithmetic is unsigned 32-bit, as on the target, and the result is
    truncated. Raises ValueError if ``value`` lies outside the input range or
    the input range is empty.
    """
    if not in_min <= value <= in_max:
        raise ValueError(f"value {value} is outside the input range {in_min}..{in_max}")
    if in_max == in_min:
        raise ValueError("input range must not be empty")
    span_out = (out_max - out_min) & _U32_MASK
    scaled = (((value - in_min) * span_out) & _U32_MASK) // (in_max - in_min)
    return (scaled + out_min) & _U32_MASK


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / math.pi)


@dataclass
class Pid:
    """A PID controller with integral anti-windup and output saturation."""

    kp: float
    ki: float
    kd: float
    integral_limit: float
    output_min: float
    output_max: float
    integral: float = 0.0
    prev_error: float = 0.0

    def update(self, set_point: float, process_value: float, dt: float) -> float:
        """Advance the controller by ``dt`` seconds and return its output.

        ``dt`` is clamped to ``MAX_PID_DT``. Raises ValueError if ``dt`` is
        not positive.
        """
        if dt <= 0.0:
            raise ValueError(f"dt must be positive, got {dt}")
        dt = min(dt, MAX_PID_DT)

        error = set_point - process_value
        p_term = self.kp * error

        self.integral += error * dt
        if self.integral > self.integral_limit:
            self.integral = self.integral_limit
        elif self.integral < -self.integral_limit:
            self.integral = -self.integral_limit
        i_term = self.ki * self.integral

        d_term = self.kd * (error - self.prev_error) / dt
        self.prev_error = error

        output = p_term + i_term + d_term
        if output > self.output_max:
            return self.output_max
        if output < self.output_min:
            return self.output_min
        return output