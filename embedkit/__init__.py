"""Small utilities for embedded-style code: baud rates, error messages, colour, PID and float parts."""

__version__ = "0.1.0"

__all__ = [
    "baudrate",
    "error_messages",
    "colour",
    "math_utils",
    "float_parts",
]