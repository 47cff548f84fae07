"""Standard serial baud rates and their numeric values."""

from __future__ import annotations

from enum import IntEnum


class Baudrate(IntEnum):
    """Selectable serial baud rates; DEFAULT defers to a device's own setting."""

    DEFAULT = 0
    B4800 = 1
    B9600 = 2
    B19200 = 3
    B38400 = 4
    B57600 = 5
    B115200 = 6
    B230400 = 7
    B460800 = 8
    B921600 = 9
    B1000000 = 10
    B2000000 = 11


_BAUDRATE_VALUES = {
    Baudrate.DEFAULT: 0,
    Baudrate.B4800: 4800,
    Baudrate.B9600: 9600,
    Baudrate.B19200: 19200,
    Baudrate.B38400: 38400,
    Baudrate.B57600: 57600,
    Baudrate.B115200: 115200,
    Baudrate.B230400: 230400,
    Baudrate.B460800: 460800,
    Baudrate.B921600: 921600,
    Baudrate.B1000000: 1000000,
    Baudrate.B2000000: 2000000,
}


def baudrate_value(baudrate: Baudrate | int) -> int:
    """Return the bits-per-second value of ``baudrate``.

    ``Baudrate.DEFAULT`` has no fixed value and gives 0. Raises ValueError
    for anything that is not a known baud rate.
    """
    try:
        member = Baudrate(baudrate)
    except ValueError:
        raise ValueError(f"unknown baud rate: {baudrate!r}") from None
    return _BAUDRATE_VALUES[member]