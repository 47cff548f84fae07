"""Integer conversions between packed 24-bit RGB and 8-bit HSV colours."""

from __future__ import annotations

from dataclasses import dataclass

RGB_RED_SHIFT = 16
RGB_GREEN_SHIFT = 8
RGB_BLUE_SHIFT = 0
RGB_BYTE_MASK = 0xFF

CHANNEL_MAX = 255

# Hue runs over 0-255 rather than 0-360 degrees; the wheel has six sectors
# of 256 / 6, rounded to 43.
_HUE_SECTOR_SIZE = 43
_SECTOR_COUNT = 6
_NORMALISE_SHIFT = 8
_HUE_OFFSET_GREEN = 85
_HUE_OFFSET_BLUE = 171

_U32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class ColourHsv:
    """A colour as 8-bit hue, saturation and value."""

    hue: int
    saturation: int
    value: int

    def __post_init__(self) -> None:
        for name in ("hue", "saturation", "value"):
            component = getattr(self, name)
            if not 0 <= component <= CHANNEL_MAX:
                raise ValueError(f"{name} must be within 0..{CHANNEL_MAX}, got {component}")


def hsv_to_rgb(hsv: ColourHsv) -> int:
    """Convert ``hsv`` to a packed 0xRRGGBB integer."""
    value = hsv.value
    saturation = hsv.saturation

    if saturation == 0:
        red = green = blue = value
    else:
        region = hsv.hue // _HUE_SECTOR_SIZE
        remainder = ((hsv.hue - region * _HUE_SECTOR_SIZE) * _SECTOR_COUNT) & 0xFF

        pure = (value * (CHANNEL_MAX - saturation)) >> _NORMALISE_SHIFT
        quasi = (
            value * (CHANNEL_MAX - ((saturation * remainder) >> _NORMALISE_SHIFT))
        ) >> _NORMALISE_SHIFT
        tint = (
            value
            * (CHANNEL_MAX - ((saturation * (CHANNEL_MAX - remainder)) >> _NORMALISE_SHIFT))
        ) >> _NORMALISE_SHIFT

        red, green, blue = {
            0: (value, tint, pure),
            1: (quasi, value, pure),
            2: (pure, value, tint),
            3: (pure, quasi, value),
            4: (tint, pure, value),
        }.get(region, (value, pure, quasi))

    return (red << RGB_RED_SHIFT) | (green << RGB_GREEN_SHIFT) | (blue << RGB_BLUE_SHIFT)


def _sector_hue(offset: int, difference: int, delta: int) -> int:
    """Hue within one sector, reproducing 32-bit unsigned then 16-bit signed wrap."""
    scaled = ((_HUE_SECTOR_SIZE * difference) & _U32_MASK) // delta
    hue = (offset + scaled) & 0xFFFF
    return hue - 0x10000 if hue >= 0x8000 else hue


def rgb_to_hsv(rgb: int) -> ColourHsv:
    """Convert a packed 0xRRGGBB integer to HSV; bits above 24 are ignored."""
    red = (rgb >> RGB_RED_SHIFT) & RGB_BYTE_MASK
    green = (rgb >> RGB_GREEN_SHIFT) & RGB_BYTE_MASK
    blue = (rgb >> RGB_BLUE_SHIFT) & RGB_BYTE_MASK

    rgb_min = min(red, green, blue)
    rgb_max = max(red, green, blue)
    delta = rgb_max - rgb_min

    if rgb_max == 0:
        return ColourHsv(hue=0, saturation=0, value=0)

    saturation = (delta * CHANNEL_MAX) // rgb_max

    if delta == 0:
        return ColourHsv(hue=0, saturation=saturation, value=rgb_max)

    if red == rgb_max:
        hue = _sector_hue(0, green - blue, delta)
    elif green == rgb_max:
        hue = _sector_hue(_HUE_OFFSET_GREEN, blue - red, delta)
    else:
        hue = _sector_hue(_HUE_OFFSET_BLUE, red - green, delta)

    if hue < 0:
        hue += 256

    return ColourHsv(hue=hue & 0xFF, saturation=saturation, value=rgb_max)


def scale_brightness(value: int, brightness: int, max_brightness: int) -> int:
    """Scale a channel ``value`` by ``brightness`` out of ``max_brightness``.

    A brightness of 0 gives 0; one above ``max_brightness`` leaves ``value`` as is.
    """
    if brightness == 0:
        return 0
    if brightness > max_brightness:
        return value
    return (value * brightness) // max_brightness