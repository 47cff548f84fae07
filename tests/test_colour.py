import pytest
from hypothesis import given
from hypothesis import strategies as st

from embedkit.colour import (
    CHANNEL_MAX,
    ColourHsv,
    hsv_to_rgb,
    rgb_to_hsv,
    scale_brightness,
)

channel = st.integers(min_value=0, max_value=255)
packed_rgb = st.integers(min_value=0, max_value=0xFFFFFF)


def _channels(rgb):
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def test_pure_red_hsv_to_rgb():
    assert hsv_to_rgb(ColourHsv(hue=0, saturation=255, value=255)) == 0xFF0000


def test_pure_red_rgb_to_hsv():
    assert rgb_to_hsv(0xFF0000) == ColourHsv(hue=0, saturation=CHANNEL_MAX, value=CHANNEL_MAX)


def test_black_is_all_zero():
    assert rgb_to_hsv(0) == ColourHsv(hue=0, saturation=0, value=0)


def test_red_hue_wraps_when_blue_exceeds_green():
    hsv = rgb_to_hsv(0xFF0080)
    assert 171 < hsv.hue <= 255
    assert hsv.value == CHANNEL_MAX


def test_upper_bits_are_ignored():
    assert rgb_to_hsv(0x7F123456) == rgb_to_hsv(0x123456)


@pytest.mark.parametrize("field", ["hue", "saturation", "value"])
@pytest.mark.parametrize("bad", [-1, 256])
def test_hsv_components_are_range_checked(field, bad):
    kwargs = {"hue": 0, "saturation": 0, "value": 0, field: bad}
    with pytest.raises(ValueError):
        ColourHsv(**kwargs)


@given(hue=channel, value=channel)
def test_zero_saturation_is_grey(hue, value):
    assert _channels(hsv_to_rgb(ColourHsv(hue, 0, value))) == (value, value, value)


@given(hue=channel, saturation=channel, value=channel)
def test_hsv_to_rgb_peak_channel_is_value(hue, saturation, value):
    rgb = hsv_to_rgb(ColourHsv(hue, saturation, value))
    assert 0 <= rgb <= 0xFFFFFF
    assert max(_channels(rgb)) == value


@given(rgb=packed_rgb)
def test_rgb_to_hsv_value_is_max_channel(rgb):
    hsv = rgb_to_hsv(rgb)
    channels = _channels(rgb)
    assert hsv.value == max(channels)
    assert (hsv.saturation == 0) == (min(channels) == max(channels))


@given(rgb=packed_rgb)
def test_round_trip_preserves_peak_channel(rgb):
    back = hsv_to_rgb(rgb_to_hsv(rgb))
    assert max(_channels(back)) == max(_channels(rgb))


@given(grey=channel)
def test_grey_round_trips_exactly(grey):
    rgb = (grey << 16) | (grey << 8) | grey
    assert hsv_to_rgb(rgb_to_hsv(rgb)) == rgb


@given(value=channel, max_brightness=st.integers(min_value=1, max_value=255))
def test_full_brightness_keeps_value(value, max_brightness):
    assert scale_brightness(value, max_brightness, max_brightness) == value


@given(value=channel, max_brightness=st.integers(min_value=0, max_value=255))
def test_zero_brightness_gives_zero(value, max_brightness):
    assert scale_brightness(value, 0, max_brightness) == 0


@given(value=channel, brightness=channel, max_brightness=st.integers(min_value=1, max_value=255))
def test_scaled_value_never_exceeds_input(value, brightness, max_brightness):
    assert 0 <= scale_brightness(value, brightness, max_brightness) <= value


def test_brightness_above_max_keeps_value():
    assert scale_brightness(200, 101, 100) == 200


def test_half_brightness():
    assert scale_brightness(200, 50, 100) == 100