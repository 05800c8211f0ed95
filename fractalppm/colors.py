"""Colors, color tables with gradients, and HSV/RGB conversion."""

from __future__ import annotations

import math
import random

_CHANNELS = 3


def hsv_to_rgb(hue: float, saturation: float, value: float) -> tuple[float, float, float]:
    """Convert hue (0..360), saturation and value (0..1) to RGB in 0..255.

    Raises ValueError when an input lies outside its range.
    """
    if not (0.0 <= hue <= 360.0 and 0.0 <= saturation <= 1.0 and 0.0 <= value <= 1.0):
        raise ValueError(
            f"hsv_to_rgb() input parameters out of range: "
            f"hue={hue} saturation={saturation} value={value}"
        )
    chroma = value * saturation
    wedge = hue / 60.0
    x = chroma * (1 - abs(math.fmod(wedge, 2) - 1))
    if 0 <= wedge < 1:
        red, green, blue = chroma, x, 0.0
    elif 1 <= wedge < 2:
        red, green, blue = x, chroma, 0.0
    elif 2 <= wedge < 3:
        red, green, blue = 0.0, chroma, x
    elif 3 <= wedge < 4:
        red, green, blue = 0.0, x, chroma
    elif 4 <= wedge < 5:
        red, green, blue = x, 0.0, chroma
    elif 5 <= wedge <= 6:
        red, green, blue = chroma, 0.0, x
    else:
        red = green = blue = 0.0
    m = value - chroma
    return 255.0 * (red + m), 255.0 * (green + m), 255.0 * (blue + m)


def rgb_to_hsv(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """Convert RGB in 0..255 to hue (0..360), saturation and value (0..1).

    Raises ValueError when an input lies outside its range.
    """
    if not (0.0 <= red <= 255.0 and 0.0 <= green <= 255.0 and 0.0 <= blue <= 255.0):
        raise ValueError(
            f"rgb_to_hsv() input parameters out of range: "
            f"red={red} green={green} blue={blue}"
        )
    r, g, b = red / 255.0, green / 255.0, blue / 255.0
    x_max = max(r, g, b)
    x_min = min(r, g, b)
    value = x_max
    chroma = x_max - x_min
    if chroma == 0:
        hue = 0.0
    elif value == r:
        hue = 60.0 * (0 + (g - b) / chroma)
    elif value == g:
        hue = 60.0 * (2 + (b - r) / chroma)
    else:
        hue = 60.0 * (4 + (r - g) / chroma)
    if hue < 0.0:
        hue += 360.0
    saturation = 0.0 if value == 0.0 else chroma / value
    return hue, saturation, value


class Color:
    """An RGB color; setting a negative channel value is ignored."""

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        self._channels = [int(red), int(green), int(blue)]

    @property
    def red(self) -> int:
        return self._channels[0]

    @red.setter
    def red(self, value: int) -> None:
        self.set_channel(0, value)

    @property
    def green(self) -> int:
        return self._channels[1]

    @green.setter
    def green(self, value: int) -> None:
        self.set_channel(1, value)

    @property
    def blue(self) -> int:
        return self._channels[2]

    @blue.setter
    def blue(self, value: int) -> None:
        self.set_channel(2, value)

    def get_channel(self, channel: int) -> int:
        """Channel value (0 red, 1 green, 2 blue), or -1 for any other channel."""
        if 0 <= channel < _CHANNELS:
            return self._channels[channel]
        return -1

    def set_channel(self, channel: int, value: int) -> None:
        """Set a channel; unknown channels and negative values are ignored."""
        if 0 <= channel < _CHANNELS and value >= 0:
            self._channels[channel] = int(value)

    def invert(self, max_color_value: int) -> None:
        """Replace each channel by max minus channel, if all fit under max."""
        if all(c <= max_color_value for c in self._channels):
            self._channels = [max_color_value - c for c in self._channels]

    def set_from_hsv(self, hue: float, saturation: float, value: float) -> None:
        """Set the channels from hue, saturation and value."""
        for channel, component in enumerate(hsv_to_rgb(hue, saturation, value)):
            self.set_channel(channel, int(component))

    def hsv(self) -> tuple[float, float, float]:
        """This color as (hue, saturation, value)."""
        return rgb_to_hsv(self.red, self.green, self.blue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._channels == other._channels

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.red}:{self.green}:{self.blue}"

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


class ColorTable:
    """A resizable list of colors indexed by slot."""

    def __init__(self, num_color: int) -> None:
        self._colors: list[Color] = []
        self.number_of_colors = num_color

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def number_of_colors(self) -> int:
        """Number of slots; growing adds black colors, shrinking drops the tail."""
        return len(self._colors)

    @number_of_colors.setter
    def number_of_colors(self, count: int) -> None:
        if count < 0:
            raise ValueError("color table size must not be negative")
        if count < len(self._colors):
            del self._colors[count:]
        else:
            self._colors.extend(Color() for _ in range(count - len(self._colors)))

    def __getitem__(self, i: int) -> Color:
        """The color in slot i; outside the table a detached Color(-1, -1, -1)."""
        if 0 <= i < len(self._colors):
            return self._colors[i]
        return Color(-1, -1, -1)

    def set_random_color(self, max_color_value: int, position: int) -> None:
        """Give a slot random channels in 0..max_color_value-1."""
        if not 0 <= position < len(self._colors) or max_color_value < 0:
            return
        color = self._colors[position]
        for channel in range(_CHANNELS):
            value = 0 if max_color_value == 0 else random.randrange(max_color_value)
            color.set_channel(channel, value)

    def gradient_slope(self, y1: float, y2: float, x1: float, x2: float) -> float:
        """Slope of the line through (x1, y1) and (x2, y2)."""
        return (y1 - y2) / (x1 - x2)

    def gradient_value(self, y1: float, x1: float, slope: float, x: float) -> float:
        """Value at x of the line through (x1, y1) with the given slope."""
        return slope * x + (y1 - slope * x1)

    def _positions_valid(self, position1: int, position2: int) -> bool:
        size = len(self._colors)
        return 0 <= position1 < position2 < size

    def insert_gradient(
        self, color1: Color, color2: Color, position1: int, position2: int
    ) -> None:
        """Fill slots position1..position2 with a linear RGB gradient."""
        if not self._positions_valid(position1, position2):
            return
        slopes = [
            self.gradient_slope(color1.get_channel(c), color2.get_channel(c), position1, position2)
            for c in range(_CHANNELS)
        ]
        for i in range(position1, position2 + 1):
            target = self._colors[i]
            for channel, slope in enumerate(slopes):
                value = self.gradient_value(color1.get_channel(channel), position1, slope, i)
                target.set_channel(channel, int(value))

    def insert_hsv_gradient(
        self, color1: Color, color2: Color, position1: int, position2: int
    ) -> None:
        """Fill slots position1..position2 with a gradient in HSV space."""
        if not self._positions_valid(position1, position2):
            return
        start = color1.hsv()
        end = color2.hsv()
        slopes = [
            self.gradient_slope(a, b, position1, position2) for a, b in zip(start, end)
        ]
        for i in range(position1, position2 + 1):
            hsv = [
                self.gradient_value(first, position1, slope, i)
                for first, slope in zip(start, slopes)
            ]
            rgb = hsv_to_rgb(*hsv)
            target = self._colors[i]
            for channel, component in enumerate(rgb):
                target.set_channel(channel, int(component))

    def max_channel_value(self) -> int:
        """Largest channel value over all colors, at least 0."""
        return max(
            (value for color in self._colors for value in (color.red, color.green, color.blue)),
            default=0,
            key=lambda v: v,
        ) if self._colors and max(
            max(color.red, color.green, color.blue) for color in self._colors
        ) > 0 else 0