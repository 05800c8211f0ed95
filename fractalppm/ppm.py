"""PPM images: channel values bounded by a maximum, binary P6 input and output."""

from __future__ import annotations

from collections.abc import Callable
from typing import BinaryIO

from .image import CHANNELS, Image

_WHITESPACE = b" \t\n\r\v\f"


def _read_token(stream: BinaryIO) -> bytes:
    byte = stream.read(1)
    while byte and byte in _WHITESPACE:
        byte = stream.read(1)
    token = bytearray()
    while byte and byte not in _WHITESPACE:
        token += byte
        byte = stream.read(1)
    if not token:
        raise ValueError("unexpected end of PPM header")
    return bytes(token)


def _read_int(stream: BinaryIO) -> int:
    token = _read_token(stream)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid number in PPM header: {token!r}") from None


class PPM(Image):
    """An image whose channel values lie between 0 and a max color value."""

    def __init__(self, height: int = 0, width: int = 0) -> None:
        super().__init__(height, width)
        self._max_color_value = 1

    @property
    def max_color_value(self) -> int:
        """Largest allowed channel value; only 1..255 is accepted when set."""
        return self._max_color_value

    @max_color_value.setter
    def max_color_value(self, value: int) -> None:
        if 1 <= value <= 255:
            self._max_color_value = value

    def value_valid(self, value: int) -> bool:
        """Whether value lies between 0 and the max color value."""
        return 0 <= value <= self._max_color_value

    def set_channel(self, row: int, column: int, channel: int, value: int) -> None:
        """Store a channel value if both value and index are valid."""
        if self.value_valid(value):
            super().set_channel(row, column, channel, value)

    def set_pixel(self, row: int, column: int, red: int, green: int, blue: int) -> None:
        """Set all three channels of one pixel."""
        self.set_channel(row, column, 0, red)
        self.set_channel(row, column, 1, green)
        self.set_channel(row, column, 2, blue)

    def write_stream(self, stream: BinaryIO) -> None:
        """Write the image as binary P6 to a byte stream."""
        header = f"P6 {self.width} {self.height} {self.max_color_value}\n"
        stream.write(header.encode("ascii"))
        stream.write(bytes(value & 0xFF for value in self._data))

    def read_stream(self, stream: BinaryIO) -> None:
        """Replace the image with one read as binary P6 from a byte stream."""
        _read_token(stream)
        width = _read_int(stream)
        height = _read_int(stream)
        max_color = _read_int(stream)
        self.width = width
        self.height = height
        self.max_color_value = max_color
        count = max(0, height) * max(0, width) * CHANNELS
        payload = stream.read(count) if count else b""
        coordinates = (
            (row, column, channel)
            for row in range(height)
            for column in range(width)
            for channel in range(CHANNELS)
        )
        for (row, column, channel), byte in zip(coordinates, payload):
            self.set_channel(row, column, channel, byte)

    # Comparisons look only at the dimensions.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: PPM) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return self.height * self.width < other.height * other.width

    def __le__(self, other: PPM) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: PPM) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return other < self

    def __ge__(self, other: PPM) -> bool:
        if not isinstance(other, PPM):
            return NotImplemented
        return other <= self

    # Arithmetic

    def _blank_like(self) -> PPM:
        result = PPM(self.height, self.width)
        result.max_color_value = self.max_color_value
        return result

    def _apply(self, target: PPM, func: Callable[[int, int, int], int]) -> PPM:
        for row, column, channel in self._coordinates():
            target.set_channel(row, column, channel, func(row, column, channel))
        return target

    def _clamp(self, value: int) -> int:
        return max(0, min(value, self.max_color_value))

    def _sum(self, other: PPM) -> Callable[[int, int, int], int]:
        def compute(row: int, column: int, channel: int) -> int:
            total = self.get_channel(row, column, channel) + other.get_channel(row, column, channel)
            return min(total, self.max_color_value)

        return compute

    def _difference(self, other: PPM) -> Callable[[int, int, int], int]:
        def compute(row: int, column: int, channel: int) -> int:
            diff = self.get_channel(row, column, channel) - other.get_channel(row, column, channel)
            return max(diff, 0)

        return compute

    def _scaled(self, scale: Callable[[int], float]) -> Callable[[int, int, int], int]:
        def compute(row: int, column: int, channel: int) -> int:
            return self._clamp(int(scale(self.get_channel(row, column, channel))))

        return compute

    def __iadd__(self, other: PPM) -> PPM:
        return self._apply(self, self._sum(other))

    def __isub__(self, other: PPM) -> PPM:
        return self._apply(self, self._difference(other))

    def __imul__(self, factor: float) -> PPM:
        return self._apply(self, self._scaled(lambda v: v * factor))

    def __itruediv__(self, factor: float) -> PPM:
        return self._apply(self, self._scaled(lambda v: v / factor))

    def __add__(self, other: PPM) -> PPM:
        return self._apply(self._blank_like(), self._sum(other))

    def __sub__(self, other: PPM) -> PPM:
        return self._apply(self._blank_like(), self._difference(other))

    def __mul__(self, factor: float) -> PPM:
        return self._apply(self._blank_like(), self._scaled(lambda v: v * factor))

    def __truediv__(self, factor: float) -> PPM:
        return self._apply(self._blank_like(), self._scaled(lambda v: v / factor))

    # Filters

    def gray_from_channel(self, channel: int) -> PPM:
        """A gray image whose channels all copy the given source channel."""
        return self._apply(
            self._blank_like(),
            lambda row, column, _: self.get_channel(row, column, channel),
        )

    def gray_from_red(self) -> PPM:
        """A gray image taken from the red channel."""
        return self.gray_from_channel(0)

    def gray_from_green(self) -> PPM:
        """A gray image taken from the green channel."""
        return self.gray_from_channel(1)

    def gray_from_blue(self) -> PPM:
        """A gray image taken from the blue channel."""
        return self.gray_from_channel(2)

    def linear_colorimetric_pixel_value(self, row: int, column: int) -> float:
        """Luminance of a pixel by linear colorimetric weights."""
        return (
            self.get_channel(row, column, 0) * 0.2126
            + self.get_channel(row, column, 1) * 0.7152
            + self.get_channel(row, column, 2) * 0.0722
        )

    def gray_from_linear_colorimetric(self) -> PPM:
        """A gray image from the linear colorimetric luminance."""
        return self._apply(
            self._blank_like(),
            lambda row, column, _: int(self.linear_colorimetric_pixel_value(row, column)),
        )

    def orange_filter(self) -> PPM:
        """An orange-tinted copy of the image."""
        result = self._blank_like()
        top = self.max_color_value
        for row in range(self.height):
            for column in range(self.width):
                red = self.get_channel(row, column, 0)
                green = self.get_channel(row, column, 1)
                blue = self.get_channel(row, column, 2)
                result.set_pixel(
                    row,
                    column,
                    min(2 * (2 * red + green) // 3, top),
                    min(2 * (2 * red + green) // 6, top),
                    min(blue // 2, top),
                )
        return result