"""A rectangular image with three integer channels per pixel."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import product

CHANNELS = 3


class Image:
    """Pixels stored row by row, three channels each."""

    def __init__(self, height: int = 0, width: int = 0) -> None:
        if height < 0 or width < 0:
            raise ValueError("image dimensions must not be negative")
        self._height = height
        self._width = width
        self._data: list[int] = [0] * (height * width * CHANNELS)

    def _resize(self) -> None:
        size = self._height * self._width * CHANNELS
        if len(self._data) > size:
            del self._data[size:]
        else:
            self._data.extend([0] * (size - len(self._data)))

    @property
    def height(self) -> int:
        """Number of rows; negative values are ignored when set."""
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        if value > -1:
            self._height = value
            self._resize()

    @property
    def width(self) -> int:
        """Number of columns; negative values are ignored when set."""
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        if value > -1:
            self._width = value
            self._resize()

    def _coordinates(self) -> Iterator[tuple[int, int, int]]:
        return product(range(self._height), range(self._width), range(CHANNELS))

    def index_valid(self, row: int, column: int, channel: int) -> bool:
        """Whether the row, column and channel lie inside the image."""
        return (
            0 <= row < self._height
            and 0 <= column < self._width
            and 0 <= channel < CHANNELS
        )

    def index(self, row: int, column: int, channel: int) -> int:
        """Position of a channel value in the flat storage."""
        return row * self._width * CHANNELS + column * CHANNELS + channel

    def get_channel(self, row: int, column: int, channel: int) -> int:
        """The channel value, or -1 when the index is out of range."""
        if self.index_valid(row, column, channel):
            return self._data[self.index(row, column, channel)]
        return -1

    def set_channel(self, row: int, column: int, channel: int, value: int) -> None:
        """Store a channel value; out-of-range indices are ignored."""
        if self.index_valid(row, column, channel):
            self._data[self.index(row, column, channel)] = value

    def __copy__(self) -> Image:
        duplicate = type(self).__new__(type(self))
        duplicate.__dict__.update(self.__dict__)
        duplicate._data = list(self._data)
        return duplicate