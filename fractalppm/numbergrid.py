"""Grids of numbers that can be computed and rendered into PPM images."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .colors import ColorTable
from .ppm import PPM

# Colors for the plain rendering, chosen by value modulo 8.
_PALETTE = (
    (63, 63, 63),
    (63, 31, 31),
    (63, 63, 31),
    (31, 63, 31),
    (0, 0, 0),
    (31, 63, 63),
    (31, 31, 63),
    (63, 31, 63),
)


class NumberGrid(ABC):
    """A rectangle of integers between 0 and a maximum number."""

    def __init__(self, height: int = 300, width: int = 400) -> None:
        if height < 0 or width < 0:
            raise ValueError("grid dimensions must not be negative")
        self._height = height
        self._width = width
        self._max_number = 255
        self._grid: list[int] = [0] * (height * width)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def max_number(self) -> int:
        """Largest allowed number; setting it clamps stored numbers down to it."""
        return self._max_number

    @max_number.setter
    def max_number(self, number: int) -> None:
        if number >= 0:
            self._max_number = number
            self._grid = [min(value, number) for value in self._grid]

    def set_grid_size(self, height: int, width: int) -> None:
        """Resize the grid; both dimensions must be at least 2."""
        if height >= 2 and width >= 2:
            self._height = height
            self._width = width
            size = height * width
            if len(self._grid) > size:
                del self._grid[size:]
            else:
                self._grid.extend([0] * (size - len(self._grid)))

    @abstractmethod
    def calculate_number(self, row: int, column: int) -> int:
        """The number belonging at row and column."""

    def calculate_all_numbers(self) -> None:
        """Fill every cell with its calculated number."""
        for row in range(self._height):
            self._calculate_row(row)

    def _calculate_row(self, row: int) -> None:
        for column in range(self._width):
            self.set_number(row, column, self.calculate_number(row, column))

    @property
    def numbers(self) -> tuple[int, ...]:
        """All numbers, row by row."""
        return tuple(self._grid)

    def index(self, row: int, column: int) -> int:
        """Position of a cell in the flat storage."""
        return row * self._width + column

    def index_valid(self, row: int, column: int) -> bool:
        """Whether row and column lie inside the grid."""
        return 0 <= row < self._height and 0 <= column < self._width

    def number_valid(self, number: int) -> bool:
        """Whether number lies between 0 and the max number."""
        return 0 <= number <= self._max_number

    def get_number(self, row: int, column: int) -> int:
        """The number at row and column, or -1 outside the grid."""
        if self.index_valid(row, column):
            return self._grid[self.index(row, column)]
        return -1

    def set_number(self, row: int, column: int, number: int) -> None:
        """Store a number; invalid numbers or positions are ignored."""
        if self.number_valid(number) and self.index_valid(row, column):
            self._grid[self.index(row, column)] = number

    def set_ppm(self, ppm: PPM, colors: ColorTable | None = None) -> None:
        """Render the grid into ppm, with a fixed palette or a color table."""
        if colors is None:
            self._render_plain(ppm)
        else:
            self._render_table(ppm, colors)

    def _render_plain(self, ppm: PPM) -> None:
        ppm.width = self._width
        ppm.height = self._height
        ppm.max_color_value = 63
        for row in range(self._height):
            for column in range(self._width):
                value = self._grid[self.index(row, column)]
                if value == 0:
                    rgb = (0, 0, 0)
                elif value == self._max_number:
                    rgb = (63, 31, 31)
                else:
                    rgb = _PALETTE[value % 8]
                ppm.set_pixel(row, column, *rgb)

    def _render_table(self, ppm: PPM, colors: ColorTable) -> None:
        size = len(colors)
        if size < 2:
            return
        ppm.height = self._height
        ppm.width = self._width
        ppm.max_color_value = colors.max_channel_value()
        for row in range(self._height):
            for column in range(self._width):
                number = self.get_number(row, column)
                if number == self._max_number:
                    color = colors[size - 1]
                else:
                    color = colors[number % size]
                ppm.set_pixel(row, column, color.red, color.green, color.blue)


class ManhattanNumbers(NumberGrid):
    """Each cell holds its Manhattan distance from the grid's center."""

    def __init__(self, height: int = 600, width: int = 800) -> None:
        super().__init__(height, width)

    def calculate_number(self, row: int, column: int) -> int:
        return abs(row - self._height // 2) + abs(column - self._width // 2)