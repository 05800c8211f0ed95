"""Grids over a region of the complex plane: a test pattern, Julia and Mandelbrot sets."""

from __future__ import annotations

import math

from .threaded import ThreadedGrid

_PLANE_LIMIT = 2.0
_ESCAPE_RADIUS = 2.0


class ComplexFractal(ThreadedGrid):
    """A grid mapped onto a rectangle of the complex plane within [-2, 2]."""

    def __init__(
        self,
        height: int = 200,
        width: int = 300,
        min_x: float = -1.5,
        max_x: float = 1.5,
        min_y: float = -1.0,
        max_y: float = 1.0,
    ) -> None:
        super().__init__(height, width)
        self._min_x = min_x
        self._max_x = max_x
        self._min_y = min_y
        self._max_y = max_y
        self._delta_x = 0.01
        self._delta_y = 0.01

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def delta_x(self) -> float:
        return self._delta_x

    @property
    def delta_y(self) -> float:
        return self._delta_y

    def set_grid_size(self, height: int, width: int) -> None:
        """Resize the grid and recalculate the deltas; both sides must be at least 2."""
        if height >= 2 and width >= 2:
            super().set_grid_size(height, width)
            self.set_deltas(self.calculate_delta_x(), self.calculate_delta_y())

    def set_plane_size(self, min_x: float, max_x: float, min_y: float, max_y: float) -> None:
        """Set the plane rectangle; bounds are ordered, and must lie in [-2, 2]."""
        if min_x == max_x or min_y == max_y:
            return
        bounds = (min_x, max_x, min_y, max_y)
        if not all(-_PLANE_LIMIT <= bound <= _PLANE_LIMIT for bound in bounds):
            return
        self._min_x, self._max_x = sorted((min_x, max_x))
        self._min_y, self._max_y = sorted((min_y, max_y))
        self.set_deltas(self.calculate_delta_x(), self.calculate_delta_y())

    def set_deltas(self, delta_x: float, delta_y: float) -> None:
        """Set the plane distance between pixels; both must be positive."""
        if delta_x > 0 and delta_y > 0:
            self._delta_x = delta_x
            self._delta_y = delta_y

    def calculate_delta_x(self) -> float:
        return (self._max_x - self._min_x) / (self.width - 1)

    def calculate_delta_y(self) -> float:
        return (self._max_y - self._min_y) / (self.height - 1)

    def plane_x(self, column: int) -> float:
        """Plane x of a pixel column, or 0 outside the grid."""
        if not 0 <= column < self.width:
            return 0.0
        return self._min_x + column * self._delta_x

    def plane_y(self, row: int) -> float:
        """Plane y of a pixel row, counted down from max y, or 0 outside the grid."""
        if not 0 <= row < self.height:
            return 0.0
        return self._max_y - row * self._delta_y

    def plane_coordinates(self, row: int, column: int) -> tuple[float, float]:
        """Plane (x, y) of a pixel; (0, 0) whenever either coordinate is 0."""
        x = self.plane_x(column)
        y = self.plane_y(row)
        if x == 0 or y == 0:
            return 0.0, 0.0
        return x, y

    def calculate_number(self, row: int, column: int) -> int:
        x, y = self.plane_coordinates(row, column)
        if x == 0 or y == 0:
            return -1
        return int(abs(self.max_number * math.sin(10 * x) * math.cos(10 * y)))


class JuliaSet(ComplexFractal):
    """Escape counts of z -> z*z + (a + bi) from each plane point."""

    def __init__(
        self,
        height: int = 200,
        width: int = 300,
        min_x: float = -1.5,
        max_x: float = 1.5,
        min_y: float = -1.0,
        max_y: float = 1.0,
        a: float = -0.650492,
        b: float = -0.478235,
    ) -> None:
        super().__init__(height, width, min_x, max_x, min_y, max_y)
        self._a = a
        self._b = b

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    def set_parameters(self, a: float, b: float) -> None:
        """Set the constant a + bi; both parts must lie in [-2, 2]."""
        if -2 <= a <= 2 and -2 <= b <= 2:
            self._a = a
            self._b = b

    def next_point(self, x0: float, y0: float) -> tuple[float, float]:
        return x0 * x0 - y0 * y0 + self._a, 2 * x0 * y0 + self._b

    def escape_count(self, x0: float, y0: float) -> int:
        """Iterations until the point leaves radius 2, at most max_number."""
        x, y = x0, y0
        escaped = math.hypot(x, y) > _ESCAPE_RADIUS
        count = 0
        while count < self.max_number and not escaped:
            x, y = self.next_point(x, y)
            escaped = math.hypot(x, y) > _ESCAPE_RADIUS
            count += 1
        return count

    def calculate_number(self, row: int, column: int) -> int:
        if not self.index_valid(row, column):
            return -1
        return self.escape_count(*self.plane_coordinates(row, column))


class MandelbrotSet(ComplexFractal):
    """Escape counts of z -> z*z + c starting from z = c."""

    def __init__(
        self,
        height: int = 200,
        width: int = 300,
        min_x: float = -1.5,
        max_x: float = 1.5,
        min_y: float = -1.0,
        max_y: float = 1.0,
    ) -> None:
        super().__init__(height, width, min_x, max_x, min_y, max_y)

    def next_point(self, x0: float, y0: float, a: float, b: float) -> tuple[float, float]:
        return x0 * x0 - y0 * y0 + a, 2 * x0 * y0 + b

    def escape_count(self, a: float, b: float) -> int:
        """Iterations until the orbit of a + bi leaves radius 2, at most max_number."""
        x, y = a, b
        escaped = math.hypot(a, b) > _ESCAPE_RADIUS
        count = 0
        while count < self.max_number and not escaped:
            x, y = self.next_point(x, y, a, b)
            escaped = math.hypot(x, y) > _ESCAPE_RADIUS
            count += 1
        return count

    def calculate_number(self, row: int, column: int) -> int:
        if not self.index_valid(row, column):
            return -1
        return self.escape_count(*self.plane_coordinates(row, column))


class MandelbrotPower(MandelbrotSet):
    """A Mandelbrot set with z raised to an arbitrary real power."""

    def __init__(self) -> None:
        super().__init__()
        self._power = 2.0

    @property
    def power(self) -> float:
        return self._power

    @power.setter
    def power(self, value: float) -> None:
        self._power = float(value)

    def next_point(self, x0: float, y0: float, a: float, b: float) -> tuple[float, float]:
        r = math.hypot(x0, y0)
        theta = math.atan2(y0, x0)
        if r == 0 and self._power < 0:
            magnitude = math.inf
        else:
            magnitude = r**self._power
        return (
            magnitude * math.cos(self._power * theta) + a,
            magnitude * math.sin(self._power * theta) + b,
        )