"""The shared state every menu action works on."""

from __future__ import annotations

from typing import IO, Any

from .colors import Color, ColorTable
from .numbergrid import NumberGrid
from .ppm import PPM


class ActionData:
    """Streams, images, the number grid and the color table used by actions."""

    def __init__(self, input_stream: IO[Any], output_stream: IO[Any]) -> None:
        self.input_stream = input_stream
        self.output_stream = output_stream
        self.input_image1 = PPM()
        self.input_image2 = PPM()
        self.output_image = PPM()
        self.table = ColorTable(16)
        self.table.insert_gradient(Color(0, 255, 0), Color(255, 0, 255), 0, 15)
        self._grid: NumberGrid | None = None
        self._done = False

    @property
    def done(self) -> bool:
        """Whether the user asked to stop."""
        return self._done

    def finish(self) -> None:
        """Mark the session as done."""
        self._done = True

    @property
    def grid(self) -> NumberGrid:
        """The current number grid; raises LookupError if none has been set."""
        if self._grid is None:
            raise LookupError("no number grid has been set")
        return self._grid

    @grid.setter
    def grid(self, grid: NumberGrid | None) -> None:
        self._grid = grid