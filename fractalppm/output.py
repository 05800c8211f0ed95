"""Menu actions that show, copy, read and write images."""

from __future__ import annotations

import copy

from .actions import ActionData
from .ppm import PPM
from .userio import get_string

_SHADES = (
    (1.0, "@"),
    (0.9, "#"),
    (0.8, "%"),
    (0.7, "*"),
    (0.6, "|"),
    (0.5, "+"),
    (0.4, ";"),
    (0.3, "~"),
    (0.2, "-"),
    (0.1, "."),
    (0.0, " "),
)


def _symbol(strength: float) -> str:
    return next((char for threshold, char in _SHADES if strength >= threshold), " ")


def draw_ascii_image(action_data: ActionData) -> None:
    """Write the output image to the output stream as ASCII art."""
    image = action_data.output_image
    lines: list[str] = []
    if image.width > 0 and image.height > 0:
        for row in range(image.height):
            lines.append(
                "".join(
                    _symbol(
                        sum(image.get_channel(row, column, ch) for ch in range(3)) / 765.0
                    )
                    for column in range(image.width)
                )
            )
    action_data.output_stream.write("\n".join(lines) + "\n")


def write_user_image(action_data: ActionData) -> None:
    """Ask for a filename and write the output image to it as binary P6."""
    file_name = get_string(action_data, "Output filename? ")
    with open(file_name, "wb") as file:
        action_data.output_image.write_stream(file)


def copy_image(action_data: ActionData) -> None:
    """Make the output image an independent copy of input image 1."""
    action_data.output_image = copy.copy(action_data.input_image1)


def _read_user_image(action_data: ActionData, target: PPM) -> None:
    file_name = get_string(action_data, "Input filename? ")
    try:
        file = open(file_name, "rb")
    except OSError:
        action_data.output_stream.write(f"'{file_name}' could not be opened.\n")
        return
    with file:
        target.read_stream(file)


def read_user_image1(action_data: ActionData) -> None:
    """Ask for a filename and read it into input image 1."""
    _read_user_image(action_data, action_data.input_image1)


def read_user_image2(action_data: ActionData) -> None:
    """Ask for a filename and read it into input image 2."""
    _read_user_image(action_data, action_data.input_image2)