"""Menu actions that combine images and apply color filters."""

from __future__ import annotations

from .actions import ActionData
from .userio import get_double

_FACTOR_PROMPT = "Factor? "


def plus_equals(action_data: ActionData) -> None:
    """Add input image 2 into input image 1."""
    action_data.input_image1 += action_data.input_image2


def minus_equals(action_data: ActionData) -> None:
    """Subtract input image 2 from input image 1."""
    action_data.input_image1 -= action_data.input_image2


def times_equals(action_data: ActionData) -> None:
    """Ask for a factor and multiply input image 1 by it."""
    factor = get_double(action_data, _FACTOR_PROMPT)
    action_data.input_image1 *= factor


def divide_equals(action_data: ActionData) -> None:
    """Ask for a factor and divide input image 1 by it."""
    factor = get_double(action_data, _FACTOR_PROMPT)
    action_data.input_image1 /= factor


def plus(action_data: ActionData) -> None:
    """Set the output image to the sum of the two input images."""
    action_data.output_image = action_data.input_image1 + action_data.input_image2


def minus(action_data: ActionData) -> None:
    """Set the output image to the difference of the two input images."""
    action_data.output_image = action_data.input_image1 - action_data.input_image2


def times(action_data: ActionData) -> None:
    """Ask for a factor and set the output image to input image 1 times it."""
    factor = get_double(action_data, _FACTOR_PROMPT)
    action_data.output_image = action_data.input_image1 * factor


def divide(action_data: ActionData) -> None:
    """Ask for a factor and set the output image to input image 1 divided by it."""
    factor = get_double(action_data, _FACTOR_PROMPT)
    action_data.output_image = action_data.input_image1 / factor


def gray_from_red(action_data: ActionData) -> None:
    """Set the output image to a grayscale of input image 1's red channel."""
    action_data.output_image = action_data.input_image1.gray_from_red()


def gray_from_green(action_data: ActionData) -> None:
    """Set the output image to a grayscale of input image 1's green channel."""
    action_data.output_image = action_data.input_image1.gray_from_green()


def gray_from_blue(action_data: ActionData) -> None:
    """Set the output image to a grayscale of input image 1's blue channel."""
    action_data.output_image = action_data.input_image1.gray_from_blue()


def gray_from_linear_colorimetric(action_data: ActionData) -> None:
    """Set the output image to the linear colorimetric grayscale of input image 1."""
    action_data.output_image = action_data.input_image1.gray_from_linear_colorimetric()


def orange_filter(action_data: ActionData) -> None:
    """Set the output image to an orange-tinted copy of input image 1."""
    action_data.output_image = action_data.input_image1.orange_filter()