"""Program flows and the interactive image menu."""

from __future__ import annotations

import sys
from typing import IO, Any

from . import drawing, filters, output, userio
from .actions import ActionData
from .fractals import ComplexFractal, JuliaSet, MandelbrotPower, MandelbrotSet
from .menu import MenuData
from .numbergrid import ManhattanNumbers


def assignment1(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Ask the favorite-things questions; return the favorite integer."""
    return userio.ask_questions3(ActionData(input_stream, output_stream))


def assignment2(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Draw the diagonal quad pattern as ASCII art."""
    action_data = ActionData(input_stream, output_stream)
    drawing.diagonal_quad_pattern(action_data)
    output.copy_image(action_data)
    output.draw_ascii_image(action_data)
    return 0


def assignment3(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Draw the striped diagonal pattern and write it to a file."""
    action_data = ActionData(input_stream, output_stream)
    drawing.striped_diagonal_pattern(action_data)
    output.copy_image(action_data)
    output.write_user_image(action_data)
    return 0


def simple_squares_ascii(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Draw the simple squares pattern as ASCII art."""
    action_data = ActionData(input_stream, output_stream)
    drawing.simple_squares_pattern(action_data)
    output.copy_image(action_data)
    output.draw_ascii_image(action_data)
    return 0


def hero(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Ask about a hero; return their birth year."""
    return userio.ask_hero_questions(ActionData(input_stream, output_stream))


def show_menu(menu_data: MenuData, action_data: ActionData) -> None:
    """Write every action and its description, sorted by name."""
    for name, description in menu_data.sorted_descriptions():
        action_data.output_stream.write(f"{name}) {description}\n")


def take_action(choice: str, menu_data: MenuData, action_data: ActionData) -> None:
    """Run the action named choice, show the menu, or report an unknown action."""
    if choice == "menu":
        show_menu(menu_data, action_data)
        return
    function = menu_data.get_function(choice)
    if function is None:
        action_data.output_stream.write(f"Unknown action '{choice}'.\n")
    else:
        function(action_data)


_ACTIONS = (
    ("draw-ascii", output.draw_ascii_image, "Write output image to terminal as ASCII art."),
    ("write", output.write_user_image, "Write output image to file."),
    ("copy", output.copy_image, "Copy input image 1 to output image."),
    ("read1", output.read_user_image1, "Read file into input image 1."),
    ("#", userio.comment_line, "Comment to end of line."),
    ("max-color-value", drawing.set_max_color_value, "Set the max color value of input image 1."),
    ("channel", drawing.set_channel, "Set a channel value in input image 1."),
    ("pixel", drawing.set_pixel, "Set a pixel's 3 values in input image 1."),
    ("clear", drawing.clear_all, "Set all pixels to 0,0,0 in input image 1."),
    ("quit", userio.quit, "Quit."),
    ("read2", output.read_user_image2, "Read file into input image 2."),
    ("+", filters.plus, "Set output image from sum of input image 1 and input image 2."),
    ("+=", filters.plus_equals, "Set input image 1 by adding in input image 2."),
    ("-", filters.minus, "Set output image from difference of input image 1 and input image 2."),
    ("-=", filters.minus_equals, "Set input image 1 by subtracting input image 2."),
    ("*", filters.times, "Set output image from input image 1 multiplied by a number."),
    ("*=", filters.times_equals, "Set input image 1 by multiplying by a number."),
    ("/", filters.divide, "Set output image from input image 1 divided by a number."),
    ("/=", filters.divide_equals, "Set input image 1 by dividing by a number."),
    ("red-gray", filters.gray_from_red, "Set output image by grayscale from red on input image 1."),
    ("green-gray", filters.gray_from_green, "Set output image by grayscale from green on input image 1."),
    ("blue-gray", filters.gray_from_blue, "Set output image by grayscale from blue on input image 1."),
    (
        "linear-gray",
        filters.gray_from_linear_colorimetric,
        "Set output image by linear colorimetric grayscale on input image 1.",
    ),
    ("circle", drawing.draw_circle, "Draw a circle shape in input image 1."),
    ("box", drawing.draw_box, "Draw a box shape in input image 1."),
    ("orange", filters.orange_filter, "Set output image from orange filter on input image 1."),
    ("square", drawing.draw_square, "Draw a square shape in input image 1."),
    ("grid", drawing.configure_grid, "Configure the grid."),
    ("grid-set", drawing.set_grid, "Set a single value in the grid."),
    ("grid-apply", drawing.apply_grid, "Use the grid values to set colors in the output image."),
    ("set-color-table-size", drawing.set_color_table_size, "Change the number of slots in the color table."),
    ("set-color", drawing.set_color, "Set the RGB values for one slot in the color table."),
    (
        "set-random-color",
        drawing.set_random_color,
        "Randomly set the RGB values for one slot in the color table.",
    ),
    (
        "set-color-gradient",
        drawing.set_color_gradient,
        "Smoothly set the RGB values for a range of slots in the color table.",
    ),
    (
        "grid-apply-color-table",
        drawing.apply_grid_color_table,
        "Use the grid values to set colors in the output image using the color table.",
    ),
    ("fractal-plane-size", drawing.set_fractal_plane_size, "Set the dimensions of the grid in the complex plane."),
    ("fractal-calculate", drawing.calculate_fractal, "Calculate the escape values for the fractal."),
    ("julia-parameters", drawing.set_julia_parameters, "Set the parameters of the Julia Set function."),
    ("complex-fractal", None, "Choose to make a complex plane."),
    ("julia", None, "Choose to make a Julia set."),
    ("mandelbrot", None, "Choose to make a Mandelbrot set."),
    ("mandelbrot-power", None, "Choose to make a Mandelbrot set with the power function."),
    ("set-mandelbrot-power", drawing.set_mandelbrot_power, "Choose a power for the Mandelbrot power function."),
    ("manhattan", None, "Choose to make a Manhattan distance grid."),
    (
        "fractal-calculate-single-thread",
        drawing.calculate_fractal_single_thread,
        "Calculate the escape values for the fractal, single-thread.",
    ),
    ("size", drawing.set_size, "Set the size of input image 1."),
    (
        "set-hsv-gradient",
        drawing.set_hsv_gradient,
        "Smoothly set colors for a range of slots in the color table, "
        "based on change of hue, saturation, and value.",
    ),
)


def configure_menu(menu_data: MenuData) -> None:
    """Register every image menu action."""
    grid_choices = {
        "complex-fractal": set_complex_fractal,
        "julia": set_julia_fractal,
        "mandelbrot": set_mandelbrot_fractal,
        "mandelbrot-power": set_mandelbrot_power_fractal,
        "manhattan": set_manhattan_numbers,
    }
    for name, function, description in _ACTIONS:
        menu_data.add_action(name, function or grid_choices[name], description)


def image_menu(input_stream: IO[Any], output_stream: IO[Any]) -> int:
    """Read choices and run actions until quit or the end of the input."""
    action_data = ActionData(input_stream, output_stream)
    action_data.grid = ComplexFractal()
    menu_data = MenuData()
    configure_menu(menu_data)
    while not action_data.done:
        try:
            choice = userio.get_choice(action_data)
            take_action(choice, menu_data, action_data)
        except EOFError:
            break
        except ValueError as error:
            print(error, file=sys.stderr)
    return 0


def set_complex_fractal(action_data: ActionData) -> None:
    """Replace the grid with a complex plane pattern."""
    action_data.grid = ComplexFractal()


def set_julia_fractal(action_data: ActionData) -> None:
    """Replace the grid with a Julia set."""
    action_data.grid = JuliaSet()


def set_mandelbrot_fractal(action_data: ActionData) -> None:
    """Replace the grid with a Mandelbrot set."""
    action_data.grid = MandelbrotSet()


def set_mandelbrot_power_fractal(action_data: ActionData) -> None:
    """Replace the grid with a Mandelbrot power set."""
    action_data.grid = MandelbrotPower()


def set_manhattan_numbers(action_data: ActionData) -> None:
    """Replace the grid with a Manhattan distance grid."""
    action_data.grid = ManhattanNumbers()