"""Menu actions that draw patterns and shapes and configure grids and color tables."""

from __future__ import annotations

import math
from itertools import product

from .actions import ActionData
from .colors import Color
from .fractals import ComplexFractal, JuliaSet, MandelbrotPower
from .numbergrid import NumberGrid
from .ppm import PPM
from .userio import get_double, get_integer


def _pixels(image: PPM):
    return product(range(image.height), range(image.width))


def _paint(image: PPM, row: int, column: int, red: int, green: int, blue: int) -> None:
    image.set_channel(row, column, 0, red)
    image.set_channel(row, column, 1, green)
    image.set_channel(row, column, 2, blue)


def diagonal_quad_pattern(action_data: ActionData) -> None:
    """Fill input image 1 with red/blue quadrants and a diagonal green ramp."""
    height = get_integer(action_data, "Image height? ")
    width = get_integer(action_data, "Image width? ")
    image = action_data.input_image1
    image.height = height
    image.width = width
    image.max_color_value = 255
    half_height = int(height / 2)
    half_width = int(width / 2)
    for row, column in product(range(height), range(width)):
        red = 0 if row < half_height else 255
        green = (2 * row + 2 * column) % 256
        blue = 0 if column < half_width else 255
        _paint(image, row, column, red, green, blue)


def striped_diagonal_pattern(action_data: ActionData) -> None:
    """Fill input image 1 with diagonal green stripes, red bands and a blue triangle."""
    height = get_integer(action_data, "Image height? ")
    width = get_integer(action_data, "Image width? ")
    max_value = min(int((height + width) / 3), 255)
    image = action_data.input_image1
    image.height = height
    image.width = width
    image.max_color_value = max_value
    half_height = int(height / 2)
    for row, column in product(range(height), range(width)):
        green = (row + width - column - 1) % (max_value + 1)
        image.set_channel(row, column, 1, green)
        if row < half_height or row % 3 == 0:
            red = 0
        else:
            red = max_value
        image.set_channel(row, column, 0, red)
        blue = 0 if column < row else max_value
        image.set_channel(row, column, 2, blue)


def simple_squares_pattern(action_data: ActionData) -> None:
    """Fill a square input image 1 with four colored quadrants."""
    size = get_integer(action_data, "Image size? ")
    image = action_data.input_image1
    image.height = size
    image.width = size
    half = int(size / 2)
    for row, column in product(range(size), range(size)):
        image.set_channel(row, column, 0, 127 if row < half else 255)
        image.set_channel(row, column, 2, 255)
        image.set_channel(row, column, 1, 0 if column < half else 255)


def set_size(action_data: ActionData) -> None:
    """Ask for and set the height and width of input image 1."""
    height = get_integer(action_data, "Height? ")
    width = get_integer(action_data, "Width? ")
    action_data.input_image1.height = height
    action_data.input_image1.width = width


def set_max_color_value(action_data: ActionData) -> None:
    """Ask for and set the max color value of input image 1."""
    action_data.input_image1.max_color_value = get_integer(action_data, "Max color value? ")


def set_channel(action_data: ActionData) -> None:
    """Ask for a position, channel and value and set it in input image 1."""
    row = get_integer(action_data, "Row? ")
    column = get_integer(action_data, "Column? ")
    channel = get_integer(action_data, "Channel? ")
    value = get_integer(action_data, "Value? ")
    action_data.input_image1.set_channel(row, column, channel, value)


def set_pixel(action_data: ActionData) -> None:
    """Ask for a position and three channel values and set them in input image 1."""
    row = get_integer(action_data, "Row? ")
    column = get_integer(action_data, "Column? ")
    red = get_integer(action_data, "Red? ")
    green = get_integer(action_data, "Green? ")
    blue = get_integer(action_data, "Blue? ")
    _paint(action_data.input_image1, row, column, red, green, blue)


def clear_all(action_data: ActionData) -> None:
    """Set every pixel of input image 1 to black."""
    image = action_data.input_image1
    for row, column in _pixels(image):
        image.set_pixel(row, column, 0, 0, 0)


def draw_circle(action_data: ActionData) -> None:
    """Fill a disc in input image 1."""
    center_row = get_integer(action_data, "Center Row? ")
    center_column = get_integer(action_data, "Center Column? ")
    radius = get_integer(action_data, "Radius? ")
    red = get_integer(action_data, "Red? ")
    green = get_integer(action_data, "Green? ")
    blue = get_integer(action_data, "Blue? ")
    image = action_data.input_image1
    for row, column in _pixels(image):
        if math.hypot(center_row - row, center_column - column) <= radius:
            _paint(image, row, column, red, green, blue)


def draw_box(action_data: ActionData) -> None:
    """Fill the rectangle between the given rows and columns in input image 1."""
    top = get_integer(action_data, "Top Row? ")
    left = get_integer(action_data, "Left Column? ")
    bottom = get_integer(action_data, "Bottom Row? ")
    right = get_integer(action_data, "Right Column? ")
    red = get_integer(action_data, "Red? ")
    green = get_integer(action_data, "Green? ")
    blue = get_integer(action_data, "Blue? ")
    image = action_data.input_image1
    for row, column in _pixels(image):
        if top <= row <= bottom and left <= column <= right:
            _paint(image, row, column, red, green, blue)


def draw_square(action_data: ActionData) -> None:
    """Fill a square centred on a pixel in input image 1."""
    center_row = get_integer(action_data, "Row? ")
    center_column = get_integer(action_data, "Column? ")
    size = get_integer(action_data, "Size? ")
    red = get_integer(action_data, "Red? ")
    green = get_integer(action_data, "Green? ")
    blue = get_integer(action_data, "Blue? ")
    radius = int(size / 2)
    image = action_data.input_image1
    for row, column in _pixels(image):
        if (
            center_row - radius <= row <= center_row + radius
            and center_column - radius <= column <= center_column + radius
        ):
            _paint(image, row, column, red, green, blue)


def configure_grid(action_data: ActionData) -> None:
    """Ask for and set the grid's size and max value."""
    height = get_integer(action_data, "Grid Height? ")
    width = get_integer(action_data, "Grid Width? ")
    max_number = get_integer(action_data, "Grid Max Value? ")
    action_data.grid.set_grid_size(height, width)
    action_data.grid.max_number = max_number


def set_grid(action_data: ActionData) -> None:
    """Ask for and set one value in the grid."""
    row = get_integer(action_data, "Grid Row? ")
    column = get_integer(action_data, "Grid Column? ")
    value = get_integer(action_data, "Grid Value? ")
    action_data.grid.set_number(row, column, value)


def apply_grid(action_data: ActionData) -> None:
    """Render the grid into the output image with the fixed palette."""
    action_data.grid.set_ppm(action_data.output_image)


def set_color_table_size(action_data: ActionData) -> None:
    """Ask for and set the number of slots in the color table."""
    action_data.table.number_of_colors = get_integer(action_data, "Size? ")


def set_color(action_data: ActionData) -> None:
    """Ask for and set the RGB values of one color table slot."""
    position = get_integer(action_data, "Position? ")
    red = get_integer(action_data, "Red? ")
    green = get_integer(action_data, "Green? ")
    blue = get_integer(action_data, "Blue? ")
    color = action_data.table[position]
    color.red = red
    color.green = green
    color.blue = blue


def set_random_color(action_data: ActionData) -> None:
    """Give one color table slot random RGB values."""
    position = get_integer(action_data, "Position? ")
    action_data.table.set_random_color(255, position)


def set_color_gradient(action_data: ActionData) -> None:
    """Ask for two positions and colors and fill an RGB gradient between them."""
    position1 = get_integer(action_data, "First position? ")
    red1 = get_integer(action_data, "First red? ")
    green1 = get_integer(action_data, "First green? ")
    blue1 = get_integer(action_data, "First blue? ")
    position2 = get_integer(action_data, "Second position? ")
    red2 = get_integer(action_data, "Second red? ")
    green2 = get_integer(action_data, "Second green? ")
    blue2 = get_integer(action_data, "Second blue? ")
    action_data.table.insert_gradient(
        Color(red1, green1, blue1), Color(red2, green2, blue2), position1, position2
    )


def apply_grid_color_table(action_data: ActionData) -> None:
    """Render the grid into the output image using the color table."""
    action_data.grid.set_ppm(action_data.output_image, action_data.table)


def set_fractal_plane_size(action_data: ActionData) -> None:
    """Ask for and set the plane rectangle of a complex fractal grid."""
    grid = action_data.grid
    if not isinstance(grid, ComplexFractal):
        action_data.output_stream.write(
            "Not a ComplexFractal object. Can't set plane size.\n"
        )
        return
    min_x = get_double(action_data, "Min X? ")
    max_x = get_double(action_data, "Max X? ")
    min_y = get_double(action_data, "Min Y? ")
    max_y = get_double(action_data, "Max Y? ")
    grid.set_plane_size(min_x, max_x, min_y, max_y)


def calculate_fractal(action_data: ActionData) -> None:
    """Calculate every number of the grid."""
    action_data.grid.calculate_all_numbers()


def set_julia_parameters(action_data: ActionData) -> None:
    """Ask for and set the parameters of a Julia set grid."""
    grid = action_data.grid
    if not isinstance(grid, JuliaSet):
        action_data.output_stream.write("Not a JuliaSet object. Can't set parameters.\n")
        return
    a = get_double(action_data, "Parameter a? ")
    b = get_double(action_data, "Parameter b? ")
    grid.set_parameters(a, b)


def set_mandelbrot_power(action_data: ActionData) -> None:
    """Ask for and set the power of a Mandelbrot power grid."""
    grid = action_data.grid
    if not isinstance(grid, MandelbrotPower):
        action_data.output_stream.write(
            "Not a MandelbrotPower object. Can't set power.\n"
        )
        return
    grid.power = get_double(action_data, "Power? ")


def calculate_fractal_single_thread(action_data: ActionData) -> None:
    """Calculate every number of the grid in the calling thread."""
    NumberGrid.calculate_all_numbers(action_data.grid)


def set_hsv_gradient(action_data: ActionData) -> None:
    """Ask for two positions and HSV colors and fill a gradient between them."""
    position1 = get_integer(action_data, "First position? ")
    hue1 = get_double(action_data, "First hue? ")
    saturation1 = get_double(action_data, "First saturation? ")
    value1 = get_double(action_data, "First value? ")
    position2 = get_integer(action_data, "Second position? ")
    hue2 = get_double(action_data, "Second hue? ")
    saturation2 = get_double(action_data, "Second saturation? ")
    value2 = get_double(action_data, "Second value? ")
    first = Color()
    second = Color()
    first.set_from_hsv(hue1, saturation1, value1)
    second.set_from_hsv(hue2, saturation2, value2)
    action_data.table.insert_gradient(first, second, position1, position2)