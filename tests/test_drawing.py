import io
from itertools import product

import pytest

from fractalppm.actions import ActionData
from fractalppm.colors import Color
from fractalppm.drawing import (
    apply_grid,
    apply_grid_color_table,
    calculate_fractal,
    calculate_fractal_single_thread,
    clear_all,
    configure_grid,
    diagonal_quad_pattern,
    draw_box,
    draw_circle,
    draw_square,
    set_channel,
    set_color,
    set_color_gradient,
    set_color_table_size,
    set_fractal_plane_size,
    set_grid,
    set_hsv_gradient,
    set_julia_parameters,
    set_mandelbrot_power,
    set_max_color_value,
    set_pixel,
    set_random_color,
    set_size,
    simple_squares_pattern,
    striped_diagonal_pattern,
)
from fractalppm.fractals import ComplexFractal, JuliaSet, MandelbrotPower
from fractalppm.numbergrid import ManhattanNumbers


def _data(text, grid=None):
    data = ActionData(io.StringIO(text), io.StringIO())
    if grid is not None:
        data.grid = grid
    return data


def _canvas(text, size=5):
    data = _data(text)
    image = data.input_image1
    image.height = size
    image.width = size
    image.max_color_value = 255
    return data


def _pixel(image, row, column):
    return tuple(image.get_channel(row, column, c) for c in range(3))


def _painted(image, rgb):
    return {
        (r, c)
        for r, c in product(range(image.height), range(image.width))
        if _pixel(image, r, c) == rgb
    }


def test_diagonal_quad_pattern_quadrants():
    data = _data("4 6")
    diagonal_quad_pattern(data)
    image = data.input_image1
    assert (image.height, image.width, image.max_color_value) == (4, 6, 255)
    assert data.output_stream.getvalue() == "Image height? Image width? "
    for row, column in product(range(4), range(6)):
        assert image.get_channel(row, column, 0) == (0 if row < 2 else 255)
        assert image.get_channel(row, column, 2) == (0 if column < 3 else 255)
    assert image.get_channel(0, 0, 1) == 0
    assert image.get_channel(0, 1, 1) == 2


def test_striped_diagonal_pattern_limits_values():
    data = _data("6 6")
    striped_diagonal_pattern(data)
    image = data.input_image1
    top = image.max_color_value
    assert top == 4
    for row, column in product(range(6), range(6)):
        assert image.get_channel(row, column, 2) == (0 if column < row else top)
        assert 0 <= image.get_channel(row, column, 1) <= top
        if row < 3:
            assert image.get_channel(row, column, 0) == 0


def test_simple_squares_pattern_keeps_default_max():
    data = _data("4")
    simple_squares_pattern(data)
    image = data.input_image1
    assert (image.height, image.width, image.max_color_value) == (4, 4, 1)
    assert _painted(image, (0, 0, 0)) == set(product(range(4), range(4)))


def test_set_size():
    data = _data("3 5")
    set_size(data)
    assert (data.input_image1.height, data.input_image1.width) == (3, 5)
    assert data.output_stream.getvalue() == "Height? Width? "


def test_set_max_color_value():
    data = _data("100")
    set_max_color_value(data)
    assert data.input_image1.max_color_value == 100


def test_set_channel_and_pixel():
    data = _canvas("1 2 0 9 3 4 10 20 30")
    set_channel(data)
    assert data.input_image1.get_channel(1, 2, 0) == 9
    set_pixel(data)
    assert _pixel(data.input_image1, 3, 4) == (10, 20, 30)


def test_clear_all():
    data = _canvas("0 0 10 20 30")
    set_pixel(data)
    clear_all(data)
    assert _painted(data.input_image1, (0, 0, 0)) == set(product(range(5), range(5)))


def test_draw_circle():
    data = _canvas("2 2 1 10 20 30")
    draw_circle(data)
    assert _painted(data.input_image1, (10, 20, 30)) == {
        (2, 2), (1, 2), (3, 2), (2, 1), (2, 3)
    }


def test_draw_box():
    data = _canvas("1 1 2 3 5 6 7")
    draw_box(data)
    assert _painted(data.input_image1, (5, 6, 7)) == set(product((1, 2), (1, 2, 3)))


def test_draw_square():
    data = _canvas("2 2 3 8 8 8")
    draw_square(data)
    assert _painted(data.input_image1, (8, 8, 8)) == set(product((1, 2, 3), (1, 2, 3)))


def test_configure_grid():
    grid = ManhattanNumbers(10, 10)
    data = _data("3 4 10", grid)
    configure_grid(data)
    assert (grid.height, grid.width, grid.max_number) == (3, 4, 10)


def test_set_grid():
    grid = ManhattanNumbers(3, 4)
    data = _data("1 2 7", grid)
    set_grid(data)
    assert grid.get_number(1, 2) == 7


def test_apply_grid():
    grid = ManhattanNumbers(3, 4)
    data = _data("", grid)
    apply_grid(data)
    out = data.output_image
    assert (out.height, out.width, out.max_color_value) == (3, 4, 63)


def test_apply_grid_color_table():
    grid = ManhattanNumbers(3, 4)
    grid.calculate_all_numbers()
    data = _data("", grid)
    apply_grid_color_table(data)
    out = data.output_image
    assert (out.height, out.width) == (3, 4)
    assert out.max_color_value == data.table.max_channel_value()


def test_set_color_table_size():
    data = _data("5")
    set_color_table_size(data)
    assert len(data.table) == 5


def test_set_color():
    data = _data("2 1 2 3")
    set_color(data)
    assert data.table[2] == Color(1, 2, 3)


def test_set_random_color_within_range():
    data = _data("0")
    set_random_color(data)
    color = data.table[0]
    assert all(0 <= color.get_channel(c) < 255 for c in range(3))


def test_set_color_gradient():
    data = _data("0 0 0 0 4 40 80 120")
    set_color_gradient(data)
    assert data.table[0] == Color(0, 0, 0)
    assert data.table[4] == Color(40, 80, 120)
    assert data.table[2] == Color(20, 40, 60)


def test_set_fractal_plane_size():
    grid = ComplexFractal()
    data = _data("-1 1 -0.5 0.5", grid)
    set_fractal_plane_size(data)
    assert (grid.min_x, grid.max_x, grid.min_y, grid.max_y) == (-1, 1, -0.5, 0.5)


def test_set_fractal_plane_size_wrong_grid():
    data = _data("-1 1 -0.5 0.5", ManhattanNumbers(3, 3))
    set_fractal_plane_size(data)
    assert data.output_stream.getvalue() == (
        "Not a ComplexFractal object. Can't set plane size.\n"
    )


def test_calculate_fractal_matches_single_thread():
    threaded = ComplexFractal()
    threaded.set_grid_size(5, 6)
    single = ComplexFractal()
    single.set_grid_size(5, 6)
    calculate_fractal(_data("", threaded))
    calculate_fractal_single_thread(_data("", single))
    assert threaded.numbers == single.numbers
    assert any(number > 0 for number in single.numbers)


def test_set_julia_parameters():
    grid = JuliaSet()
    data = _data("0.3 -0.2", grid)
    set_julia_parameters(data)
    assert (grid.a, grid.b) == (0.3, -0.2)


def test_set_julia_parameters_wrong_grid():
    data = _data("0.3 -0.2", ComplexFractal())
    set_julia_parameters(data)
    assert data.output_stream.getvalue() == "Not a JuliaSet object. Can't set parameters.\n"


def test_set_mandelbrot_power():
    grid = MandelbrotPower()
    data = _data("3", grid)
    set_mandelbrot_power(data)
    assert grid.power == 3.0


def test_set_mandelbrot_power_wrong_grid():
    data = _data("3", ComplexFractal())
    set_mandelbrot_power(data)
    assert data.output_stream.getvalue() == (
        "Not a MandelbrotPower object. Can't set power.\n"
    )


def test_set_hsv_gradient_endpoints():
    data = _data("0 0 1 1 2 120 1 1")
    set_hsv_gradient(data)
    assert data.table[0] == Color(255, 0, 0)
    assert data.table[2] == Color(0, 255, 0)


def test_set_hsv_gradient_out_of_range_raises():
    data = _data("0 400 1 1 2 120 1 1")
    with pytest.raises(ValueError):
        set_hsv_gradient(data)


def test_missing_grid_raises():
    data = _data("1 2 3")
    with pytest.raises(LookupError):
        configure_grid(data)