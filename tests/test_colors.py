import pytest

from fractalppm.colors import Color, ColorTable, hsv_to_rgb, rgb_to_hsv


def test_color_defaults_and_str():
    assert str(Color()) == "0:0:0"
    assert str(Color(1, 2, 3)) == "1:2:3"


def test_color_negative_set_ignored():
    color = Color(5, 6, 7)
    color.red = -3
    color.set_channel(1, -1)
    assert color == Color(5, 6, 7)


def test_color_channels():
    color = Color(5, 6, 7)
    assert [color.get_channel(c) for c in range(3)] == [5, 6, 7]
    assert color.get_channel(3) == -1
    color.set_channel(2, 9)
    color.set_channel(4, 100)
    assert color.blue == 9
    assert color == Color(5, 6, 9)


def test_invert_twice_is_identity():
    color = Color(10, 20, 30)
    color.invert(255)
    assert color.red + 10 == 255
    color.invert(255)
    assert color == Color(10, 20, 30)


def test_invert_ignored_when_above_max():
    color = Color(10, 200, 30)
    color.invert(100)
    assert color == Color(10, 200, 30)


def test_hsv_pure_red():
    assert hsv_to_rgb(0.0, 1.0, 1.0) == pytest.approx((255.0, 0.0, 0.0))
    assert rgb_to_hsv(255.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 1.0))


@pytest.mark.parametrize("rgb", [(10, 20, 30), (200, 100, 50), (0, 0, 0), (255, 255, 255), (40, 250, 90)])
def test_hsv_round_trip(rgb):
    assert hsv_to_rgb(*rgb_to_hsv(*rgb)) == pytest.approx(rgb)


def test_hsv_out_of_range_raises():
    with pytest.raises(ValueError):
        hsv_to_rgb(400.0, 0.5, 0.5)
    with pytest.raises(ValueError):
        rgb_to_hsv(-1.0, 0.0, 0.0)


def test_color_set_from_hsv_gray():
    color = Color()
    color.set_from_hsv(0.0, 0.0, 1.0)
    assert color == Color(255, 255, 255)
    assert color.hsv() == pytest.approx((0.0, 0.0, 1.0))


def test_table_resize_and_lookup():
    table = ColorTable(4)
    assert len(table) == 4
    table[1].red = 50
    table.number_of_colors = 8
    assert table.number_of_colors == 8
    assert table[1].red == 50
    table.number_of_colors = 1
    assert len(table) == 1


def test_table_out_of_range_is_detached():
    table = ColorTable(2)
    outside = table[5]
    assert outside == Color(-1, -1, -1)
    outside.red = 99
    assert table[5] == Color(-1, -1, -1)
    assert table[-1] == Color(-1, -1, -1)


def test_insert_gradient_endpoints_and_monotonic():
    table = ColorTable(16)
    first, last = Color(0, 255, 0), Color(255, 0, 255)
    table.insert_gradient(first, last, 0, 15)
    assert table[0] == first
    assert table[15] == last
    reds = [table[i].red for i in range(16)]
    assert reds == sorted(reds)


@pytest.mark.parametrize("positions", [(5, 5), (6, 2), (-1, 3), (0, 16)])
def test_insert_gradient_invalid_positions(positions):
    table = ColorTable(16)
    table.insert_gradient(Color(9, 9, 9), Color(200, 200, 200), *positions)
    assert all(table[i] == Color() for i in range(16))


def test_insert_hsv_gradient_endpoints():
    table = ColorTable(8)
    table.insert_hsv_gradient(Color(255, 0, 0), Color(0, 0, 255), 0, 7)
    assert table[0] == Color(255, 0, 0)
    for i in range(8):
        assert max(table[i].red, table[i].green, table[i].blue) >= 254


def test_set_random_color_range():
    table = ColorTable(3)
    for _ in range(20):
        table.set_random_color(10, 1)
        assert all(0 <= table[1].get_channel(c) < 10 for c in range(3))
    table.set_random_color(0, 2)
    assert table[2] == Color(0, 0, 0)


def test_set_random_color_invalid_position():
    table = ColorTable(2)
    table[0].red = 7
    table.set_random_color(255, 5)
    table.set_random_color(-1, 0)
    assert table[0] == Color(7, 0, 0)


def test_max_channel_value():
    table = ColorTable(3)
    assert table.max_channel_value() == 0
    table[0].green = 40
    table[2].blue = 120
    assert table.max_channel_value() == 120


def test_gradient_line():
    table = ColorTable(2)
    slope = table.gradient_slope(0.0, 10.0, 0.0, 5.0)
    assert table.gradient_value(0.0, 0.0, slope, 5.0) == pytest.approx(10.0)