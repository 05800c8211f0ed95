import io

import pytest

from fractalppm.actions import ActionData
from fractalppm.colors import Color
from fractalppm.numbergrid import ManhattanNumbers


def _make():
    return ActionData(io.StringIO("1 2"), io.StringIO())


def test_streams_are_kept():
    source = io.StringIO("abc")
    sink = io.StringIO()
    data = ActionData(source, sink)
    assert data.input_stream is source
    assert data.output_stream is sink


def test_finish_sets_done():
    data = _make()
    assert data.done is False
    data.finish()
    assert data.done is True


def test_default_color_table_is_gradient():
    data = _make()
    assert len(data.table) == 16
    assert data.table[0] == Color(0, 255, 0)
    assert data.table[15] == Color(255, 0, 255)


def test_grid_missing_raises():
    with pytest.raises(LookupError):
        _make().grid


def test_grid_can_be_replaced():
    data = _make()
    first = ManhattanNumbers(4, 4)
    second = ManhattanNumbers(6, 6)
    data.grid = first
    assert data.grid is first
    data.grid = second
    assert data.grid is second
    data.grid = None
    with pytest.raises(LookupError):
        data.grid


def test_images_start_empty():
    data = _make()
    assert (data.output_image.height, data.output_image.width) == (0, 0)
    assert data.input_image1.max_color_value == 1
    assert data.input_image1 is not data.input_image2