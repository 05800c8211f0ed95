import io

from fractalppm import output
from fractalppm.actions import ActionData
from fractalppm.ppm import PPM


def _data(text=""):
    return ActionData(io.StringIO(text), io.StringIO())


def _image(pixels, max_value=255):
    image = PPM(len(pixels), len(pixels[0]))
    image.max_color_value = max_value
    for row, values in enumerate(pixels):
        for column, rgb in enumerate(values):
            image.set_pixel(row, column, *rgb)
    return image


def _channels(image):
    return [
        image.get_channel(row, column, channel)
        for row in range(image.height)
        for column in range(image.width)
        for channel in range(3)
    ]


def test_draw_ascii_single_row():
    data = _data()
    data.output_image = _image([[(255, 255, 255), (0, 0, 0)]])
    output.draw_ascii_image(data)
    assert data.output_stream.getvalue() == "@ \n"


def test_draw_ascii_single_column():
    data = _data()
    data.output_image = _image([[(255, 255, 255)], [(0, 0, 0)]])
    output.draw_ascii_image(data)
    assert data.output_stream.getvalue() == "@\n \n"


def test_draw_ascii_mid_gray():
    data = _data()
    data.output_image = _image([[(128, 128, 128)]])
    output.draw_ascii_image(data)
    assert data.output_stream.getvalue() == "+\n"


def test_draw_ascii_empty_image():
    data = _data()
    output.draw_ascii_image(data)
    assert data.output_stream.getvalue() == "\n"


def test_draw_ascii_line_shape():
    data = _data()
    data.output_image = _image([[(10, 20, 30)] * 4] * 3)
    output.draw_ascii_image(data)
    lines = data.output_stream.getvalue().split("\n")
    assert lines[-1] == ""
    assert [len(line) for line in lines[:-1]] == [4, 4, 4]


def test_write_header(tmp_path):
    path = tmp_path / "out.ppm"
    data = _data(f"{path}\n")
    data.output_image = _image([[(1, 2, 3), (4, 5, 6)]])
    output.write_user_image(data)
    content = path.read_bytes()
    assert content.startswith(b"P6 2 1 255\n")
    assert content.endswith(bytes([1, 2, 3, 4, 5, 6]))
    assert data.output_stream.getvalue() == "Output filename? "


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "round.ppm"
    data = _data(f"{path}\n{path}\n{path}\n")
    data.output_image = _image([[(9, 8, 7), (0, 63, 1)], [(5, 5, 5), (63, 0, 62)]], 63)
    output.write_user_image(data)
    output.read_user_image1(data)
    output.read_user_image2(data)
    for image in (data.input_image1, data.input_image2):
        assert image.height == 2
        assert image.width == 2
        assert image.max_color_value == 63
        assert _channels(image) == _channels(data.output_image)


def test_read_missing_file_reports(tmp_path):
    path = tmp_path / "missing.ppm"
    data = _data(f"{path}\n")
    output.read_user_image1(data)
    assert data.output_stream.getvalue() == f"Input filename? '{path}' could not be opened.\n"
    assert data.input_image1.width == 0


def test_copy_image_is_independent():
    data = _data()
    data.input_image1 = _image([[(1, 2, 3)]])
    output.copy_image(data)
    assert _channels(data.output_image) == [1, 2, 3]
    data.output_image.set_pixel(0, 0, 100, 100, 100)
    assert _channels(data.input_image1) == [1, 2, 3]