import io
import sys

import pytest

from fractalppm import commands
from fractalppm.ppm import PPM


def _feed(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_hello(capsys):
    assert commands.hello_main([]) == 0
    assert capsys.readouterr().out == "Hello, world.\n"


def test_hello_rejects_arguments():
    with pytest.raises(SystemExit):
        commands.hello_main(["--unknown"])


def test_hero(monkeypatch, capsys):
    _feed(monkeypatch, "Ada 1815\n")
    assert commands.hero_main([]) == 1815
    assert capsys.readouterr().out.endswith("Ada was born in 1815.")


def test_questions(monkeypatch, capsys):
    _feed(monkeypatch, "red 1 2\n")
    assert commands.questions_main([]) == 1
    assert capsys.readouterr().out.endswith("1 red 2\n")


def test_ppm_menu_quit(monkeypatch, capsys):
    _feed(monkeypatch, "quit\n")
    assert commands.ppm_menu_main([]) == 0
    assert capsys.readouterr().out == "Choice? "


def test_ascii_image(monkeypatch, capsys):
    _feed(monkeypatch, "2 2\n")
    assert commands.ascii_image_main([]) == 0
    text = capsys.readouterr().out
    body = text[len("Image height? Image width? "):]
    assert [len(line) for line in body.split("\n")] == [2, 2, 0]


def test_simple_squares(monkeypatch, capsys):
    _feed(monkeypatch, "2\n")
    assert commands.simple_squares_main([]) == 0
    body = capsys.readouterr().out[len("Image size? "):]
    assert [len(line) for line in body.split("\n")] == [2, 2, 0]


def test_image_file(monkeypatch, tmp_path):
    path = tmp_path / "image.ppm"
    _feed(monkeypatch, f"3 3 {path}\n")
    assert commands.image_file_main([]) == 0
    content = path.read_bytes()
    assert content.startswith(b"P6 3 3 ")
    assert len(content.split(b"\n", 1)[1]) == 27
    image = PPM()
    with open(path, "rb") as file:
        image.read_stream(file)
    assert (image.height, image.width) == (3, 3)