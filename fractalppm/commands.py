"""Entry points of the command-line programs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from . import controllers


def _parse(prog: str, description: str, argv: Sequence[str] | None) -> None:
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.parse_args(argv)


def hello_main(argv: Sequence[str] | None = None) -> int:
    """Greet the world."""
    _parse("hello", "Print a greeting.", argv)
    print("Hello, world.")
    return 0


def ascii_image_main(argv: Sequence[str] | None = None) -> int:
    """Draw the diagonal quad pattern as ASCII art."""
    _parse("ascii_image", "Draw a diagonal quad pattern as ASCII art.", argv)
    return controllers.assignment2(sys.stdin, sys.stdout)


def hero_main(argv: Sequence[str] | None = None) -> int:
    """Ask about a hero; the exit status is their birth year."""
    _parse("hero", "Ask about a hero.", argv)
    return controllers.hero(sys.stdin, sys.stdout)


def image_file_main(argv: Sequence[str] | None = None) -> int:
    """Draw the striped diagonal pattern into a PPM file."""
    _parse("image_file", "Write a striped diagonal pattern to a PPM file.", argv)
    return controllers.assignment3(sys.stdin, sys.stdout)


def ppm_menu_main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive image menu."""
    _parse("ppm_menu", "Interactive PPM image and fractal menu.", argv)
    return controllers.image_menu(sys.stdin, sys.stdout)


def questions_main(argv: Sequence[str] | None = None) -> int:
    """Ask the favorite-things questions."""
    _parse("questions_3", "Ask about favorite things.", argv)
    return controllers.assignment1(sys.stdin, sys.stdout)


def simple_squares_main(argv: Sequence[str] | None = None) -> int:
    """Draw the simple squares pattern as ASCII art."""
    _parse("simple_squares_ascii", "Draw a simple squares pattern as ASCII art.", argv)
    return controllers.simple_squares_ascii(sys.stdin, sys.stdout)