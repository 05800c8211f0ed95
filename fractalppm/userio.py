"""Prompting for and reading whitespace-separated values from an action's streams."""

from __future__ import annotations

import weakref
from typing import IO, Any

from .actions import ActionData

# A whitespace character that ended a token is kept back for the next reader,
# so a following comment still sees the end of its line.
_pending: weakref.WeakKeyDictionary[IO[Any], str] = weakref.WeakKeyDictionary()


def _read_char(stream: IO[Any]) -> str:
    pending = _pending.pop(stream, None)
    if pending is not None:
        return pending
    return stream.read(1)


def _read_token(stream: IO[Any]) -> str:
    char = _read_char(stream)
    while char and char.isspace():
        char = _read_char(stream)
    token: list[str] = []
    while char and not char.isspace():
        token.append(char)
        char = _read_char(stream)
    if char:
        _pending[stream] = char
    if not token:
        raise EOFError("end of input")
    return "".join(token)


def _format_double(value: float) -> str:
    return f"{value:g}"


def get_string(action_data: ActionData, prompt: str) -> str:
    """Write prompt and read one whitespace-delimited word.

    Raises EOFError when the input is exhausted.
    """
    action_data.output_stream.write(prompt)
    return _read_token(action_data.input_stream)


def get_integer(action_data: ActionData, prompt: str) -> int:
    """Write prompt and read an integer; raises ValueError if it is malformed."""
    action_data.output_stream.write(prompt)
    token = _read_token(action_data.input_stream)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def get_double(action_data: ActionData, prompt: str) -> float:
    """Write prompt and read a number; raises ValueError if it is malformed."""
    action_data.output_stream.write(prompt)
    token = _read_token(action_data.input_stream)
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def ask_questions3(action_data: ActionData) -> int:
    """Ask for a color, an integer and a number, then repeat them that many times."""
    out = action_data.output_stream
    color = get_string(action_data, "What is your favorite color?")
    out.write(" ")
    count = get_integer(action_data, "What is your favorite integer?")
    out.write(" ")
    number = get_double(action_data, "What is your favorite number?")
    out.write(" ")
    for i in range(1, count + 1):
        out.write(f"{i} {color} {_format_double(number)}\n")
    return count


def ask_hero_questions(action_data: ActionData) -> int:
    """Ask for a hero and their birth year, report both, return the year."""
    hero = get_string(action_data, "Who is your hero? ")
    year = get_integer(action_data, "What year were they born? ")
    action_data.output_stream.write(f"{hero} was born in {year}.")
    return year


def get_choice(action_data: ActionData) -> str:
    """Prompt for and read a menu choice."""
    return get_string(action_data, "Choice? ")


def comment_line(action_data: ActionData) -> None:
    """Skip the input up to and including the end of the current line."""
    stream = action_data.input_stream
    char = _read_char(stream)
    while char and char != "\n":
        char = _read_char(stream)


def quit(action_data: ActionData) -> None:  # noqa: A001
    """Mark the session as done."""
    action_data.finish()