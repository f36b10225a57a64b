"""Text helpers: number formatting and parsing, field splitting and file reading."""

from __future__ import annotations

import os
import re
from itertools import groupby
from pathlib import Path

MAX_NUMBER = 32767

_DIGIT_RUN = re.compile(r"[0-9]+")

PathLike = str | os.PathLike


def int_to_str(number: int) -> str:
    """Return the decimal text of ``number``; zero gives an empty string."""
    if number == 0:
        return ""
    return str(number)


def get_number(text: str) -> int:
    """Read the first run of digits in ``text`` as an integer.

    A ``-`` directly before the digits makes the result negative. Text
    without digits, or a value above ``MAX_NUMBER``, gives 0.
    """
    match = _DIGIT_RUN.search(text)
    if match is None:
        return 0
    value = int(match.group())
    if value > MAX_NUMBER:
        return 0
    start = match.start()
    if start > 0 and text[start - 1] == "-":
        return -value
    return value


def split_fields(text: str, separators: str) -> list[str]:
    """Split ``text`` into the runs of characters not found in ``separators``.

    Consecutive separators count as one; empty fields are never returned.
    """
    separator_set = set(separators)
    return [
        "".join(chars)
        for is_separator, chars in groupby(text, key=separator_set.__contains__)
        if not is_separator
    ]


def read_file(path: PathLike) -> str:
    """Return the whole content of the file at ``path``."""
    return Path(path).read_text(encoding="utf-8")


def read_optional_file(path: PathLike) -> str | None:
    """Return the content of ``path``, or None if it is missing, unreadable or empty."""
    try:
        content = read_file(path)
    except OSError:
        return None
    return content or None


def parse_battle_numbers(text: str) -> list[str]:
    """Return every run of digits in ``text``, in order."""
    return _DIGIT_RUN.findall(text)


def has_prefix(prefix: str, text: str) -> bool:
    """Tell whether ``text`` starts with ``prefix``."""
    return text.startswith(prefix)