"""Numeric attribute codecs."""

from __future__ import annotations

from gdtfkit.core.errors import InvalidValueError


def parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError as e:
        raise InvalidValueError("float", text, "expected a number") from e


def parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise InvalidValueError("int", text, "expected an integer") from e
