"""Tree Value kinds and rendering helpers.

Parsed JSON documents are plain Python values:

- ``dict``                         -> Object
- ``list`` / ``tuple``             -> Array
- ``str``                          -> String
- ``int`` / ``float`` / ``Decimal`` -> Number (never ``bool``)
- ``bool``                         -> Boolean
- ``None``                         -> Null

``kind_of`` is the single exhaustive dispatch point over that closed set.
The comparison engine never looks at Python types directly.
"""

from __future__ import annotations

import json
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any, Final

__all__ = [
    "ABSENT",
    "IGNORE_MARKER",
    "ValueKind",
    "is_ignore_marker",
    "kind_of",
    "numbers_equal",
    "parse_json",
    "to_display_text",
    "to_json_text",
    "to_matcher_text",
]

IGNORE_MARKER: Final = "@ignore@"


class _Absent:
    """Marks a position that does not exist in the actual document."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


class ValueKind(StrEnum):
    """The six structural kinds of a Tree Value.

    StrEnum values are the lowercased member names; ``display`` gives the
    capitalised form used in diagnostics (``"Object"``, ``"Array"``, ...).
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def display(self) -> str:
        return self.value.capitalize()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of a parsed JSON value.

    Raises:
        TypeError: If value is not a JSON value (or is ``ABSENT``).
    """
    # bool MUST be checked before int: bool subclasses int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_ignore_marker(value: Any) -> bool:
    return isinstance(value, str) and value.strip() == IGNORE_MARKER


def _as_decimal(number: int | float | Decimal) -> Decimal:
    if isinstance(number, Decimal):
        return number
    if isinstance(number, float):
        # repr keeps the shortest round-tripping form, so 0.1 -> Decimal("0.1")
        return Decimal(repr(number))
    return Decimal(number)


def numbers_equal(a: int | float | Decimal, b: int | float | Decimal) -> bool:
    """Value-based numeric equality: ``5``, ``5.0`` and ``Decimal("5.00")`` agree."""
    return _as_decimal(a) == _as_decimal(b)


def _number_text(number: int | float | Decimal) -> str:
    if isinstance(number, float):
        return repr(number)
    return str(number)


def to_json_text(value: Any) -> str:
    """Render a Tree Value as compact JSON text (``[11,22,44]``).

    Key order follows the document; Decimals keep their original digits.
    """
    kind = kind_of(value)
    if kind == ValueKind.OBJECT:
        entries = (
            f"{json.dumps(key, ensure_ascii=False)}:{to_json_text(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(entries) + "}"
    if kind == ValueKind.ARRAY:
        return "[" + ",".join(to_json_text(item) for item in value) + "]"
    if kind == ValueKind.STRING:
        return json.dumps(value, ensure_ascii=False)
    if kind == ValueKind.NUMBER:
        return _number_text(value)
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    return "null"


def to_display_text(value: Any) -> str:
    """Render a value for a diagnostic message.

    Strings are shown bare, containers as compact JSON, and a missing
    position as ``absent``.
    """
    if value is ABSENT:
        return "absent"
    if isinstance(value, str):
        return value
    return to_json_text(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r} is not supported")


def parse_json(text: str) -> Any:
    """Parse JSON text into a Tree Value, keeping numbers as exact Decimals.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected; they are not JSON.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    return json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)


def to_matcher_text(value: Any) -> str | None:
    """Stringify an actual value for a matcher; ``None`` when absent."""
    if value is ABSENT:
        return None
    if isinstance(value, str):
        return value
    return to_json_text(value)
