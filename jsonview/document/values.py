"""JSON value kinds and their canonical text forms.

Parsed documents are plain Python values (``dict``/``list``/``str``/``int``/
``float``/``bool``/``None``). ``kind_of`` maps them onto one closed set of kinds
so every formatting and search site can branch exhaustively.
"""

from __future__ import annotations

import enum
import json
import math


class JsonKind(enum.Enum):
    """Closed set of JSON value kinds."""

    NULL = "null"
    BOOL = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "list"
    OBJECT = "dictionary"

    @property
    def is_container(self) -> bool:
        return self in (JsonKind.ARRAY, JsonKind.OBJECT)


class NonFiniteFloat(float):
    """Float parsed from a ``NaN``/``Infinity``/``-Infinity`` literal.

    Keeps the literal token so it can be re-emitted verbatim.
    """

    literal: str

    def __new__(cls, literal: str) -> NonFiniteFloat:
        if literal == "NaN":
            number = math.nan
        elif literal == "Infinity":
            number = math.inf
        elif literal == "-Infinity":
            number = -math.inf
        else:
            raise ValueError(f"not a non-finite literal: {literal!r}")
        obj = super().__new__(cls, number)
        obj.literal = literal
        return obj

    def __repr__(self) -> str:
        return self.literal


def kind_of(value: object) -> JsonKind:
    """Return the ``JsonKind`` of a parsed JSON value.

    ``bool`` is checked before ``int`` because it is an ``int`` subclass.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOL
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"unsupported JSON value type: {type(value).__name__}")


def number_text(value: int | float) -> str:
    """Canonical JSON text of a number, keeping non-finite literals."""
    if isinstance(value, NonFiniteFloat):
        return value.literal
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return json.dumps(value)


def canonical_text(value: object) -> str:
    """String form used for value search.

    Strings verbatim, ``true``/``false``, numeric text, ``null``, and the kind
    name (``dictionary``/``list``) for containers.
    """
    kind = kind_of(value)
    if kind is JsonKind.STRING:
        return value  # type: ignore[return-value]
    if kind is JsonKind.BOOL:
        return "true" if value else "false"
    if kind is JsonKind.NUMBER:
        return number_text(value)  # type: ignore[arg-type]
    if kind is JsonKind.NULL:
        return "null"
    return kind.value

