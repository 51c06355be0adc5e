"""Equality primitives shared by the assertion set.

Three notions of equality are used:

* ``is_identical``: equality without coercion. Scalars compare by exact type
  and value, everything else by object identity.
* ``loosely_equal``: equality with permissive coercion between numbers and
  numeric strings.
* ``equal_structurally``: a minimal recursive comparison over own keys.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from assertkit.assertions.base import UNDEFINED

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)
_NUMBER_TYPES = (bool, int, float)

_INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)
_NUMBER_TEXT = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


def is_identical(a: Any, b: Any) -> bool:
    if isinstance(a, _SCALAR_TYPES) or isinstance(b, _SCALAR_TYPES):
        return type(a) is type(b) and a == b
    return a is b


def _to_number(text: str) -> int | float | None:
    """Parse a numeric literal; None when ``text`` is not one.

    Integral text parses exactly as an int so it compares exactly against
    ints of any size.
    """
    text = text.strip()
    if not text:
        return 0
    if _INTEGER_TEXT.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Past the interpreter's int string-conversion digit limit.
            return float(text)
    if _NUMBER_TEXT.fullmatch(text):
        return float(text)
    return None


def loosely_equal(a: Any, b: Any) -> bool:
    """Compare two values, coercing numeric strings when paired with numbers.

    ``None`` and ``UNDEFINED`` are loosely equal to each other and to nothing
    else. Only the str/number pairing is coerced; containers are never
    converted.
    """
    if a is None or a is UNDEFINED or b is None or b is UNDEFINED:
        return (a is None or a is UNDEFINED) and (b is None or b is UNDEFINED)

    if a == b:
        return True

    if isinstance(a, str) and isinstance(b, _NUMBER_TYPES):
        a, b = b, a
    if isinstance(b, str) and isinstance(a, _NUMBER_TYPES):
        coerced = _to_number(b)
        return coerced is not None and a == coerced

    return False


def own_keys(value: Any) -> list[Any]:
    """Enumerate the own keys of ``value``.

    Mappings yield their keys, sequences (including strings) their indices,
    and plain objects their instance attributes. Values without any of these
    have no keys. ``None`` and ``UNDEFINED`` cannot be enumerated.
    """
    if value is None or value is UNDEFINED:
        raise TypeError(f"Cannot convert {value!r} to an object with keys")
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, Sequence):
        return list(range(len(value)))
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return list(vars(value).keys())
    return []


def _has_key(value: Any, key: Any, keys: list[Any]) -> bool:
    # Text is enumerable but cannot be searched for keys.
    if isinstance(value, (str, bytes)):
        raise TypeError(f"Cannot search for key {key!r} in {value!r}")
    return key in keys


def _lookup(value: Any, key: Any) -> Any:
    if isinstance(value, (Mapping, Sequence)):
        return value[key]
    return vars(value)[key]


def equal_structurally(a: Any, b: Any) -> bool:
    if is_identical(a, b):
        return True

    keys_a = own_keys(a)
    keys_b = own_keys(b)
    if len(keys_a) != len(keys_b):
        return False

    for key in keys_a:
        if not _has_key(b, key, keys_b):
            return False
        if not equal_structurally(_lookup(a, key), _lookup(b, key)):
            return False

    return True
