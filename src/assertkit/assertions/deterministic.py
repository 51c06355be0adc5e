"""The assertion set: named checks that pass silently or raise AssertionFailure."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping, Sequence, Set
from typing import Any

from assertkit.assertions.base import UNDEFINED, fail
from assertkit.assertions.equality import (
    equal_structurally,
    is_identical,
    loosely_equal,
    own_keys,
)
from assertkit.formatting import format_value as _f

logger = logging.getLogger(__name__)

Pattern = str | re.Pattern[str]


def assert_(condition: Any, message: str | None = None) -> None:
    if condition:
        return
    fail(message or f"Expected {_f(condition)} to be truthy")


def is_ok(thing: Any, message: str | None = None) -> None:
    if thing:
        return
    fail(message or f"Expected {_f(thing)} to be ok")


def is_not_ok(thing: Any, message: str | None = None) -> None:
    if not thing:
        return
    fail(message or f"Expected {_f(thing)} to be not ok")


# --- equality ---


def equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Check equality with numeric-string coercion (``1`` equals ``"1"``)."""
    if loosely_equal(actual, expected):
        return
    fail(message or f"Expected {_f(actual)} and {_f(expected)} to be equal")


def not_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if not loosely_equal(actual, expected):
        return
    fail(message or f"Expected {_f(actual)} and {_f(expected)} to be not equal")


def strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Check equality without coercion.

    Scalars must share their exact type and value; any other object must be
    the very same object.
    """
    if is_identical(actual, expected):
        return
    fail(message or f"Expected {_f(actual)} and {_f(expected)} to be strict equal")


def not_strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if not is_identical(actual, expected):
        return
    fail(message or f"Expected {_f(actual)} and {_f(expected)} to be not strict equal")


def deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Check that two key-value containers have the same keys and values, recursively.

    The comparison is minimal: there is no cycle detection, and two values
    without enumerable keys (numbers, sets) compare equal. Unequal strings of
    the same length raise ``TypeError``.
    """
    if equal_structurally(actual, expected):
        return
    fail(message or f"Expected {_f(expected)} to be deeply equal to {_f(actual)}")


def not_deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if not equal_structurally(actual, expected):
        return
    fail(message or f"Expected {_f(expected)} to not be deeply equal to {_f(actual)}")


# --- ordering ---


def is_above(value_to_check: Any, value_to_be_above: Any, message: str | None = None) -> None:
    if value_to_check > value_to_be_above:
        return
    fail(message or f"Expected {_f(value_to_check)} to be above {_f(value_to_be_above)}")


def is_at_least(value_to_check: Any, value_to_be_at_least: Any, message: str | None = None) -> None:
    if value_to_check >= value_to_be_at_least:
        return
    fail(message or f"Expected {_f(value_to_check)} to be at least {_f(value_to_be_at_least)}")


def is_below(value_to_check: Any, value_to_be_below: Any, message: str | None = None) -> None:
    if value_to_check < value_to_be_below:
        return
    fail(message or f"Expected {_f(value_to_check)} to be below {_f(value_to_be_below)}")


# --- exact values ---


def is_true(value: Any, message: str | None = None) -> None:
    if value is True:
        return
    fail(message or f"Expected {_f(value)} to be true")


def is_false(value: Any, message: str | None = None) -> None:
    if value is False:
        return
    fail(message or f"Expected {_f(value)} to be false")


def is_null(value: Any, message: str | None = None) -> None:
    if value is None:
        return
    fail(message or f"Expected {_f(value)} to be None")


def is_not_null(value: Any, message: str | None = None) -> None:
    if value is not None:
        return
    fail(message or f"Expected {_f(value)} to not be None")


def is_undefined(value: Any, message: str | None = None) -> None:
    if value is UNDEFINED:
        return
    fail(message or f"Expected {_f(value)} to be undefined")


def instance_of(value: Any, construct: type | tuple[type, ...], message: str | None = None) -> None:
    if isinstance(value, construct):
        return
    fail(message or f"Expected {_f(value)} to be an instance of {_f(construct)}")


# --- containers ---


def include(haystack: Any, needle: Any, message: str | None = None) -> None:
    if needle in haystack:
        return
    fail(message or f"Expected {_f(haystack)} to include {_f(needle)}")


def not_include(haystack: Any, needle: Any, message: str | None = None) -> None:
    if needle not in haystack:
        return
    fail(message or f"Expected {_f(haystack)} to not include {_f(needle)}")


def match(value: str, regexp: Pattern, message: str | None = None) -> None:
    if re.search(regexp, value):
        return
    fail(message or f"Expected {_f(value)} to match {_f(_pattern_text(regexp))}")


def has_all_keys(thing: Any, keys: Iterable[Any], message: str | None = None) -> None:
    """Check that ``thing`` has exactly ``keys`` as its own keys, in any order."""
    object_keys = own_keys(thing)
    keys = list(keys)
    if len(object_keys) == len(keys) and all(key in object_keys for key in keys):
        return
    fail(message or f"Expected {_f(object_keys)} to include {_f(keys)} and only those keys")


def contains_all_keys(thing: Any, keys: Iterable[Any], message: str | None = None) -> None:
    object_keys = own_keys(thing)
    keys = list(keys)
    if all(key in object_keys for key in keys):
        return
    fail(message or f"Expected {_f(object_keys)} to include all the keys: {_f(keys)}")


def _size(target: Any) -> int | None:
    """Length of a text/sequence or size of a mapping/set; None for other shapes."""
    if isinstance(target, (str, bytes, Sequence)):
        return len(target)
    if isinstance(target, (Mapping, Set)):
        return len(target)
    return None


def is_empty(target: Any, message: str | None = None) -> None:
    size = _size(target)
    if size is None:
        fail(message or f"Didn't know how to check if {_f(target)} is empty")
    if size == 0:
        return
    fail(message or f"Expected {_f(target)} to be empty")


def is_not_empty(target: Any, message: str | None = None) -> None:
    size = _size(target)
    if size is None:
        fail(message or f"Didn't know how to check if {_f(target)} is not empty")
    if size != 0:
        return
    fail(message or f"Expected {_f(target)} to be not empty")


# --- exceptions ---


def _pattern_text(pattern: Pattern) -> str:
    return pattern.pattern if isinstance(pattern, re.Pattern) else pattern


def throws(fn: Callable[[], Any], pattern: Pattern, message: str | None = None) -> None:
    """Check that calling ``fn`` raises an exception whose message matches ``pattern``.

    Anything raised that is not an ``Exception`` (``KeyboardInterrupt``,
    ``SystemExit`` or a custom ``BaseException``) is accepted without looking
    at its message. Interrupting the process while ``fn`` runs (Ctrl-C) or
    ``fn`` calling ``sys.exit()`` therefore passes the assertion instead of
    propagating.
    """
    try:
        fn()
    except Exception as error:
        error_message = str(error)
        if re.search(pattern, error_message):
            return
        fail(
            message
            or f"Expected error message {_f(error_message)} to match {_f(_pattern_text(pattern))}"
        )
    except BaseException as error:
        logger.debug(f"Accepting non-Exception {type(error).__name__} raised by {fn!r}")
        return
    fail(message or "Expected function to raise")
