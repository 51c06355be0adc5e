"""Assertion set, its failure primitive and a name-keyed registry."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from assertkit.assertions.base import UNDEFINED, AssertionFailure, AssertionResult, fail
from assertkit.assertions.deterministic import (
    assert_,
    contains_all_keys,
    deep_equal,
    equal,
    has_all_keys,
    include,
    instance_of,
    is_above,
    is_at_least,
    is_below,
    is_empty,
    is_false,
    is_not_empty,
    is_not_null,
    is_not_ok,
    is_null,
    is_ok,
    is_true,
    is_undefined,
    match,
    not_deep_equal,
    not_equal,
    not_include,
    not_strict_equal,
    strict_equal,
    throws,
)
from assertkit.assertions.equality import equal_structurally

ASSERTIONS: Mapping[str, Callable[..., None]] = MappingProxyType(
    {
        "assert": assert_,
        "is_ok": is_ok,
        "is_not_ok": is_not_ok,
        "equal": equal,
        "not_equal": not_equal,
        "strict_equal": strict_equal,
        "not_strict_equal": not_strict_equal,
        "deep_equal": deep_equal,
        "not_deep_equal": not_deep_equal,
        "is_above": is_above,
        "is_at_least": is_at_least,
        "is_below": is_below,
        "is_true": is_true,
        "is_false": is_false,
        "is_null": is_null,
        "is_not_null": is_not_null,
        "is_undefined": is_undefined,
        "instance_of": instance_of,
        "include": include,
        "not_include": not_include,
        "match": match,
        "has_all_keys": has_all_keys,
        "contains_all_keys": contains_all_keys,
        "is_empty": is_empty,
        "is_not_empty": is_not_empty,
        "throws": throws,
        "fail": fail,
    }
)


def evaluate(name: str, *args: Any, message: str | None = None) -> AssertionResult:
    """Run the assertion registered as ``name`` and report instead of raising.

    Only ``AssertionFailure`` is turned into a failed result; any other error
    raised by the assertion propagates.

    Raises ValueError for unknown assertion names.
    """
    try:
        check = ASSERTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown assertion type: '{name}'") from None

    try:
        if message is None:
            check(*args)
        else:
            check(*args, message)
    except AssertionFailure as failure:
        return AssertionResult(name=name, passed=False, message=failure.message)

    return AssertionResult(name=name, passed=True, message="")


__all__ = [
    "ASSERTIONS",
    "UNDEFINED",
    "AssertionFailure",
    "AssertionResult",
    "assert_",
    "contains_all_keys",
    "deep_equal",
    "equal",
    "equal_structurally",
    "evaluate",
    "fail",
    "has_all_keys",
    "include",
    "instance_of",
    "is_above",
    "is_at_least",
    "is_below",
    "is_empty",
    "is_false",
    "is_not_empty",
    "is_not_null",
    "is_not_ok",
    "is_null",
    "is_ok",
    "is_true",
    "is_undefined",
    "match",
    "not_deep_equal",
    "not_equal",
    "not_include",
    "not_strict_equal",
    "strict_equal",
    "throws",
]
