"""Named assertions for test bodies."""

from assertkit.assertions import (
    ASSERTIONS,
    UNDEFINED,
    AssertionFailure,
    AssertionResult,
    assert_,
    contains_all_keys,
    deep_equal,
    equal,
    equal_structurally,
    evaluate,
    fail,
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
from assertkit.config import AssertConfig, FormatConfig, get_config, load_config, reset_config, set_config

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
    "AssertConfig",
    "FormatConfig",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
