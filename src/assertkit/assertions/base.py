"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn


class AssertionFailure(AssertionError):
    """Raised by every assertion that does not hold.

    Attributes:
        message: The description passed to :func:`fail`, verbatim.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def fail(message: str = "") -> NoReturn:
    raise AssertionFailure(message)


class _Undefined:
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()


@dataclass
class AssertionResult:
    """Outcome of evaluating a single assertion without raising.

    Attributes:
        name: Registry name of the assertion (e.g. "deep_equal").
        passed: Whether the assertion held.
        message: Empty on pass, the failure message otherwise.
    """

    name: str
    passed: bool
    message: str
