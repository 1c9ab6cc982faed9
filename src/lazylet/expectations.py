"""Expectation targets handed to the assertion layer."""

from __future__ import annotations

from typing import Any, Protocol


def _truncate(value: Any, max_len: int = 60) -> str:
    """Truncate a repr string if too long."""
    s = repr(value)
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


class Matcher(Protocol):
    """Any callable judging an actual value; the result's truthiness decides."""

    def __call__(self, actual: Any) -> Any: ...


class ExpectationNotMet(AssertionError):
    """AssertionError carrying the actual value and the matcher that rejected it."""

    def __init__(self, actual: Any, matcher: Matcher, negated: bool, message: str | None = None) -> None:
        self.actual = actual
        self.matcher = matcher
        self.negated = negated
        if message is None:
            matcher_name = getattr(matcher, "__name__", None) or _truncate(matcher)
            verb = "not to satisfy" if negated else "to satisfy"
            message = f"expected {_truncate(actual)} {verb} {matcher_name}"
        super().__init__(message)


class ExpectationTarget:
    """Wraps a value so matchers can be applied to it.

    Matchers returning a result object (for example an ``AssertionResult``
    with ``__bool__``) are returned from :meth:`to` so callers can inspect it.
    """

    def __init__(self, actual: Any) -> None:
        self.actual = actual

    def to(self, matcher: Matcher, message: str | None = None) -> Any:
        result = matcher(self.actual)
        if not result:
            raise ExpectationNotMet(self.actual, matcher, negated=False, message=message)
        return result

    def not_to(self, matcher: Matcher, message: str | None = None) -> Any:
        result = matcher(self.actual)
        if result:
            raise ExpectationNotMet(self.actual, matcher, negated=True, message=message)
        return result

    to_not = not_to

    def __repr__(self) -> str:
        return f"ExpectationTarget({_truncate(self.actual)})"


__all__ = ["ExpectationNotMet", "ExpectationTarget", "Matcher"]
