"""Error types raised by lazylet.

Every error here signals an authoring mistake in a test group. None of them
are caught or retried by lazylet itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lazylet.types import SUBJECT, SharedHookKind

if TYPE_CHECKING:
    from lazylet.definitions import Scope


class LetError(Exception):
    """Base class for lazylet errors."""


class NoDefinition(LetError, AttributeError):
    """Raised when no scope in the chain defines the requested name.

    Also an :class:`AttributeError`, so ``hasattr(example, name)`` and
    ``getattr(example, name, default)`` work on the running example.
    """

    def __init__(self, name: str, scope: Scope | None = None) -> None:
        message = f"No `let` or `subject` named {name!r} is defined"
        if scope is not None:
            message += f" in {scope.full_description!r} or any enclosing group"
        # AttributeError.__init__ resets ``name``
        super().__init__(message)
        self.name = name
        self.scope = scope


class UnsupportedUpcall(LetError):
    """Raised when a named subject tries to call its enclosing definition."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Calling the enclosing definition from named subject {name!r} is not supported"
        )


class MissingBody(LetError):
    """Raised when a declaration has no computation body."""

    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"`let` or `subject` {name or SUBJECT!r} declared without a body")


class ReservedName(LetError):
    """Raised when a declaration would shadow the running example's own API."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"{name!r} cannot be used as a `let` name: it is reserved by the example object"
        )


class ScopeMismatch(LetError, ValueError):
    """Raised when a lookup names a scope other than the running example's."""

    def __init__(self, scope: Scope, example_scope: Scope) -> None:
        self.scope = scope
        self.example_scope = example_scope
        super().__init__(
            f"Cannot look up lets of {scope.full_description!r} from an example "
            f"running in {example_scope.full_description!r}"
        )


class SubjectError(LetError):
    """Raised when computing the subject for an expectation raises AttributeError."""

    def __init__(self, error: AttributeError) -> None:
        self.error = error
        super().__init__(f"Computing the subject raised {type(error).__name__}: {error}")


class CyclicDefinition(LetError):
    """Raised when a definition depends on itself while being computed."""

    def __init__(self, chain: list[str]) -> None:
        self.chain = chain
        super().__init__(f"Cyclic `let` dependency: {' -> '.join(chain)}")


class NoActiveExample(LetError):
    """Raised when example-bound helpers are used outside a running example."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a running example")


class PhaseMismatch(LetError):
    """Raised when a shared phase is exited with a different kind than it was entered."""

    def __init__(self, expected: SharedHookKind | None, actual: SharedHookKind) -> None:
        self.expected = expected
        self.actual = actual
        active = expected.value if expected else "no shared phase"
        super().__init__(f"Cannot exit {actual.value}: {active} is active")


_HOOK_WORDING = {
    SharedHookKind.BEFORE_ALL: (
        "a `before_all`",
        "define state that is shared across examples in an example group",
    ),
    SharedHookKind.AFTER_ALL: (
        "an `after_all`",
        "clean up state that is shared across examples in an example group",
    ),
}


class WrongPhaseAccess(LetError):
    """Raised when a let or subject is accessed from a group-level hook."""

    def __init__(self, name: str, kind: SharedHookKind, location: str | None = None) -> None:
        self.name = name
        self.kind = kind
        self.location = location

        hook, intention = _HOOK_WORDING[kind]
        description = "subject" if self.is_subject else f"let declaration `{name}`"
        message = f"""
`let` and `subject` declarations are not intended to be called
in {hook} hook, as they exist to define state that is reset
between each example, while `{kind.value}` exists to
{intention}.

{description} accessed in {hook} hook"""
        if location:
            message += f" at:\n    {location}"
        super().__init__(message)

    @property
    def is_subject(self) -> bool:
        return self.name == SUBJECT


__all__ = [
    "CyclicDefinition",
    "LetError",
    "MissingBody",
    "NoActiveExample",
    "NoDefinition",
    "PhaseMismatch",
    "ReservedName",
    "ScopeMismatch",
    "SubjectError",
    "UnsupportedUpcall",
    "WrongPhaseAccess",
]
