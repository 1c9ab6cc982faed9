"""Scopes, definitions and override-chain resolution.

A :class:`Scope` mirrors one example group. Each scope owns the definitions
declared directly in it and links to the enclosing group's scope. Resolving a
name walks from a scope toward the root and returns the first definition
found; an upcall starts the walk at the parent of the definition's owning
scope so an override can reach the definition it replaces.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from lazylet.config import get_config
from lazylet.errors import MissingBody, NoDefinition, ReservedName
from lazylet.types import SUBJECT

logger = logging.getLogger(__name__)


# Attributes of the running example object; a let with one of these names
# would never be reachable through attribute access.
RESERVED_NAMES = frozenset(
    {"cache", "is_expected", "name", "scope", "should", "should_not", "upcall"}
)


def accepts_example(body: Callable[..., Any]) -> bool:
    """Return True if ``body`` expects the running example as its only argument."""
    try:
        signature = inspect.signature(body)
    except (TypeError, ValueError):
        return False

    required = [
        p
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    ]
    if len(required) > 1:
        msg = f"let body must take zero or one argument, got {len(required)}"
        raise TypeError(msg)
    return len(required) == 1


@dataclass(frozen=True, slots=True)
class Definition:
    """A named lazy computation owned by one scope."""

    name: str
    body: Callable[..., Any]
    scope: Scope
    takes_example: bool = False
    named_subject: bool = False
    eager: bool = False

    def evaluate(self, example: Any) -> Any:
        """Run the body, passing ``example`` to one-argument bodies."""
        if self.takes_example:
            return self.body(example)
        return self.body()


@dataclass(eq=False)
class Scope:
    """Node in the tree of nested example groups.

    Attributes
    ----------
    description
        Class or label the group describes.
    parent
        Enclosing scope, or ``None`` for a top-level group.
    definitions
        Definitions declared directly in this scope.
    """

    description: Any = None
    parent: Scope | None = None
    definitions: dict[str, Definition] = field(default_factory=dict)

    def ancestors(self) -> Iterator[Scope]:
        """Yield this scope followed by each enclosing scope up to the root."""
        scope: Scope | None = self
        while scope is not None:
            yield scope
            scope = scope.parent

    def child(self, description: Any = None) -> Scope:
        return Scope(description=description, parent=self)

    @property
    def described_class(self) -> type | None:
        """Nearest class described by this scope or an enclosing one."""
        for scope in self.ancestors():
            if isinstance(scope.description, type):
                return scope.description
        return None

    @property
    def full_description(self) -> str:
        parts = [_describe(s.description) for s in reversed(list(self.ancestors()))]
        return " ".join(p for p in parts if p)

    def __repr__(self) -> str:
        return f"Scope({self.full_description!r}, definitions={sorted(self.definitions)!r})"


def _describe(description: Any) -> str:
    if description is None:
        return ""
    if isinstance(description, type):
        return description.__qualname__
    return str(description)


def define(
    scope: Scope,
    name: str,
    body: Callable[..., Any] | None,
    *,
    named_subject: bool = False,
    eager: bool = False,
) -> Definition:
    """Register ``body`` under ``name`` in ``scope``, replacing a same-scope entry."""
    if body is None or not callable(body):
        raise MissingBody(name)
    if not name or name.startswith("_") or name in RESERVED_NAMES:
        raise ReservedName(name)

    definition = Definition(
        name=name,
        body=body,
        scope=scope,
        takes_example=accepts_example(body),
        named_subject=named_subject,
        eager=eager,
    )

    if name in scope.definitions and get_config().warn_on_redefinition:
        logger.warning("%r redefined in %r", name, scope.full_description)

    scope.definitions[name] = definition
    logger.debug("Declared %r in %r", name, scope.full_description)
    return definition


def define_subject(
    scope: Scope,
    name: str | None,
    body: Callable[..., Any] | None,
    *,
    eager: bool = False,
) -> Definition:
    """Declare the subject of ``scope``, optionally under an explicit name.

    A named subject is registered under ``name`` and aliased as ``subject``
    in the same scope, so both resolve to the same memoized value.
    """
    if name is None or name == SUBJECT:
        return define(scope, SUBJECT, body, eager=eager)

    definition = define(scope, name, body, named_subject=True, eager=eager)

    def alias(example: Any) -> Any:
        return getattr(example, name)

    define(scope, SUBJECT, alias)
    return definition


def resolve(scope: Scope, name: str, upcall: bool = False) -> Definition:
    """Return the definition of ``name`` visible from ``scope``.

    With ``upcall`` the search starts at ``scope.parent``. An unresolved
    ``subject`` falls back to the default subject of ``scope``.
    """
    start = scope.parent if upcall else scope
    if start is not None:
        for candidate in start.ancestors():
            definition = candidate.definitions.get(name)
            if definition is not None:
                return definition

    if name == SUBJECT:
        return default_subject_definition(scope)

    raise NoDefinition(name, scope)


def resolve_default_subject(scope: Scope, described: Any) -> Callable[[], Any]:
    """Return a computation producing the implicit subject for ``described``.

    Classes are instantiated with no arguments; any other value is returned
    unchanged. Nothing is computed until the returned callable is called.
    """
    if isinstance(described, type):
        return described
    return lambda: described


def default_subject_definition(scope: Scope) -> Definition:
    """Build the fallback ``subject`` definition for ``scope``."""
    described = scope.described_class
    if described is None:
        described = scope.description
    return Definition(
        name=SUBJECT,
        body=resolve_default_subject(scope, described),
        scope=_root(scope),
    )


def _root(scope: Scope) -> Scope:
    *_, root = scope.ancestors()
    return root


__all__ = [
    "RESERVED_NAMES",
    "Definition",
    "Scope",
    "accepts_example",
    "default_subject_definition",
    "define",
    "define_subject",
    "resolve",
    "resolve_default_subject",
]
