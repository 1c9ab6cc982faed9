"""Declaration and lookup API for lazily memoized example values.

Declaring::

    scope = Scope(Widget)
    declare(scope, "size", lambda: 3)
    declare_subject(scope, "widget", lambda ex: Widget(size=ex.size))

Looking values up inside a running example::

    with example_scope(scope) as ex:
        ex.size           # computed once, then memoized for this example
        ex.subject        # same object as ex.widget
        ex.is_expected.to(lambda w: w.size == 3)

Nested scopes may redefine a name and reach the definition they replace
with :func:`upcall`::

    inner = scope.child("when doubled")
    declare(inner, "size", lambda ex: ex.upcall() * 2)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from lazylet.context import current_example
from lazylet.definitions import RESERVED_NAMES, Definition, Scope, define, define_subject, resolve
from lazylet.errors import NoActiveExample, ScopeMismatch, SubjectError, UnsupportedUpcall
from lazylet.expectations import ExpectationTarget, Matcher
from lazylet.guard import check_phase
from lazylet.memo import MemoCache
from lazylet.types import SUBJECT

logger = logging.getLogger(__name__)


class Example:
    """The object a running example and its let bodies see.

    Any attribute that is not part of this class is looked up as a let:
    ``example.user`` is ``get(example.scope, example, "user")``, and
    ``example.subject`` is the subject. Lookups that find no definition raise
    :class:`~lazylet.errors.NoDefinition`, an ``AttributeError``.
    """

    def __init__(self, scope: Scope, name: str | None = None, cache: MemoCache | None = None) -> None:
        self.scope = scope
        self.name = name
        self.cache = cache if cache is not None else MemoCache()
        self._frames: list[Definition] = []

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in RESERVED_NAMES:
            raise AttributeError(name)
        return get(self.scope, self, name)

    def upcall(self) -> Any:
        """Evaluate the enclosing scope's definition of the let being computed."""
        return upcall(self)

    @property
    def is_expected(self) -> ExpectationTarget:
        try:
            return target(self.scope, self)
        except AttributeError as e:
            # Escaping a property, it would be retried through __getattr__
            raise SubjectError(e) from e

    def should(self, matcher: Matcher, message: str | None = None) -> Any:
        return self.is_expected.to(matcher, message)

    def should_not(self, matcher: Matcher, message: str | None = None) -> Any:
        return self.is_expected.not_to(matcher, message)

    def _evaluate(self, definition: Definition) -> Any:
        self._frames.append(definition)
        try:
            return definition.evaluate(self)
        finally:
            self._frames.pop()

    def __repr__(self) -> str:
        return f"Example({self.name!r}, scope={self.scope.full_description!r})"


def declare(scope: Scope, name: str, body: Callable[..., Any] | None) -> Definition:
    """Declare a lazily computed, per-example memoized value."""
    return define(scope, name, body)


def declare_eager(scope: Scope, name: str, body: Callable[..., Any] | None) -> Definition:
    """Declare a let that is computed before every example body runs."""
    return define(scope, name, body, eager=True)


def declare_subject(
    scope: Scope,
    name: str | None,
    body: Callable[..., Any] | None,
    *,
    eager: bool = False,
) -> Definition:
    """Declare the subject of ``scope``; a ``name`` also makes it reachable under that name."""
    return define_subject(scope, name, body, eager=eager)


def get(scope: Scope, example: Example | None, name: str) -> Any:
    """Return the memoized value of ``name`` for ``example``.

    Raises :class:`~lazylet.errors.WrongPhaseAccess` from group-level hooks,
    :class:`~lazylet.errors.NoDefinition` when nothing in the scope chain
    defines ``name``. ``scope`` must be the scope the example runs in, since
    the example's cache holds one value per name.
    """
    check_phase(name)
    if example is None:
        raise NoActiveExample(f"Accessing {name!r}")
    if scope is not example.scope:
        raise ScopeMismatch(scope, example.scope)

    def compute() -> Any:
        definition = resolve(scope, name)
        logger.debug("Resolved %r to %r", name, definition.scope.full_description)
        return example._evaluate(definition)

    return example.cache.fetch(name, compute)


def upcall(example: Example | None = None) -> Any:
    """Evaluate the next-outer definition of the let currently being computed.

    The result is not memoized separately; the overriding definition's value
    is what ends up in the cache.
    """
    if example is None:
        example = current_example()
    if not example._frames:
        raise NoActiveExample("upcall() outside a let body")

    frame = example._frames[-1]
    if frame.named_subject:
        raise UnsupportedUpcall(frame.name)

    return example._evaluate(resolve(frame.scope, frame.name, upcall=True))


def target(scope: Scope, example: Example | None) -> ExpectationTarget:
    """Wrap the subject of ``example`` for matchers."""
    return ExpectationTarget(get(scope, example, SUBJECT))


def prime_eager(example: Example) -> None:
    """Compute every eager let visible from the example's scope, outermost first."""
    seen: set[str] = set()
    for scope in reversed(list(example.scope.ancestors())):
        for name, definition in scope.definitions.items():
            if definition.eager and name not in seen:
                seen.add(name)
                getattr(example, name)


__all__ = [
    "Example",
    "declare",
    "declare_eager",
    "declare_subject",
    "get",
    "prime_eager",
    "target",
    "upcall",
]
