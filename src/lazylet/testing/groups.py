"""Declaring example groups, their lets and their hooks.

::

    widgets = describe(Widget)

    @widgets.let
    def size():
        return 3

    @widgets.subject("widget")
    def make_widget(ex):
        return Widget(size=ex.size)

    doubled = widgets.describe("when doubled")

    @doubled.let("size")
    def doubled_size(ex):
        return ex.upcall() * 2

    @doubled.it("has twice the size")
    def _(ex):
        ex.is_expected.to(lambda w: w.size == 6)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lazylet.definitions import Scope, accepts_example
from lazylet.helpers import declare, declare_eager, declare_subject
from lazylet.types import SUBJECT, SharedHookKind


Hook = Callable[..., Any]


@dataclass
class ExampleBody:
    """Everything needed to run a single example."""

    description: str
    fn: Callable[..., Any]
    takes_example: bool
    is_async: bool
    skip_reason: str | None = None


class ExampleGroup:
    """A group of examples sharing lets, a subject and hooks.

    Nested groups created with :meth:`describe` see every let of their
    ancestors and may redefine any of them.
    """

    def __init__(self, description: Any = None, parent: ExampleGroup | None = None) -> None:
        self.parent = parent
        self.scope = parent.scope.child(description) if parent else Scope(description)
        self.children: list[ExampleGroup] = []
        self.examples: list[ExampleBody] = []
        self.before_each_hooks: list[Hook] = []
        self.after_each_hooks: list[Hook] = []
        self.shared_hooks: dict[SharedHookKind, list[Hook]] = {
            SharedHookKind.BEFORE_ALL: [],
            SharedHookKind.AFTER_ALL: [],
        }

    @property
    def description(self) -> Any:
        return self.scope.description

    @property
    def full_description(self) -> str:
        return self.scope.full_description

    def describe(self, description: Any) -> ExampleGroup:
        """Create a nested group."""
        child = ExampleGroup(description, parent=self)
        self.children.append(child)
        return child

    context = describe

    # Declarations

    def let(self, target: str | Callable[..., Any] | None = None, body: Callable[..., Any] | None = None) -> Any:
        """Declare a let, as ``@group.let``, ``@group.let("name")`` or ``group.let("name", body)``."""
        return self._declare(target, body, lambda name, fn: declare(self.scope, name, fn))

    def let_eager(self, target: str | Callable[..., Any] | None = None, body: Callable[..., Any] | None = None) -> Any:
        """Declare a let that is computed before each example in this group."""

        def register(name: str, fn: Callable[..., Any]) -> None:
            declare_eager(self.scope, name, fn)
            self.before_each_hooks.append(_eager_hook(name))

        return self._declare(target, body, register)

    def subject(self, target: str | Callable[..., Any] | None = None, body: Callable[..., Any] | None = None) -> Any:
        """Declare the subject; ``@group.subject("name")`` also exposes it as ``name``."""
        return self._declare_subject(target, body, eager=False)

    def subject_eager(self, target: str | Callable[..., Any] | None = None, body: Callable[..., Any] | None = None) -> Any:
        return self._declare_subject(target, body, eager=True)

    def _declare_subject(self, target: Any, body: Callable[..., Any] | None, *, eager: bool) -> Any:
        if callable(target):
            fn = target
            declare_subject(self.scope, None, fn, eager=eager)
            if eager:
                self.before_each_hooks.append(_eager_hook(SUBJECT))
            return fn

        def register(name: str, fn: Callable[..., Any]) -> None:
            declare_subject(self.scope, name, fn, eager=eager)
            if eager:
                self.before_each_hooks.append(_eager_hook(SUBJECT))

        return self._declare(target, body, register, default_name=SUBJECT)

    def _declare(
        self,
        target: str | Callable[..., Any] | None,
        body: Callable[..., Any] | None,
        register: Callable[[str, Any], None],
        default_name: str | None = None,
    ) -> Any:
        if callable(target):
            register(target.__name__, target)
            return target

        name = target or default_name
        if body is not None:
            register(name, body)
            return body

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            register(name or fn.__name__, fn)
            return fn

        return decorator

    # Hooks

    def before_each(self, fn: Hook) -> Hook:
        self.before_each_hooks.append(fn)
        return fn

    def after_each(self, fn: Hook) -> Hook:
        self.after_each_hooks.append(fn)
        return fn

    def before_all(self, fn: Hook) -> Hook:
        self.shared_hooks[SharedHookKind.BEFORE_ALL].append(fn)
        return fn

    def after_all(self, fn: Hook) -> Hook:
        self.shared_hooks[SharedHookKind.AFTER_ALL].append(fn)
        return fn

    # Examples

    def it(self, description: str | Callable[..., Any], *, skip: str | None = None) -> Any:
        """Register an example, as ``@group.it("does something")`` or ``@group.it``."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            text = description if isinstance(description, str) else fn.__name__
            self.examples.append(
                ExampleBody(
                    description=text,
                    fn=fn,
                    takes_example=accepts_example(fn),
                    is_async=inspect.iscoroutinefunction(fn),
                    skip_reason=skip,
                )
            )
            return fn

        if callable(description):
            return decorator(description)
        return decorator

    example = it

    def iter_groups(self):
        """Yield this group and every nested group, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_groups()

    def example_count(self) -> int:
        return sum(len(group.examples) for group in self.iter_groups())

    def __repr__(self) -> str:
        return f"ExampleGroup({self.full_description!r})"


def _eager_hook(name: str) -> Hook:
    def fetch(example: Any) -> None:
        getattr(example, name)

    fetch.__name__ = f"eager_{name}"
    return fetch


def describe(description: Any = None) -> ExampleGroup:
    """Create a top-level example group."""
    return ExampleGroup(description)


__all__ = ["ExampleBody", "ExampleGroup", "describe"]
