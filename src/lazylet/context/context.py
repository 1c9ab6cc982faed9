from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from lazylet.errors import NoActiveExample, PhaseMismatch
from lazylet.types import PhaseState, SharedHookKind

if TYPE_CHECKING:
    from lazylet.definitions import Scope
    from lazylet.helpers import Example


EXAMPLE_CONTEXT: ContextVar[Example | None] = ContextVar("example_context", default=None)
PHASE_CONTEXT: ContextVar[SharedPhase | None] = ContextVar("phase_context", default=None)


@dataclass(slots=True)
class SharedPhase:
    """Marker for a running group-level hook.

    Attributes
    ----------
    kind
        Which shared hook is running.
    state
        Where the marker is in its enter/exit lifecycle.
    """

    kind: SharedHookKind
    state: PhaseState = PhaseState.ENTERING


def current_phase() -> SharedPhase | None:
    """Return the shared-phase marker of the current execution context."""
    return PHASE_CONTEXT.get()


def phase_state() -> PhaseState:
    phase = PHASE_CONTEXT.get()
    return phase.state if phase is not None else PhaseState.IDLE


def enter_shared_phase(kind: SharedHookKind) -> Token[SharedPhase | None]:
    """Mark the current context as running a ``kind`` hook.

    The returned token must be passed to :func:`exit_shared_phase`.
    """
    phase = SharedPhase(kind=kind)
    token = PHASE_CONTEXT.set(phase)
    phase.state = PhaseState.ACTIVE
    return token


def exit_shared_phase(kind: SharedHookKind, token: Token[SharedPhase | None]) -> None:
    """Leave the shared phase entered with ``token``."""
    phase = PHASE_CONTEXT.get()
    if phase is None or phase.kind is not kind:
        raise PhaseMismatch(phase.kind if phase else None, kind)
    phase.state = PhaseState.EXITING
    PHASE_CONTEXT.reset(token)
    phase.state = PhaseState.IDLE


@contextmanager
def shared_phase(kind: SharedHookKind) -> Iterator[SharedPhase]:
    token = enter_shared_phase(kind)
    try:
        yield PHASE_CONTEXT.get()
    finally:
        exit_shared_phase(kind, token)


def current_example() -> Example:
    """Return the example running in the current context."""
    example = EXAMPLE_CONTEXT.get()
    if example is None:
        raise NoActiveExample("current_example()")
    return example


@contextmanager
def example_scope(scope: Scope, name: str | None = None) -> Iterator[Example]:
    """Run one example against a fresh memoization cache.

    The cache is cleared on exit, including when the example fails or is
    cancelled.
    """
    from lazylet.helpers import Example

    example = Example(scope, name=name)
    token = EXAMPLE_CONTEXT.set(example)
    try:
        yield example
    finally:
        EXAMPLE_CONTEXT.reset(token)
        example.cache.clear()
