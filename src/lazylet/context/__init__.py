from .context import (
    EXAMPLE_CONTEXT,
    PHASE_CONTEXT,
    SharedPhase,
    current_example,
    current_phase,
    enter_shared_phase,
    example_scope,
    exit_shared_phase,
    phase_state,
    shared_phase,
)

__all__ = [
    "EXAMPLE_CONTEXT",
    "PHASE_CONTEXT",
    "SharedPhase",
    "current_example",
    "current_phase",
    "enter_shared_phase",
    "example_scope",
    "exit_shared_phase",
    "phase_state",
    "shared_phase",
]
