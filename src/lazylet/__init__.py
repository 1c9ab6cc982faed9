"""lazylet - lazily computed, per-example memoized values for nested example groups."""

from .config import LetConfig, get_config, load_config, set_config
from .context import (
    current_example,
    enter_shared_phase,
    example_scope,
    exit_shared_phase,
    shared_phase,
)
from .definitions import Definition, Scope, resolve, resolve_default_subject
from .errors import (
    CyclicDefinition,
    LetError,
    MissingBody,
    NoActiveExample,
    NoDefinition,
    PhaseMismatch,
    ReservedName,
    ScopeMismatch,
    SubjectError,
    UnsupportedUpcall,
    WrongPhaseAccess,
)
from .expectations import ExpectationNotMet, ExpectationTarget
from .helpers import Example, declare, declare_eager, declare_subject, get, prime_eager, target, upcall
from .memo import MemoCache
from .types import SUBJECT, SharedHookKind
from .testing import ExampleGroup, Runner, describe, run

__version__ = "0.1.0"


__all__ = [
    # Declaring and looking up lets
    "Scope",
    "Definition",
    "declare",
    "declare_eager",
    "declare_subject",
    "get",
    "upcall",
    "resolve",
    "resolve_default_subject",
    "prime_eager",
    "Example",
    "MemoCache",
    "SUBJECT",
    # Phases
    "SharedHookKind",
    "enter_shared_phase",
    "exit_shared_phase",
    "shared_phase",
    "example_scope",
    "current_example",
    # Expectations
    "target",
    "ExpectationTarget",
    "ExpectationNotMet",
    # Groups and running
    "ExampleGroup",
    "describe",
    "Runner",
    "run",
    # Config
    "LetConfig",
    "get_config",
    "load_config",
    "set_config",
    # Errors
    "LetError",
    "NoDefinition",
    "UnsupportedUpcall",
    "WrongPhaseAccess",
    "MissingBody",
    "ReservedName",
    "ScopeMismatch",
    "SubjectError",
    "CyclicDefinition",
    "NoActiveExample",
    "PhaseMismatch",
]
