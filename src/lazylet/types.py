"""Shared types for lazylet."""

from enum import Enum


SUBJECT = "subject"


class SharedHookKind(Enum):
    """Group-level hooks that run once for all examples in a group."""

    BEFORE_ALL = "before_all"
    AFTER_ALL = "after_all"


class PhaseState(Enum):
    """Lifecycle of a shared-phase marker."""

    IDLE = "idle"
    ENTERING = "entering"
    ACTIVE = "active"  # Fixture access fails while here
    EXITING = "exiting"
