"""Rejects let and subject access from group-level hooks."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path

from lazylet.context import current_phase
from lazylet.errors import WrongPhaseAccess
from lazylet.types import PhaseState

logger = logging.getLogger(__name__)

_PACKAGE_DIR = Path(__file__).resolve().parent


def _is_internal(filename: str) -> bool:
    try:
        return Path(filename).resolve().is_relative_to(_PACKAGE_DIR)
    except (OSError, ValueError):
        return False


def caller_location() -> str | None:
    """Describe the first stack frame outside lazylet as ``path:line in function``."""
    frame = inspect.currentframe()
    if frame is None:
        logger.warning("No frame found for access location")
        return None

    try:
        frame = frame.f_back
        while frame:
            filename = frame.f_code.co_filename
            if not _is_internal(filename) and not filename.startswith("<frozen"):
                return f"{filename}:{frame.f_lineno} in {frame.f_code.co_name}"
            frame = frame.f_back
        return None
    finally:
        del frame


def check_phase(name: str) -> None:
    """Raise :class:`WrongPhaseAccess` if a shared-phase hook is running."""
    phase = current_phase()
    if phase is None or phase.state is not PhaseState.ACTIVE:
        return
    raise WrongPhaseAccess(name, phase.kind, caller_location())


__all__ = ["caller_location", "check_phase"]
