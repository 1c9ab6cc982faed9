"""Per-example memoization of let values."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from lazylet.errors import CyclicDefinition

logger = logging.getLogger(__name__)


class MemoCache:
    """Name to value mapping owned by exactly one running example.

    Presence is tracked by key, so ``None`` and other falsy values are cached
    like any other value.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._computing: list[str] = []

    def fetch(self, name: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``name``, computing and storing it on a miss."""
        if name in self._entries:
            return self._entries[name]

        if name in self._computing:
            start = self._computing.index(name)
            raise CyclicDefinition([*self._computing[start:], name])

        logger.debug("Computing let %r", name)
        self._computing.append(name)
        try:
            value = compute()
        finally:
            self._computing.pop()

        self._entries[name] = value
        return value

    def clear(self) -> None:
        """Drop every cached value."""
        self._entries.clear()
        self._computing.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoCache({sorted(self._entries)!r})"
