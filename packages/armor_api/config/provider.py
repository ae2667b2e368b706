"""Debug-level provider interface consumed by envelope construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class DebugLevelSource(Protocol):
    """Anything that can report the current server debugging level."""

    def server_debugging_level(self) -> int:
        """Return a non-negative debugging level; ``0`` is production."""
        ...


@dataclass(frozen=True)
class StaticDebugLevel:
    """Fixed debugging level, for tests and embedded use."""

    level: int = 0

    def server_debugging_level(self) -> int:
        return self.level
