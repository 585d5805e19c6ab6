"""Control flow value used when visiting query results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

B = TypeVar("B")


@dataclass(frozen=True)
class Control(Generic[B]):
    """Tells a visiting function either to continue or to stop with a value.

    The default instance means continue.
    """

    is_break: bool = False
    value: Optional[B] = None

    @classmethod
    def continuing(cls) -> "Control[B]":
        """Control indicating that visiting should continue."""
        return cls()

    @classmethod
    def breaking(cls, value: B = None) -> "Control[B]":
        """Control indicating that visiting should stop and yield ``value``."""
        return cls(True, value)

    def should_break(self) -> bool:
        """Return True if visiting should stop."""
        return self.is_break