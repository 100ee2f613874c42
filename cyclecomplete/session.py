"""Completion session state — needle, discovered matches, cycle position."""
import enum
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


class Phase(enum.Enum):
    """Session lifecycle. Transitions only move forward: IDLE → SCANNING → CYCLING."""
    IDLE = "idle"          # no step taken yet
    SCANNING = "scanning"  # stepped at least once, producer may still yield
    CYCLING = "cycling"    # producer exhausted, matches is final


@dataclass
class Session:
    needle: str = ""
    matches: List[str] = field(default_factory=list)
    cursor: int = -1
    phase: Phase = Phase.IDLE
    producer: Optional[object] = None
    _edit_depth: int = field(default=0, init=False, repr=False)

    @property
    def is_active(self) -> bool:
        return self.phase is not Phase.IDLE

    @property
    def scan_exhausted(self) -> bool:
        return self.phase is Phase.CYCLING

    @property
    def edit_guard(self) -> bool:
        return self._edit_depth > 0

    def activate(self):
        if self.phase is Phase.IDLE:
            self.phase = Phase.SCANNING

    def mark_exhausted(self):
        self.phase = Phase.CYCLING

    def can_discard(self) -> bool:
        """Whether reset() may replace this session.

        Idle sessions are kept, and so is any session inside an edit scope.
        """
        return self.is_active and not self.edit_guard

    @contextmanager
    def edit_scope(self) -> Iterator['Session']:
        """Hold the edit guard for the duration of a batch of edits."""
        self._edit_depth += 1
        try:
            yield self
        finally:
            self._edit_depth -= 1

    def capture_needle(self, needle: str):
        if self.needle:
            raise RuntimeError(f"needle already captured: {self.needle!r}")
        self.needle = needle

    def add_match(self, token: str) -> int:
        """Append token unless present; return its index."""
        if token in self.matches:
            return self.matches.index(token)
        self.matches.append(token)
        return len(self.matches) - 1

    def select(self, index: int) -> Optional[str]:
        """Move the cursor to index and return the match there.

        An index outside matches leaves the cursor alone and returns None.
        """
        if not 0 <= index < len(self.matches):
            return None
        self.cursor = index
        return self.matches[index]

    @property
    def current(self) -> Optional[str]:
        if self.cursor < 0:
            return None
        return self.matches[self.cursor]
