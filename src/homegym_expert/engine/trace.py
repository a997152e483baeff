"""Append-only inference trace owned by a single engine run."""

from __future__ import annotations

import logging

from ..models import TraceCategory, TraceEntry

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    TraceCategory.WARNING: logging.WARNING,
    TraceCategory.SUCCESS: logging.INFO,
    TraceCategory.SYSTEM: logging.INFO,
}


class TraceRecorder:
    """Collects trace entries in execution order, optionally mirroring them to logging."""

    def __init__(self, mirror_to_log: bool = False):
        self._entries: list[TraceEntry] = []
        self._mirror = mirror_to_log

    def add(self, category: TraceCategory, message: str) -> TraceEntry:
        entry = TraceEntry(category=category, message=message)
        self._entries.append(entry)
        if self._mirror:
            logger.log(_LOG_LEVELS.get(category, logging.DEBUG), "[%s] %s", category.value, message)
        return entry

    def system(self, message: str) -> None:
        self.add(TraceCategory.SYSTEM, message)

    def phase(self, title: str) -> None:
        self.system("")
        self.system(f"PHASE {title}")

    @property
    def entries(self) -> list[TraceEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
