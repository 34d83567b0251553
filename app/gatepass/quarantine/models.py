"""Quarantine domain models for processed items and run state.

This module defines the immutable data structures produced by a
quarantine removal run: the per-entry outcome (ProcessedItem with
its ItemStatus) and the lifecycle value shared between a running
batch and the caller (ProcessingState).
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class ItemStatus(str, Enum):
    """Outcome of processing a single filesystem entry.

    Attributes:
        REMOVED: The attribute was present and has been deleted.
        NOT_FOUND: The attribute was absent; nothing to do.
        FAILED: The entry could not be read, queried, or cleaned.
    """

    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class Presence(str, Enum):
    """Answer of an attribute presence query.

    Attributes:
        PRESENT: The attribute exists on the path.
        ABSENT: The attribute does not exist on the path.
        QUERY_FAILED: The check itself could not be performed.
    """

    PRESENT = "present"
    ABSENT = "absent"
    QUERY_FAILED = "query_failed"


class ProcessingPhase(str, Enum):
    """Lifecycle phase of a batch run.

    Attributes:
        IDLE: No run active; a new run may start.
        PROCESSING: A run is active; no results are exposed yet.
        FINISHED: The run completed; per-item results are available.
        ERROR: The run failed as a whole.
    """

    IDLE = "idle"
    PROCESSING = "processing"
    FINISHED = "finished"
    ERROR = "error"


def _new_item_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True, slots=True)
class ProcessedItem:
    """Outcome for one visited filesystem entry.

    Attributes:
        path: Absolute path of the entry.
        status: Outcome classification.
        reason: Diagnostic text, set only when status is FAILED.
        id: Unique identifier (12-character hex string from UUID).
    """

    path: str
    status: ItemStatus
    reason: str | None = None
    id: str = field(default_factory=_new_item_id)

    def __post_init__(self) -> None:
        """Validate item data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.status == ItemStatus.FAILED and not self.reason:
            msg = "Failed items require a reason"
            raise ValueError(msg)
        if self.status != ItemStatus.FAILED and self.reason is not None:
            msg = f"Reason is only allowed on failed items, got status {self.status.value}"
            raise ValueError(msg)

    @property
    def failed(self) -> bool:
        """Check if processing this entry failed."""
        return self.status == ItemStatus.FAILED

    @property
    def name(self) -> str:
        """Final path component, for display."""
        return Path(self.path).name or self.path

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output.

        Returns:
            Dictionary representation of the processed item.
        """
        return {
            "id": self.id,
            "path": self.path,
            "status": self.status.value,
            "reason": self.reason,
        }


@dataclass(frozen=True, slots=True)
class PresenceResult:
    """Result of querying an entry for the quarantine attribute.

    Attributes:
        presence: Whether the attribute is present, absent, or unknown.
        reason: Diagnostic text, set only when the query failed.
    """

    presence: Presence
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate that only failed queries carry a reason."""
        if self.presence == Presence.QUERY_FAILED and not self.reason:
            msg = "Failed queries require a reason"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RemoveResult:
    """Result of deleting the quarantine attribute from an entry.

    Attributes:
        success: Whether the attribute was deleted.
        reason: Diagnostic text when the deletion failed.
    """

    success: bool
    reason: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success


@dataclass(frozen=True, slots=True)
class ProcessingState:
    """Lifecycle value of a batch run.

    Exactly one phase holds at a time. Items are only exposed in the
    FINISHED phase, and a message only in the ERROR phase.

    Attributes:
        phase: Current lifecycle phase.
        items: Ordered results of a finished run.
        message: Human-readable failure message of an errored run.
    """

    phase: ProcessingPhase
    items: tuple[ProcessedItem, ...] = ()
    message: str | None = None

    def __post_init__(self) -> None:
        """Validate that payloads match the phase."""
        if self.items and self.phase != ProcessingPhase.FINISHED:
            msg = f"Items are only allowed in the finished phase, got {self.phase.value}"
            raise ValueError(msg)
        if self.phase == ProcessingPhase.ERROR and not self.message:
            msg = "Error state requires a message"
            raise ValueError(msg)
        if self.phase != ProcessingPhase.ERROR and self.message is not None:
            msg = f"Message is only allowed in the error phase, got {self.phase.value}"
            raise ValueError(msg)

    @classmethod
    def idle(cls) -> "ProcessingState":
        return cls(phase=ProcessingPhase.IDLE)

    @classmethod
    def processing(cls) -> "ProcessingState":
        return cls(phase=ProcessingPhase.PROCESSING)

    @classmethod
    def finished(cls, items: list[ProcessedItem] | tuple[ProcessedItem, ...]) -> "ProcessingState":
        return cls(phase=ProcessingPhase.FINISHED, items=tuple(items))

    @classmethod
    def error(cls, message: str) -> "ProcessingState":
        return cls(phase=ProcessingPhase.ERROR, message=message)

    @property
    def is_idle(self) -> bool:
        """Check if no run is active and none has completed."""
        return self.phase == ProcessingPhase.IDLE

    @property
    def is_processing(self) -> bool:
        """Check if a run is active."""
        return self.phase == ProcessingPhase.PROCESSING

    @property
    def is_terminal(self) -> bool:
        """Check if the run reached FINISHED or ERROR."""
        return self.phase in (ProcessingPhase.FINISHED, ProcessingPhase.ERROR)

    def count(self, status: ItemStatus) -> int:
        """Count finished items with the given status."""
        return sum(1 for item in self.items if item.status == status)
