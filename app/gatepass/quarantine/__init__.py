"""Quarantine attribute removal engine.

This module provides the attribute gateway, single-entry processor,
tree walker, scoped root access, and the batch coordinator that ties
them into ordered, fully-accounted removal runs.
"""

from gatepass.quarantine.access import (
    AccessDeniedError,
    AccessProvider,
    FilesystemAccess,
    scoped_access,
)
from gatepass.quarantine.coordinator import BatchCoordinator
from gatepass.quarantine.gateway import QUARANTINE_ATTRIBUTE, AttributeGateway
from gatepass.quarantine.models import (
    ItemStatus,
    Presence,
    PresenceResult,
    ProcessedItem,
    ProcessingPhase,
    ProcessingState,
    RemoveResult,
)
from gatepass.quarantine.processor import ItemProcessor
from gatepass.quarantine.roots import collect_roots, read_root_list
from gatepass.quarantine.scanner import QuarantineScanner, ScannedEntry
from gatepass.quarantine.walker import TreeWalker, WalkEntry

__all__ = [
    "QUARANTINE_ATTRIBUTE",
    "AccessDeniedError",
    "AccessProvider",
    "AttributeGateway",
    "BatchCoordinator",
    "FilesystemAccess",
    "ItemProcessor",
    "ItemStatus",
    "Presence",
    "PresenceResult",
    "ProcessedItem",
    "ProcessingPhase",
    "ProcessingState",
    "QuarantineScanner",
    "RemoveResult",
    "ScannedEntry",
    "TreeWalker",
    "WalkEntry",
    "collect_roots",
    "read_root_list",
    "scoped_access",
]
