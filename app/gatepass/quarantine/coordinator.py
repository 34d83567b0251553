"""Batch coordination of quarantine removal runs.

The BatchCoordinator owns the ProcessingState lifecycle:

    IDLE -> PROCESSING -> FINISHED | ERROR -> (reset) -> IDLE

A run walks each root in order, classifies every entry, and
publishes the complete ordered result list only once the run is
over. Runs execute either synchronously (``run``) or on a dedicated
background thread (``start`` + ``wait``); only one run may be active
at a time.

Root access policy:
- Single-root runs: failing to acquire the root ends the whole run
  in ERROR.
- Multi-root runs: the root is recorded as a FAILED item and the
  remaining roots are still processed.
"""

import logging
import os
import threading
from collections.abc import Callable, Sequence

from gatepass.quarantine.access import (
    AccessDeniedError,
    AccessProvider,
    FilesystemAccess,
    scoped_access,
)
from gatepass.quarantine.models import ProcessedItem, ProcessingState
from gatepass.quarantine.processor import ItemProcessor
from gatepass.quarantine.walker import TreeWalker

logger = logging.getLogger(__name__)

StateListener = Callable[[ProcessingState], None]

RootPath = str | os.PathLike[str]


class BatchCoordinator:
    """Runs quarantine removal over one or more roots.

    Args:
        processor: Classifies individual entries.
        walker: Enumerates each root and its descendants.
        access: Scoped access provider for roots. Defaults to
            FilesystemAccess.
    """

    def __init__(
        self,
        processor: ItemProcessor,
        walker: TreeWalker | None = None,
        access: AccessProvider | None = None,
    ) -> None:
        self._processor = processor
        self._walker = walker or TreeWalker()
        self._access = access if access is not None else FilesystemAccess()
        self._lock = threading.Lock()
        self._state = ProcessingState.idle()
        self._listeners: list[StateListener] = []
        # Set whenever no run is active
        self._run_done = threading.Event()
        self._run_done.set()

    @property
    def state(self) -> ProcessingState:
        """Current lifecycle state."""
        with self._lock:
            return self._state

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked after every state transition.

        Callbacks run on the thread that performed the transition.

        Args:
            listener: Callable receiving the new state.
        """
        self._listeners.append(listener)

    def run(self, roots: Sequence[RootPath]) -> ProcessingState:
        """Process roots synchronously.

        Rejected without side effects unless the coordinator is IDLE.

        Args:
            roots: Ordered, non-empty sequence of root paths.

        Returns:
            The terminal state of the run, or the current state if the
            run was rejected.

        Raises:
            ValueError: If roots is empty.
        """
        root_list = _normalize_roots(roots)
        if not self._begin():
            logger.warning("Run rejected: coordinator is %s", self.state.phase.value)
            return self.state
        return self._execute(root_list)

    def start(self, roots: Sequence[RootPath]) -> bool:
        """Process roots on a background thread.

        The transition to PROCESSING happens before this method
        returns, so a concurrent second ``start`` is always rejected.

        Args:
            roots: Ordered, non-empty sequence of root paths.

        Returns:
            True if the run was started, False if it was rejected.

        Raises:
            ValueError: If roots is empty.
        """
        root_list = _normalize_roots(roots)
        if not self._begin():
            logger.warning("Start rejected: coordinator is %s", self.state.phase.value)
            return False

        threading.Thread(
            target=self._execute,
            args=(root_list,),
            name="gatepass-run",
            daemon=True,
        ).start()
        return True

    def wait(self, timeout: float | None = None) -> ProcessingState:
        """Block until the active run finishes or the timeout expires.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Returns:
            The state after waiting.
        """
        self._run_done.wait(timeout)
        return self.state

    def reset(self) -> bool:
        """Return to IDLE after a run reached FINISHED or ERROR.

        Discards the previous result. Does not interrupt an active run.

        Returns:
            True if the state was reset, False if no terminal state was held.
        """
        with self._lock:
            if not self._state.is_terminal:
                logger.warning("Reset rejected: coordinator is %s", self._state.phase.value)
                return False
            self._state = ProcessingState.idle()
            new_state = self._state
        self._notify(new_state)
        return True

    def _begin(self) -> bool:
        """Atomically move from IDLE to PROCESSING."""
        with self._lock:
            if not self._state.is_idle:
                return False
            self._state = ProcessingState.processing()
            self._run_done.clear()
            new_state = self._state
        self._notify(new_state)
        return True

    def _finish(self, state: ProcessingState) -> None:
        with self._lock:
            self._state = state
            self._run_done.set()
        self._notify(state)

    def _execute(self, roots: list[str]) -> ProcessingState:
        """Run every root and publish the terminal state."""
        logger.info("Processing %d root(s)", len(roots))
        try:
            items = self._process_roots(roots)
        except AccessDeniedError as e:
            logger.warning("Run aborted: %s", e)
            final = ProcessingState.error(str(e))
        except Exception as e:
            logger.exception("Run failed unexpectedly")
            final = ProcessingState.error(f"Unexpected error: {str(e) or type(e).__name__}")
        else:
            logger.info("Run finished with %d item(s)", len(items))
            final = ProcessingState.finished(items)

        self._finish(final)
        return final

    def _process_roots(self, roots: list[str]) -> list[ProcessedItem]:
        """Process all roots in order and accumulate their items.

        Raises:
            AccessDeniedError: If the only root of a single-root run
                cannot be acquired.
        """
        single_root = len(roots) == 1
        items: list[ProcessedItem] = []

        for root in roots:
            try:
                with scoped_access(self._access, root):
                    items.extend(self._process_root(root))
            except AccessDeniedError as e:
                if single_root:
                    raise
                logger.warning("Skipping root: %s", e)
                items.append(self._processor.failed(root, str(e)))

        return items

    def _process_root(self, root: str) -> list[ProcessedItem]:
        """Classify a root and every entry beneath it, in walk order."""
        items: list[ProcessedItem] = []
        for entry in self._walker.walk(root):
            if entry.error is not None:
                items.append(self._processor.failed(entry.path, entry.error))
            else:
                items.append(self._processor.classify(entry.path))
            logger.debug("%s: %s", items[-1].status.value, entry.path)
        return items

    def _notify(self, state: ProcessingState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")


def _normalize_roots(roots: Sequence[RootPath]) -> list[str]:
    """Convert roots to absolute path strings, preserving order.

    Raises:
        ValueError: If roots is empty.
    """
    if not roots:
        msg = "At least one root path is required"
        raise ValueError(msg)
    return [os.path.abspath(os.fspath(root)) for root in roots]
