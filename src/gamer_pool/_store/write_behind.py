# Area: Store
"""
gamer_pool._store.write_behind — Asynchronous gamer persistence
===============================================================

Adds and deletes are submitted fire-and-forget onto a bounded work
queue and applied in submission order by one background worker.
Failures never reach the submitter: they are logged and kept on an
error channel the service drains. ``drain()`` is the completion
barrier used before a resync and at shutdown.
"""

import logging
import queue
import threading
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .repo_gamers import GamerRepository
from ..errors import PersistenceError
from ..types import GamerRecord

logger = logging.getLogger("gamer_pool.store.write_behind")

BUFFER_SIZE_DEFAULT = 16


class StoreOp(Enum):
    """Kinds of queued persistence work."""
    ADD = "add"
    DELETE = "delete"


_STOP = None
WorkItem = Optional[Tuple[StoreOp, GamerRecord]]


class WriteBehindStore:
    """
    Bounded write-behind queue in front of a GamerRepository.

    Submitting blocks only while the buffer is full.
    """

    def __init__(self, repository: GamerRepository, buffer_size: int = BUFFER_SIZE_DEFAULT):
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.repository = repository
        self._work: "queue.Queue[WorkItem]" = queue.Queue(maxsize=buffer_size)
        self._errors: "queue.Queue[PersistenceError]" = queue.Queue()
        self._closed = False
        self._submit_lock = threading.Lock()
        self._worker = threading.Thread(
            target=self._run, name="gamer-pool-write-behind", daemon=True
        )
        self._worker.start()

    # ── Submission ───────────────────────────────────────────

    def submit_add(self, record: GamerRecord) -> None:
        self._submit(StoreOp.ADD, record)

    def submit_delete(self, record: GamerRecord) -> None:
        self._submit(StoreOp.DELETE, record)

    def _submit(self, op: StoreOp, record: GamerRecord) -> None:
        with self._submit_lock:
            if self._closed:
                raise PersistenceError(op.value, "store is closed", record.name)
            self._work.put((op, record))

    # ── Worker ───────────────────────────────────────────────

    def _run(self) -> None:
        while True:
            item = self._work.get()
            try:
                if item is _STOP:
                    return
                self._apply(*item)
            finally:
                self._work.task_done()

    def _apply(self, op: StoreOp, record: GamerRecord) -> None:
        try:
            if op is StoreOp.ADD:
                self.repository.save_gamer(record)
            else:
                self.repository.delete_gamer(record.name)
        except Exception as e:
            # every failure is reported, never raised out of the worker
            error = PersistenceError(op.value, str(e), record.name)
            logger.error(f"Persisting {op.value} for {record.name} failed: {e}")
            self._errors.put(error)

    # ── Reads and lifecycle ──────────────────────────────────

    def read_gamers(self) -> Iterator[GamerRecord]:
        """Lazily yield every persisted gamer; raises PersistenceError on failure."""
        return self.repository.iter_gamers()

    def pop_errors(self) -> List[PersistenceError]:
        """Take every failure reported since the last call."""
        errors = []
        while True:
            try:
                errors.append(self._errors.get_nowait())
            except queue.Empty:
                return errors

    def drain(self) -> None:
        """Block until every submitted add and delete has been applied."""
        self._work.join()

    def close(self) -> None:
        with self._submit_lock:
            if self._closed:
                return
            self._closed = True
        self.drain()
        self._work.put(_STOP)
        self._worker.join()
        logger.info("Write-behind store closed")

    @property
    def closed(self) -> bool:
        return self._closed
