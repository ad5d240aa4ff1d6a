"""Exclusive access to the one shared Exasol session.

The session is stateful (current schema, open transaction), so every
operation touching it, read-only catalog queries included, runs while
holding the gatekeeper. This is plain mutual exclusion: there is no
reader/writer split, no fairness guarantee and no acquire timeout.

Example:
    >>> gatekeeper = ConnectionGatekeeper(Executor(context))
    >>> with gatekeeper.acquire() as locked:
    ...     locked.executor.run("CREATE SCHEMA STAGING")
    ...     locked.executor.commit()
"""

import logging
import threading
from typing import Any, Literal

from exalib.primitives.execute import Executor

logger = logging.getLogger(__name__)


class LockedConnection:
    """Scoped handle on the shared executor, valid until released"""

    def __init__(self, gatekeeper: "ConnectionGatekeeper", executor: Executor):
        self._gatekeeper = gatekeeper
        self._executor = executor
        self._released = False

    @property
    def executor(self) -> Executor:
        """The guarded executor; unusable once the handle is released"""
        if self._released:
            raise RuntimeError("LockedConnection used after release")
        return self._executor

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Give the session back; calling it again is a no-op"""
        if self._released:
            return
        self._released = True
        self._gatekeeper._release()

    def __enter__(self) -> "LockedConnection":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> Literal[False]:
        """Always release, always propagate"""
        self.release()
        return False


class ConnectionGatekeeper:
    """Owner of the shared executor, handing it out to one caller at a time"""

    def __init__(self, executor: Executor):
        self._executor = executor
        self._lock = threading.Lock()

    def acquire(self) -> LockedConnection:
        """Block until the session is free and return a scoped handle"""
        self._lock.acquire()
        logger.debug("Acquired session on thread %s", threading.current_thread().name)
        return LockedConnection(self, self._executor)

    def _release(self) -> None:
        logger.debug("Released session on thread %s", threading.current_thread().name)
        self._lock.release()

    @property
    def locked(self) -> bool:
        """Whether some caller currently holds the session"""
        return self._lock.locked()

    def __repr__(self) -> str:
        status = "held" if self.locked else "free"
        return f"ConnectionGatekeeper({status})"
