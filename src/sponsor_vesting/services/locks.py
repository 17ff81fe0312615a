"""Process-wide mutual exclusion keyed by ledger resource."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from threading import Lock
from typing import Final

SUPPLY_KEY: Final[str] = "supply"

_LOCKS: dict[str, Lock] = {}
_REGISTRY_LOCK = Lock()


def account_key(account_id: str) -> str:
    """Return the lock key guarding one account's ledger state."""
    return f"account:{account_id}"


def _lock_for(key: str) -> Lock:
    with _REGISTRY_LOCK:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = _LOCKS[key] = Lock()
        return lock


@contextmanager
def holding(*keys: str) -> Iterator[None]:
    """Hold the locks for ``keys`` for the duration of the block.

    Keys are acquired in sorted order so overlapping callers cannot deadlock.
    """
    locks = [_lock_for(key) for key in sorted(set(keys))]
    acquired: list[Lock] = []
    try:
        for lock in locks:
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()
