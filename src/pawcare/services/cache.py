"""Simple cache abstractions."""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for memoized lookups."""

    def get(self, key: Hashable) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: Hashable, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""

    def delete(self, key: Hashable) -> None:
        """Drop a cached value, if present."""

    def delete_where(self, predicate: Callable[[Hashable], bool]) -> int:
        """Drop every entry whose key matches and return how many went."""

    def clear(self) -> None:
        """Drop every cached value."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


@dataclass
class InMemoryCache(Cache):
    """Process-local cache with per-entry expiry."""

    _entries: dict[Hashable, _CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: Hashable) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: Hashable, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL."""
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)

    def delete(self, key: Hashable) -> None:
        """Drop a cached value."""
        self._entries.pop(key, None)

    def delete_where(self, predicate: Callable[[Hashable], bool]) -> int:
        """Drop matching entries."""
        doomed = [key for key in self._entries if predicate(key)]
        for key in doomed:
            del self._entries[key]
        return len(doomed)

    def clear(self) -> None:
        """Drop everything."""
        self._entries.clear()
