"""Snapshot cache and fetch generation tracking."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Cache(Protocol):
    """Cache interface for simple key-value data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL in seconds."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: datetime


@dataclass
class InMemoryCache(Cache):
    """Process-local cache with per-entry expiry."""

    _entries: dict[str, _CacheEntry]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a cached value with a TTL."""
        self._purge_expired()
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl_seconds)
        self._entries[key] = _CacheEntry(value=value, expires_at=expires_at)

    def _purge_expired(self) -> None:
        now = datetime.now(tz=UTC)
        expired = [
            key for key, entry in self._entries.items() if now >= entry.expires_at
        ]
        for key in expired:
            del self._entries[key]


@dataclass
class FetchGenerations:
    """Per-key counters used to recognise superseded fetches.

    A fetch records the generation it started under. Any write advances the
    generation, and results from an older generation must not be stored.
    Generations come from one increasing sequence, so a forgotten key never
    hands out a number an older fetch could still hold.
    """

    _generations: dict[str, int]
    _sequence: int
    _floor: int

    def __init__(self) -> None:
        self._generations = {}
        self._sequence = 0
        self._floor = 0

    def __len__(self) -> int:
        return len(self._generations)

    def current(self, key: str) -> int:
        """Return the current generation for a key."""
        return self._generations.get(key, self._floor)

    def advance(self, key: str) -> int:
        """Start a new generation for a key and return it."""
        self._sequence += 1
        self._generations[key] = self._sequence
        return self._sequence

    def forget(self, key: str) -> None:
        """Drop a key's counter while still superseding its older fetches."""
        self._sequence += 1
        self._floor = self._sequence
        self._generations.pop(key, None)

    def is_current(self, key: str, generation: int) -> bool:
        """Return True when no write happened since the generation started."""
        return self.current(key) == generation
