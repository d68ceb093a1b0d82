"""Span and snapshot persistence interfaces with in-memory implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

_HASH_LENGTH = 32


class SpanStore(ABC):
    """Persistent store of Bor spans keyed by span id."""

    @abstractmethod
    def get_span(self, span_id: int) -> Any | None:
        """Return the span with the given id, or None."""

    @abstractmethod
    def put_span(self, span: Any) -> None:
        """Store a span under its ``id`` attribute."""

    @abstractmethod
    def latest_span_id(self) -> int | None:
        """Return the highest stored span id, or None when empty."""


class SnapshotStore(ABC):
    """Persistent store of encoded snapshots keyed by block hash."""

    @abstractmethod
    def get_snapshot(self, block_hash: bytes) -> bytes | None:
        """Return the snapshot data for a block hash, or None."""

    @abstractmethod
    def put_snapshot(self, block_hash: bytes, data: bytes) -> None:
        """Store snapshot data under a block hash, replacing any earlier data."""


def _hash_key(block_hash: bytes) -> bytes:
    key = bytes(block_hash)
    if len(key) != _HASH_LENGTH:
        raise ValueError(f"block hash must be {_HASH_LENGTH} bytes, got {len(key)}")
    return key


class InMemorySpanStore(SpanStore):
    """A dict-backed span store."""

    def __init__(self) -> None:
        self._spans: dict[int, Any] = {}

    def get_span(self, span_id: int) -> Any | None:
        return self._spans.get(span_id)

    def put_span(self, span: Any) -> None:
        self._spans[span.id] = span

    def latest_span_id(self) -> int | None:
        return max(self._spans, default=None)


class InMemorySnapshotStore(SnapshotStore):
    """A dict-backed snapshot store."""

    def __init__(self) -> None:
        self._snapshots: dict[bytes, bytes] = {}

    def get_snapshot(self, block_hash: bytes) -> bytes | None:
        return self._snapshots.get(_hash_key(block_hash))

    def put_snapshot(self, block_hash: bytes, data: bytes) -> None:
        self._snapshots[_hash_key(block_hash)] = bytes(data)