"""Least-recently-used cache of spans."""

from __future__ import annotations

from collections import OrderedDict
from typing import Any


class SpanCache:
    """Spans keyed by id, evicting the least recently used one when full.

    A ``max_size`` of zero disables eviction altogether.
    """

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must not be negative, got {max_size}")
        self._max_size = max_size
        self._spans: OrderedDict[int, Any] = OrderedDict()

    @property
    def max_size(self) -> int:
        return self._max_size

    def get(self, span_id: int) -> Any | None:
        """Return the cached span and mark it most recently used, or None."""
        if span_id not in self._spans:
            return None
        self._spans.move_to_end(span_id)
        return self._spans[span_id]

    def insert(self, span: Any) -> None:
        """Cache a span under its ``id``, evicting the LRU entry when full."""
        span_id = span.id
        if span_id in self._spans:
            self._spans[span_id] = span
            self._spans.move_to_end(span_id)
            return
        if self._max_size > 0 and len(self._spans) >= self._max_size:
            self._spans.popitem(last=False)
        self._spans[span_id] = span

    def __contains__(self, span_id: object) -> bool:
        return span_id in self._spans

    def __len__(self) -> int:
        return len(self._spans)