"""A Heimdall client that answers from pre-configured data."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from itertools import islice
from typing import Any

from borkit.heimdall.models import (
    Checkpoint,
    HeimdallClient,
    Milestone,
    NotFound,
    StateSyncEvent,
)


class MockHeimdallClient(HeimdallClient):
    """A client whose responses are set up with the ``with_*`` builder methods.

    Each builder method returns a new client and leaves the original as it was.
    """

    def __init__(self) -> None:
        self._spans: dict[int, Any] = {}
        self._latest_span: Any | None = None
        self._events: tuple[StateSyncEvent, ...] = ()
        self._checkpoints: dict[int, Checkpoint] = {}
        self._latest_milestone: Milestone | None = None

    def _derive(self, **changes: Any) -> MockHeimdallClient:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    def with_span(self, span_id: int, span: Any) -> MockHeimdallClient:
        """Register a span for the given id."""
        return self._derive(_spans={**self._spans, span_id: span})

    def with_latest_span(self, span: Any) -> MockHeimdallClient:
        """Set the latest span."""
        return self._derive(_latest_span=span)

    def with_events(self, events: Iterable[StateSyncEvent]) -> MockHeimdallClient:
        """Set the state-sync events to serve."""
        return self._derive(_events=tuple(events))

    def with_checkpoint(self, number: int, checkpoint: Checkpoint) -> MockHeimdallClient:
        """Register a checkpoint for the given number."""
        return self._derive(_checkpoints={**self._checkpoints, number: checkpoint})

    def with_latest_milestone(self, milestone: Milestone) -> MockHeimdallClient:
        """Set the latest milestone."""
        return self._derive(_latest_milestone=milestone)

    async def fetch_span(self, span_id: int) -> Any:
        try:
            return self._spans[span_id]
        except KeyError:
            raise NotFound() from None

    async def fetch_latest_span(self) -> Any:
        if self._latest_span is None:
            raise NotFound()
        return self._latest_span

    async def fetch_state_sync_events(
        self, from_id: int, to_time: int, limit: int
    ) -> list[StateSyncEvent]:
        """Return events with id at least ``from_id``, at most ``limit`` of them.

        ``to_time`` is ignored.
        """
        del to_time
        matching = (event for event in self._events if event.id >= from_id)
        return list(islice(matching, limit))

    async def fetch_checkpoint(self, number: int) -> Checkpoint:
        try:
            return self._checkpoints[number]
        except KeyError:
            raise NotFound() from None

    async def fetch_milestone_latest(self) -> Milestone:
        if self._latest_milestone is None:
            raise NotFound()
        return self._latest_milestone