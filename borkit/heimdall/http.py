"""HTTP client for the Heimdall REST API."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from borkit.heimdall.models import (
    Checkpoint,
    HeimdallClient,
    HeimdallError,
    InvalidResponse,
    Milestone,
    NetworkError,
    NotFound,
    RateLimited,
    RequestTimeout,
    StateSyncEvent,
)

MAX_RETRIES = 3
BASE_RETRY_DELAY = 0.5

_T = TypeVar("_T")


def _parse(build: Callable[[Any], _T], value: Any) -> _T:
    try:
        return build(value)
    except (ValueError, TypeError, KeyError) as exc:
        raise InvalidResponse(f"failed to parse response: {exc}") from exc


def _parse_events(value: Any) -> list[StateSyncEvent]:
    if not isinstance(value, list):
        raise ValueError("expected a list of events")
    return [StateSyncEvent.from_dict(item) for item in value]


class HttpHeimdallClient(HeimdallClient):
    """Heimdall client over HTTP with retries and exponential backoff.

    Payloads are read from the ``result`` key of each response. A 404 fails
    at once with NotFound; other failures are retried up to ``max_retries``
    times, waiting ``base_retry_delay`` seconds, doubled after each retry.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        max_retries: int = MAX_RETRIES,
        base_retry_delay: float = BASE_RETRY_DELAY,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self._max_retries = max_retries
        self._base_retry_delay = base_retry_delay

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> HttpHeimdallClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _get_result(self, path: str) -> Any:
        url = f"{self._base_url}{path}"
        last_error: HeimdallError = NetworkError("no attempts made")
        for attempt in range(self._max_retries):
            if attempt > 0:
                await asyncio.sleep(self._base_retry_delay * 2 ** (attempt - 1))
            try:
                response = await self._client.get(url)
            except httpx.TimeoutException:
                last_error = RequestTimeout()
                continue
            except httpx.TransportError as exc:
                last_error = NetworkError(str(exc))
                continue

            status = response.status_code
            if response.is_success:
                return self._decode_result(response)
            if status == 404:
                raise NotFound()
            if status == 429:
                last_error = RateLimited()
            else:
                last_error = InvalidResponse(
                    f"unexpected status code: {status} {response.reason_phrase}"
                )
        raise last_error

    @staticmethod
    def _decode_result(response: httpx.Response) -> Any:
        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidResponse(f"failed to parse response: {exc}") from exc
        if not isinstance(payload, dict) or "result" not in payload:
            raise InvalidResponse("failed to parse response: missing field `result`")
        return payload["result"]

    async def fetch_span(self, span_id: int) -> Any:
        """Return the decoded JSON payload of the span with the given id."""
        return await self._get_result(f"/bor/span/{span_id}")

    async def fetch_latest_span(self) -> Any:
        """Return the decoded JSON payload of the latest span."""
        return await self._get_result("/bor/latest-span")

    async def fetch_state_sync_events(
        self, from_id: int, to_time: int, limit: int
    ) -> list[StateSyncEvent]:
        path = f"/clerk/event-record/list?from-id={from_id}&to-time={to_time}&limit={limit}"
        return _parse(_parse_events, await self._get_result(path))

    async def fetch_checkpoint(self, number: int) -> Checkpoint:
        result = await self._get_result(f"/checkpoints/{number}")
        return _parse(Checkpoint.from_dict, result)

    async def fetch_milestone_latest(self) -> Milestone:
        result = await self._get_result("/milestones/latest")
        return _parse(Milestone.from_dict, result)