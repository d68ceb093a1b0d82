"""Heimdall data types, errors and the client interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from borkit.storage.receipt_key import keccak256

ADDRESS_LENGTH = 20
HASH_LENGTH = 32
_U64_MAX = (1 << 64) - 1


class HeimdallError(Exception):
    """Base class of errors raised while talking to Heimdall."""


class NetworkError(HeimdallError):
    """A network-level failure such as a refused connection."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"network error: {reason}")
        self.reason = reason


class RequestTimeout(HeimdallError):
    """The request timed out before a response arrived."""

    def __init__(self) -> None:
        super().__init__("request timeout")


class InvalidResponse(HeimdallError):
    """A response arrived but could not be parsed or was otherwise invalid."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid response: {reason}")
        self.reason = reason


class NotFound(HeimdallError):
    """The requested resource does not exist on the Heimdall server."""

    def __init__(self) -> None:
        super().__init__("not found")


class RateLimited(HeimdallError):
    """The Heimdall server refused the request because of rate limiting."""

    def __init__(self) -> None:
        super().__init__("rate limited")


def _checksum_address(raw: bytes) -> str:
    hex_addr = raw.hex()
    digest = keccak256(hex_addr.encode("ascii")).hex()
    return "0x" + "".join(
        char.upper() if int(nibble, 16) >= 8 else char
        for char, nibble in zip(hex_addr, digest)
    )


def _hex(raw: bytes) -> str:
    return "0x" + raw.hex()


def _field(data: Mapping[str, Any], name: str) -> Any:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected an object, got {type(data).__name__}")
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _parse_hex(value: Any, name: str, length: int | None = None) -> bytes:
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a hex string")
    digits = value[2:] if value[:2].lower() == "0x" else value
    try:
        raw = bytes.fromhex(digits)
    except ValueError as exc:
        raise ValueError(f"field `{name}` is not valid hex: {value!r}") from exc
    return _check_length(raw, name, length)


def _check_length(raw: bytes, name: str, length: int | None) -> bytes:
    raw = bytes(raw)
    if length is not None and len(raw) != length:
        raise ValueError(f"field `{name}` must be {length} bytes, got {len(raw)}")
    return raw


def _parse_u64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field `{name}` must be an integer")
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"field `{name}` is outside the u64 range")
    return value


def _parse_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"field `{name}` must be a string")
    return value


@dataclass
class StateSyncEvent:
    """A state-sync event relayed from Ethereum L1 to Bor through Heimdall."""

    id: int
    contract: bytes
    data: bytes
    tx_hash: bytes
    log_index: int
    bor_chain_id: str
    time: int

    def __post_init__(self) -> None:
        self.contract = _check_length(self.contract, "contract", ADDRESS_LENGTH)
        self.data = bytes(self.data)
        self.tx_hash = _check_length(self.tx_hash, "tx_hash", HASH_LENGTH)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the event."""
        return {
            "id": self.id,
            "contract": _checksum_address(self.contract),
            "data": _hex(self.data),
            "tx_hash": _hex(self.tx_hash),
            "log_index": self.log_index,
            "bor_chain_id": self.bor_chain_id,
            "time": self.time,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StateSyncEvent:
        """Build an event from its JSON form; raises ValueError when malformed."""
        return cls(
            id=_parse_u64(_field(data, "id"), "id"),
            contract=_parse_hex(_field(data, "contract"), "contract", ADDRESS_LENGTH),
            data=_parse_hex(_field(data, "data"), "data"),
            tx_hash=_parse_hex(_field(data, "tx_hash"), "tx_hash", HASH_LENGTH),
            log_index=_parse_u64(_field(data, "log_index"), "log_index"),
            bor_chain_id=_parse_str(_field(data, "bor_chain_id"), "bor_chain_id"),
            time=_parse_u64(_field(data, "time"), "time"),
        )


@dataclass
class Checkpoint:
    """A Heimdall checkpoint covering a range of Bor blocks."""

    start_block: int
    end_block: int
    root_hash: bytes
    proposer: bytes

    def __post_init__(self) -> None:
        self.root_hash = _check_length(self.root_hash, "root_hash", HASH_LENGTH)
        self.proposer = _check_length(self.proposer, "proposer", ADDRESS_LENGTH)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the checkpoint."""
        return {
            "start_block": self.start_block,
            "end_block": self.end_block,
            "root_hash": _hex(self.root_hash),
            "proposer": _checksum_address(self.proposer),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Checkpoint:
        """Build a checkpoint from its JSON form; raises ValueError when malformed."""
        return cls(
            start_block=_parse_u64(_field(data, "start_block"), "start_block"),
            end_block=_parse_u64(_field(data, "end_block"), "end_block"),
            root_hash=_parse_hex(_field(data, "root_hash"), "root_hash", HASH_LENGTH),
            proposer=_parse_hex(_field(data, "proposer"), "proposer", ADDRESS_LENGTH),
        )


@dataclass
class Milestone:
    """A Heimdall milestone covering a range of Bor blocks."""

    start_block: int
    end_block: int
    hash: bytes
    proposer: bytes

    def __post_init__(self) -> None:
        self.hash = _check_length(self.hash, "hash", HASH_LENGTH)
        self.proposer = _check_length(self.proposer, "proposer", ADDRESS_LENGTH)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the milestone."""
        return {
            "start_block": self.start_block,
            "end_block": self.end_block,
            "hash": _hex(self.hash),
            "proposer": _checksum_address(self.proposer),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Milestone:
        """Build a milestone from its JSON form; raises ValueError when malformed."""
        return cls(
            start_block=_parse_u64(_field(data, "start_block"), "start_block"),
            end_block=_parse_u64(_field(data, "end_block"), "end_block"),
            hash=_parse_hex(_field(data, "hash"), "hash", HASH_LENGTH),
            proposer=_parse_hex(_field(data, "proposer"), "proposer", ADDRESS_LENGTH),
        )


class HeimdallClient(ABC):
    """Interface for fetching data from the Heimdall layer."""

    @abstractmethod
    async def fetch_span(self, span_id: int) -> Any:
        """Fetch a span by its id."""

    @abstractmethod
    async def fetch_latest_span(self) -> Any:
        """Fetch the latest span."""

    @abstractmethod
    async def fetch_state_sync_events(
        self, from_id: int, to_time: int, limit: int
    ) -> list[StateSyncEvent]:
        """Fetch at most ``limit`` events from ``from_id`` up to ``to_time``."""

    @abstractmethod
    async def fetch_checkpoint(self, number: int) -> Checkpoint:
        """Fetch a checkpoint by its number."""

    @abstractmethod
    async def fetch_milestone_latest(self) -> Milestone:
        """Fetch the latest milestone."""