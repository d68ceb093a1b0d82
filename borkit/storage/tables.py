"""Names of the custom Bor database tables and their meta keys."""

from __future__ import annotations

from enum import Enum, IntEnum


class BorTable(str, Enum):
    """Custom tables kept alongside the standard chain data.

    Key and value layout of each table:

    * ``BorSpans``: span id (u64) -> serialized span
    * ``BorSnapshots``: block hash (32 bytes) -> serialized snapshot
    * ``BorReceipts``: receipt key (32 bytes) -> RLP-encoded receipt
    * ``BorTxLookup``: tx hash (32 bytes) -> (block number, tx index)
    * ``BorMeta``: meta key (u64) -> u64 value
    """

    SPANS = "BorSpans"
    SNAPSHOTS = "BorSnapshots"
    RECEIPTS = "BorReceipts"
    TX_LOOKUP = "BorTxLookup"
    META = "BorMeta"

    def __str__(self) -> str:
        return self.value


class MetaKey(IntEnum):
    """Keys used in the ``BorMeta`` table."""

    LAST_SPAN_ID = 0
    LAST_SNAPSHOT_BLOCK = 1
    LAST_BOR_RECEIPT_BLOCK = 2


BOR_TABLES: tuple[str, ...] = tuple(table.value for table in BorTable)