"""Dual-path receipt storage for Bor.

Before the Madhugiri hardfork, Bor receipts are stored separately and are
not part of the receipt root. From Madhugiri on, the state-sync receipt is
unified with the regular receipts and included in the receipt root.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from borkit.storage.receipt_key import bor_receipt_key

MADHUGIRI_BLOCK = 80_084_800


def is_post_madhugiri(block_number: int) -> bool:
    """Return True if the block uses unified (post-Madhugiri) receipt storage."""
    return block_number >= MADHUGIRI_BLOCK


def compute_receipt_root(
    receipt_hashes: Iterable[bytes],
    bor_receipt_hash: bytes | None,
    block_number: int,
) -> list[bytes]:
    """Return the receipt hashes that make up the block's receipt root.

    The Bor receipt hash is appended last, and only for post-Madhugiri blocks.
    """
    hashes = list(receipt_hashes)
    if bor_receipt_hash is not None and is_post_madhugiri(block_number):
        hashes.append(bor_receipt_hash)
    return hashes


@dataclass(frozen=True)
class BorReceiptStorage:
    """How a Bor receipt is stored.

    ``key`` is the raw database key; ``separate`` is True when the receipt is
    kept apart from the regular receipt trie (pre-Madhugiri).
    """

    key: bytes
    separate: bool


def store_block_receipts(block_number: int, block_hash: bytes) -> BorReceiptStorage:
    """Return the storage key and path for the block's Bor receipt."""
    return BorReceiptStorage(
        key=bor_receipt_key(block_number, block_hash),
        separate=not is_post_madhugiri(block_number),
    )