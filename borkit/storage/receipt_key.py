"""Bor receipt database keys and derived state-sync transaction hashes.

The receipt key is ``b"matic-bor-receipt-" + block_number (8 bytes, big
endian) + block_hash (32 raw bytes)``. The synthetic transaction hash of
the Bor state-sync transaction is the Keccak-256 digest of that key.
"""

from __future__ import annotations

from Crypto.Hash import keccak

BOR_RECEIPT_PREFIX = b"matic-bor-receipt-"
HASH_LENGTH = 32
_U64_MAX = (1 << 64) - 1


def keccak256(data: bytes) -> bytes:
    """Return the 32-byte Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _check_hash(block_hash: bytes) -> bytes:
    raw = bytes(block_hash)
    if len(raw) != HASH_LENGTH:
        raise ValueError(f"block hash must be {HASH_LENGTH} bytes, got {len(raw)}")
    return raw


def bor_receipt_key(block_number: int, block_hash: bytes) -> bytes:
    """Return the raw (unhashed) database key of a block's Bor receipt."""
    if not 0 <= block_number <= _U64_MAX:
        raise ValueError(f"block number {block_number} is outside the u64 range")
    return BOR_RECEIPT_PREFIX + block_number.to_bytes(8, "big") + _check_hash(block_hash)


def derived_bor_tx_hash(block_number: int, block_hash: bytes) -> bytes:
    """Return the synthetic hash of the block's Bor state-sync transaction."""
    return keccak256(bor_receipt_key(block_number, block_hash))