"""Cumulative gas derivation for Bor system-transaction receipts.

Bor system transactions (state sync, span commit) consume no gas, so the
cumulative gas of a Bor receipt is derived from the regular transactions.
"""

from __future__ import annotations


def derive_bor_receipt_gas(regular_cumulative_gas: int, bor_tx_index: int) -> int:
    """Return the cumulative gas used for a Bor receipt in a block.

    Since Bor system transactions use no gas, this is the cumulative gas
    after the last regular transaction, whatever the Bor transaction index.
    """
    if regular_cumulative_gas < 0:
        raise ValueError(
            f"cumulative gas must not be negative, got {regular_cumulative_gas}"
        )
    if bor_tx_index < 0:
        raise ValueError(f"bor transaction index must not be negative, got {bor_tx_index}")
    return regular_cumulative_gas


def is_bor_system_tx(tx_index: int, total_txs: int, bor_tx_count: int) -> bool:
    """Tell whether the transaction at ``tx_index`` is a Bor system transaction.

    Bor system transactions are appended at the end of the block.
    """
    if bor_tx_count > total_txs:
        raise ValueError(
            f"bor transaction count {bor_tx_count} exceeds total transactions {total_txs}"
        )
    return tx_index >= total_txs - bor_tx_count