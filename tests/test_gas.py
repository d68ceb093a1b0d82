import pytest

from borkit.storage.gas import derive_bor_receipt_gas, is_bor_system_tx


def test_derive_bor_receipt_gas_returns_regular_cumulative():
    assert derive_bor_receipt_gas(1_000_000, 0) == 1_000_000
    assert derive_bor_receipt_gas(5_000_000, 3) == 5_000_000


def test_derive_bor_receipt_gas_zero():
    assert derive_bor_receipt_gas(0, 0) == 0


def test_bor_receipt_gas_equals_last_regular():
    assert derive_bor_receipt_gas(300_000, 0) == 300_000
    assert derive_bor_receipt_gas(300_000, 1) == 300_000
    assert derive_bor_receipt_gas(300_000, 5) == 300_000


def test_is_bor_system_tx_last_txs_are_bor():
    assert not is_bor_system_tx(0, 10, 2)
    assert not is_bor_system_tx(7, 10, 2)
    assert is_bor_system_tx(8, 10, 2)
    assert is_bor_system_tx(9, 10, 2)


def test_is_bor_system_tx_single_bor_tx():
    assert not is_bor_system_tx(3, 5, 1)
    assert is_bor_system_tx(4, 5, 1)


def test_is_bor_system_tx_all_bor():
    assert is_bor_system_tx(0, 3, 3)
    assert is_bor_system_tx(1, 3, 3)
    assert is_bor_system_tx(2, 3, 3)


def test_bor_system_tx_detection():
    assert not is_bor_system_tx(0, 10, 3)
    assert not is_bor_system_tx(6, 10, 3)
    assert is_bor_system_tx(7, 10, 3)
    assert is_bor_system_tx(8, 10, 3)
    assert is_bor_system_tx(9, 10, 3)


@pytest.mark.parametrize("index", range(5))
def test_no_bor_txs_means_no_system_tx(index):
    assert is_bor_system_tx(index, 5, 0) is False


def test_more_bor_txs_than_total_is_rejected():
    with pytest.raises(ValueError):
        is_bor_system_tx(0, 2, 3)