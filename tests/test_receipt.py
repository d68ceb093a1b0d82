import pytest

from borkit.storage.receipt import (
    BorReceiptStorage,
    compute_receipt_root,
    is_post_madhugiri,
    store_block_receipts,
)

ZERO_HASH = bytes(32)
BOR = bytes([0xFF]) * 32


def _regular(count):
    return [bytes([i + 1]) * 32 for i in range(count)]


def test_pre_madhugiri_separate_storage():
    storage = store_block_receipts(1_000_000, ZERO_HASH)
    assert storage.separate is True


def test_post_madhugiri_standard_storage():
    storage = store_block_receipts(80_084_800, ZERO_HASH)
    assert storage.separate is False


def test_receipt_root_excludes_bor_pre_madhugiri():
    root = compute_receipt_root(_regular(2), BOR, 1_000_000)
    assert len(root) == 2
    assert BOR not in root


def test_receipt_root_includes_statesynctx_post_madhugiri():
    root = compute_receipt_root(_regular(2), BOR, 80_084_800)
    assert len(root) == 3
    assert BOR in root


def test_boundary_block_80084800():
    assert is_post_madhugiri(80_084_800)
    assert not is_post_madhugiri(80_084_799)
    block_hash = bytes([0xAB]) * 32
    pre = store_block_receipts(80_084_799, block_hash)
    post = store_block_receipts(80_084_800, block_hash)
    assert pre.separate
    assert not post.separate
    assert pre.key[18:26] == (80_084_799).to_bytes(8, "big")
    assert pre.key != post.key


def test_no_bor_receipt():
    root = compute_receipt_root(_regular(1), None, 80_084_800)
    assert root == _regular(1)


def test_key_contains_prefix_and_data():
    block_hash = bytes([0xAB]) * 32
    storage = store_block_receipts(50_000_000, block_hash)
    assert len(storage.key) == 18 + 8 + 32
    assert storage.key[:18] == b"matic-bor-receipt-"
    assert storage.key[26:] == block_hash


def test_pre_madhugiri_bor_excluded_from_receipt_root():
    regular = _regular(5)
    root = compute_receipt_root(regular, BOR, 50_000_000)
    assert root == regular


def test_post_madhugiri_bor_included_last():
    regular = _regular(5)
    root = compute_receipt_root(regular, BOR, 81_000_000)
    assert len(root) == 6
    assert root[-1] == BOR
    assert root[:5] == regular


def test_madhugiri_boundary_exact_transition():
    regular = _regular(1)
    assert compute_receipt_root(regular, BOR, 80_084_799) == regular
    assert compute_receipt_root(regular, BOR, 80_084_800) == regular + [BOR]


@pytest.mark.parametrize("block", [50_000_000, 81_000_000])
def test_empty_block_no_receipts(block):
    assert compute_receipt_root([], None, block) == []


def test_post_madhugiri_sprint_boundary_only_bor():
    assert compute_receipt_root([], BOR, 81_000_000) == [BOR]


def test_pre_madhugiri_sprint_boundary_bor_excluded():
    assert compute_receipt_root([], BOR, 50_000_000) == []


def test_input_list_is_not_modified():
    regular = _regular(2)
    compute_receipt_root(regular, BOR, 81_000_000)
    assert regular == _regular(2)


@pytest.mark.parametrize(
    "block, expected",
    [(0, False), (80_084_799, False), (80_084_800, True),
     (80_084_801, True), ((1 << 64) - 1, True)],
)
def test_is_post_madhugiri_boundaries(block, expected):
    assert is_post_madhugiri(block) is expected


def test_storage_value_equality():
    block_hash = bytes([0xAB]) * 32
    assert store_block_receipts(100, block_hash) == BorReceiptStorage(
        key=b"matic-bor-receipt-" + bytes([0, 0, 0, 0, 0, 0, 0, 100]) + block_hash,
        separate=True,
    )