# borkit

Building blocks for nodes of a Bor-style proof-of-stake chain:

- **`borkit.storage`**: the storage rules for Bor system transactions.
  It covers receipt database keys, derived transaction hashes, the
  Madhugiri receipt-root switch, cumulative gas for system receipts, the
  custom table and meta-key names, and in-memory span and snapshot stores.
- **`borkit.heimdall`**: an asynchronous client for the Heimdall REST API
  (spans, state-sync events, checkpoints, milestones). It also has a mock
  client with canned responses for tests, data models for events,
  checkpoints and milestones, and a small LRU cache for spans.

## Installation

```
pip install borkit
```

To run the test suite as well:

```
pip install "borkit[test]"
pytest
```

## Storage

### Receipt keys (`borkit.storage.receipt_key`)

A Bor receipt is stored under the key
`b"matic-bor-receipt-" + block_number (8 bytes, big-endian) + block_hash (32 raw bytes)`.
The synthetic transaction hash of the state-sync transaction is the
Keccak-256 digest of that key.

```python
from borkit.storage.receipt_key import bor_receipt_key, derived_bor_tx_hash, keccak256

block_hash = bytes([0xAB]) * 32
key = bor_receipt_key(100, block_hash)
assert len(key) == 18 + 8 + 32
assert derived_bor_tx_hash(100, block_hash) == keccak256(key)
```

`bor_receipt_key` raises `ValueError` if the block number is outside the
unsigned 64-bit range or if the hash is not exactly 32 bytes.

### Receipt roots before and after Madhugiri (`borkit.storage.receipt`)

Before block 80,084,800 (`MADHUGIRI_BLOCK`), the Bor receipt is kept apart
from the regular receipts and left out of the receipt root. From that block
on, it is appended after them.

```python
from borkit.storage.receipt import (
    compute_receipt_root,
    is_post_madhugiri,
    store_block_receipts,
)

regular = [bytes([1]) * 32, bytes([2]) * 32]
bor = bytes([0xFF]) * 32

assert compute_receipt_root(regular, bor, 1_000_000) == regular
assert compute_receipt_root(regular, bor, 80_084_800) == regular + [bor]
assert compute_receipt_root(regular, None, 80_084_800) == regular

assert not is_post_madhugiri(80_084_799)
storage = store_block_receipts(80_084_799, bytes(32))
assert storage.separate          # stored apart, pre-Madhugiri
```

`compute_receipt_root` returns the list of receipt hashes that go into the
root. It does not build a trie. `store_block_receipts` returns a frozen
`BorReceiptStorage` that holds the raw `key` and the `separate` flag.

### Gas of system transactions (`borkit.storage.gas`)

System transactions sit at the end of a block and use no gas. The
cumulative gas of their receipts is therefore that of the last regular
transaction.

```python
from borkit.storage.gas import derive_bor_receipt_gas, is_bor_system_tx

assert derive_bor_receipt_gas(300_000, 1) == 300_000
assert is_bor_system_tx(8, total_txs=10, bor_tx_count=2)
assert not is_bor_system_tx(7, total_txs=10, bor_tx_count=2)
```

Negative gas or indexes raise `ValueError`, as does a `bor_tx_count`
larger than `total_txs`.

### Span and snapshot stores (`borkit.storage.persistence`)

`SpanStore` and `SnapshotStore` are abstract interfaces.
`InMemorySpanStore` and `InMemorySnapshotStore` implement them with
dictionaries.

```python
from borkit.storage.persistence import InMemorySnapshotStore

store = InMemorySnapshotStore()
block_hash = bytes([0x01]) * 32
store.put_snapshot(block_hash, b"\x01\x02\x03")
store.put_snapshot(block_hash, b"\x04\x05\x06")
assert store.get_snapshot(block_hash) == b"\x04\x05\x06"   # last write wins
```

Snapshot block hashes must be 32 bytes, otherwise `ValueError` is raised.
A span can be any object with an `id` attribute. `put_span` stores it under
that id, `get_span` returns it or `None`, and `latest_span_id()` returns the
highest id stored, or `None` when the store is empty.

### Tables (`borkit.storage.tables`)

`BorTable` enumerates the custom table names (`BorSpans`, `BorSnapshots`,
`BorReceipts`, `BorTxLookup`, `BorMeta`). `BOR_TABLES` is the tuple of all
five names. `MetaKey` holds the `BorMeta` keys `LAST_SPAN_ID` (0),
`LAST_SNAPSHOT_BLOCK` (1) and `LAST_BOR_RECEIPT_BLOCK` (2).

## Heimdall

### Models and errors (`borkit.heimdall.models`)

`StateSyncEvent`, `Checkpoint` and `Milestone` are dataclasses. Addresses
and hashes are stored as raw bytes, and their lengths are checked on
construction. `to_dict()` gives the JSON form: hex strings, with addresses
in checksum case. `from_dict()` parses that form and raises `ValueError`
when the data is malformed.

All client failures derive from `HeimdallError`. The subclasses are
`NetworkError`, `RequestTimeout`, `InvalidResponse`, `NotFound` and
`RateLimited`. `HeimdallClient` is the abstract async interface with the
methods `fetch_span`, `fetch_latest_span`, `fetch_state_sync_events`,
`fetch_checkpoint` and `fetch_milestone_latest`.

### HTTP client (`borkit.heimdall.http`)

`HttpHeimdallClient(base_url)` reads each payload from the `result` key of
the response. Network errors, timeouts, HTTP 429 and other non-404 error
statuses lead to a retry. By default a request makes up to three attempts,
waiting 0.5 s and then 1 s between them. The number of attempts and the
first wait can be changed with `max_retries` and `base_retry_delay`. A 404
raises `NotFound` straight away. An existing `httpx.AsyncClient` can be
passed as `client`; in that case `aclose()` leaves it open.

```python
import asyncio

from borkit.heimdall.http import HttpHeimdallClient
from borkit.heimdall.models import HeimdallError, NotFound


async def main():
    async with HttpHeimdallClient("http://localhost:1317") as client:
        try:
            span = await client.fetch_latest_span()      # decoded JSON payload
            print(span["id"])
            events = await client.fetch_state_sync_events(1, 1_700_000_000, 50)
            print(len(events), "state-sync events")
            milestone = await client.fetch_milestone_latest()
            print(milestone.end_block)
        except NotFound:
            print("nothing there")
        except HeimdallError as exc:
            print("Heimdall request failed:", exc)


asyncio.run(main())
```

`fetch_span` and `fetch_latest_span` return the span's JSON payload as
decoded. The other methods return `StateSyncEvent`, `Checkpoint` and
`Milestone` objects, and raise `InvalidResponse` when the payload does not
parse.

### Mock client (`borkit.heimdall.mock`)

`MockHeimdallClient` answers from data registered through chained
`with_*` calls:

- `with_span`
- `with_latest_span`
- `with_events`
- `with_checkpoint`
- `with_latest_milestone`

Each call returns a new client and leaves the original unchanged. A lookup
of anything not registered raises `NotFound`. `fetch_state_sync_events`
returns the events whose id is at least `from_id`, capped at `limit`. It
ignores `to_time` and returns an empty list when no event matches.

```python
import asyncio

from borkit.heimdall.mock import MockHeimdallClient
from borkit.heimdall.models import NotFound


async def main():
    client = MockHeimdallClient()
    assert await client.fetch_state_sync_events(0, 2**64 - 1, 100) == []
    try:
        await client.fetch_span(42)
    except NotFound:
        print("span 42 not registered")


asyncio.run(main())
```

### Span cache (`borkit.heimdall.cache`)

`SpanCache(max_size)` keeps spans by their `id` and evicts the least
recently used one when it is full.

- `get` returns the span or `None`, and marks a hit as most recently used.
- Re-inserting an existing id replaces that entry in place.
- A `max_size` of zero disables eviction, and a negative size raises
  `ValueError`.
- The cache supports `len()` and `in`.

## What it does not do

- The package has no span or validator types of its own. Spans are passed
  through as whatever object or JSON payload the caller supplies.
- The stores keep data in memory only; there is no on-disk database.
- There is no block validation, consensus logic or command-line program.