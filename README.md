# arxia

Building blocks for an offline-first ledger that settles payments over
low-bandwidth mesh links.

Each account keeps its own chain of signed blocks (a block lattice).
Blocks are hashed with BLAKE3 (a pure-Python implementation in
`arxia.hashing`) and signed with Ed25519 over the raw 32 hash bytes, and
they pack into a fixed 193-byte compact form that fits in a single LoRa
frame. The package is organised as plain modules:

- **Lattice**: `arxia.block` (`Block` and the operation types `Open`,
  `Send`, `Receive`, `Revoke`), `arxia.chain` (`AccountChain`,
  `VectorClock`), `arxia.ledger` (`Ledger`), `arxia.validation`
  (`verify_block`, `verify_chain_integrity`) and `arxia.serialization`
  (`to_compact_bytes`, `from_compact_bytes`).
- **Consensus**: `arxia.vote` (`cast_vote`, `verify_vote`,
  `compute_vote_hash`), `arxia.orv` (`collect_votes`, which keeps votes from
  representatives holding at least 0.1% of supply), `arxia.quorum`
  (`check_quorum`: at least 2/3 of representatives and 20% of stake),
  `arxia.conflict` (`resolve_conflict_orv`, stake-weighted with a hash
  tiebreaker, and `detect_double_spend`) and `arxia.delegation`
  (`total_delegated_stake`).
- **CRDTs**: `arxia.pn_counter` (`PNCounter`), `arxia.or_set` (`ORSet`),
  `arxia.crdt_clock` (`CrdtVectorClock`), `arxia.pruning` (`prune_expired`,
  `prune_to_cap`, `prune_all` and their `_default` variants) and
  `arxia.reconciliation` (`reconcile_partitions`, merging balances after a
  network split).
- **Gossip and finality**: `arxia.gossip_message` (`BlockAnnounce`,
  `NonceSyncRequest`, `NonceSyncResponse`, `Ping`), `arxia.nonce_registry`
  (`merge_nonce_registries`, `sync_nonces_before_l1`, `SyncResult`),
  `arxia.gossip_node` (`GossipNode`) and `arxia.finality`
  (`assess_finality`, grading a transaction PENDING, L0, L1 or L2).
- **Mesh plumbing**: `arxia.transport` (the `Transport` interface,
  `TransportMessage` and `TransportError` subclasses), `arxia.simulated`
  (`SimulatedTransport` with deterministic packet loss and `lora()` /
  `ble()` presets), `arxia.relay` (`RelayReceipt`, `RelayBatch`,
  `RelayScore`) and `arxia.storage` (`StorageBackend`, `MemoryStorage`).
- **Identity and contracts**: `arxia.did` (`ArxiaDid`, identifiers of the
  form `did:arxia:<base58(blake3(pubkey))>`), `arxia.escrow` (`Escrow`) and
  `arxia.token_lock` (`TokenLock`).

Errors are raised as subclasses of `arxia.errors.ArxiaError`. Amounts are
integers in micro-ARX; one ARX is `arxia.constants.ONE_ARX` (1,000,000).

## An offline payment

```python
from arxia.chain import AccountChain, VectorClock
from arxia.validation import verify_chain_integrity
from arxia.finality import assess_finality
from arxia.nonce_registry import SyncResult

vclock = VectorClock()
alice = AccountChain()
bob = AccountChain()

alice.open(100_000_000, vclock)
bob.open(0, vclock)

send = alice.send(bob.id, 5_000_000, vclock)
bob.receive(send, vclock)

verify_chain_integrity(alice.chain)   # raises an ArxiaError subclass on failure
verify_chain_integrity(bob.chain)

level = assess_finality(5_000_000, 1, SyncResult.mismatch(0), 0.0)
print(level)                          # L0 (instant)
```

`AccountChain.id` and `AccountChain.short_id` are properties holding the
hex public key and its first eight characters. Sending more than the
balance raises `InsufficientBalanceError`; sending zero raises
`ZeroAmountError`; receiving a block that is not a SEND, or a SEND
addressed elsewhere, raises `NotSendBlockError` or `WrongDestinationError`.

## Compact wire format

```python
from arxia.serialization import to_compact_bytes, from_compact_bytes

data = to_compact_bytes(send)         # 193 bytes
restored = from_compact_bytes(data)
assert restored.balance == send.balance
```

Input shorter than 193 bytes raises `DataTooShortError`; an unknown type
tag raises `InvalidBlockTypeError`. The hash of a restored block is
recomputed from its fields.

## Reconciling partitions

```python
from arxia.pn_counter import PNCounter

a, b = PNCounter(), PNCounter()
a.increment("node_1", 100)
a.decrement("node_1", 10)
b.increment("node_3", 200)

a.merge(b)
b.merge(a)
assert a.value() == b.value() == 290
```

## Command line

Generate a fresh Ed25519 keypair (hex encoded):

```
arxia-cli keygen
```

Generate a new decentralized identifier:

```
arxia-cli did
```

Show usage (also shown for any other or missing command):

```
arxia-cli help
```

Keep any private key the tool prints to yourself.

## What it does not do

This is a library of protocol pieces, not a running node. There is no
node or network daemon, and no radio or Bluetooth transport: the only
`Transport` implementation is the in-memory `SimulatedTransport`. Storage
is in memory only (`MemoryStorage`); nothing is persisted to disk, and
keys are not encrypted at rest.