# bftreplica

Data types and bookkeeping for leader-based Byzantine fault tolerant
replicas in the HotStuff family. The package models the values a replica
passes around (hashes, blocks, accumulators, groups of replicas), the
rotation of view leaders, and a replica's record of its clients. It uses
only the standard library.

## Modules

- `bftreplica.hashing` – `Hash`, a 32-byte digest with an `is_set` flag.
  `Hash()` is the all-`'0'` digest, set; `Hash.dummy()` is the same digest
  with the flag cleared. `is_dummy()`, `is_zero()`, `to_print()` (the flag
  and the first six bytes), `to_string()`, and a 33-byte `serialize()` /
  `Hash.deserialize()`. Two hashes compare equal when their digests are
  equal, whatever their flags.
- `bftreplica.group` – `Group`, an ordered tuple of replica ids with
  `size`, `to_print()`, `to_string()` and a little-endian `serialize()` /
  `Group.deserialize()` (a 32-bit count followed by 32-bit ids).
- `bftreplica.accumulator` – `Accumulator`, the summary a leader builds from
  new-view messages: `propose_view`, `prepare_hash`, `prepare_view`, `size`
  and `is_set`. `Accumulator.unset()` carries no value. Fixed-size
  `serialize()` / `Accumulator.deserialize()`.
- `bftreplica.block` – `Block`, a batch of transactions chained to its
  predecessor by `previous_hash`. `Block.genesis()`, `Block.dummy()`,
  `is_dummy()`, `extends(previous_hash)`, and `hash()`, the SHA-256 of
  `to_string()`. Any object with `to_string()` and `to_print()` methods
  can serve as a transaction.
- `bftreplica.peers` – `Peer` (a replica id and the network identity used to
  reach it), `LeaderSchedule` for round-robin leaders (`leader_of(view)`,
  `am_leader_of(view)`), and `remove_from_peers`, `keep_from_peers` and
  `recipients_to_string` for choosing and listing message recipients.
- `bftreplica.clients` – `ClientRegistry` and `ClientInfo`: registering
  clients, queuing transactions from known running clients (optionally up to
  a `capacity`), taking batches for a new block with `take_batch(limit)`,
  listing the `(transaction_id, client_id)` pairs to reply to once a block
  is executed (`pending_replies`), and counting replies (`record_reply`).

## Example

```python
from bftreplica.block import Block
from bftreplica.hashing import Hash
from bftreplica.peers import LeaderSchedule

genesis = Block.genesis()
print(genesis.to_print())          # BLOCK[1,HASH[1-48 48 48 48 48 48],0,{}]

child = Block(genesis.hash())
print(child.extends(genesis.hash()))  # True
print(Hash.dummy().is_dummy())        # True

schedule = LeaderSchedule(replica_id=1, num_leaders=4)
print(schedule.leader_of(5))          # 1
print(schedule.am_leader_of(5))       # True
```

```python
from bftreplica.clients import ClientRegistry

registry = ClientRegistry(capacity=100)
registry.register(7, connection=None)
registry.accept_transaction(7, "tx-1")
print(registry.take_batch(10))        # ['tx-1']
```

## What the package does not do

It has no network layer, no running replica or consensus message handling,
no signatures or key handling, no command-line programs, and no client load
generator or statistics output. It supplies the data types and bookkeeping
such a system is built from; sending messages, verifying certificates and
driving views are left to the code that uses it.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install .[test]
pytest
```