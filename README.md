# novachain

This package provides core primitives for a small experimental chain. It also
includes a command-line tool, `nova-cli`, that simulates block production.

## Modules

- `novachain.poh`: proof-of-history style digests.
  - `generate_poh(previous, counter)` returns the SHA-256 of `previous`
    followed by `counter` as 8 little-endian bytes. `counter` must be an
    integer from 0 to 2**64 - 1. A value outside that range raises
    `ValueError`, and a value that is not an integer raises `TypeError`.
  - `random_seed()` returns 32 random bytes.
- `novachain.data_model`: the types `BlockHeader`, `Block`, `Transaction` and
  `TxType`.
  - `TxType` has three members: `CABIN_UPLOAD`, `CROSS_BRIDGE` and `TRANSFER`.
  - Each of the three classes has `to_dict()` and `from_dict()`. Byte fields
    become lists of integers.
  - `Block.to_json()` returns compact JSON bytes.
  - `Block.from_json()` accepts bytes or a string.
  - Malformed input raises `ValueError`. This covers missing fields, unknown
    transaction types, and numbers that are not valid unsigned 64-bit values.
- `novachain.storage`: the abstract `Storage` interface with `put`, `get`,
  `delete` and `contains_key`. Keys and values are bytes.
  - `MemDb` is a thread-safe in-memory store.
  - `RocksDbStub` and `SledDbStub` also keep their data in memory.
  - `open_backend(name)` accepts `"mem"`, `"rocks"` or `"sled"`. Any other
    name returns a `MemDb`.
- `novachain.vm`: `Receipt` (with `success` and `output`), the abstract `VM`
  interface, and the `EvmCompat` and `WasmRuntime` engines.
  - Both engines succeed and echo the transaction's payload back as the
    output.
  - `execute_evm_tx(tx)` and `execute_wasm_tx(tx)` are shortcuts for running
    a transaction on each engine.
- `novachain.demo`: `send(amount)`, `lock(amount)` and `propose()`. Each one
  prints a short message and returns the lines it printed.
  - `send` calls `lock`.
  - `lock` calls `propose`.
- `novachain.simulate`: `run(count, storm, json_output, backend)`. It builds a
  chain of `count` blocks linked by PoH digests. See the `simulate` command
  below. A negative `count` raises `ValueError`.
- `novachain.cli`: `build_parser()` and `main(argv=None)`. `nova-cli` runs
  `main`.

## Installation

```
pip install .
```

## Library use

```python
from novachain.poh import generate_poh, random_seed
from novachain.data_model import Block, BlockHeader
from novachain.storage import open_backend

seed = random_seed()
digest = generate_poh(seed, 1)

header = BlockHeader(
    parent_hash=seed,
    merkle_root=bytes(32),
    poh_digest=digest,
    number=1,
    timestamp=1_700_000_000,
)
block = Block(header=header, transactions=[])

db = open_backend("mem")
db.put(b"block:1", block.to_json())
assert Block.from_json(db.get(b"block:1")).header.number == 1
```

## Command line

Simulate five blocks, printing one line per block:

```
nova-cli simulate
```

Each block gets the next number, starting at 1, and the current Unix
timestamp. Its digest is computed from the previous block's digest. The
chain starts from a random seed.

Options:

- `--count N`: the number of blocks to produce. The default is 5.
- `--json`: print each block as a compact JSON object with the keys
  `number`, `timestamp` and `poh`. The `poh` value is hex. Without this
  option, each line reads `block N ts=T poh=HEX`.
- `--backend mem|none`: controls whether blocks are stored.
  - With `mem` (the default), each block is serialized to JSON and stored in
    an in-memory backend under the key `block:N`. The output then also
    reports `stored`.
  - With `none`, nothing is stored, and `stored` does not appear in the
    output.
- `--storm`: compute one extra digest after each block. That digest is not
  part of the chain.

Example:

```
nova-cli simulate --count 3 --json
```

There are three more subcommands:

- `wallet ACTION` prints `wallet action: ACTION`.
- `tx [TO] [AMOUNT]` prints the values it was given.
- `gov ACTION` prints `gov action: ACTION`.

`wallet send` is the exception. It runs the `send`, `lock` and `propose`
steps for an amount of 10:

```
nova-cli wallet send
```

## What it does not do

Nothing is written to disk.

- Every storage backend, including `RocksDbStub` and `SledDbStub`, keeps its
  data in memory only.
- Blocks stored by `nova-cli simulate` are gone when the command ends.

The `wallet`, `tx` and `gov` subcommands only print messages:

- There are no keys, addresses or balances.
- There is no networking and no real consensus.

## Tests

```
pip install .[test]
pytest
```