"""Simulate a short chain of blocks linked by PoH digests."""

from __future__ import annotations

import json
import time

from .data_model import Block, BlockHeader
from .poh import generate_poh, random_seed
from .storage import Storage, open_backend

_STORM_OFFSET = 100


def _open_storage(backend: str) -> Storage | None:
    if backend == "none":
        return None
    return open_backend(backend)


def run(count: int, storm: bool, json_output: bool, backend: str) -> None:
    """Generate ``count`` blocks, print one line per block and store them unless ``backend`` is "none"."""
    if count < 0:
        raise ValueError("count must not be negative")
    storage = _open_storage(backend)
    previous = random_seed()

    for number in range(1, count + 1):
        poh = generate_poh(previous, number)
        ts = int(time.time())
        poh_hex = poh.hex()

        record: dict[str, object] = {"number": number, "timestamp": ts, "poh": poh_hex}
        if storage is not None:
            block = Block(
                header=BlockHeader(
                    parent_hash=previous,
                    merkle_root=bytes(32),
                    poh_digest=poh,
                    number=number,
                    timestamp=ts,
                ),
            )
            key = f"block:{number}".encode()
            storage.put(key, block.to_json())
            record["stored"] = storage.get(key) is not None

        if json_output:
            print(json.dumps(record, sort_keys=True, separators=(",", ":")))
        else:
            line = f"block {number} ts={ts} poh={poh_hex}"
            if "stored" in record:
                line += f" stored={str(record['stored']).lower()}"
            print(line)

        previous = poh
        if storm:
            # extra internal pulse; its result is not part of the chain
            generate_poh(previous, number - 1 + _STORM_OFFSET)