import json

import pytest

from novachain import poh
from novachain.data_model import Block, BlockHeader, Transaction, TxType


def _header(**overrides):
    values = dict(
        parent_hash=b"\x01" * 32,
        merkle_root=bytes(32),
        poh_digest=b"\x02" * 32,
        number=42,
        timestamp=1_700_000_000,
    )
    values.update(overrides)
    return BlockHeader(**values)


def test_poh_and_serde_roundtrip():
    seed = poh.random_seed()
    d1 = poh.generate_poh(seed, 1)
    d2 = poh.generate_poh(d1, 2)
    header = BlockHeader(
        parent_hash=d1,
        merkle_root=bytes(32),
        poh_digest=d2,
        number=42,
        timestamp=1_700_000_000,
    )
    block = Block(header=header, transactions=[])

    ser = block.to_json()
    de = Block.from_json(ser)

    assert de.header.number == header.number
    assert de.header.poh_digest == header.poh_digest
    assert de.header.parent_hash == header.parent_hash


def test_block_with_transactions_roundtrip():
    block = Block(
        header=_header(),
        transactions=[
            Transaction(TxType.TRANSFER, b"hello"),
            Transaction(TxType.CROSS_BRIDGE, b""),
            Transaction(TxType.CABIN_UPLOAD, b"\x00\xff"),
        ],
    )
    assert Block.from_json(block.to_json()) == block


def test_transaction_dict_shape():
    tx = Transaction(TxType.TRANSFER, b"hi")
    assert tx.to_dict() == {"tx_type": "Transfer", "payload": [104, 105]}


def test_block_json_field_layout():
    block = Block(header=_header(number=1, timestamp=5))
    parsed = json.loads(block.to_json())
    assert list(parsed) == ["header", "transactions"]
    assert list(parsed["header"]) == [
        "parent_hash",
        "merkle_root",
        "poh_digest",
        "number",
        "timestamp",
    ]
    assert parsed["header"]["merkle_root"] == [0] * 32
    assert parsed["transactions"] == []


def test_from_json_accepts_str():
    block = Block(header=_header())
    assert Block.from_json(block.to_json().decode("utf-8")) == block


def test_unknown_tx_type_rejected():
    with pytest.raises(ValueError):
        Transaction.from_dict({"tx_type": "Mint", "payload": []})


def test_missing_field_rejected():
    data = _header().to_dict()
    del data["number"]
    with pytest.raises(ValueError):
        BlockHeader.from_dict(data)


def test_byte_out_of_range_rejected():
    data = _header().to_dict()
    data["parent_hash"] = [256]
    with pytest.raises(ValueError):
        BlockHeader.from_dict(data)


def test_negative_number_rejected():
    data = _header().to_dict()
    data["number"] = -1
    with pytest.raises(ValueError):
        BlockHeader.from_dict(data)


def test_invalid_json_rejected():
    with pytest.raises(ValueError):
        Block.from_json(b"not json")