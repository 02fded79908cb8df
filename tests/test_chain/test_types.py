"""Tests for Transaction / Block and block hashing (access_ledger/chain/types.py)."""

import dataclasses

import pytest

from access_ledger.chain import Block, Transaction, TransactionType, compute_block_hash
from access_ledger.chain.hasher import digest_text

TS = 1_767_225_600


def _register_tx(**overrides) -> Transaction:
    fields = {
        "type": TransactionType.REGISTER,
        "owner": "alice",
        "data_hash": "h1",
        "metadata": "m",
        "timestamp": TS,
    }
    fields.update(overrides)
    return Transaction(**fields)


@pytest.mark.unit
class TestTransaction:
    def test_unused_fields_default_to_empty(self):
        tx = Transaction(type=TransactionType.REQUEST, requester="bob", data_hash="h1")
        assert tx.owner == ""
        assert tx.metadata == ""
        assert tx.recipient == ""

    def test_timestamp_defaults_to_now(self):
        tx = Transaction(type=TransactionType.REQUEST)
        assert tx.timestamp > 0

    def test_is_frozen(self):
        tx = _register_tx()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.owner = "mallory"  # type: ignore[misc]

    def test_serialize_field_order(self):
        tx = Transaction(
            type=TransactionType.GRANT,
            owner="o",
            data_hash="d",
            metadata="",
            recipient="r",
            requester="",
            timestamp=7,
        )
        assert tx.serialize() == "1odr7"

    def test_type_values_are_stable(self):
        assert [int(t) for t in TransactionType] == [0, 1, 2, 3]


@pytest.mark.unit
class TestBlockHash:
    def test_hash_matches_manual_serialization(self):
        tx = _register_tx()
        expected = digest_text(f"prev{TS}0aliceh1m{TS}")
        assert compute_block_hash("prev", TS, (tx,)) == expected

    def test_identical_blocks_hash_equal(self):
        a = Block.seal(prev_hash="p", timestamp=TS, transactions=(_register_tx(),))
        b = Block.seal(prev_hash="p", timestamp=TS, transactions=(_register_tx(),))
        assert a.hash == b.hash

    @pytest.mark.parametrize(
        "field,value",
        [
            ("type", TransactionType.GRANT),
            ("owner", "bob"),
            ("data_hash", "h2"),
            ("metadata", "other"),
            ("recipient", "carol"),
            ("requester", "dave"),
            ("timestamp", TS + 1),
        ],
    )
    def test_changing_any_transaction_field_changes_hash(self, field, value):
        base = Block.seal(prev_hash="p", timestamp=TS, transactions=(_register_tx(),))
        changed = Block.seal(
            prev_hash="p", timestamp=TS, transactions=(_register_tx(**{field: value}),)
        )
        assert base.hash != changed.hash

    def test_prev_hash_and_timestamp_are_hashed(self):
        tx = _register_tx()
        base = Block.seal(prev_hash="p", timestamp=TS, transactions=(tx,))
        assert base.hash != Block.seal(prev_hash="q", timestamp=TS, transactions=(tx,)).hash
        assert base.hash != Block.seal(prev_hash="p", timestamp=TS + 1, transactions=(tx,)).hash


@pytest.mark.unit
class TestBlockSeal:
    def test_seal_accepts_list_and_stores_tuple(self):
        block = Block.seal(prev_hash="p", timestamp=TS, transactions=[_register_tx()])
        assert isinstance(block.transactions, tuple)
        assert len(block.transactions) == 1

    def test_seal_supports_multiple_transactions(self):
        txs = (_register_tx(), _register_tx(data_hash="h2"))
        block = Block.seal(prev_hash="p", timestamp=TS, transactions=txs)
        assert block.hash == compute_block_hash("p", TS, txs)

    def test_seal_rejects_non_transactions(self):
        with pytest.raises(TypeError, match="Transaction"):
            Block.seal(prev_hash="p", timestamp=TS, transactions=("not a tx",))  # type: ignore[arg-type]

    def test_sealed_block_is_frozen(self):
        block = Block.seal(prev_hash="p", timestamp=TS, transactions=())
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.hash = "forged"  # type: ignore[misc]
