"""Chain package: the hash-linked block store.

Public surface
--------------
- :func:`digest`: DJB2 checksum of a byte string.
- :class:`TransactionType`: the four recorded operation kinds.
- :class:`Transaction`: one attempted access-control operation.
- :class:`Block`: sealed container of transactions.
- :class:`Ledger`: append-only, lock-guarded sequence of blocks.

Usage example
-------------
::

    from access_ledger.chain import Block, Ledger, Transaction, TransactionType

    ledger = Ledger()
    tx = Transaction(type=TransactionType.REGISTER, owner="alice", data_hash="h1")
    block = Block.seal(prev_hash=ledger.tip_hash(), timestamp=tx.timestamp, transactions=(tx,))
    ledger.append_block(block)

Design notes
------------
- The digest is a non-cryptographic checksum used for chain linkage only.
- Nothing is persisted; the chain lives for the lifetime of the process.
- There is deliberately no verification pass over the chain.
"""

from access_ledger.chain.hasher import digest, digest_text
from access_ledger.chain.ledger import GENESIS_PREV_HASH, Ledger
from access_ledger.chain.types import Block, Transaction, TransactionType, compute_block_hash

__all__ = [
    "GENESIS_PREV_HASH",
    "Block",
    "Ledger",
    "Transaction",
    "TransactionType",
    "compute_block_hash",
    "digest",
    "digest_text",
]
