"""Immutable record types for the ledger.

A :class:`Transaction` records one attempted access-control operation; a
:class:`Block` wraps one or more transactions together with the hash of the
previous block.  Both are frozen dataclasses: once a block is sealed and
appended it is never modified.

Field usage by transaction type
-------------------------------
::

    type       owner  data_hash  metadata  recipient  requester
    REGISTER     x        x         x
    GRANT        x        x                    x
    REVOKE       x        x                    x
    REQUEST               x                               x

Fields a type does not use are left as empty strings.  They are not
validated, but they still take part in the block hash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import IntEnum

from access_ledger.chain.hasher import digest_text


def unix_now() -> int:
    """Current wall-clock time as whole Unix seconds (UTC)."""
    return int(datetime.now(UTC).timestamp())


class TransactionType(IntEnum):
    """The four operations recorded on the ledger.

    The integer values are part of the block hash serialisation and must
    not be renumbered.
    """

    REGISTER = 0
    GRANT = 1
    REVOKE = 2
    REQUEST = 3


@dataclass(frozen=True)
class Transaction:
    """One attempted access-control operation.

    Attributes:
        type:      Which operation was attempted.
        owner:     Identity claiming ownership (REGISTER, GRANT, REVOKE).
        data_hash: Identifier of the data item (all types).
        metadata:  Free-form description supplied at registration.
        recipient: Identity being granted or revoked access.
        requester: Identity asking for access (REQUEST).
        timestamp: Unix seconds at which the transaction was created.
    """

    type: TransactionType
    owner: str = ""
    data_hash: str = ""
    metadata: str = ""
    recipient: str = ""
    requester: str = ""
    timestamp: int = field(default_factory=unix_now)

    def serialize(self) -> str:
        """Concatenate every field in hash order."""
        return (
            f"{int(self.type)}"
            f"{self.owner}"
            f"{self.data_hash}"
            f"{self.metadata}"
            f"{self.recipient}"
            f"{self.requester}"
            f"{self.timestamp}"
        )


def compute_block_hash(
    prev_hash: str,
    timestamp: int,
    transactions: tuple[Transaction, ...],
) -> str:
    """Digest a block's content in the fixed serialisation order.

    The input string is ``prev_hash``, then ``timestamp``, then each
    transaction's :meth:`Transaction.serialize` output, concatenated with
    no separators.

    Args:
        prev_hash:    Hash of the preceding block.
        timestamp:    Block creation time in Unix seconds.
        transactions: The block's transactions in order.

    Returns:
        The decimal DJB2 digest of the serialised block.
    """
    parts = [prev_hash, str(timestamp)]
    parts.extend(tx.serialize() for tx in transactions)
    return digest_text("".join(parts))


@dataclass(frozen=True)
class Block:
    """A sealed container of transactions linked to its predecessor.

    Build blocks with :meth:`seal` so that ``hash`` is always computed from
    the final ``transactions`` and ``prev_hash``.

    Attributes:
        transactions: Ordered transactions recorded in this block.
        prev_hash:    Hash of the previous block (``"0"`` for genesis).
        timestamp:    Unix seconds at which the block was created.
        hash:         Digest over ``prev_hash``, ``timestamp`` and every
                      transaction field.
    """

    transactions: tuple[Transaction, ...]
    prev_hash: str
    timestamp: int
    hash: str

    @classmethod
    def seal(
        cls,
        *,
        prev_hash: str,
        timestamp: int,
        transactions: tuple[Transaction, ...] | list[Transaction],
    ) -> Block:
        """Finalise ``transactions`` and ``prev_hash`` and compute the hash.

        Raises:
            TypeError: If any entry of ``transactions`` is not a
                       :class:`Transaction`.
        """
        txs = tuple(transactions)
        for tx in txs:
            if not isinstance(tx, Transaction):
                raise TypeError(f"Block.seal: expected Transaction, got {type(tx).__name__}.")
        return cls(
            transactions=txs,
            prev_hash=prev_hash,
            timestamp=timestamp,
            hash=compute_block_hash(prev_hash, timestamp, txs),
        )
