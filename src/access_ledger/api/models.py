"""
Pydantic models for API responses.

The transaction endpoints answer in plain text, so only the JSON inspection
endpoints (``/``, ``/health``, ``/chain``) have models here.
"""

from pydantic import BaseModel

from access_ledger.chain import Block, Transaction


class RootResponse(BaseModel):
    """API identity and version."""

    message: str
    version: str


class HealthResponse(BaseModel):
    """
    Liveness check.

    Attributes:
        status: Always "ok" when the server answers
        blocks: Current chain length, genesis included
    """

    status: str
    blocks: int


class TransactionModel(BaseModel):
    """JSON view of a recorded transaction."""

    type: str
    owner: str
    data_hash: str
    metadata: str
    recipient: str
    requester: str
    timestamp: int

    @classmethod
    def from_transaction(cls, tx: Transaction) -> "TransactionModel":
        """Build the JSON view of ``tx``."""
        return cls(
            type=tx.type.name,
            owner=tx.owner,
            data_hash=tx.data_hash,
            metadata=tx.metadata,
            recipient=tx.recipient,
            requester=tx.requester,
            timestamp=tx.timestamp,
        )


class BlockModel(BaseModel):
    """
    JSON view of a sealed block.

    Attributes:
        height: Position in the chain (0 = genesis)
        hash: Block digest
        prev_hash: Digest of the previous block ("0" for genesis)
        timestamp: Block creation time in Unix seconds
        transactions: Recorded transactions (empty for genesis)
    """

    height: int
    hash: str
    prev_hash: str
    timestamp: int
    transactions: list[TransactionModel]

    @classmethod
    def from_block(cls, height: int, block: Block) -> "BlockModel":
        """Build the JSON view of ``block`` at position ``height``."""
        return cls(
            height=height,
            hash=block.hash,
            prev_hash=block.prev_hash,
            timestamp=block.timestamp,
            transactions=[TransactionModel.from_transaction(tx) for tx in block.transactions],
        )


class ChainResponse(BaseModel):
    """The whole chain, genesis first."""

    length: int
    blocks: list[BlockModel]
