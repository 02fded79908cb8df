"""Read-only view of the chain.

No linkage or hash verification happens here; blocks are reported exactly
as they were appended.
"""

from fastapi import APIRouter

from access_ledger.api.models import BlockModel, ChainResponse
from access_ledger.router import TransactionRouter


def router(tx_router: TransactionRouter) -> APIRouter:
    """Build the chain inspection router."""
    api = APIRouter()

    @api.get("/chain", response_model=ChainResponse)
    def get_chain():
        """Return every block, genesis first."""
        blocks = tx_router.ledger.blocks()
        return ChainResponse(
            length=len(blocks),
            blocks=[BlockModel.from_block(height, block) for height, block in enumerate(blocks)],
        )

    return api
