"""Health and root endpoints.

Provides the root ``/`` endpoint (API identity and version) and the
``/health`` endpoint (liveness check with the current chain length).
"""

from fastapi import APIRouter

from access_ledger import __version__
from access_ledger.api.models import HealthResponse, RootResponse
from access_ledger.router import TransactionRouter


def router(tx_router: TransactionRouter) -> APIRouter:
    """Build the health router bound to the running ledger."""
    api = APIRouter()

    @api.get("/", response_model=RootResponse)
    async def root():
        """Root endpoint showing API identity and current version."""
        return RootResponse(message="Data Access Ledger API", version=__version__)

    @api.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(status="ok", blocks=len(tx_router.ledger))

    return api
