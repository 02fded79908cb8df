"""
Route registration entry point for the FastAPI application.

Order matters: the inspection routers are included before the catch-all
transaction router so that ``GET /``, ``GET /health`` and ``GET /chain``
win over the "Only POST" fallback.
"""

from fastapi import FastAPI

from access_ledger.api.routes import chain, health, transactions
from access_ledger.router import TransactionRouter


def register_routes(app: FastAPI, tx_router: TransactionRouter) -> None:
    """Register all API routes with the FastAPI app."""
    app.include_router(health.router(tx_router))
    app.include_router(chain.router(tx_router))
    app.include_router(transactions.router(tx_router))
