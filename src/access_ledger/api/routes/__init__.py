"""Route modules for the FastAPI application."""

from access_ledger.api.routes.register import register_routes

__all__ = ["register_routes"]
