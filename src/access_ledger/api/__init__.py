"""HTTP surface for the ledger: FastAPI app factory, routers and models."""
