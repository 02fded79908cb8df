"""
FastAPI application for the data access ledger.

:func:`create_app` wires an explicitly constructed
:class:`~access_ledger.router.TransactionRouter` (and the ledger and table it
owns) into a new FastAPI instance.  The process entry point owns those
objects; nothing here is a module-level singleton.

For ``uvicorn --factory`` use::

    uvicorn access_ledger.api.server:create_app --factory
"""

import logging

from fastapi import FastAPI

from access_ledger import __version__
from access_ledger.access import AccessControlTable
from access_ledger.api.routes import register_routes
from access_ledger.chain import Ledger
from access_ledger.config import AppConfig, config
from access_ledger.router import TransactionRouter

logger = logging.getLogger(__name__)


def build_router(cfg: AppConfig | None = None) -> TransactionRouter:
    """Construct a fresh ledger, table and router from configuration."""
    cfg = cfg or config
    ledger = Ledger(genesis_seed=cfg.ledger.genesis_seed)
    return TransactionRouter(ledger, AccessControlTable())


def create_app(tx_router: TransactionRouter | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        tx_router: Router to serve.  A new one (fresh genesis block, empty
                   table) is built from the loaded config when omitted.

    Returns:
        The configured FastAPI app.  The router is also reachable as
        ``app.state.tx_router``.
    """
    tx_router = tx_router or build_router()
    app = FastAPI(title="Data Access Ledger", version=__version__)
    app.state.tx_router = tx_router
    register_routes(app, tx_router)
    logger.info("app: serving ledger with genesis %s", tx_router.ledger.tip_hash())
    return app


def start_server(host: str | None = None, port: int | None = None, cfg: AppConfig | None = None) -> None:
    """
    Run the API under uvicorn until interrupted.

    Args:
        host: Interface to bind. Defaults to ``config.server.host``.
        port: TCP port. Defaults to ``config.server.port``.
        cfg: Configuration to use instead of the module-level one.
    """
    import uvicorn

    cfg = cfg or config
    app = create_app(build_router(cfg))
    uvicorn.run(
        app,
        host=host or cfg.server.host,
        port=port or cfg.server.port,
        log_level=cfg.logging.level.lower(),
    )
