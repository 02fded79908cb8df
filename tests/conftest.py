"""
Shared pytest fixtures for the ledger test suite.

Fixtures provided here:
- A deterministic clock so block and genesis hashes are reproducible
- Fresh Ledger / AccessControlTable / TransactionRouter instances per test
- A FastAPI TestClient wired to that router

Every fixture is function-scoped: no state leaks between tests.
"""

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from access_ledger.access import AccessControlTable
from access_ledger.api.server import create_app
from access_ledger.chain import Ledger
from access_ledger.router import TransactionRouter
from tests.constants import StepClock


@pytest.fixture
def clock() -> Callable[[], int]:
    """A frozen clock returning FIXED_TIME on every call."""
    return StepClock()


@pytest.fixture
def ledger(clock) -> Ledger:
    """A fresh ledger holding only its genesis block."""
    return Ledger(clock=clock)


@pytest.fixture
def table() -> AccessControlTable:
    """An empty access-control table."""
    return AccessControlTable()


@pytest.fixture
def tx_router(ledger: Ledger, table: AccessControlTable, clock) -> TransactionRouter:
    """A router bound to the per-test ledger and table."""
    return TransactionRouter(ledger, table, clock=clock)


@pytest.fixture
def test_client(tx_router: TransactionRouter) -> TestClient:
    """
    Create a FastAPI TestClient for API endpoint testing.

    Example:
        def test_register(test_client):
            response = test_client.post("/register", data={"owner": "alice"})
            assert response.text == "Registration successful"
    """
    return TestClient(create_app(tx_router))
