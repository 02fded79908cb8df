"""Dispatch decoded requests onto the access-control table and the ledger.

:class:`TransactionRouter` is the only component that touches both shared
resources.  For each recognised path it:

1. Stamps the new block's time and reads ``prev_hash`` from the ledger tip.
2. Builds a :class:`~access_ledger.chain.types.Transaction` from the
   parameters.  Missing parameters become empty strings.
3. Runs the matching :class:`~access_ledger.access.table.AccessControlTable`
   operation and keeps its boolean result.
4. Seals a one-transaction :class:`~access_ledger.chain.types.Block` and
   appends it to the ledger.
5. Returns a fixed status string.

Every attempt is recorded, successful or not, so the chain is an audit log
of what was *asked*, not only of what changed.  Unknown paths touch neither
the table nor the ledger.

The table lock and the ledger lock are never held together.  Another thread
can therefore see the table change before the matching block is appended,
or append its own block between this request's tip read and append.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from access_ledger.access import AccessControlTable
from access_ledger.chain import Block, Ledger, Transaction, TransactionType
from access_ledger.chain.types import unix_now

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = "Unknown POST endpoint"


@dataclass(frozen=True)
class _Route:
    """How one path maps onto a transaction type and a table operation."""

    type: TransactionType
    fields: tuple[str, ...]
    operation: Callable[[AccessControlTable, Transaction], bool]
    success: str
    failure: str


# Request parameter name -> Transaction attribute.
_PARAM_FIELDS = {
    "owner": "owner",
    "dataHash": "data_hash",
    "metadata": "metadata",
    "recipient": "recipient",
    "requester": "requester",
}

ROUTES: dict[str, _Route] = {
    "/register": _Route(
        type=TransactionType.REGISTER,
        fields=("owner", "dataHash", "metadata"),
        operation=lambda table, tx: table.register_data(tx.owner, tx.data_hash, tx.metadata),
        success="Registration successful",
        failure="Registration failed",
    ),
    "/grant": _Route(
        type=TransactionType.GRANT,
        fields=("owner", "dataHash", "recipient"),
        operation=lambda table, tx: table.grant_access(tx.owner, tx.data_hash, tx.recipient),
        success="Access granted",
        failure="Grant failed",
    ),
    "/revoke": _Route(
        type=TransactionType.REVOKE,
        fields=("owner", "dataHash", "recipient"),
        operation=lambda table, tx: table.revoke_access(tx.owner, tx.data_hash, tx.recipient),
        success="Access revoked",
        failure="Revoke failed",
    ),
    "/request": _Route(
        type=TransactionType.REQUEST,
        fields=("requester", "dataHash"),
        operation=lambda table, tx: table.request_access(tx.requester, tx.data_hash),
        success="Access granted to requester",
        failure="Access denied",
    ),
}


class TransactionRouter:
    """Turn ``(path, params)`` pairs into recorded ledger transactions.

    Args:
        ledger: The process-wide :class:`~access_ledger.chain.Ledger`.
        table:  The process-wide :class:`~access_ledger.access.AccessControlTable`.
        clock:  Callable returning Unix seconds.  Used for both the block
                and the transaction timestamp.
    """

    def __init__(
        self,
        ledger: Ledger,
        table: AccessControlTable,
        *,
        clock: Callable[[], int] = unix_now,
    ) -> None:
        self.ledger = ledger
        self.table = table
        self._clock = clock

    def handle(self, path: str, params: Mapping[str, str]) -> str:
        """Process one operation and return its status string."""
        route = ROUTES.get(path)
        if route is None:
            logger.info("router: unknown endpoint %r", path)
            return UNKNOWN_ENDPOINT

        block_timestamp = self._clock()
        prev_hash = self.ledger.tip_hash()

        values = {_PARAM_FIELDS[name]: params.get(name, "") for name in route.fields}
        tx = Transaction(type=route.type, timestamp=self._clock(), **values)

        ok = route.operation(self.table, tx)

        block = Block.seal(prev_hash=prev_hash, timestamp=block_timestamp, transactions=(tx,))
        self.ledger.append_block(block)

        logger.info(
            "router: %s %s -> %s (block %s)",
            route.type.name,
            tx.data_hash or "<empty>",
            "ok" if ok else "failed",
            block.hash,
        )
        return route.success if ok else route.failure
