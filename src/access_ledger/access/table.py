"""In-memory access-control table.

:class:`AccessControlTable` keeps two mappings:

- ``owner -> [data_hash, ...]``: items each owner has registered, in
  registration order.  Registering the same item twice stores it twice.
- ``data_hash -> [recipient, ...]``: identities currently granted access,
  in grant order.  Granting the same recipient twice stores it twice, and a
  revoke removes only the first matching entry.

Failure model
-------------
The public operations never raise.  Each one computes an
:class:`AccessOutcome` describing exactly why it failed, logs that cause at
DEBUG, and returns only ``outcome is AccessOutcome.OK`` to the caller.  The
distinct causes are therefore indistinguishable from outside the table.

Concurrency
-----------
One :class:`threading.Lock` guards both mappings.  Every operation,
including the read-only ones, holds it for its full duration.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from enum import Enum

logger = logging.getLogger(__name__)


class AccessOutcome(Enum):
    """Result of a single table operation."""

    OK = "ok"
    OWNER_NOT_FOUND = "owner_not_found"
    ITEM_NOT_REGISTERED = "item_not_registered"
    RECIPIENT_NOT_PRESENT = "recipient_not_present"
    ACCESS_NOT_GRANTED = "access_not_granted"

    @property
    def ok(self) -> bool:
        return self is AccessOutcome.OK


class AccessControlTable:
    """Ownership and recipient lists for registered data items."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._owner_data: dict[str, list[str]] = defaultdict(list)
        self._access_list: dict[str, list[str]] = defaultdict(list)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_data(self, owner: str, data_hash: str, metadata: str) -> bool:
        """Record ``data_hash`` as owned by ``owner``.

        Always succeeds.  ``metadata`` is carried on the ledger transaction
        only; the table does not store it.
        """
        with self._lock:
            self._owner_data[owner].append(data_hash)
        return True

    def grant_access(self, owner: str, data_hash: str, recipient: str) -> bool:
        """Add ``recipient`` to the access list of an item ``owner`` registered."""
        with self._lock:
            outcome = self._check_ownership(owner, data_hash)
            if outcome.ok:
                self._access_list[data_hash].append(recipient)
        return self._report("grant", outcome)

    def revoke_access(self, owner: str, data_hash: str, recipient: str) -> bool:
        """Remove the first ``recipient`` entry from an owned item's access list."""
        with self._lock:
            outcome = self._check_ownership(owner, data_hash)
            if outcome.ok:
                recipients = self._access_list.get(data_hash)
                if recipients is None or recipient not in recipients:
                    outcome = AccessOutcome.RECIPIENT_NOT_PRESENT
                else:
                    recipients.remove(recipient)
        return self._report("revoke", outcome)

    def request_access(self, requester: str, data_hash: str) -> bool:
        """Return True if ``requester`` is on ``data_hash``'s access list."""
        with self._lock:
            recipients = self._access_list.get(data_hash)
            if recipients is not None and requester in recipients:
                outcome = AccessOutcome.OK
            else:
                outcome = AccessOutcome.ACCESS_NOT_GRANTED
        return self._report("request", outcome)

    def registered_items(self, owner: str) -> tuple[str, ...]:
        """Snapshot of the items ``owner`` has registered, duplicates included."""
        with self._lock:
            return tuple(self._owner_data.get(owner, ()))

    def recipients(self, data_hash: str) -> tuple[str, ...]:
        """Snapshot of the identities currently granted access to ``data_hash``."""
        with self._lock:
            return tuple(self._access_list.get(data_hash, ()))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _check_ownership(self, owner: str, data_hash: str) -> AccessOutcome:
        # Caller holds self._lock.  Uses .get() so a failed lookup never
        # creates an empty entry in the defaultdict.
        items = self._owner_data.get(owner)
        if not items:
            return AccessOutcome.OWNER_NOT_FOUND
        if data_hash not in items:
            return AccessOutcome.ITEM_NOT_REGISTERED
        return AccessOutcome.OK

    @staticmethod
    def _report(operation: str, outcome: AccessOutcome) -> bool:
        if not outcome.ok:
            logger.debug("access: %s failed (%s)", operation, outcome.value)
        return outcome.ok
