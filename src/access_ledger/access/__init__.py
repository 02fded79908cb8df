"""Access-control package: who owns which data and who may read it."""

from access_ledger.access.table import AccessControlTable, AccessOutcome

__all__ = ["AccessControlTable", "AccessOutcome"]
