"""In-memory, append-only chain of blocks.

:class:`Ledger` owns an ordered list of :class:`~access_ledger.chain.types.Block`
objects.  The first entry is a genesis block synthesised at construction;
every later block is supplied by the caller, already sealed and already
pointing at the current tip.

Concurrency
-----------
A single :class:`threading.Lock` guards the block list.  Appends, tip reads
and snapshots each hold it for their whole duration.  The ledger never
takes any other lock, so it cannot take part in a lock-ordering deadlock.

The ledger does not re-check linkage or re-hash on append.  Two callers that
read the same tip and then append will both succeed; the chain records them
in arrival order.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from access_ledger.chain.hasher import digest_text
from access_ledger.chain.types import Block, unix_now

logger = logging.getLogger(__name__)

#: ``prev_hash`` stored on the genesis block.
GENESIS_PREV_HASH = "0"

#: Default text digested together with the genesis timestamp.
DEFAULT_GENESIS_SEED = "genesis"


class Ledger:
    """Append-only sequence of hash-linked blocks.

    Args:
        genesis_seed: Text prefixed to the genesis timestamp before hashing.
        clock:        Callable returning Unix seconds.  Injected by tests
                      that need a reproducible genesis hash.
    """

    def __init__(
        self,
        *,
        genesis_seed: str = DEFAULT_GENESIS_SEED,
        clock: Callable[[], int] = unix_now,
    ) -> None:
        self._lock = threading.Lock()
        timestamp = clock()
        genesis = Block(
            transactions=(),
            prev_hash=GENESIS_PREV_HASH,
            timestamp=timestamp,
            hash=digest_text(f"{genesis_seed}{timestamp}"),
        )
        self._chain: list[Block] = [genesis]
        logger.debug("ledger: genesis block %s created at %d", genesis.hash, timestamp)

    def append_block(self, block: Block) -> None:
        """Add ``block`` to the tail of the chain.

        The caller must have set ``block.prev_hash`` from :meth:`tip_hash`
        and sealed the block.  No integrity check is done here.
        """
        with self._lock:
            self._chain.append(block)
            height = len(self._chain) - 1
        logger.debug("ledger: appended block %s at height %d", block.hash, height)

    def tip_hash(self) -> str:
        """Return the hash of the most recently appended block."""
        with self._lock:
            return self._chain[-1].hash

    def blocks(self) -> tuple[Block, ...]:
        """Return a snapshot of the chain, genesis first."""
        with self._lock:
            return tuple(self._chain)

    def __len__(self) -> int:
        with self._lock:
            return len(self._chain)
