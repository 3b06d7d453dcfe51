"""
Transaction management for the key-value store.
"""

import logging
from enum import Enum
from typing import List

from .scope import Scope

logger = logging.getLogger(__name__)


class TransactionSignal(Enum):
    """Outcome of a ROLLBACK or COMMIT."""
    OK = "ok"
    NO_TRANSACTION = "no_transaction"


class TransactionStack:
    """
    Stack of scope snapshots, one per open BEGIN block.

    BEGIN pushes a full copy of the current scope. All later mutations go
    straight to the live scope, so ROLLBACK restores the top snapshot and
    COMMIT only has to throw every snapshot away.
    """

    def __init__(self) -> None:
        self.snapshots: List[Scope] = []

    def begin(self, scope: Scope) -> None:
        """Open a transaction block by snapshotting ``scope``."""
        self.snapshots.append(scope.copy())
        logger.debug("BEGIN: transaction depth is now %d", self.depth)

    def rollback(self, scope: Scope) -> TransactionSignal:
        """Discard changes made to ``scope`` since the innermost BEGIN."""
        if not self.snapshots:
            return TransactionSignal.NO_TRANSACTION

        scope.restore(self.snapshots.pop())
        logger.debug("ROLLBACK: transaction depth is now %d", self.depth)
        return TransactionSignal.OK

    def commit(self) -> TransactionSignal:
        """Close every open transaction block, keeping the live scope as is."""
        if not self.snapshots:
            return TransactionSignal.NO_TRANSACTION

        logger.debug("COMMIT: flattening %d open transaction(s)", self.depth)
        self.snapshots.clear()
        return TransactionSignal.OK

    @property
    def depth(self) -> int:
        """Number of open transaction blocks."""
        return len(self.snapshots)

    def __len__(self) -> int:
        return len(self.snapshots)
