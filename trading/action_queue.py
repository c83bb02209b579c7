"""
Action Queue — pending unsigned actions awaiting one batched transaction.
"""

from __future__ import annotations
import asyncio
from typing import Iterable, List, Optional, Tuple, TYPE_CHECKING
import logging

from exchange.models import Action, Receipt

if TYPE_CHECKING:
    from trading.submitter import TransactionSubmitter

logger = logging.getLogger(__name__)


class ActionQueue:
    """
    FIFO buffer owned by one order manager.

    Enqueue and drain share one lock, so a flush (take, clear, submit) never
    interleaves with an enqueue. The buffer is cleared BEFORE submitting:
    a failed batch is dropped, never resubmitted by the next flush.
    """

    def __init__(self):
        self._pending: List[Action] = []
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def pending(self) -> Tuple[Action, ...]:
        return tuple(self._pending)

    async def enqueue(self, actions: Iterable[Action]):
        async with self._lock:
            self._pending.extend(actions)
            logger.debug(f"[QUEUE] {len(self._pending)} action(s) pending")

    async def drain_and_submit(
        self,
        submitter: "TransactionSubmitter",
        trailing: Iterable[Action] = (),
    ) -> Optional[Receipt]:
        """Append `trailing`, then submit and clear everything pending."""
        async with self._lock:
            self._pending.extend(trailing)
            batch, self._pending = self._pending, []
            if not batch:
                return None
            return await submitter.submit(batch)
