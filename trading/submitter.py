"""
Transaction Submitter — the single point where authorization is attached.
Hands one batch of actions to the chain transport as one transaction.
No retries here; retry policy belongs to the caller.
"""

from __future__ import annotations
from typing import Sequence, TYPE_CHECKING
import logging

from exchange.errors import SubmissionError
from exchange.models import Action, Authorization, Receipt

if TYPE_CHECKING:
    from exchange.transport import ChainTransport

logger = logging.getLogger(__name__)


class TransactionSubmitter:

    def __init__(
        self,
        transport: "ChainTransport",
        authorization: Authorization,
        blocks_behind: int = 300,
        expire_seconds: int = 3000,
    ):
        self.transport = transport
        self.authorization = authorization
        self.blocks_behind = blocks_behind
        self.expire_seconds = expire_seconds

    def authorize(self, actions: Sequence[Action]) -> list:
        """Attach the configured authorization where none is present."""
        return [
            a if a.is_authorized else a.with_authorization(self.authorization)
            for a in actions
        ]

    async def submit(self, actions: Sequence[Action]) -> Receipt:
        if not actions:
            raise ValueError("No actions to submit")

        authorized = self.authorize(actions)
        names = ",".join(a.name for a in authorized)
        logger.info(f"[TX] Submitting {len(authorized)} action(s): {names}")

        try:
            response = await self.transport.transact(
                [a.to_dict() for a in authorized],
                blocks_behind=self.blocks_behind,
                expire_seconds=self.expire_seconds,
            )
        except Exception as e:
            logger.error(f"[TX] Transaction failed: {e}")
            raise SubmissionError(f"Transaction failed: {e}", cause=e) from e

        receipt = Receipt.from_response(response)
        logger.info(f"[TX] Accepted, id={receipt.transaction_id}")
        return receipt
