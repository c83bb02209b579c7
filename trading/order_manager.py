"""
Order Manager — order lifecycle on the DEX contract.

Limit orders are queued and sent in one transaction on flush, together with
a `process` and a `withdrawall` action. Cancels skip the queue and go out
immediately. Cancel-all enumerates every open order page by page first.

Lifecycle: Intent -> Built -> Queued -> Submitted -> Confirmed | Rejected
(confirmation is whatever the transport reports; no finality polling).
"""

from __future__ import annotations
from typing import List, Optional, TYPE_CHECKING
import logging

from exchange.models import (
    Action,
    CancelAllResult,
    CancelAllStatus,
    OpenOrder,
    OrderIntent,
    OrderSide,
    Receipt,
)
from trading.action_builder import ActionBuilder
from trading.action_queue import ActionQueue
from trading.normalizer import Number

if TYPE_CHECKING:
    from config import ExecutionConfig
    from exchange.dex_api import DexApiClient
    from trading.submitter import TransactionSubmitter

logger = logging.getLogger(__name__)


class DexOrderManager:
    """Places, batches and cancels orders for one account."""

    def __init__(
        self,
        username: str,
        dex_api: "DexApiClient",
        submitter: "TransactionSubmitter",
        config: "ExecutionConfig",
        queue: Optional[ActionQueue] = None,
    ):
        self.username = username
        self.dex_api = dex_api
        self.submitter = submitter
        self.config = config
        self.builder = ActionBuilder(username, exchange_account=config.exchange_account)
        self.queue = queue if queue is not None else ActionQueue()

    # ==================== Placement ====================

    async def prepare_limit_order(
        self,
        market_symbol: str,
        side: OrderSide,
        quantity: Number,
        price: Number,
    ) -> List[Action]:
        """
        Build a limit order and queue it for the next `submit_orders()`.
        Raises MarketNotFoundError before anything is queued.
        """
        actions = self.builder.build_limit_order_actions_for_symbol(
            self.dex_api.get_market_by_symbol, market_symbol, side, quantity, price,
        )
        logger.info(
            f"[ORDER] Placing {side.name.lower()} order for "
            f"{actions[0].data.quantity} at {price}"
        )
        await self.queue.enqueue(actions)
        return actions

    async def place_limit_order(self, intent: OrderIntent) -> List[Action]:
        return await self.prepare_limit_order(
            intent.market_symbol, intent.side, intent.quantity, intent.price,
        )

    async def submit_orders(self) -> Optional[Receipt]:
        """
        Flush: queued orders + process + withdrawall as one transaction.
        The queue is empty afterwards whether or not the submit succeeded.
        """
        trailing = [
            self.builder.build_process_action(
                self.config.submit_process_q_size, self.config.show_error_msg,
            ),
            self.builder.build_withdraw_action(),
        ]
        logger.info(f"[ORDER] Flushing {len(self.queue)} queued action(s)")
        return await self.queue.drain_and_submit(self.submitter, trailing)

    async def submit_process_action(self) -> Receipt:
        """Nudge contract-side matching without touching the order queue."""
        action = self.builder.build_process_action(
            self.config.trigger_process_q_size, self.config.show_error_msg,
        )
        return await self.submitter.submit([action])

    # ==================== Cancellation ====================

    async def cancel_order(self, order_id) -> Receipt:
        logger.info(f"[CANCEL] Canceling order with id: {order_id}")
        return await self.submitter.submit([self.builder.build_cancel_action(order_id)])

    async def fetch_all_open_orders(self) -> List[OpenOrder]:
        """
        Page through open orders until a page comes back EMPTY.
        A short page is not treated as the end; a full final page costs one
        more fetch. Assumes the order list does not shift between pages.
        """
        page_size = self.config.cancel_page_size
        orders: List[OpenOrder] = []
        page = 0
        while True:
            batch = await self.dex_api.fetch_open_orders(
                self.username, page_size, page_size * page,
            )
            if not batch:
                break
            orders.extend(batch)
            page += 1
        return orders

    async def cancel_all_orders(self) -> CancelAllResult:
        """Best effort: errors are logged and reported, never raised."""
        try:
            orders = await self.fetch_all_open_orders()
            if not orders:
                logger.info("[CANCEL] No orders to cancel")
                return CancelAllResult(CancelAllStatus.NOTHING_TO_CANCEL)

            logger.info(f"[CANCEL] Cancelling all ({len(orders)}) orders")
            actions = [self.builder.build_cancel_action(o.order_id) for o in orders]
            receipt = await self.submitter.submit(actions)
            return CancelAllResult(
                CancelAllStatus.SUBMITTED, cancelled=len(actions), receipt=receipt,
            )
        except Exception as e:
            logger.error(f"[CANCEL] Cancel all orders error: {e}", exc_info=True)
            return CancelAllResult(CancelAllStatus.FAILED, error=e)
