"""
Action Builder — turns trading intents into unsigned contract actions.

SELL offers the bid token: funds move in bid-token units and the order
quantity uses bid-token precision. BUY offers the ask token. The transfer
always precedes placeorder so the contract can debit funds received in the
same transaction.
"""

from __future__ import annotations
from typing import Callable, List, Optional

from exchange.errors import MarketNotFoundError
from exchange.models import (
    Action,
    CancelOrderData,
    ExtendedSymbol,
    FillType,
    Market,
    OrderSide,
    OrderType,
    PlaceOrderData,
    ProcessData,
    TransferData,
    WithdrawAllData,
)
from trading.normalizer import (
    Number,
    format_quantity,
    scale_price,
    scale_quantity,
    symbol_code,
)

MarketLookup = Callable[[str], Optional[Market]]


class ActionBuilder:
    """Builds actions for one trading account. Never attaches authorization."""

    def __init__(self, account: str, exchange_account: str = "dex"):
        self.account = account
        self.exchange_account = exchange_account

    def build_limit_order_actions(
        self,
        market: Market,
        side: OrderSide,
        quantity: Number,
        price: Number,
    ) -> List[Action]:
        """Return [transfer, placeorder] for a post-only limit order."""
        offered = market.bid_token if side == OrderSide.SELL else market.ask_token

        transfer = Action(
            account=offered.contract,
            data=TransferData(
                from_account=self.account,
                to=self.exchange_account,
                quantity=format_quantity(quantity, offered),
                memo="",
            ),
        )
        place = Action(
            account=self.exchange_account,
            data=PlaceOrderData(
                market_id=market.market_id,
                account=self.account,
                order_type=OrderType.LIMIT,
                order_side=side,
                quantity=scale_quantity(quantity, offered),
                price=scale_price(price, market.ask_token),
                bid_symbol=ExtendedSymbol(
                    sym=symbol_code(market.bid_token),
                    contract=market.bid_token.contract,
                ),
                ask_symbol=ExtendedSymbol(
                    sym=symbol_code(market.ask_token),
                    contract=market.ask_token.contract,
                ),
                trigger_price=0,
                fill_type=FillType.POST_ONLY,
                referrer="",
            ),
        )
        return [transfer, place]

    def build_limit_order_actions_for_symbol(
        self,
        lookup: MarketLookup,
        market_symbol: str,
        side: OrderSide,
        quantity: Number,
        price: Number,
    ) -> List[Action]:
        market = lookup(market_symbol)
        if not market:
            raise MarketNotFoundError(market_symbol)
        return self.build_limit_order_actions(market, side, quantity, price)

    def build_cancel_action(self, order_id) -> Action:
        return Action(
            account=self.exchange_account,
            data=CancelOrderData(account=self.account, order_id=str(order_id)),
        )

    def build_withdraw_action(self) -> Action:
        """Reclaim unmatched/partial balances after processing."""
        return Action(
            account=self.exchange_account,
            data=WithdrawAllData(account=self.account),
        )

    def build_process_action(self, queue_size: int, show_errors: bool = False) -> Action:
        return Action(
            account=self.exchange_account,
            data=ProcessData(q_size=queue_size, show_error_msg=show_errors),
        )
