"""Shared fakes and fixtures."""

from decimal import Decimal

import pytest

from config import ExecutionConfig
from exchange.models import Authorization, Market, OpenOrder, Token
from trading.order_manager import DexOrderManager
from trading.submitter import TransactionSubmitter


class FakeTransport:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    async def transact(self, actions, blocks_behind, expire_seconds):
        self.calls.append({
            "actions": actions,
            "blocks_behind": blocks_behind,
            "expire_seconds": expire_seconds,
        })
        if self.error is not None:
            raise self.error
        return {"transaction_id": f"tx{len(self.calls)}", "processed": {}}


class FakeDexApi:
    def __init__(self, markets=None, open_orders=0, error=None):
        self._markets = {m.symbol: m for m in (markets or [])}
        self._orders = [OpenOrder(order_id=str(i)) for i in range(1, open_orders + 1)]
        self.error = error
        self.page_calls = []

    def get_market_by_symbol(self, symbol):
        return self._markets.get(symbol)

    async def fetch_open_orders(self, account, limit=100, offset=0):
        self.page_calls.append((account, limit, offset))
        if self.error is not None:
            raise self.error
        return self._orders[offset:offset + limit]


@pytest.fixture
def market():
    return Market(
        market_id=7,
        symbol="XYZ_USD",
        ask_token=Token(contract="xtokens", code="USD", precision=2, multiplier=Decimal("100")),
        bid_token=Token(contract="xyztoken", code="XYZ", precision=4, multiplier=Decimal("10000")),
    )


@pytest.fixture
def auth():
    return Authorization(actor="alice", permission="active")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def dex_api(market):
    return FakeDexApi(markets=[market])


@pytest.fixture
def manager(dex_api, transport, auth):
    submitter = TransactionSubmitter(transport, auth, blocks_behind=300, expire_seconds=3000)
    return DexOrderManager("alice", dex_api, submitter, ExecutionConfig())
