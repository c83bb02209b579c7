import pytest

from exchange.errors import MarketNotFoundError
from exchange.models import FillType, OrderSide, OrderType
from trading.action_builder import ActionBuilder


@pytest.fixture
def builder():
    return ActionBuilder("alice", exchange_account="dex")


def test_sell_scenario(builder, market):
    transfer, place = builder.build_limit_order_actions(market, OrderSide.SELL, 12.3, 5.0)

    assert transfer.name == "transfer"
    assert transfer.account == "xyztoken"
    assert transfer.to_dict()["data"] == {
        "from": "alice",
        "to": "dex",
        "quantity": "12.3000 XYZ",
        "memo": "",
    }

    assert place.name == "placeorder"
    assert place.account == "dex"
    assert place.to_dict()["data"] == {
        "market_id": 7,
        "account": "alice",
        "order_type": 1,
        "order_side": 2,
        "quantity": "123000",
        "price": "500",
        "bid_symbol": {"sym": "4,XYZ", "contract": "xyztoken"},
        "ask_symbol": {"sym": "2,USD", "contract": "xtokens"},
        "trigger_price": 0,
        "fill_type": 2,
        "referrer": "",
    }


def test_buy_offers_ask_token(builder, market):
    transfer, place = builder.build_limit_order_actions(market, OrderSide.BUY, "25", "0.5")

    assert transfer.account == "xtokens"
    assert transfer.data.quantity == "25.00 USD"
    assert place.data.quantity == "2500"
    assert place.data.price == "50"
    assert place.data.order_side == OrderSide.BUY


@pytest.mark.parametrize("side", [OrderSide.BUY, OrderSide.SELL])
def test_limit_order_shape(builder, market, side):
    actions = builder.build_limit_order_actions(market, side, 1, 1)

    assert [a.name for a in actions] == ["transfer", "placeorder"]
    assert actions[1].data.order_type == OrderType.LIMIT
    assert actions[1].data.fill_type == FillType.POST_ONLY
    assert actions[1].data.trigger_price == 0
    assert all(not a.is_authorized for a in actions)


def test_unknown_market_raises(builder):
    with pytest.raises(MarketNotFoundError) as exc:
        builder.build_limit_order_actions_for_symbol(lambda s: None, "NOPE_USD", OrderSide.BUY, 1, 1)
    assert exc.value.symbol == "NOPE_USD"
    assert isinstance(exc.value, LookupError)


def test_cancel_action(builder):
    action = builder.build_cancel_action(12345)
    assert action.to_dict() == {
        "account": "dex",
        "name": "cancelorder",
        "data": {"account": "alice", "order_id": "12345"},
        "authorization": [],
    }


def test_withdraw_action(builder):
    action = builder.build_withdraw_action()
    assert action.name == "withdrawall"
    assert action.to_dict()["data"] == {"account": "alice"}


def test_process_action(builder):
    assert builder.build_process_action(60).to_dict()["data"] == {"q_size": 60, "show_error_msg": 0}
    assert builder.build_process_action(100, show_errors=True).data.to_dict() == {
        "q_size": 100,
        "show_error_msg": 1,
    }
