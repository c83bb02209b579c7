"""
Data models for the DEX order client.
Uses Decimal for all quantity/price values — no floating point errors.
Action payloads are typed per contract action; field names match the
contract ABI exactly.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, ClassVar, Dict, Optional, Tuple, Union


class OrderSide(IntEnum):
    BUY = 1
    SELL = 2


class OrderType(IntEnum):
    LIMIT = 1
    STOP_LOSS = 2
    TAKE_PROFIT = 3


class FillType(IntEnum):
    GTC = 0
    IOC = 1
    POST_ONLY = 2


class CancelAllStatus(Enum):
    NOTHING_TO_CANCEL = "NOTHING_TO_CANCEL"
    SUBMITTED = "SUBMITTED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Token:
    """One side of a market, as registered on-chain."""
    contract: str           # Token contract account, e.g. "xtokens"
    code: str               # Currency code, e.g. "XBTC"
    precision: int          # Decimal places of the on-chain asset
    multiplier: Decimal     # Human quantity -> integer fixed-point unit

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "Token":
        return cls(
            contract=raw["contract"],
            code=raw["code"],
            precision=int(raw["precision"]),
            multiplier=Decimal(str(raw["multiplier"])),
        )


@dataclass(frozen=True)
class Market:
    """Tradable ask/bid pair. Read-only, supplied by the DEX API."""
    market_id: int
    symbol: str
    ask_token: Token
    bid_token: Token

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "Market":
        return cls(
            market_id=int(raw["market_id"]),
            symbol=raw["symbol"],
            ask_token=Token.from_api(raw["ask_token"]),
            bid_token=Token.from_api(raw["bid_token"]),
        )


@dataclass(frozen=True)
class OrderIntent:
    """Request to place a limit order. Not persisted."""
    market_symbol: str
    side: OrderSide
    quantity: Union[Decimal, str, int, float]
    price: Union[Decimal, str, int, float]


@dataclass(frozen=True)
class OpenOrder:
    order_id: str
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "OpenOrder":
        return cls(order_id=str(raw["order_id"]), raw=raw)


@dataclass(frozen=True)
class Authorization:
    actor: str
    permission: str

    def to_dict(self) -> Dict[str, str]:
        return {"actor": self.actor, "permission": self.permission}


# ==================== Action payloads ====================


@dataclass(frozen=True)
class TransferData:
    name: ClassVar[str] = "transfer"

    from_account: str
    to: str
    quantity: str           # "12.3000 XYZ"
    memo: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "from": self.from_account,
            "to": self.to,
            "quantity": self.quantity,
            "memo": self.memo,
        }


@dataclass(frozen=True)
class ExtendedSymbol:
    sym: str                # "<precision>,<code>"
    contract: str

    def to_dict(self) -> Dict[str, str]:
        return {"sym": self.sym, "contract": self.contract}


@dataclass(frozen=True)
class PlaceOrderData:
    name: ClassVar[str] = "placeorder"

    market_id: int
    account: str
    order_type: OrderType
    order_side: OrderSide
    quantity: str           # Integer fixed-point, rendered as text
    price: str              # Integer fixed-point, rendered as text
    bid_symbol: ExtendedSymbol
    ask_symbol: ExtendedSymbol
    trigger_price: int = 0
    fill_type: FillType = FillType.POST_ONLY
    referrer: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "market_id": self.market_id,
            "account": self.account,
            "order_type": int(self.order_type),
            "order_side": int(self.order_side),
            "quantity": self.quantity,
            "price": self.price,
            "bid_symbol": self.bid_symbol.to_dict(),
            "ask_symbol": self.ask_symbol.to_dict(),
            "trigger_price": self.trigger_price,
            "fill_type": int(self.fill_type),
            "referrer": self.referrer,
        }


@dataclass(frozen=True)
class CancelOrderData:
    name: ClassVar[str] = "cancelorder"

    account: str
    order_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"account": self.account, "order_id": self.order_id}


@dataclass(frozen=True)
class ProcessData:
    name: ClassVar[str] = "process"

    q_size: int
    show_error_msg: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"q_size": self.q_size, "show_error_msg": int(self.show_error_msg)}


@dataclass(frozen=True)
class WithdrawAllData:
    name: ClassVar[str] = "withdrawall"

    account: str

    def to_dict(self) -> Dict[str, Any]:
        return {"account": self.account}


ActionData = Union[TransferData, PlaceOrderData, CancelOrderData, ProcessData, WithdrawAllData]


@dataclass(frozen=True)
class Action:
    """
    A contract call. The action name comes from the payload type.
    Built without authorization; the submitter attaches it.
    """
    account: str
    data: ActionData
    authorization: Tuple[Authorization, ...] = ()

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def is_authorized(self) -> bool:
        return bool(self.authorization)

    def with_authorization(self, *authorization: Authorization) -> "Action":
        return replace(self, authorization=tuple(authorization))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "account": self.account,
            "name": self.name,
            "data": self.data.to_dict(),
            "authorization": [a.to_dict() for a in self.authorization],
        }


# ==================== Results ====================


@dataclass(frozen=True)
class Receipt:
    """Transport response for one submitted transaction."""
    transaction_id: Optional[str]
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_response(cls, response: Any) -> "Receipt":
        if not isinstance(response, dict):
            return cls(transaction_id=None, raw={"response": response})
        return cls(transaction_id=response.get("transaction_id"), raw=response)


@dataclass(frozen=True)
class CancelAllResult:
    """Outcome of a best-effort bulk cancel."""
    status: CancelAllStatus
    cancelled: int = 0
    receipt: Optional[Receipt] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status != CancelAllStatus.FAILED
