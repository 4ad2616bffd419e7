"""Order placement, cancellation and trading-pair listing messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .base import AccAddress, Msg, ValidationError
from .symbols import validate_mini_token_symbol, validate_symbol

ROUTE_NEW_ORDER = "orderNew"
ROUTE_CANCEL_ORDER = "orderCancel"

_UNKNOWN = "UNKNOWN"


class Side(IntEnum):
    """The side of an order."""

    BUY = 1
    SELL = 2


class OrderType(IntEnum):
    """The kind of an order; only LIMIT is accepted by the matching engine."""

    MARKET = 1
    LIMIT = 2


class TimeInForce(IntEnum):
    """How long an order stays on the book."""

    GTC = 1
    IOC = 3


def _name_of(enum_cls: type[IntEnum], value: int) -> str:
    try:
        return enum_cls(value).name
    except ValueError:
        return _UNKNOWN


def side_name(side: int) -> str:
    """Return "BUY", "SELL" or "UNKNOWN"."""
    return _name_of(Side, side)


def order_type_name(order_type: int) -> str:
    """Return "LIMIT", "MARKET" or "UNKNOWN"."""
    return _name_of(OrderType, order_type)


def time_in_force_name(tif: int) -> str:
    """Return "GTC", "IOC" or "UNKNOWN"."""
    return _name_of(TimeInForce, tif)


def is_valid_side(side: int) -> bool:
    return side in (Side.BUY, Side.SELL)


def is_valid_order_type(order_type: int) -> bool:
    return order_type == OrderType.LIMIT


def is_valid_time_in_force(tif: int) -> bool:
    return tif in (TimeInForce.GTC, TimeInForce.IOC)


def side_from_string(text: str) -> Side:
    """Parse a side name, ignoring case."""
    upper = text.upper()
    try:
        return Side[upper]
    except KeyError:
        raise ValueError(f"side `{upper}` not found or supported") from None


def time_in_force_from_string(text: str) -> TimeInForce:
    """Parse a time-in-force name, ignoring case."""
    upper = text.upper()
    try:
        return TimeInForce[upper]
    except KeyError:
        raise ValueError(f"tif `{upper}` not found or supported") from None


def generate_order_id(sequence: int, sender: bytes) -> str:
    """Build an order id of the form ``<ADDRESS HEX>-<sequence>``."""
    return f"{bytes(sender or b'').hex().upper()}-{sequence}"


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


@dataclass(frozen=True)
class CreateOrderMsg(Msg):
    """Place a new order."""

    sender: AccAddress | None
    order_id: str
    side: int
    symbol: str
    price: int
    quantity: int
    order_type: int = OrderType.LIMIT
    time_in_force: int = TimeInForce.GTC

    route = ROUTE_NEW_ORDER
    msg_type = ROUTE_NEW_ORDER

    def __str__(self) -> str:
        return (
            f"CreateOrderMsg{{Sender: {_address_json(self.sender)}, Id: {self.order_id}, "
            f"Symbol: {self.symbol}, OrderSide: {int(self.side)}, Price: {self.price}, "
            f"Qty: {self.quantity}}}"
        )

    def signers(self) -> list:
        return [self.sender]

    def validate_basic(self) -> None:
        if not self.sender:
            raise ValidationError(f"ErrUnknownAddress {_address_json(self.sender)}")
        if not self.order_id or "-" not in self.order_id:
            raise ValidationError(f"Invalid order ID:{self.order_id}")
        if self.quantity <= 0:
            raise ValidationError(
                f"Invalid order Quantity, Zero/Negative Number:{self.quantity}"
            )
        if self.price <= 0:
            raise ValidationError(f"Invalid order Price, Zero/Negative Number:{self.price}")
        if not is_valid_order_type(self.order_type):
            raise ValidationError(f"Invalid order type:{int(self.order_type)}")
        if not is_valid_side(self.side):
            raise ValidationError(f"Invalid side:{int(self.side)}")
        if not is_valid_time_in_force(self.time_in_force):
            raise ValidationError(f"Invalid TimeInForce:{int(self.time_in_force)}")

    def to_json(self) -> dict:
        return {
            "sender": _address_json(self.sender),
            "id": self.order_id,
            "symbol": self.symbol,
            "ordertype": int(self.order_type),
            "side": int(self.side),
            "price": self.price,
            "quantity": self.quantity,
            "timeinforce": int(self.time_in_force),
        }


@dataclass(frozen=True)
class CancelOrderMsg(Msg):
    """Cancel an open order."""

    sender: AccAddress | None
    symbol: str
    ref_id: str

    route = ROUTE_CANCEL_ORDER
    msg_type = ROUTE_CANCEL_ORDER

    def __str__(self) -> str:
        return f"CancelOrderMsg{{Sender: {_address_json(self.sender)}}}"

    def signers(self) -> list:
        return [self.sender]

    def validate_basic(self) -> None:
        if not self.sender:
            raise ValidationError(f"ErrUnknownAddress {_address_json(self.sender)}")
        if not self.ref_id or "-" not in self.ref_id:
            raise ValidationError(f"Invalid order RefID:{self.ref_id}")

    def to_json(self) -> dict:
        return {
            "sender": _address_json(self.sender),
            "symbol": self.symbol,
            "refid": self.ref_id,
        }


@dataclass(frozen=True)
class DexListMsg(Msg):
    """List a trading pair after a passed proposal."""

    sender: AccAddress | None
    proposal_id: int
    base_asset_symbol: str
    quote_asset_symbol: str
    init_price: int

    route = "dexList"
    msg_type = "dexList"

    def validate_basic(self) -> None:
        try:
            validate_symbol(self.base_asset_symbol)
        except ValidationError:
            raise ValidationError(f"Invalid base asset token {self.base_asset_symbol}") from None
        try:
            validate_symbol(self.quote_asset_symbol)
        except ValidationError:
            raise ValidationError(
                f"Invalid quote asset token {self.quote_asset_symbol}"
            ) from None
        if self.init_price <= 0:
            raise ValidationError("Price should be positive")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "proposal_id": self.proposal_id,
            "base_asset_symbol": self.base_asset_symbol,
            "quote_asset_symbol": self.quote_asset_symbol,
            "init_price": self.init_price,
        }


@dataclass(frozen=True)
class ListMiniMsg(Msg):
    """List a mini-token trading pair."""

    sender: AccAddress | None
    base_asset_symbol: str
    quote_asset_symbol: str
    init_price: int

    route = "dexListMini"
    msg_type = "dexListMini"

    def validate_basic(self) -> None:
        try:
            validate_mini_token_symbol(self.base_asset_symbol)
        except ValidationError:
            raise ValidationError(f"Invalid base asset token {self.base_asset_symbol}") from None
        if self.init_price <= 0:
            raise ValidationError("Price should be positive")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "base_asset_symbol": self.base_asset_symbol,
            "quote_asset_symbol": self.quote_asset_symbol,
            "init_price": self.init_price,
        }