"""Cross-chain bridge messages and smart chain addresses."""

from __future__ import annotations

import string
from dataclasses import dataclass

from .base import ADDR_LEN, AccAddress, Coin, Msg, ValidationError
from .utils import has_0x_prefix, hex_address

ROUTE_BRIDGE = "bridge"

BIND_MSG_TYPE = "crossBind"
UNBIND_MSG_TYPE = "crossUnbind"
TRANSFER_OUT_MSG_TYPE = "crossTransferOut"

MAX_SYMBOL_LENGTH = 32

SMART_CHAIN_ADDRESS_LENGTH = 20

_HEX_DIGITS = set(string.hexdigits)


def _lenient_hex(text: str) -> bytes:
    """Decode 0x-prefixed hex, keeping whatever decodes before the first fault."""
    if not has_0x_prefix(text):
        return b""
    body = text[2:]
    out = bytearray()
    for start in range(0, len(body) - 1, 2):
        pair = body[start:start + 2]
        if not set(pair) <= _HEX_DIGITS:
            break
        out.append(int(pair, 16))
    return bytes(out)


class SmartChainAddress(bytes):
    """A 20-byte smart chain address; shorter input is left-padded, longer keeps the tail."""

    def __new__(cls, data: bytes = b""):
        data = bytes(data)[-SMART_CHAIN_ADDRESS_LENGTH:]
        return super().__new__(cls, data.rjust(SMART_CHAIN_ADDRESS_LENGTH, b"\0"))

    @classmethod
    def from_hex(cls, text: str) -> "SmartChainAddress":
        """Parse a 0x-prefixed hex address; malformed input is not an error."""
        return cls(_lenient_hex(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "SmartChainAddress":
        return cls(data)

    def is_empty(self) -> bool:
        return not any(self)

    def to_json(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return hex_address(bytes(self))

    def __repr__(self) -> str:
        return f"SmartChainAddress({str(self)!r})"


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _check_sender(sender: bytes | None) -> None:
    if len(sender or b"") != ADDR_LEN:
        raise ValidationError(f"address length should be {ADDR_LEN}")


@dataclass(frozen=True)
class BindMsg(Msg):
    """Bind a token to a contract on the smart chain."""

    sender: AccAddress | None
    symbol: str
    amount: int
    contract_address: SmartChainAddress
    contract_decimals: int
    expire_time: int

    route = ROUTE_BRIDGE
    msg_type = BIND_MSG_TYPE

    def __str__(self) -> str:
        return (
            f"Bind{{{_address_json(self.sender)}#{self.symbol}#{self.amount}$"
            f"{self.contract_address}#{self.contract_decimals}#{self.expire_time}}}"
        )

    def validate_basic(self) -> None:
        _check_sender(self.sender)
        if not self.symbol:
            raise ValidationError("symbol should not be empty")
        if self.amount <= 0:
            raise ValidationError("amount should be larger than 0")
        if SmartChainAddress(self.contract_address).is_empty():
            raise ValidationError("contract address should not be empty")
        if self.contract_decimals < 0:
            raise ValidationError("decimal should be no less than 0")
        if self.expire_time <= 0:
            raise ValidationError("expire time should be larger than 0")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "symbol": self.symbol,
            "amount": self.amount,
            "contract_address": SmartChainAddress(self.contract_address).to_json(),
            "contract_decimals": self.contract_decimals,
            "expire_time": self.expire_time,
        }


@dataclass(frozen=True)
class TransferOutMsg(Msg):
    """Move coins to an address on the smart chain."""

    sender: AccAddress | None
    to: SmartChainAddress
    amount: Coin
    expire_time: int

    route = ROUTE_BRIDGE
    msg_type = TRANSFER_OUT_MSG_TYPE

    def __str__(self) -> str:
        return (
            f"TransferOut{{{_address_json(self.sender)}#{self.to}#{self.amount}#"
            f"{self.expire_time}}}"
        )

    def validate_basic(self) -> None:
        _check_sender(self.sender)
        if SmartChainAddress(self.to).is_empty():
            raise ValidationError("to address should not be empty")
        if not self.amount.is_positive():
            raise ValidationError("amount should be positive")
        if self.expire_time <= 0:
            raise ValidationError("expire time should be larger than 0")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "to": SmartChainAddress(self.to).to_json(),
            "amount": self.amount.to_json(),
            "expire_time": self.expire_time,
        }


@dataclass(frozen=True)
class UnbindMsg(Msg):
    """Remove the binding of a token."""

    sender: AccAddress | None
    symbol: str

    route = ROUTE_BRIDGE
    msg_type = UNBIND_MSG_TYPE

    def __str__(self) -> str:
        return f"Unbind{{{_address_json(self.sender)}#{self.symbol}}}"

    def validate_basic(self) -> None:
        _check_sender(self.sender)
        if not self.symbol:
            raise ValidationError("symbol should not be empty")
        if len(self.symbol.encode("utf-8")) > MAX_SYMBOL_LENGTH:
            raise ValidationError(
                f"symbol length should not be larger than {MAX_SYMBOL_LENGTH}"
            )

    def to_json(self) -> dict:
        return {"from": _address_json(self.sender), "symbol": self.symbol}