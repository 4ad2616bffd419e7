"""Coin transfers and account flag messages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .base import ADDR_LEN, AccAddress, Coins, Msg, ValidationError

ACCOUNT_FLAGS_ROUTE = "accountFlags"
SET_ACCOUNT_FLAGS_MSG_TYPE = "setAccountFlags"


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


@dataclass(frozen=True)
class Input:
    """Coins taken from an address."""

    address: AccAddress
    coins: Coins

    def __post_init__(self) -> None:
        object.__setattr__(self, "coins", Coins(self.coins))

    def validate_basic(self) -> None:
        if not self.address:
            raise ValidationError("Len of input address is less than 1 ")
        if not self.coins.is_valid():
            raise ValidationError(f"Inputs coins {self.coins} is invalid ")
        if not self.coins.is_positive():
            raise ValidationError(f"Inputs coins {self.coins} is negative ")

    def to_json(self) -> dict:
        return {"address": _address_json(self.address), "coins": self.coins.to_json()}


@dataclass(frozen=True)
class Output:
    """Coins given to an address."""

    address: AccAddress
    coins: Coins

    def __post_init__(self) -> None:
        object.__setattr__(self, "coins", Coins(self.coins))

    def validate_basic(self) -> None:
        if not self.address:
            raise ValidationError("Len output 0 should is less than 1 ")
        if not self.coins.is_valid():
            raise ValidationError("Coins is invalid ")
        if not self.coins.is_positive():
            raise ValidationError(" Coins is negative ")

    def to_json(self) -> dict:
        return {"address": _address_json(self.address), "coins": self.coins.to_json()}


@dataclass(frozen=True)
class SendMsg(Msg):
    """A multi-input, multi-output coin transfer."""

    inputs: tuple
    outputs: tuple

    route = "bank"
    msg_type = "send"

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

    def validate_basic(self) -> None:
        if not self.inputs:
            raise ValidationError("Len of inputs is less than 1 ")
        if not self.outputs:
            raise ValidationError("Len of outputs is less than 1 ")
        total_in = Coins()
        for item in self.inputs:
            item.validate_basic()
            total_in = total_in.plus(item.coins)
        total_out = Coins()
        for item in self.outputs:
            item.validate_basic()
            total_out = total_out.plus(item.coins)
        if not total_in.is_equal(total_out):
            raise ValidationError(f"inputs {total_in} and outputs {total_out} don't match")

    def to_json(self) -> dict:
        return {
            "inputs": [item.to_json() for item in self.inputs],
            "outputs": [item.to_json() for item in self.outputs],
        }

    def signers(self) -> list:
        return [item.address for item in self.inputs]

    def involved_addresses(self) -> list:
        return [item.address for item in (*self.inputs, *self.outputs)]


@dataclass(frozen=True)
class Transfer:
    """A destination and the coins it receives."""

    to_addr: AccAddress
    coins: Coins


def create_send_msg(sender: AccAddress, sender_coins: Iterable, transfers: Iterable[Transfer]) -> SendMsg:
    """Build a send from one address to several, sorting each output's coins."""
    outputs = tuple(Output(t.to_addr, Coins(t.coins).sort()) for t in transfers)
    return SendMsg((Input(sender, Coins(sender_coins)),), outputs)


@dataclass(frozen=True)
class SetAccountFlagsMsg(Msg):
    """Set the flag bits of an account."""

    sender: AccAddress
    flags: int

    route = ACCOUNT_FLAGS_ROUTE
    msg_type = SET_ACCOUNT_FLAGS_MSG_TYPE

    def __str__(self) -> str:
        return f"setAccountFlags{{{self.sender}#{self.flags}}}"

    def validate_basic(self) -> None:
        length = len(self.sender or b"")
        if length != ADDR_LEN:
            raise ValidationError(
                f"Expected address length is {ADDR_LEN}, actual length is {length}"
            )

    def to_json(self) -> dict:
        return {"from": _address_json(self.sender), "flags": self.flags}