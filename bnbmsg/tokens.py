"""Token supply, freezing, ownership and URI messages."""

from __future__ import annotations

from dataclasses import dataclass

from .base import ADDR_LEN, MAX_TOKEN_URI_LENGTH, AccAddress, Msg, ValidationError
from .symbols import is_valid_mini_token_symbol, validate_mini_token_symbol, validate_symbol


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _check_symbol_and_amount(symbol: str, amount: int) -> None:
    try:
        validate_symbol(symbol)
    except ValidationError:
        raise ValidationError(f"ErrInvalidCoins {symbol}") from None
    if amount <= 0:
        raise ValidationError("ErrInsufficientFunds, amount should be more than 0")


def _symbol_amount_json(msg) -> dict:
    return {"from": _address_json(msg.sender), "symbol": msg.symbol, "amount": msg.amount}


@dataclass(frozen=True)
class TokenBurnMsg(Msg):
    """Destroy an amount of a token held by the sender."""

    sender: AccAddress | None
    symbol: str
    amount: int

    route = "tokensBurn"
    msg_type = "tokensBurn"

    def __str__(self) -> str:
        return f"BurnMsg{{{self.sender}#{self.amount}{self.symbol}}}"

    def validate_basic(self) -> None:
        _check_symbol_and_amount(self.symbol, self.amount)

    def to_json(self) -> dict:
        return _symbol_amount_json(self)


@dataclass(frozen=True)
class MintMsg(Msg):
    """Create new units of a mintable token."""

    sender: AccAddress | None
    symbol: str
    amount: int

    route = "tokensIssue"
    msg_type = "mintMsg"

    def validate_basic(self) -> None:
        if self.sender is None:
            raise ValidationError("sender address cannot be empty")
        if self.amount <= 0:
            raise ValidationError("Amount cant be less than 0 ")

    def to_json(self) -> dict:
        return _symbol_amount_json(self)


@dataclass(frozen=True)
class TokenFreezeMsg(Msg):
    """Freeze an amount of a token in the sender's account."""

    sender: AccAddress | None
    symbol: str
    amount: int

    route = "tokensFreeze"
    msg_type = "tokensFreeze"

    def __str__(self) -> str:
        return f"Freeze{{{self.sender}#{self.symbol}}}"

    def validate_basic(self) -> None:
        _check_symbol_and_amount(self.symbol, self.amount)

    def to_json(self) -> dict:
        return _symbol_amount_json(self)


@dataclass(frozen=True)
class TokenUnfreezeMsg(Msg):
    """Release a frozen amount of a token."""

    sender: AccAddress | None
    symbol: str
    amount: int

    route = "tokensFreeze"
    msg_type = "tokensFreeze"

    def __str__(self) -> str:
        return f"Unfreeze{{{self.sender}#{self.amount}{self.symbol}}}"

    def validate_basic(self) -> None:
        _check_symbol_and_amount(self.symbol, self.amount)

    def to_json(self) -> dict:
        return _symbol_amount_json(self)


@dataclass(frozen=True)
class TransferOwnershipMsg(Msg):
    """Hand ownership of a token to another account."""

    sender: AccAddress | None
    symbol: str
    new_owner: AccAddress | None

    route = "tokensOwnershipTransfer"
    msg_type = "transferOwnership"

    def validate_basic(self) -> None:
        length = len(self.sender or b"")
        if length != ADDR_LEN:
            raise ValidationError(
                f"Invalid from address, expected address length is {ADDR_LEN}, "
                f"actual length is {length} "
            )
        length = len(self.new_owner or b"")
        if length != ADDR_LEN:
            raise ValidationError(
                f"Invalid newOwner, expected address length is {ADDR_LEN}, "
                f"actual length is {length} "
            )
        if not is_valid_mini_token_symbol(self.symbol):
            validate_symbol(self.symbol)

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "symbol": self.symbol,
            "new_owner": _address_json(self.new_owner),
        }

    def involved_addresses(self) -> list:
        return [*self.signers(), self.new_owner]


@dataclass(frozen=True)
class SetURIMsg(Msg):
    """Set the URI describing a mini token."""

    sender: AccAddress | None
    symbol: str
    token_uri: str

    route = "miniTokensSetURI"
    msg_type = "miniTokensSetURI"

    def validate_basic(self) -> None:
        if self.sender is None:
            raise ValidationError("sender address cannot be empty")
        if len(self.token_uri.encode("utf-8")) > MAX_TOKEN_URI_LENGTH:
            raise ValidationError(
                f"token seturi should not exceed {MAX_TOKEN_URI_LENGTH} characters"
            )
        try:
            validate_mini_token_symbol(self.symbol)
        except ValidationError:
            raise ValidationError(f"Invalid symbol {self.symbol}") from None

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "symbol": self.symbol,
            "token_uri": self.token_uri,
        }