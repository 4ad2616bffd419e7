"""Token issue messages for regular, mini and tiny tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import (
    DECIMALS,
    DOT_B_SUFFIX,
    MAX_MINI_TOKEN_NAME_LENGTH,
    MAX_TOKEN_URI_LENGTH,
    MAX_TOTAL_SUPPLY,
    MINI_TOKEN_SYMBOL_MAX_LEN,
    MINI_TOKEN_SYMBOL_MIN_LEN,
    TOKEN_SYMBOL_MAX_LEN,
    TOKEN_SYMBOL_MIN_LEN,
    AccAddress,
    Msg,
    ValidationError,
)

MINI_ROUTE = "miniTokensIssue"
ISSUE_MINI_MSG_TYPE = "miniIssueMsg"
ISSUE_TINY_MSG_TYPE = "tinyIssueMsg"
MAX_TOKEN_NAME_LENGTH = 20

_ALNUM = re.compile(r"[A-Za-z0-9]+")


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _check_symbol_shape(symbol: str, min_len: int, max_len: int) -> None:
    if not min_len <= _byte_len(symbol) <= max_len:
        raise ValidationError("length of token symbol is limited to 2~8")
    if not _ALNUM.fullmatch(symbol):
        raise ValidationError("token symbol should be alphanumeric")


def validate_issue_symbol(symbol: str) -> None:
    """Check a symbol proposed for a new token; a trailing ``.B`` is allowed."""
    if not symbol:
        raise ValidationError("token symbol cannot be empty")
    _check_symbol_shape(symbol.removesuffix(DOT_B_SUFFIX), TOKEN_SYMBOL_MIN_LEN, TOKEN_SYMBOL_MAX_LEN)


def validate_issue_mini_symbol(symbol: str) -> None:
    """Check a symbol proposed for a new mini or tiny token."""
    if not symbol:
        raise ValidationError("token symbol cannot be empty")
    _check_symbol_shape(symbol, MINI_TOKEN_SYMBOL_MIN_LEN, MINI_TOKEN_SYMBOL_MAX_LEN)


@dataclass(frozen=True)
class TokenIssueMsg(Msg):
    """Issue a new token."""

    sender: AccAddress | None
    name: str
    symbol: str
    total_supply: int
    mintable: bool

    route = "tokenIssue"
    msg_type = "tokenIssue"

    def validate_basic(self) -> None:
        if self.sender is None:
            raise ValidationError("sender address cannot be empty")
        try:
            validate_issue_symbol(self.symbol)
        except ValidationError:
            raise ValidationError(f"Invalid symbol {self.symbol}") from None
        if not 1 <= _byte_len(self.name) <= MAX_TOKEN_NAME_LENGTH:
            raise ValidationError("Token name should have 1~20 characters")
        if not 0 < self.total_supply <= MAX_TOTAL_SUPPLY:
            raise ValidationError(
                f"Total supply should be <= {MAX_TOTAL_SUPPLY // 10 ** DECIMALS}"
            )

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "name": self.name,
            "symbol": self.symbol,
            "total_supply": self.total_supply,
            "mintable": self.mintable,
        }


@dataclass(frozen=True)
class _SmallTokenIssueMsg(Msg):
    sender: AccAddress | None
    name: str
    symbol: str
    total_supply: int
    mintable: bool
    token_uri: str

    route = MINI_ROUTE

    def validate_basic(self) -> None:
        if self.sender is None:
            raise ValidationError("sender address cannot be empty")
        try:
            validate_issue_mini_symbol(self.symbol)
        except ValidationError:
            raise ValidationError(f"Invalid symbol {self.symbol}") from None
        if not 1 <= _byte_len(self.name) <= MAX_MINI_TOKEN_NAME_LENGTH:
            raise ValidationError(
                f"token name should have 1 ~ {MAX_MINI_TOKEN_NAME_LENGTH} characters"
            )
        if _byte_len(self.token_uri) > MAX_TOKEN_URI_LENGTH:
            raise ValidationError(
                f"token seturi should not exceed {MAX_TOKEN_URI_LENGTH} characters"
            )

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "name": self.name,
            "symbol": self.symbol,
            "total_supply": self.total_supply,
            "mintable": self.mintable,
            "token_uri": self.token_uri,
        }


@dataclass(frozen=True)
class MiniTokenIssueMsg(_SmallTokenIssueMsg):
    """Issue a new mini token."""

    msg_type = ISSUE_MINI_MSG_TYPE

    def validate_basic(self) -> None:
        super().validate_basic()

    def to_json(self) -> dict:
        return super().to_json()


@dataclass(frozen=True)
class TinyTokenIssueMsg(_SmallTokenIssueMsg):
    """Issue a new tiny token."""

    msg_type = ISSUE_TINY_MSG_TYPE

    def validate_basic(self) -> None:
        super().validate_basic()

    def to_json(self) -> dict:
        return super().to_json()