"""Core value types: bech32 addresses, coins, the message interface and constants."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import ClassVar, Iterable

from .utils import _dump_json

DEFAULT_API_SCHEMA = "https"
DEFAULT_WS_SCHEMA = "wss"
DEFAULT_API_VERSION_PREFIX = "/api/v1"
DEFAULT_WS_PREFIX = "/api/ws"
NATIVE_SYMBOL = "BNB"

PROD_CHAIN_ID = "Binance-Chain-Tigris"
TESTNET_CHAIN_ID = "Binance-Chain-Ganges"
KONGO_CHAIN_ID = "Binance-Chain-Kongo"
GANGES_CHAIN_ID = "Binance-Chain-Ganges"

RIALTO_NET = "rialto"
CHAPEL_NET = "chapel"

ADDR_LEN = 20

DOT_B_SUFFIX = ".B"
NATIVE_TOKEN = "BNB"
NATIVE_TOKEN_DOT_B_SUFFIXED = NATIVE_TOKEN + DOT_B_SUFFIX
DECIMALS = 8
MAX_TOTAL_SUPPLY = 9_000_000_000_000_000_000

TOKEN_SYMBOL_MAX_LEN = 8
TOKEN_SYMBOL_MIN_LEN = 2
TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN = 3

MINI_TOKEN_SYMBOL_MAX_LEN = 8
MINI_TOKEN_SYMBOL_MIN_LEN = 2
MINI_TOKEN_SYMBOL_SUFFIX_LEN = 4
MINI_TOKEN_SYMBOL_M_SUFFIX = "M"
MINI_TOKEN_SYMBOL_TX_HASH_SUFFIX_LEN = 3
MAX_MINI_TOKEN_NAME_LENGTH = 32
MAX_TOKEN_URI_LENGTH = 2048


class ValidationError(ValueError):
    """Raised when a message fails its basic validation."""


_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_INDEX = {char: value for value, char in enumerate(_CHARSET)}
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_BECH32_LENGTH = 90


def _polymod(values: Iterable[int]) -> int:
    checksum = 1
    for value in values:
        top = checksum >> 25
        checksum = ((checksum & 0x1FFFFFF) << 5) ^ value
        for bit, generator in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                checksum ^= generator
    return checksum


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _convert_bits(data: Iterable[int], from_bits: int, to_bits: int, pad: bool) -> list[int]:
    acc = 0
    bits = 0
    out: list[int] = []
    max_value = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise ValueError(f"invalid data value {value}")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            out.append((acc >> bits) & max_value)
    if pad:
        if bits:
            out.append((acc << (to_bits - bits)) & max_value)
    elif bits >= from_bits or (acc << (to_bits - bits)) & max_value:
        raise ValueError("invalid padding in bech32 data")
    return out


def _check_hrp(hrp: str) -> None:
    if not hrp:
        raise ValueError("bech32 prefix cannot be empty")
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise ValueError(f"invalid character in bech32 prefix {hrp!r}")


def bech32_encode(hrp: str, data: bytes) -> str:
    """Encode bytes as a bech32 string with the given human-readable part."""
    _check_hrp(hrp)
    five_bit = _convert_bits(data, 8, 5, True)
    polymod = _polymod(_hrp_expand(hrp) + five_bit + [0] * 6) ^ 1
    checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_CHARSET[d] for d in five_bit + checksum)


def bech32_decode(text: str) -> tuple[str, bytes]:
    """Decode a bech32 string into its human-readable part and payload bytes."""
    if not text:
        raise ValueError("bech32 string cannot be empty")
    if text.lower() != text and text.upper() != text:
        raise ValueError("bech32 string has mixed case")
    if len(text) > _MAX_BECH32_LENGTH:
        raise ValueError(f"bech32 string is longer than {_MAX_BECH32_LENGTH} characters")
    text = text.lower()
    separator = text.rfind("1")
    if separator < 1 or separator + 7 > len(text):
        raise ValueError("invalid bech32 separator position")
    hrp, rest = text[:separator], text[separator + 1:]
    _check_hrp(hrp)
    try:
        values = [_CHARSET_INDEX[c] for c in rest]
    except KeyError as exc:
        raise ValueError(f"invalid bech32 character {exc.args[0]!r}") from None
    if _polymod(_hrp_expand(hrp) + values) != 1:
        raise ValueError("invalid bech32 checksum")
    return hrp, bytes(_convert_bits(values[:-6], 5, 8, False))


def _decode_with_prefix(text: str, expected: str) -> bytes:
    prefix, data = bech32_decode(text)
    if prefix != expected:
        raise ValueError(f"invalid bech32 prefix, expected {expected}, got {prefix}")
    return data


class _Address(bytes):
    HRP: ClassVar[str] = ""

    def to_bech32(self, hrp: str | None = None) -> str:
        return bech32_encode(hrp or self.HRP, bytes(self))

    def __str__(self) -> str:
        return self.to_bech32()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_bech32()!r})"


class AccAddress(_Address):
    """An account address."""

    HRP: ClassVar[str] = "bnb"

    @classmethod
    def from_bech32(cls, text: str, hrp: str | None = None) -> "AccAddress":
        """Decode a bech32 account address, checking its prefix."""
        return cls(_decode_with_prefix(text, hrp or cls.HRP))

    def to_bech32(self, hrp: str | None = None) -> str:
        """Encode the address as bech32."""
        return bech32_encode(hrp or self.HRP, bytes(self))


class ValAddress(_Address):
    """A validator operator address."""

    HRP: ClassVar[str] = "bva"

    @classmethod
    def from_bech32(cls, text: str, hrp: str | None = None) -> "ValAddress":
        """Decode a bech32 validator address, checking its prefix."""
        return cls(_decode_with_prefix(text, hrp or cls.HRP))


@dataclass(frozen=True)
class Coin:
    """An amount of a single denomination."""

    denom: str
    amount: int

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_not_negative(self) -> bool:
        return self.amount >= 0

    def to_json(self) -> dict:
        return {"denom": self.denom, "amount": self.amount}

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


class Coins(tuple):
    """An ordered collection of coins."""

    def __new__(cls, coins: Iterable[Coin] = ()):
        return super().__new__(cls, coins)

    def is_valid(self) -> bool:
        """True if coins are positive and strictly sorted by denomination."""
        if not all(coin.is_positive() for coin in self):
            return False
        return all(a.denom < b.denom for a, b in zip(self, self[1:]))

    def is_positive(self) -> bool:
        return len(self) > 0 and all(coin.is_positive() for coin in self)

    def is_not_negative(self) -> bool:
        return all(coin.is_not_negative() for coin in self)

    def is_zero(self) -> bool:
        return all(coin.amount == 0 for coin in self)

    def plus(self, other: Iterable[Coin]) -> "Coins":
        """Add two sorted coin sets; denominations summing to zero are dropped."""
        mine = {coin.denom: coin.amount for coin in self}
        theirs = {coin.denom: coin.amount for coin in other}
        result = []
        for denom in sorted(mine.keys() | theirs.keys()):
            if denom in mine and denom in theirs:
                total = mine[denom] + theirs[denom]
                if total == 0:
                    continue
            else:
                total = mine.get(denom, theirs.get(denom, 0))
            result.append(Coin(denom, total))
        return Coins(result)

    def is_equal(self, other: Iterable[Coin]) -> bool:
        return tuple(self) == tuple(other)

    def sort(self) -> "Coins":
        return Coins(sorted(self, key=lambda coin: coin.denom))

    def to_json(self) -> list:
        return [coin.to_json() for coin in self]

    def __str__(self) -> str:
        return ",".join(str(coin) for coin in self)


class Msg(abc.ABC):
    """A transaction message."""

    route: ClassVar[str] = ""
    msg_type: ClassVar[str] = ""
    sender: AccAddress

    @abc.abstractmethod
    def validate_basic(self) -> None:
        """Raise ValidationError if the message is malformed."""

    @abc.abstractmethod
    def to_json(self) -> dict:
        """Return the message as a JSON-ready mapping."""

    def sign_bytes(self) -> bytes:
        """Return the canonical bytes to be signed."""
        return _dump_json(self.to_json())

    def signers(self) -> list:
        """By default the message is signed by its sender."""
        return [self.sender]

    def involved_addresses(self) -> list:
        return list(self.signers())