"""Hash time-locked transfer messages for atomic swaps."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .base import ADDR_LEN, AccAddress, Coins, Msg, ValidationError

ATOMIC_SWAP_ROUTE = "atomicSwap"
HTLT = "HTLT"
DEPOSIT_HTLT = "depositHTLT"
CLAIM_HTLT = "claimHTLT"
REFUND_HTLT = "refundHTLT"

INT64_SIZE = 8
RANDOM_NUMBER_HASH_LENGTH = 32
RANDOM_NUMBER_LENGTH = 32
MAX_OTHER_CHAIN_ADDR_LENGTH = 64
SWAP_ID_LENGTH = 32
MAX_EXPECTED_INCOME_LENGTH = 64
MINIMUM_HEIGHT_SPAN = 360
MAXIMUM_HEIGHT_SPAN = 518400

# Address holding coins locked in swaps: sha256 of a fixed tag, truncated to 20 bytes.
ATOMIC_SWAP_COINS_ACC_ADDR = AccAddress(
    hashlib.sha256(b"BinanceChainAtomicSwapCoins").digest()[:ADDR_LEN]
)


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _swap_bytes_json(data: bytes | None) -> str:
    return bytes(data or b"").hex().upper()


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _check_address(address: bytes | None) -> None:
    length = len(address or b"")
    if length != ADDR_LEN:
        raise ValidationError(
            f"the expected address length is {ADDR_LEN}, actual length is {length}"
        )


def _check_swap_id(swap_id: bytes | None) -> None:
    if len(swap_id or b"") != SWAP_ID_LENGTH:
        raise ValidationError(f"the length of swapID should be {SWAP_ID_LENGTH}")


class _SwapMsg(Msg):
    route = ATOMIC_SWAP_ROUTE

    def involved_addresses(self) -> list:
        return [*self.signers(), ATOMIC_SWAP_COINS_ACC_ADDR]


@dataclass(frozen=True)
class HTLTMsg(_SwapMsg):
    """Lock coins behind a random number hash for a limited number of blocks."""

    sender: AccAddress
    to: AccAddress
    recipient_other_chain: str
    sender_other_chain: str
    random_number_hash: bytes
    timestamp: int
    amount: Coins
    expected_income: str
    height_span: int
    cross_chain: bool

    msg_type = HTLT

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return (
            f"HTLT{{{self.sender}#{self.to}#{self.recipient_other_chain}#"
            f"{self.sender_other_chain}#{_swap_bytes_json(self.random_number_hash)}#"
            f"{self.timestamp}#{self.amount}#{self.expected_income}#{self.height_span}#"
            f"{str(self.cross_chain).lower()}}}"
        )

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_address(self.sender)
        _check_address(self.to)
        if not self.cross_chain and self.recipient_other_chain:
            raise ValidationError(
                "must leave recipient address on other chain to empty for single chain swap"
            )
        if not self.cross_chain and self.sender_other_chain:
            raise ValidationError(
                "must leave sender address on other chain to empty for single chain swap"
            )
        if self.cross_chain and not self.recipient_other_chain:
            raise ValidationError("missing recipient address on other chain for cross chain swap")
        if _byte_len(self.recipient_other_chain) > MAX_OTHER_CHAIN_ADDR_LENGTH:
            raise ValidationError(
                "the length of recipient address on other chain should be less than "
                f"{MAX_OTHER_CHAIN_ADDR_LENGTH}"
            )
        if _byte_len(self.sender_other_chain) > MAX_OTHER_CHAIN_ADDR_LENGTH:
            raise ValidationError(
                "the length of sender address on other chain should be less than "
                f"{MAX_OTHER_CHAIN_ADDR_LENGTH}"
            )
        if _byte_len(self.expected_income) > MAX_EXPECTED_INCOME_LENGTH:
            raise ValidationError(
                f"the length of expected income should be less than {MAX_EXPECTED_INCOME_LENGTH}"
            )
        if len(self.random_number_hash or b"") != RANDOM_NUMBER_HASH_LENGTH:
            raise ValidationError(
                f"the length of random number hash should be {RANDOM_NUMBER_HASH_LENGTH}"
            )
        if not self.amount.is_positive():
            raise ValidationError("the swapped out coin must be positive")
        if not MINIMUM_HEIGHT_SPAN <= self.height_span <= MAXIMUM_HEIGHT_SPAN:
            raise ValidationError(
                "the height span should be no less than 360 and no greater than 518400"
            )

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "to": _address_json(self.to),
            "recipient_other_chain": self.recipient_other_chain,
            "sender_other_chain": self.sender_other_chain,
            "random_number_hash": _swap_bytes_json(self.random_number_hash),
            "timestamp": self.timestamp,
            "amount": self.amount.to_json(),
            "expected_income": self.expected_income,
            "height_span": self.height_span,
            "cross_chain": self.cross_chain,
        }


@dataclass(frozen=True)
class DepositHTLTMsg(_SwapMsg):
    """Add coins to an existing swap."""

    sender: AccAddress
    amount: Coins
    swap_id: bytes

    msg_type = DEPOSIT_HTLT

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return f"depositHTLT{{{self.sender}#{self.amount}#{_swap_bytes_json(self.swap_id)}}}"

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_address(self.sender)
        _check_swap_id(self.swap_id)
        if not self.amount.is_positive():
            raise ValidationError("the swapped out coin must be positive")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "amount": self.amount.to_json(),
            "swap_id": _swap_bytes_json(self.swap_id),
        }


@dataclass(frozen=True)
class ClaimHTLTMsg(_SwapMsg):
    """Claim a swap by revealing its random number."""

    sender: AccAddress
    swap_id: bytes
    random_number: bytes

    msg_type = CLAIM_HTLT

    def __str__(self) -> str:
        return (
            f"claimHTLT{{{self.sender}#{_swap_bytes_json(self.swap_id)}#"
            f"{_swap_bytes_json(self.random_number)}}}"
        )

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_address(self.sender)
        _check_swap_id(self.swap_id)
        if len(self.random_number or b"") != RANDOM_NUMBER_LENGTH:
            raise ValidationError(f"the length of random number should be {RANDOM_NUMBER_LENGTH}")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "swap_id": _swap_bytes_json(self.swap_id),
            "random_number": _swap_bytes_json(self.random_number),
        }


@dataclass(frozen=True)
class RefundHTLTMsg(_SwapMsg):
    """Return the coins of an expired swap to its sender."""

    sender: AccAddress
    swap_id: bytes

    msg_type = REFUND_HTLT

    def __str__(self) -> str:
        return f"refundHTLT{{{self.sender}#{_swap_bytes_json(self.swap_id)}}}"

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_address(self.sender)
        _check_swap_id(self.swap_id)

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "swap_id": _swap_bytes_json(self.swap_id),
        }