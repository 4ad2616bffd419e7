"""Messages that lock coins until a given time."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import timedelta

from .base import ADDR_LEN, AccAddress, Coins, Msg, ValidationError
from .gov import MSG_ROUTE

MAX_TIME_LOCK_DESCRIPTION_LENGTH = 128
MIN_LOCK_TIME = timedelta(seconds=60)

INITIAL_RECORD_ID = 1

# Address holding time-locked coins: sha256 of a fixed tag, truncated to 20 bytes.
TIME_LOCK_COINS_ACC_ADDR = AccAddress(
    hashlib.sha256(b"BinanceChainTimeLockCoins").digest()[:ADDR_LEN]
)


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _check_lock_id(lock_id: int) -> None:
    if lock_id < INITIAL_RECORD_ID:
        raise ValidationError(f"time lock id should not be less than {INITIAL_RECORD_ID}")


class _TimeLockBase(Msg):
    route = MSG_ROUTE

    def involved_addresses(self) -> list:
        return [self.sender, TIME_LOCK_COINS_ACC_ADDR]


@dataclass(frozen=True)
class TimeLockMsg(_TimeLockBase):
    """Lock coins until a point in time."""

    sender: AccAddress | None
    description: str
    amount: Coins
    lock_time: int

    msg_type = "timeLock"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return (
            f"TimeLock{{{_address_json(self.sender)}#{self.description}#"
            f"{self.amount}#{self.lock_time}}}"
        )

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        length = _byte_len(self.description)
        if length == 0 or length > MAX_TIME_LOCK_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"length of description({length}) should be larger than 0 and be less than "
                f"or equal to {MAX_TIME_LOCK_DESCRIPTION_LENGTH}"
            )
        if self.lock_time <= 0:
            raise ValidationError(f"lock time({self.lock_time}) should be larger than 0")
        if not self.amount.is_valid():
            raise ValidationError(f"amount {self.amount} is invalid")
        if not self.amount.is_positive():
            raise ValidationError(f"amount {self.amount} can't be negative")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "description": self.description,
            "amount": self.amount.to_json(),
            "lock_time": self.lock_time,
        }


@dataclass(frozen=True)
class TimeRelockMsg(_TimeLockBase):
    """Change the description, amount or lock time of an existing lock."""

    sender: AccAddress | None
    time_lock_id: int
    description: str
    amount: Coins
    lock_time: int

    msg_type = "timeRelock"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return (
            f"TimeRelock{{{self.time_lock_id}#{_address_json(self.sender)}#"
            f"{self.description}#{self.amount}#{self.lock_time}}}"
        )

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_lock_id(self.time_lock_id)
        length = _byte_len(self.description)
        if length > MAX_TIME_LOCK_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"length of description({length}) should be less than or equal to "
                f"{MAX_TIME_LOCK_DESCRIPTION_LENGTH}"
            )
        if self.lock_time < 0:
            raise ValidationError(f"lock time({self.lock_time}) should not be less than 0")
        if not self.amount.is_valid():
            raise ValidationError(f"amount {self.amount} is invalid")
        if not self.amount.is_not_negative():
            raise ValidationError(f"amount {self.amount} can't be negative")
        if not self.description and self.amount.is_zero() and self.lock_time == 0:
            raise ValidationError("nothing to update for time lock")

    def to_json(self) -> dict:
        return {
            "from": _address_json(self.sender),
            "time_lock_id": self.time_lock_id,
            "description": self.description,
            "amount": self.amount.to_json(),
            "lock_time": self.lock_time,
        }


@dataclass(frozen=True)
class TimeUnlockMsg(_TimeLockBase):
    """Release the coins of an expired lock."""

    sender: AccAddress | None
    time_lock_id: int

    msg_type = "timeUnlock"

    def __str__(self) -> str:
        return f"TimeUnlock{{{_address_json(self.sender)}#{self.time_lock_id}}}"

    def involved_addresses(self) -> list:
        return super().involved_addresses()

    def validate_basic(self) -> None:
        _check_lock_id(self.time_lock_id)

    def to_json(self) -> dict:
        return {"from": _address_json(self.sender), "time_lock_id": self.time_lock_id}