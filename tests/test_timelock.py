import json

import pytest

from bnbmsg.base import AccAddress, Coin, Coins, ValidationError
from bnbmsg.timelock import (
    MAX_TIME_LOCK_DESCRIPTION_LENGTH,
    TIME_LOCK_COINS_ACC_ADDR,
    TimeLockMsg,
    TimeRelockMsg,
    TimeUnlockMsg,
)

ADDR = AccAddress(bytes(range(20)))
AMOUNT = Coins([Coin("BNB", 100)])


def test_lock_address_is_twenty_bytes():
    involved = TimeUnlockMsg(ADDR, 1).involved_addresses()
    assert len(involved) == 2
    lock_address = involved[1]
    assert lock_address == TIME_LOCK_COINS_ACC_ADDR
    assert len(lock_address) == 20
    assert bytes(lock_address) != bytes(ADDR)


def test_lock_valid():
    msg = TimeLockMsg(ADDR, "savings", AMOUNT, 1000)
    msg.validate_basic()
    assert msg.route == "gov"
    assert msg.msg_type == "timeLock"
    assert msg.signers() == [ADDR]
    assert msg.involved_addresses() == [ADDR, TIME_LOCK_COINS_ACC_ADDR]


def test_lock_json():
    msg = TimeLockMsg(ADDR, "savings", AMOUNT, 1000)
    assert json.loads(msg.sign_bytes()) == {
        "from": ADDR.to_bech32(),
        "description": "savings",
        "amount": [{"denom": "BNB", "amount": 100}],
        "lock_time": 1000,
    }
    assert list(json.loads(msg.sign_bytes())) == ["from", "description", "amount", "lock_time"]


@pytest.mark.parametrize(
    "description, amount, lock_time, message",
    [
        ("", AMOUNT, 1, "length of description\\(0\\)"),
        ("d" * (MAX_TIME_LOCK_DESCRIPTION_LENGTH + 1), AMOUNT, 1, "less than or equal to 128"),
        ("d", AMOUNT, 0, "lock time\\(0\\) should be larger than 0"),
        ("d", Coins([Coin("BNB", -5)]), 1, "is invalid"),
        ("d", Coins(), 1, "can't be negative"),
    ],
)
def test_lock_invalid(description, amount, lock_time, message):
    with pytest.raises(ValidationError, match=message):
        TimeLockMsg(ADDR, description, amount, lock_time).validate_basic()


def test_relock_valid():
    msg = TimeRelockMsg(ADDR, 1, "", Coins(), 50)
    msg.validate_basic()
    assert msg.involved_addresses() == [ADDR, TIME_LOCK_COINS_ACC_ADDR]
    assert msg.to_json()["time_lock_id"] == 1
    assert msg.msg_type == "timeRelock"


@pytest.mark.parametrize(
    "lock_id, description, amount, lock_time, message",
    [
        (0, "d", AMOUNT, 1, "time lock id should not be less than 1"),
        (1, "d" * (MAX_TIME_LOCK_DESCRIPTION_LENGTH + 1), AMOUNT, 1, "length of description"),
        (1, "d", AMOUNT, -1, "lock time\\(-1\\) should not be less than 0"),
        (1, "", Coins(), 0, "nothing to update for time lock"),
    ],
)
def test_relock_invalid(lock_id, description, amount, lock_time, message):
    with pytest.raises(ValidationError, match=message):
        TimeRelockMsg(ADDR, lock_id, description, amount, lock_time).validate_basic()


def test_unlock():
    msg = TimeUnlockMsg(ADDR, 2)
    msg.validate_basic()
    assert json.loads(msg.sign_bytes()) == {"from": ADDR.to_bech32(), "time_lock_id": 2}
    assert msg.involved_addresses() == [ADDR, TIME_LOCK_COINS_ACC_ADDR]
    assert str(msg) == f"TimeUnlock{{{ADDR.to_bech32()}#2}}"


def test_unlock_invalid_id():
    with pytest.raises(ValidationError, match="time lock id should not be less than 1"):
        TimeUnlockMsg(ADDR, 0).validate_basic()