import hashlib
from dataclasses import dataclass

import pytest

from bnbmsg.base import (
    AccAddress,
    Coin,
    Coins,
    Msg,
    ValAddress,
    ValidationError,
    bech32_decode,
    bech32_encode,
)

SWAP_ACCOUNT = hashlib.sha256(b"BinanceChainAtomicSwapCoins").digest()[:20]


def test_bech32_known_addresses():
    assert bech32_encode("bnb", SWAP_ACCOUNT) == "bnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4f8ge93u"
    assert AccAddress(SWAP_ACCOUNT).to_bech32("tbnb") == "tbnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4ffasp3d"


def test_bech32_round_trip():
    data = bytes(range(20))
    hrp, decoded = bech32_decode(bech32_encode("bva", data))
    assert (hrp, decoded) == ("bva", data)


def test_bech32_upper_case_accepted():
    text = bech32_encode("bnb", SWAP_ACCOUNT)
    assert bech32_decode(text.upper()) == ("bnb", SWAP_ACCOUNT)


def test_bech32_bad_checksum():
    text = bech32_encode("bnb", SWAP_ACCOUNT)
    broken = text[:-1] + ("q" if text[-1] != "q" else "p")
    with pytest.raises(ValueError, match="checksum"):
        bech32_decode(broken)


def test_bech32_mixed_case():
    text = bech32_encode("bnb", SWAP_ACCOUNT)
    with pytest.raises(ValueError, match="mixed case"):
        bech32_decode(text[:5] + text[5:].upper())


def test_bech32_invalid_character():
    with pytest.raises(ValueError):
        bech32_decode("bnb1bbbbbbbbbbb")


def test_acc_address_from_bech32():
    address = AccAddress.from_bech32("bnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4f8ge93u")
    assert bytes(address) == SWAP_ACCOUNT
    assert str(address) == "bnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4f8ge93u"


def test_acc_address_with_testnet_prefix():
    address = AccAddress.from_bech32("tbnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4ffasp3d", "tbnb")
    assert bytes(address) == SWAP_ACCOUNT


def test_acc_address_wrong_prefix():
    with pytest.raises(ValueError, match="prefix"):
        AccAddress.from_bech32("tbnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4ffasp3d")


def test_val_address_round_trip():
    address = ValAddress(bytes(range(1, 21)))
    text = address.to_bech32()
    assert text.startswith("bva1")
    assert ValAddress.from_bech32(text) == address


def test_val_address_rejects_account_prefix():
    with pytest.raises(ValueError):
        ValAddress.from_bech32(str(AccAddress(SWAP_ACCOUNT)))


def test_coin_sign_checks():
    assert Coin("BNB", 1).is_positive()
    assert not Coin("BNB", 0).is_positive()
    assert Coin("BNB", 0).is_not_negative()
    assert not Coin("BNB", -1).is_not_negative()
    assert Coin("BNB", 7).to_json() == {"denom": "BNB", "amount": 7}


@pytest.mark.parametrize(
    "coins, valid",
    [
        (Coins(), True),
        (Coins([Coin("ABC", 1), Coin("BNB", 2)]), True),
        (Coins([Coin("BNB", 2), Coin("ABC", 1)]), False),
        (Coins([Coin("BNB", 2), Coin("BNB", 1)]), False),
        (Coins([Coin("ABC", 0), Coin("BNB", 1)]), False),
        (Coins([Coin("BNB", -1)]), False),
    ],
)
def test_coins_is_valid(coins, valid):
    assert coins.is_valid() is valid


def test_coins_sign_checks():
    assert not Coins().is_positive()
    assert Coins().is_not_negative()
    assert Coins().is_zero()
    assert Coins([Coin("A", 0)]).is_zero()
    assert not Coins([Coin("A", 0), Coin("B", 1)]).is_zero()
    assert not Coins([Coin("A", -1)]).is_not_negative()
    assert Coins([Coin("A", 1), Coin("B", 3)]).is_positive()


def test_coins_plus():
    left = Coins([Coin("BNB", 1)])
    right = Coins([Coin("ABC", 2), Coin("BNB", 3)])
    total = left.plus(right)
    assert total == Coins([Coin("ABC", 2), Coin("BNB", 4)])
    assert total.is_valid()
    assert total.is_equal(right.plus(left))


def test_coins_plus_drops_zero_sums():
    left = Coins([Coin("ABC", 5), Coin("BNB", 1)])
    right = Coins([Coin("BNB", -1)])
    assert left.plus(right) == Coins([Coin("ABC", 5)])


def test_coins_sort_and_equal():
    coins = Coins([Coin("XYZ", 1), Coin("ABC", 2), Coin("MNO", 3)])
    ordered = coins.sort()
    assert [coin.denom for coin in ordered] == sorted(coin.denom for coin in coins)
    assert ordered.is_valid()
    assert not coins.is_equal(ordered)
    assert ordered.is_equal(list(ordered))


def test_coins_to_json():
    coins = Coins([Coin("BNB", 5)])
    assert coins.to_json() == [{"denom": "BNB", "amount": 5}]


@dataclass
class _Note(Msg):
    sender: AccAddress
    note: str

    route = "note"
    msg_type = "note"

    def validate_basic(self):
        if not self.note:
            raise ValidationError("note cannot be empty")

    def to_json(self):
        return {"from": str(self.sender), "note": self.note}


def test_msg_defaults():
    sender = AccAddress(SWAP_ACCOUNT)
    msg = _Note(sender, "a<b")
    assert msg.signers() == [sender]
    assert msg.involved_addresses() == [sender]
    assert msg.sign_bytes() == (
        b'{"from":"bnb1wxeplyw7x8aahy93w96yhwm7xcq3ke4f8ge93u","note":"a\\u003cb"}'
    )


def test_msg_validation_error():
    with pytest.raises(ValidationError):
        _Note(AccAddress(SWAP_ACCOUNT), "").validate_basic()


def test_msg_is_abstract():
    with pytest.raises(TypeError):
        Msg()