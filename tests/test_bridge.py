import json

import pytest

from bnbmsg.base import AccAddress, Coin, ValidationError
from bnbmsg.bridge import BindMsg, SmartChainAddress, TransferOutMsg, UnbindMsg

SENDER = AccAddress(bytes(range(20)))
CHECKSUMMED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"
CONTRACT = SmartChainAddress.from_hex(CHECKSUMMED)


def test_from_hex_and_checksummed_string():
    assert bytes(CONTRACT) == bytes.fromhex(CHECKSUMMED[2:])
    assert str(CONTRACT) == CHECKSUMMED
    assert CONTRACT.to_json() == CHECKSUMMED


def test_string_round_trip():
    assert SmartChainAddress.from_hex(str(CONTRACT)) == CONTRACT


def test_short_input_is_left_padded():
    address = SmartChainAddress.from_bytes(b"\x01\x02")
    assert len(address) == 20
    assert bytes(address).endswith(b"\x01\x02")
    assert bytes(address[:18]) == bytes(18)


def test_long_input_keeps_tail():
    data = bytes(range(25))
    assert bytes(SmartChainAddress.from_bytes(data)) == data[-20:]


def test_lenient_parsing():
    assert SmartChainAddress.from_hex("abcd").is_empty()
    assert SmartChainAddress.from_hex("0xzz").is_empty()
    partial = SmartChainAddress.from_hex("0x01zz")
    assert bytes(partial).endswith(b"\x01") and not partial.is_empty()


def test_is_empty():
    assert SmartChainAddress().is_empty()
    assert not CONTRACT.is_empty()


def test_bind_valid_and_json():
    msg = BindMsg(SENDER, "ABC-123", 10, CONTRACT, 18, 1000)
    msg.validate_basic()
    assert msg.route == "bridge" and msg.msg_type == "crossBind"
    decoded = json.loads(msg.sign_bytes())
    assert list(decoded) == [
        "from", "symbol", "amount", "contract_address", "contract_decimals", "expire_time"
    ]
    assert decoded["contract_address"] == CHECKSUMMED
    assert msg.involved_addresses() == [SENDER]


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"sender": AccAddress(b"\x01")}, "address length should be 20"),
        ({"symbol": ""}, "symbol should not be empty"),
        ({"amount": 0}, "amount should be larger than 0"),
        ({"contract_address": SmartChainAddress()}, "contract address should not be empty"),
        ({"contract_decimals": -1}, "decimal should be no less than 0"),
        ({"expire_time": 0}, "expire time should be larger than 0"),
    ],
)
def test_bind_errors(changes, message):
    values = dict(
        sender=SENDER, symbol="ABC-123", amount=10, contract_address=CONTRACT,
        contract_decimals=18, expire_time=1000,
    )
    values.update(changes)
    with pytest.raises(ValidationError, match=message):
        BindMsg(**values).validate_basic()


def test_transfer_out():
    msg = TransferOutMsg(SENDER, CONTRACT, Coin("BNB", 5), 99)
    msg.validate_basic()
    assert msg.msg_type == "crossTransferOut"
    assert msg.to_json()["amount"] == {"denom": "BNB", "amount": 5}
    assert msg.to_json()["to"] == CHECKSUMMED
    with pytest.raises(ValidationError, match="to address should not be empty"):
        TransferOutMsg(SENDER, SmartChainAddress(), Coin("BNB", 5), 99).validate_basic()
    with pytest.raises(ValidationError, match="amount should be positive"):
        TransferOutMsg(SENDER, CONTRACT, Coin("BNB", 0), 99).validate_basic()
    with pytest.raises(ValidationError, match="expire time should be larger than 0"):
        TransferOutMsg(SENDER, CONTRACT, Coin("BNB", 5), -1).validate_basic()


def test_unbind():
    msg = UnbindMsg(SENDER, "ABC-123")
    msg.validate_basic()
    assert msg.msg_type == "crossUnbind"
    assert msg.to_json() == {"from": SENDER.to_bech32(), "symbol": "ABC-123"}
    with pytest.raises(ValidationError, match="symbol should not be empty"):
        UnbindMsg(SENDER, "").validate_basic()
    with pytest.raises(ValidationError, match="symbol length should not be larger than 32"):
        UnbindMsg(SENDER, "A" * 33).validate_basic()
    with pytest.raises(ValidationError, match="address length should be 20"):
        UnbindMsg(None, "ABC").validate_basic()