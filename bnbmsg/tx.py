"""Transactions, sign documents and their options."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .base import Msg
from .utils import _dump_json, sort_json

CODE_OK = 0
SOURCE = 0


@dataclass
class StdSignMsg:
    """The fields a signer commits to."""

    chain_id: str = ""
    account_number: int = 0
    sequence: int = 0
    msgs: list = field(default_factory=list)
    memo: str = ""
    source: int = 0
    data: bytes | None = None

    def sign_bytes(self) -> bytes:
        return std_sign_bytes(
            self.chain_id,
            self.account_number,
            self.sequence,
            self.msgs,
            self.memo,
            self.source,
            self.data,
        )


Option = Callable[[StdSignMsg], StdSignMsg]


def with_source(source: int) -> Option:
    def apply(sign_msg: StdSignMsg) -> StdSignMsg:
        sign_msg.source = source
        return sign_msg

    return apply


def with_memo(memo: str) -> Option:
    def apply(sign_msg: StdSignMsg) -> StdSignMsg:
        sign_msg.memo = memo
        return sign_msg

    return apply


def with_ac_num_and_sequence(account_number: int, sequence: int) -> Option:
    def apply(sign_msg: StdSignMsg) -> StdSignMsg:
        sign_msg.sequence = sequence
        sign_msg.account_number = account_number
        return sign_msg

    return apply


def with_chain_id(chain_id: str) -> Option:
    def apply(sign_msg: StdSignMsg) -> StdSignMsg:
        sign_msg.chain_id = chain_id
        return sign_msg

    return apply


def std_sign_bytes(
    chain_id: str,
    account_number: int,
    sequence: int,
    msgs: Sequence[Msg],
    memo: str,
    source: int,
    data: bytes | None,
) -> bytes:
    """Return the canonical, key-sorted JSON bytes to sign for a transaction."""
    doc = {
        "chain_id": chain_id,
        "account_number": str(account_number),
        "sequence": str(sequence),
        "memo": memo,
        "source": str(source),
        "msgs": [json.loads(msg.sign_bytes()) for msg in msgs] or None,
        "data": None if data is None else base64.b64encode(bytes(data)).decode("ascii"),
    }
    return sort_json(_dump_json(doc))


@dataclass
class StdSignature:
    """A signature with the account state it was made for."""

    pub_key: bytes | None
    signature: bytes
    account_number: int
    sequence: int


@dataclass
class StdTx:
    """A signed transaction."""

    msgs: list
    signatures: list
    memo: str = ""
    source: int = SOURCE
    data: bytes | None = None


@dataclass
class TxResult:
    hash: str = ""
    log: str = ""
    data: str = ""
    code: int = CODE_OK

    @classmethod
    def from_json(cls, value: dict) -> "TxResult":
        return cls(
            hash=value.get("hash", ""),
            log=value.get("log", ""),
            data=value.get("data", ""),
            code=value.get("code", CODE_OK),
        )


@dataclass
class TxCommitResult:
    ok: bool = False
    log: str = ""
    hash: str = ""
    code: int = CODE_OK
    data: str = ""

    @classmethod
    def from_json(cls, value: dict) -> "TxCommitResult":
        return cls(
            ok=value.get("ok", False),
            log=value.get("log", ""),
            hash=value.get("hash", ""),
            code=value.get("code", CODE_OK),
            data=value.get("data", ""),
        )