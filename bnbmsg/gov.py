"""Governance messages: proposals, deposits and votes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum

from .base import AccAddress, Coins, Msg, ValidationError
from .utils import _dump_json, sort_json

MSG_ROUTE = "gov"

MAX_TITLE_LENGTH = 128
MAX_DESCRIPTION_LENGTH = 2048
MAX_VOTING_PERIOD = timedelta(weeks=2)

DEPOSIT_MSG_NAME = "cosmos-sdk/MsgDeposit"


class VoteOption(IntEnum):
    """A voter's choice on a proposal."""

    EMPTY = 0x00
    YES = 0x01
    ABSTAIN = 0x02
    NO = 0x03
    NO_WITH_VETO = 0x04

    def __str__(self) -> str:
        return _VOTE_OPTION_NAMES.get(self, "")

    @classmethod
    def from_string(cls, text: str) -> "VoteOption":
        """Parse "Yes", "Abstain", "No" or "NoWithVeto"."""
        for option, name in _VOTE_OPTION_NAMES.items():
            if name == text:
                return option
        raise ValueError(f"'{text}' is not a valid vote option")


_VOTE_OPTION_NAMES = {
    VoteOption.YES: "Yes",
    VoteOption.ABSTAIN: "Abstain",
    VoteOption.NO: "No",
    VoteOption.NO_WITH_VETO: "NoWithVeto",
}


class ProposalKind(IntEnum):
    """The type of a governance proposal."""

    NIL = 0x00
    TEXT = 0x01
    PARAMETER_CHANGE = 0x02
    SOFTWARE_UPGRADE = 0x03
    LIST_TRADING_PAIR = 0x04
    # A parameter change, kept apart so that fee changes are easy to tell.
    FEE_CHANGE = 0x05
    SC_PARAMS_CHANGE = 0x81
    CSC_PARAMS_CHANGE = 0x82

    def __str__(self) -> str:
        return _PROPOSAL_KIND_NAMES.get(self, "")

    @classmethod
    def from_string(cls, text: str) -> "ProposalKind":
        """Parse a proposal type name such as "Text" or "FeeChange"."""
        for kind, name in _PROPOSAL_KIND_NAMES.items():
            if name == text:
                return kind
        raise ValueError(f"'{text}' is not a valid proposal type")


_PROPOSAL_KIND_NAMES = {
    ProposalKind.TEXT: "Text",
    ProposalKind.PARAMETER_CHANGE: "ParameterChange",
    ProposalKind.SOFTWARE_UPGRADE: "SoftwareUpgrade",
    ProposalKind.LIST_TRADING_PAIR: "ListTradingPair",
    ProposalKind.FEE_CHANGE: "FeeChange",
    ProposalKind.SC_PARAMS_CHANGE: "SCParamsChange",
    ProposalKind.CSC_PARAMS_CHANGE: "CSCParamsChange",
}


def is_valid_proposal_type(kind: int) -> bool:
    """True for proposal types accepted on the main chain."""
    return kind in (
        ProposalKind.TEXT,
        ProposalKind.PARAMETER_CHANGE,
        ProposalKind.SOFTWARE_UPGRADE,
        ProposalKind.LIST_TRADING_PAIR,
        ProposalKind.FEE_CHANGE,
    )


def is_valid_vote_option(option: int) -> bool:
    return option in (
        VoteOption.YES,
        VoteOption.ABSTAIN,
        VoteOption.NO,
        VoteOption.NO_WITH_VETO,
    )


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _coins_json(coins: Coins) -> list:
    return [{"denom": coin.denom, "amount": str(coin.amount)} for coin in coins]


def _nanoseconds(period: timedelta) -> int:
    return (period.days * 86400 + period.seconds) * 10**9 + period.microseconds * 1000


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _check_proposal_text(title: str, description: str) -> None:
    if not title:
        raise ValidationError("title can't be empty")
    if _byte_len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(f"Proposal title is longer than max length of {MAX_TITLE_LENGTH}")
    if not description:
        raise ValidationError("description can't be empty")
    if _byte_len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Proposal description is longer than max length of {MAX_DESCRIPTION_LENGTH}"
        )


def _check_proposal_funding(proposer, initial_deposit: Coins, voting_period: timedelta) -> None:
    if not proposer:
        raise ValidationError("proposer can't be empty")
    if not initial_deposit.is_valid():
        raise ValidationError(f"initial deposit {initial_deposit} is invalid. ")
    if not initial_deposit.is_not_negative():
        raise ValidationError(f"initial deposit {initial_deposit} is negative. ")
    if voting_period <= timedelta(0) or voting_period > MAX_VOTING_PERIOD:
        raise ValidationError(
            f"voting period should between 0 and {MAX_VOTING_PERIOD // timedelta(weeks=1)} weeks"
        )


def _check_deposit(depositer, amount: Coins, proposal_id: int) -> None:
    if not depositer:
        raise ValidationError("depositer can't be empty ")
    if not amount.is_valid():
        raise ValidationError("amount is invalid ")
    if not amount.is_not_negative():
        raise ValidationError("amount can't be negative ")
    if proposal_id < 0:
        raise ValidationError("proposalId can't be negative ")


def _check_vote(voter, proposal_id: int, option: int) -> None:
    if not voter:
        raise ValidationError("vaoter can't be empty ")
    if proposal_id < 0:
        raise ValidationError("proposalId can't be less than 0")
    if not is_valid_vote_option(option):
        raise ValidationError(f"invalid msg option {int(option)}")


@dataclass(frozen=True)
class ListTradingPairParams:
    """Parameters of a proposal to list a trading pair."""

    base_asset_symbol: str
    quote_asset_symbol: str
    init_price: int
    description: str
    expire_time: datetime


@dataclass(frozen=True)
class SubmitProposalMsg(Msg):
    """Submit a governance proposal."""

    title: str
    description: str
    proposal_type: ProposalKind
    proposer: AccAddress | None
    initial_deposit: Coins
    voting_period: timedelta

    route = MSG_ROUTE
    msg_type = "submit_proposal"

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_deposit", Coins(self.initial_deposit))

    def __str__(self) -> str:
        return (
            f"SubmitProposalMsg{{{self.title}, {self.description}, "
            f"{ProposalKind(self.proposal_type)}, {self.initial_deposit}}}"
        )

    def validate_basic(self) -> None:
        _check_proposal_text(self.title, self.description)
        if not is_valid_proposal_type(self.proposal_type):
            raise ValidationError(f"invalid proposal type {int(self.proposal_type)} ")
        _check_proposal_funding(self.proposer, self.initial_deposit, self.voting_period)

    def to_json(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "proposal_type": str(ProposalKind(self.proposal_type)),
            "proposer": _address_json(self.proposer),
            "initial_deposit": _coins_json(self.initial_deposit),
            "voting_period": str(_nanoseconds(self.voting_period)),
        }

    def sign_bytes(self) -> bytes:
        return sort_json(_dump_json(self.to_json()))

    def signers(self) -> list:
        return [self.proposer]


@dataclass(frozen=True)
class DepositMsg(Msg):
    """Add coins to a proposal's deposit."""

    depositer: AccAddress | None
    proposal_id: int
    amount: Coins

    route = MSG_ROUTE
    msg_type = "deposit"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return f"DepositMsg{{{_address_json(self.depositer)}=>{self.proposal_id}: {self.amount}}}"

    def validate_basic(self) -> None:
        _check_deposit(self.depositer, self.amount, self.proposal_id)

    def to_json(self) -> dict:
        return {
            "proposal_id": str(self.proposal_id),
            "depositer": _address_json(self.depositer),
            "amount": _coins_json(self.amount),
        }

    def sign_bytes(self) -> bytes:
        # The message codec knows this type, so it is wrapped with its registered name.
        return sort_json(_dump_json({"type": DEPOSIT_MSG_NAME, "value": self.to_json()}))

    def signers(self) -> list:
        return [self.depositer]


@dataclass(frozen=True)
class VoteMsg(Msg):
    """Vote on a proposal."""

    voter: AccAddress | None
    proposal_id: int
    option: VoteOption

    route = MSG_ROUTE
    msg_type = "vote"

    def __str__(self) -> str:
        return f"VoteMsg{{{self.proposal_id} - {VoteOption(self.option)}}}"

    def validate_basic(self) -> None:
        _check_vote(self.voter, self.proposal_id, self.option)

    def to_json(self) -> dict:
        return {
            "proposal_id": str(self.proposal_id),
            "voter": _address_json(self.voter),
            "option": str(VoteOption(self.option)),
        }

    def sign_bytes(self) -> bytes:
        return sort_json(_dump_json(self.to_json()))

    def signers(self) -> list:
        return [self.voter]