"""Side-chain governance messages and side-chain parameter changes."""

from __future__ import annotations

import abc
import binascii
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal

from .base import ADDR_LEN, NATIVE_TOKEN, AccAddress, Coins, Msg, ValidationError
from .gov import (
    MSG_ROUTE,
    ProposalKind,
    VoteOption,
    _check_deposit,
    _check_proposal_funding,
    _check_proposal_text,
    _check_vote,
    _coins_json,
    _nanoseconds,
)
from .utils import _dump_json, sort_json

MSG_TYPE_SIDE_SUBMIT_PROPOSAL = "side_submit_proposal"
MSG_TYPE_SIDE_DEPOSIT = "side_deposit"
MSG_TYPE_SIDE_VOTE = "side_vote"

MAX_SIDE_CHAIN_ID_LENGTH = 20

_MAX_UINT8 = 255
_SUPPORTED_PARAMS = ("slash", "ibc", "oracle", "staking")

_MINUTE = timedelta(minutes=1)
_HOUR = timedelta(hours=1)
_HUNDRED_DAYS = timedelta(days=100)


def _address_json(address: bytes | None) -> str:
    return AccAddress(address).to_bech32() if address else ""


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _format_fraction(whole: int, frac: int, digits: int) -> str:
    if not frac:
        return str(whole)
    return f"{whole}." + f"{frac:0{digits}d}".rstrip("0")


def _go_duration(period: timedelta) -> str:
    """Format a duration the way the chain prints it, e.g. ``1h0m0s`` or ``1.5s``."""
    ns = _nanoseconds(period)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1000:
        return f"{sign}{ns}ns"
    if ns < 10**6:
        return sign + _format_fraction(*divmod(ns, 1000), 3) + "µs"
    if ns < 10**9:
        return sign + _format_fraction(*divmod(ns, 10**6), 6) + "ms"
    hours, rest = divmod(ns, 3600 * 10**9)
    minutes, rest = divmod(rest, 60 * 10**9)
    seconds = _format_fraction(*divmod(rest, 10**9), 9)
    text = f"{hours}h" if hours else ""
    if hours or minutes:
        text += f"{minutes}m"
    return f"{sign}{text}{seconds}s"


def _check_side_chain_id(side_chain_id: str) -> None:
    length = _byte_len(side_chain_id)
    if length == 0 or length > MAX_SIDE_CHAIN_ID_LENGTH:
        raise ValidationError(f"invalid side chain id {side_chain_id}")


def is_valid_side_proposal_type(kind: int) -> bool:
    """True for proposal types accepted on a side chain."""
    return kind in (ProposalKind.SC_PARAMS_CHANGE, ProposalKind.CSC_PARAMS_CHANGE)


@dataclass(frozen=True)
class SideChainSubmitProposalMsg(Msg):
    """Submit a governance proposal for a side chain."""

    title: str
    description: str
    proposal_type: ProposalKind
    proposer: AccAddress | None
    initial_deposit: Coins
    voting_period: timedelta
    side_chain_id: str

    route = MSG_ROUTE
    msg_type = MSG_TYPE_SIDE_SUBMIT_PROPOSAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "initial_deposit", Coins(self.initial_deposit))

    def __str__(self) -> str:
        return (
            f"SideChainSubmitProposalMsg{{{self.title}, {self.description}, "
            f"{ProposalKind(self.proposal_type)}, {self.initial_deposit}, "
            f"{_go_duration(self.voting_period)}, {self.side_chain_id}}}"
        )

    def validate_basic(self) -> None:
        _check_proposal_text(self.title, self.description)
        if not is_valid_side_proposal_type(self.proposal_type):
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
            "side_chain_id": self.side_chain_id,
        }

    def sign_bytes(self) -> bytes:
        return sort_json(_dump_json(self.to_json()))

    def signers(self) -> list:
        return [self.proposer]


@dataclass(frozen=True)
class SideChainDepositMsg(Msg):
    """Add coins to the deposit of a side-chain proposal."""

    depositer: AccAddress | None
    proposal_id: int
    amount: Coins
    side_chain_id: str

    route = MSG_ROUTE
    msg_type = MSG_TYPE_SIDE_DEPOSIT

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", Coins(self.amount))

    def __str__(self) -> str:
        return (
            f"SideChainDepositMsg{{{_address_json(self.depositer)}=>{self.proposal_id}: "
            f"{self.amount}, {self.side_chain_id}}}"
        )

    def validate_basic(self) -> None:
        _check_side_chain_id(self.side_chain_id)
        _check_deposit(self.depositer, self.amount, self.proposal_id)

    def to_json(self) -> dict:
        return {
            "proposal_id": str(self.proposal_id),
            "depositer": _address_json(self.depositer),
            "amount": _coins_json(self.amount),
            "side_chain_id": self.side_chain_id,
        }

    def sign_bytes(self) -> bytes:
        return sort_json(_dump_json(self.to_json()))

    def signers(self) -> list:
        return [self.depositer]


@dataclass(frozen=True)
class SideChainVoteMsg(Msg):
    """Vote on a side-chain proposal."""

    voter: AccAddress | None
    proposal_id: int
    option: VoteOption
    side_chain_id: str

    route = MSG_ROUTE
    msg_type = MSG_TYPE_SIDE_VOTE

    def __str__(self) -> str:
        return (
            f"SideChainVoteMsg{{{self.proposal_id} - {VoteOption(self.option)}, "
            f"{self.side_chain_id}}}"
        )

    def validate_basic(self) -> None:
        _check_side_chain_id(self.side_chain_id)
        _check_vote(self.voter, self.proposal_id, self.option)

    def to_json(self) -> dict:
        return {
            "proposal_id": str(self.proposal_id),
            "voter": _address_json(self.voter),
            "option": str(VoteOption(self.option)),
            "side_chain_id": self.side_chain_id,
        }

    def sign_bytes(self) -> bytes:
        return sort_json(_dump_json(self.to_json()))

    def signers(self) -> list:
        return [self.voter]


class SCParam(abc.ABC):
    """A set of side-chain parameters that can be changed by proposal."""

    @abc.abstractmethod
    def update_check(self) -> None:
        """Raise ValidationError if the new values are out of range."""

    @abc.abstractmethod
    def param_attribute(self) -> tuple[str, bool]:
        """Return the parameter set name and whether it lives in the native store."""


@dataclass
class SCChangeParams:
    """A full replacement of every supported side-chain parameter set."""

    sc_params: list
    description: str = ""

    def check(self) -> None:
        if len(self.sc_params) != len(_SUPPORTED_PARAMS):
            raise ValidationError(
                f"the sc_params length mismatch, suppose {len(_SUPPORTED_PARAMS)}"
            )
        remaining = set(_SUPPORTED_PARAMS)
        for param in self.sc_params:
            if param is None:
                raise ValidationError("sc_params contains empty element")
            param.update_check()
            name, _ = param.param_attribute()
            if name not in remaining:
                raise ValidationError(f"unsupported param type {name}")
            remaining.discard(name)


@dataclass
class IbcParams(SCParam):
    relayer_fee: int

    def update_check(self) -> None:
        if self.relayer_fee <= 0:
            raise ValidationError("the syn_package_fee should be greater than 0")

    def param_attribute(self) -> tuple[str, bool]:
        return "ibc", False


@dataclass
class OracleParams(SCParam):
    consensus_needed: Decimal | None

    def update_check(self) -> None:
        value = self.consensus_needed
        if value is None or value > 1 or value < Decimal("0.5"):
            raise ValidationError("the value should be in range 0.5 to 1")

    def param_attribute(self) -> tuple[str, bool]:
        return "oracle", True


@dataclass
class SlashParams(SCParam):
    max_evidence_age: timedelta
    signed_blocks_window: int
    min_signed_per_window: Decimal | None
    double_sign_unbond_duration: timedelta
    downtime_unbond_duration: timedelta
    too_low_del_unbond_duration: timedelta
    slash_fraction_double_sign: Decimal | None
    slash_fraction_downtime: Decimal | None
    double_sign_slash_amount: int
    downtime_slash_amount: int
    submitter_reward: int
    downtime_slash_fee: int

    def param_attribute(self) -> tuple[str, bool]:
        return "slash", False

    def update_check(self) -> None:
        if not _MINUTE <= self.max_evidence_age <= _HUNDRED_DAYS:
            raise ValidationError("the max_evidence_age should be in range 1 minutes to 100 day")
        if self.double_sign_unbond_duration < _HOUR:
            raise ValidationError(
                "the double_sign_unbond_duration should be greate than 1 hour"
            )
        if not _MINUTE <= self.downtime_unbond_duration <= _HUNDRED_DAYS:
            raise ValidationError(
                "the downtime_unbond_duration should be in range 1 minutes to 100 day"
            )
        if not _MINUTE <= self.too_low_del_unbond_duration <= _HUNDRED_DAYS:
            raise ValidationError(
                "the too_low_del_unbond_duration should be in range 1 minutes to 100 day"
            )
        if self.double_sign_slash_amount < 10**8:
            raise ValidationError("the double_sign_slash_amount should be larger than 1e8")
        if not 10**8 <= self.downtime_slash_amount <= 10000 * 10**8:
            raise ValidationError("the downtime_slash_amount should be in range 1e8 to 10000e8")
        if not 10**7 <= self.submitter_reward <= 1000 * 10**8:
            raise ValidationError("the submitter_reward should be in range 1e7 to 1000e8")
        if not 10**8 <= self.downtime_slash_fee <= 1000 * 10**8:
            raise ValidationError("the downtime_slash_fee should be in range 1e8 to 1000e8")


@dataclass
class StakeParams(SCParam):
    unbonding_time: timedelta
    max_validators: int
    bond_denom: str
    min_self_delegation: int
    min_delegation_change: int

    def param_attribute(self) -> tuple[str, bool]:
        return "staking", False

    def update_check(self) -> None:
        if self.bond_denom != NATIVE_TOKEN:
            raise ValidationError("only native token is availabe as bond_denom so far")
        if not _MINUTE <= self.unbonding_time <= _HUNDRED_DAYS:
            raise ValidationError("the UnbondingTime should be in range 1 minute to 100 days")
        if not 1 <= self.max_validators <= 500:
            raise ValidationError("the max validator should be in range 1 to 500")
        if not 10**8 <= self.min_self_delegation <= 10_000_000 * 10**8:
            raise ValidationError(
                "the min_self_delegation should be in range 1e8 to 10000000e8]"
            )
        if self.min_delegation_change < 10**5:
            raise ValidationError("the min_delegation_change should be no less than 1e5")


@dataclass
class CSCParamChange:
    """A parameter change for a contract on the smart chain, given as hex strings."""

    key: str
    value: str
    target: str
    value_bytes: bytes = field(default=b"", repr=False)
    target_bytes: bytes = field(default=b"", repr=False)

    def check(self) -> None:
        """Validate the change, decoding value and target into their byte fields."""
        try:
            self.target_bytes = binascii.unhexlify(self.target)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(f"target is not hex encoded, err {exc}") from None
        try:
            self.value_bytes = binascii.unhexlify(self.value)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(f"value is not hex encoded, err {exc}") from None
        if not 0 < _byte_len(self.key) <= _MAX_UINT8:
            raise ValidationError("the length of key exceed the limitation")
        if not 0 < len(self.value_bytes) <= _MAX_UINT8:
            raise ValidationError("the length of value exceed the limitation")
        if len(self.target_bytes) != ADDR_LEN:
            raise ValidationError(f"the length of target address is not {ADDR_LEN}")