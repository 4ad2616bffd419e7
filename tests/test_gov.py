import json
from datetime import timedelta

import pytest

from bnbmsg.base import AccAddress, Coin, Coins, ValidationError
from bnbmsg.gov import (
    MAX_DESCRIPTION_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_VOTING_PERIOD,
    DepositMsg,
    ProposalKind,
    SubmitProposalMsg,
    VoteMsg,
    VoteOption,
    is_valid_proposal_type,
    is_valid_vote_option,
)

ADDR = AccAddress(bytes(range(20)))
DEPOSIT = Coins([Coin("BNB", 100)])


def proposal(**changes):
    fields = dict(
        title="title",
        description="description",
        proposal_type=ProposalKind.TEXT,
        proposer=ADDR,
        initial_deposit=DEPOSIT,
        voting_period=timedelta(hours=1),
    )
    fields.update(changes)
    return SubmitProposalMsg(**fields)


@pytest.mark.parametrize("option", list(VoteOption)[1:])
def test_vote_option_round_trip(option):
    assert VoteOption.from_string(str(option)) is option


def test_vote_option_names():
    assert VoteOption.from_string("NoWithVeto") is VoteOption.NO_WITH_VETO
    assert str(VoteOption.from_string("NoWithVeto")) == "NoWithVeto"
    assert str(VoteOption(0)) == ""


def test_vote_option_invalid():
    with pytest.raises(ValueError, match="'Maybe' is not a valid vote option"):
        VoteOption.from_string("Maybe")


@pytest.mark.parametrize("kind", list(ProposalKind)[1:])
def test_proposal_kind_round_trip(kind):
    assert ProposalKind.from_string(str(kind)) is kind


def test_proposal_kind_invalid():
    with pytest.raises(ValueError, match="is not a valid proposal type"):
        ProposalKind.from_string("Nil")


def test_valid_proposal_types():
    assert is_valid_proposal_type(ProposalKind.FEE_CHANGE)
    assert not is_valid_proposal_type(ProposalKind.NIL)
    assert not is_valid_proposal_type(ProposalKind.SC_PARAMS_CHANGE)


def test_valid_vote_options():
    assert is_valid_vote_option(VoteOption.YES)
    assert not is_valid_vote_option(VoteOption.EMPTY)


def test_proposal_valid():
    msg = proposal()
    msg.validate_basic()
    assert msg.signers() == [ADDR]
    assert msg.involved_addresses() == [ADDR]
    assert msg.route == "gov"


@pytest.mark.parametrize(
    "changes, message",
    [
        ({"title": ""}, "title can't be empty"),
        ({"title": "t" * (MAX_TITLE_LENGTH + 1)}, "title is longer"),
        ({"description": ""}, "description can't be empty"),
        ({"description": "d" * (MAX_DESCRIPTION_LENGTH + 1)}, "description is longer"),
        ({"proposal_type": ProposalKind.SC_PARAMS_CHANGE}, "invalid proposal type 129"),
        ({"proposer": None}, "proposer can't be empty"),
        ({"initial_deposit": Coins([Coin("BNB", -1)])}, "is invalid"),
        ({"voting_period": timedelta(0)}, "voting period should between 0 and 2 weeks"),
        ({"voting_period": MAX_VOTING_PERIOD + timedelta(seconds=1)}, "voting period"),
    ],
)
def test_proposal_invalid(changes, message):
    with pytest.raises(ValidationError, match=message):
        proposal(**changes).validate_basic()


def test_proposal_max_period_allowed():
    proposal(voting_period=MAX_VOTING_PERIOD).validate_basic()
    assert proposal(voting_period=MAX_VOTING_PERIOD).voting_period == MAX_VOTING_PERIOD


def test_proposal_sign_bytes_sorted():
    raw = proposal(voting_period=timedelta(seconds=1)).sign_bytes()
    decoded = json.loads(raw)
    assert list(decoded) == sorted(decoded)
    assert b" " not in raw
    assert decoded["voting_period"] == "1000000000"
    assert decoded["proposal_type"] == "Text"
    assert decoded["initial_deposit"] == [{"denom": "BNB", "amount": "100"}]
    assert decoded["proposer"] == ADDR.to_bech32()


def test_proposal_str():
    assert str(proposal()).startswith("SubmitProposalMsg{title, description, Text, ")


def test_deposit_valid_and_wrapped():
    msg = DepositMsg(ADDR, 7, DEPOSIT)
    msg.validate_basic()
    decoded = json.loads(msg.sign_bytes())
    assert decoded["type"] == "cosmos-sdk/MsgDeposit"
    assert decoded["value"]["proposal_id"] == "7"
    assert decoded["value"]["depositer"] == ADDR.to_bech32()
    assert msg.signers() == [ADDR]


@pytest.mark.parametrize(
    "depositer, proposal_id, amount, message",
    [
        (None, 1, DEPOSIT, "depositer can't be empty"),
        (ADDR, 1, Coins([Coin("BNB", 0)]), "amount is invalid"),
        (ADDR, -1, DEPOSIT, "proposalId can't be negative"),
    ],
)
def test_deposit_invalid(depositer, proposal_id, amount, message):
    with pytest.raises(ValidationError, match=message):
        DepositMsg(depositer, proposal_id, amount).validate_basic()


def test_vote_valid():
    msg = VoteMsg(ADDR, 3, VoteOption.YES)
    msg.validate_basic()
    assert str(msg) == "VoteMsg{3 - Yes}"
    assert json.loads(msg.sign_bytes()) == {
        "option": "Yes",
        "proposal_id": "3",
        "voter": ADDR.to_bech32(),
    }
    assert msg.signers() == [ADDR]


@pytest.mark.parametrize(
    "voter, proposal_id, option, message",
    [
        (None, 1, VoteOption.YES, "vaoter can't be empty"),
        (ADDR, -1, VoteOption.YES, "proposalId can't be less than 0"),
        (ADDR, 1, VoteOption.EMPTY, "invalid msg option 0"),
    ],
)
def test_vote_invalid(voter, proposal_id, option, message):
    with pytest.raises(ValidationError, match=message):
        VoteMsg(voter, proposal_id, option).validate_basic()