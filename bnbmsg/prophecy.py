"""Oracle prophecies and their database form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum

from .base import ValAddress
from .utils import _dump_json


class StatusText(IntEnum):
    """The state of a prophecy."""

    PENDING = 0
    SUCCESS = 1
    FAILED = 2

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_json(cls, value) -> "StatusText":
        """Parse a JSON string value; unknown names give PENDING."""
        if not isinstance(value, str):
            raise ValueError(f"status text must be a string, got {value!r}")
        return next((member for member in cls if str(member) == value), cls.PENDING)


@dataclass
class Status:
    text: StatusText = StatusText.PENDING
    final_claim: str = ""


@dataclass
class Prophecy:
    """A claim under consensus, with the validators backing each claim."""

    id: str
    status: Status = field(default_factory=Status)
    claim_validators: dict[str, list[ValAddress]] = field(default_factory=dict)
    validator_claims: dict[str, str] = field(default_factory=dict)

    def serialize_for_db(self) -> "DBProphecy":
        return DBProphecy(
            id=self.id,
            status=self.status,
            validator_claims=_dump_json(self.validator_claims, sort_keys=True),
        )


@dataclass
class DBProphecy:
    """A prophecy with its validator claims stored as JSON bytes."""

    id: str
    status: Status
    validator_claims: bytes

    def deserialize_from_db(self) -> Prophecy:
        decoded = json.loads(self.validator_claims)
        if decoded is None:
            decoded = {}
        if not isinstance(decoded, dict) or not all(isinstance(v, str) for v in decoded.values()):
            raise ValueError("validator claims must be a JSON object of strings")

        claim_validators: dict[str, list[ValAddress]] = {}
        for address, claim in decoded.items():
            try:
                validator = ValAddress.from_bech32(address)
            except ValueError as exc:
                raise ValueError(f"unmarshal validator address err, address={address}") from exc
            claim_validators.setdefault(claim, []).append(validator)

        return Prophecy(
            id=self.id,
            status=self.status,
            claim_validators=claim_validators,
            validator_claims=decoded,
        )