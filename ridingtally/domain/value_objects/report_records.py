"""Report record value objects.

Each report generator emits one of these records per row. ``to_dict``
renders parties by their enum code so that output is stable across label
changes.
"""

from dataclasses import asdict, dataclass
from typing import Any

from ridingtally.domain.value_objects.party import Party


def _plain(record: Any) -> dict[str, Any]:
    return {
        key: value.name if isinstance(value, Party) else value
        for key, value in asdict(record).items()
    }


@dataclass(frozen=True)
class VoteCount:
    """Party-wide vote and seat totals."""

    party: Party
    votes: int
    ratio: float
    seats: int

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)


@dataclass(frozen=True)
class ComboVictory:
    """A riding the combined vote of two parties would have taken."""

    riding: str
    winner: Party
    winner_votes: int
    combined_votes: int
    difference: int

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)


@dataclass(frozen=True)
class VictoryMargin:
    """Normalized gap between the top two candidates of a riding."""

    riding: str
    winner: Party
    margin: float

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)


@dataclass(frozen=True)
class PartyResults:
    """One party's result in one riding."""

    riding: str
    party: Party
    last_name: str
    first_name: str
    votes: int
    total_votes: int
    share: float
    won: bool

    def to_dict(self) -> dict[str, Any]:
        return _plain(self)
