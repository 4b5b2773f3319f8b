"""Riding entity."""

import math

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ridingtally.domain.value_objects.party import Party


@dataclass(frozen=True)
class Candidate:
    """A candidate's fused result within one riding.

    ``other_votes`` holds the votes of further candidates running under the
    same party in the riding (several independents, say). They count towards
    the riding and party totals but never towards this candidate's placing.
    """

    last_name: str
    first_name: str
    votes: int
    other_votes: int = 0

    @property
    def full_name(self) -> str:
        """First and last name, as printed on the ballot."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def party_votes(self) -> int:
        """Votes cast for the party's candidates in the riding."""
        return self.votes + self.other_votes


class Riding:
    """An electoral district and the candidates who ran in it.

    At most one candidate per party. The candidate mapping is kept in party
    order and cannot be modified after construction.
    """

    def __init__(self, name: str, candidates: Mapping[Party, Candidate]) -> None:
        """Initialize the riding.

        Args:
            name: Riding name, as spelled in the source files
            candidates: Candidate for each party that ran in the riding
        """
        self.name = name
        self._candidates: Mapping[Party, Candidate] = MappingProxyType(
            {party: candidates[party] for party in sorted(candidates)}
        )

    def __str__(self) -> str:
        return f"{self.name} ({len(self)} candidates)"

    def __repr__(self) -> str:
        return f"Riding(name={self.name!r}, candidates={dict(self._candidates)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Riding):
            return NotImplemented
        return self.name == other.name and dict(self._candidates) == dict(
            other._candidates
        )

    def __hash__(self) -> int:
        return hash(self.name)

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, party: object) -> bool:
        return party in self._candidates

    def __iter__(self) -> Iterator[tuple[Party, Candidate]]:
        return iter(self._candidates.items())

    @property
    def candidates(self) -> Mapping[Party, Candidate]:
        """Read-only mapping of party to candidate."""
        return self._candidates

    @property
    def parties(self) -> list[Party]:
        """Parties with a candidate in the riding, in party order."""
        return list(self._candidates)

    def candidate(self, party: Party) -> Candidate | None:
        return self._candidates.get(party)

    def votes_for(self, party: Party) -> int | None:
        """Votes of the party's candidate, or None if the party did not run."""
        candidate = self._candidates.get(party)
        return candidate.votes if candidate else None

    def total_votes(self) -> int:
        """Sum of all votes cast in the riding."""
        return sum(c.party_votes for c in self._candidates.values())

    def winner(self) -> Party | None:
        """Party whose candidate received the most votes.

        A tie goes to the party that comes first in party order. Returns None
        for a riding without candidates.
        """
        if not self._candidates:
            return None
        # max() keeps the first maximal entry; the mapping is in party order
        return max(self._candidates, key=lambda p: self._candidates[p].votes)

    def was_winner(self, party: Party) -> bool:
        return self.winner() == party

    def victory_margin(self) -> float | None:
        """Gap between the top two candidates as a share of all votes.

        Returns:
            A value in [0, 1]; None when fewer than two candidates ran, NaN
            when nobody received a vote.
        """
        if len(self._candidates) < 2:
            return None
        votes = sorted((c.votes for c in self._candidates.values()), reverse=True)
        total = self.total_votes()
        if total == 0:
            return math.nan
        return (votes[0] - votes[1]) / total
