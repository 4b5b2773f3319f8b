"""Poll record value object."""

from dataclasses import dataclass, replace
from typing import Any

from ridingtally.domain.exceptions import InvalidPollError
from ridingtally.domain.utils.labels import normalize_label
from ridingtally.domain.value_objects.party import Party


FusionKey = tuple[str, Party, str]


@dataclass(frozen=True)
class Poll:
    """One polling station's count for one candidate.

    Also used for fused records, where ``votes`` is the sum over every poll
    of the same riding, party and candidate last name.
    """

    riding: str
    party: Party
    last_name: str
    first_name: str
    votes: int

    def __post_init__(self) -> None:
        if isinstance(self.votes, bool) or not isinstance(self.votes, int):
            raise InvalidPollError(
                f"votes must be an integer, got {self.votes!r}", self.riding
            )
        if self.votes < 0:
            raise InvalidPollError(
                f"votes must be non-negative, got {self.votes}", self.riding
            )

    @property
    def riding_key(self) -> str:
        """Riding name with case and Unicode form normalized."""
        return normalize_label(self.riding)

    @property
    def fusion_key(self) -> FusionKey:
        """Identity of the logical entry this poll contributes to."""
        return (self.riding_key, self.party, self.last_name)

    @property
    def sort_key(self) -> tuple[str, int, str]:
        """Total order: riding, then party order, then last name."""
        return (self.riding_key, self.party.order, self.last_name)

    def fuse(self, other: "Poll") -> "Poll":
        """Fuse two polls of the (hopefully) same candidate.

        The result keeps every field of ``self`` and adds ``other``'s votes.
        """
        return replace(self, votes=self.votes + other.votes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "riding": self.riding,
            "party": self.party.name,
            "last_name": self.last_name,
            "first_name": self.first_name,
            "votes": self.votes,
        }
