"""Poll loading result value objects."""

from dataclasses import dataclass, field
from pathlib import Path

from ridingtally.domain.value_objects.poll import Poll


@dataclass(frozen=True)
class RowError:
    """A source row that could not be turned into a poll."""

    source: str
    line: int
    reason: str

    def __str__(self) -> str:
        return f"{self.source}:{self.line}: {self.reason}"


@dataclass
class PollLoadResult:
    """Polls read from a data source, with what had to be left out."""

    polls: list[Poll] = field(default_factory=list)
    row_errors: list[RowError] = field(default_factory=list)
    files_read: list[Path] = field(default_factory=list)
    files_skipped: list[Path] = field(default_factory=list)

    @property
    def total_votes(self) -> int:
        return sum(poll.votes for poll in self.polls)

    def extend(self, other: "PollLoadResult") -> None:
        """Append another result, keeping the order of both."""
        self.polls.extend(other.polls)
        self.row_errors.extend(other.row_errors)
        self.files_read.extend(other.files_read)
        self.files_skipped.extend(other.files_skipped)
