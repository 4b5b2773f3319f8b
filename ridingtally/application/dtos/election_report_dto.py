"""Election report generation DTOs."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.poll_load_result import RowError


class ReportKind(Enum):
    """Reports the use case can produce."""

    TOTALS = "totals"
    COMBO = "combo"
    MARGINS = "margins"
    PARTY = "party"
    POLLS = "polls"


@dataclass
class GenerateReportInputDto:
    """Input of the report generation use case."""

    kind: ReportKind
    data_dir: Path
    party: Party | None = None
    ally: Party | None = None
    limit: int | None = None


@dataclass
class GenerateReportOutputDto:
    """Output of the report generation use case."""

    kind: ReportKind
    records: list[Any] = field(default_factory=list)
    raw_polls: int = 0
    raw_votes: int = 0
    fused_polls: int = 0
    ridings: int = 0
    files_read: int = 0
    files_skipped: int = 0
    row_errors: list[RowError] = field(default_factory=list)
