"""Poll data source interface."""

from pathlib import Path
from typing import Protocol

from ridingtally.domain.value_objects.poll_load_result import PollLoadResult


class IPollDataSourceService(Protocol):
    """Source of raw poll rows for one election.

    Unparseable rows and unreadable files are reported in the result rather
    than raised. A missing source as a whole is an error.
    """

    def load_polls(self, directory: Path) -> PollLoadResult:
        """Load every poll found under ``directory``.

        Args:
            directory: Directory holding one election's result files

        Returns:
            Loaded polls and the rows and files that were skipped

        Raises:
            DataDirectoryNotFoundError: If ``directory`` does not exist
        """
        ...
