"""Elections Canada poll-by-poll data source.

Reads every result file in an election's directory. Files may be parsed in
worker threads; their results are always merged in file-path order.
"""

import logging

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from ridingtally.domain.value_objects.poll_load_result import PollLoadResult
from ridingtally.infrastructure.exceptions import DataDirectoryNotFoundError
from ridingtally.infrastructure.importers._constants import (
    DEFAULT_ENCODING,
    FALLBACK_ENCODING,
    RESULT_FILE_SUFFIXES,
)
from ridingtally.infrastructure.importers.elections_canada_csv_parser import (
    parse_csv_file,
)


logger = logging.getLogger(__name__)


def list_result_files(directory: Path) -> list[Path]:
    """Result files of a directory, sorted by path."""
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in RESULT_FILE_SUFFIXES
    )


class ElectionsCanadaDataSource:
    """Loads polls from a directory of Elections Canada CSV files."""

    def __init__(
        self,
        workers: int = 1,
        encoding: str = DEFAULT_ENCODING,
        fallback_encoding: str | None = FALLBACK_ENCODING,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._workers = workers
        self._encoding = encoding
        self._fallback_encoding = fallback_encoding

    def load_polls(self, directory: Path) -> PollLoadResult:
        """Load every poll of the directory's result files.

        Raises:
            DataDirectoryNotFoundError: If ``directory`` is not a directory
        """
        if not directory.is_dir():
            raise DataDirectoryNotFoundError(directory)

        files = list_result_files(directory)
        if not files:
            logger.warning("No result files in %s", directory)

        parse = partial(
            parse_csv_file,
            encoding=self._encoding,
            fallback_encoding=self._fallback_encoding,
        )
        if self._workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as executor:
                # map() yields in submission order, whatever finishes first
                per_file = list(executor.map(parse, files))
        else:
            per_file = [parse(path) for path in files]

        result = PollLoadResult()
        for file_result in per_file:
            result.extend(file_result)

        logger.info(
            "Loaded %d polls from %d files (%d rows skipped, %d files skipped)",
            len(result.polls),
            len(result.files_read),
            len(result.row_errors),
            len(result.files_skipped),
        )
        return result
