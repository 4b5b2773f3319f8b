"""Elections Canada poll-by-poll CSV parser.

File layout (one file per riding, one row per poll station and candidate):
    10001,"Avalon","Avalon"," 1","Freshwater",N,N,"",0,121,"Chapman","",
    "Matthew","Conservative","Conservateur",N,N,33

Column names differ between publications; ``HEADER_ALIASES`` maps each
variant to the logical field it holds. Only riding, party, candidate names
and vote count are read.
"""

import csv
import io
import logging

from pathlib import Path

from ridingtally.domain.exceptions import InvalidPollError
from ridingtally.domain.utils.labels import normalize_label
from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.poll import Poll
from ridingtally.domain.value_objects.poll_load_result import PollLoadResult, RowError
from ridingtally.infrastructure.importers._constants import (
    DEFAULT_ENCODING,
    FALLBACK_ENCODING,
    HEADER_ALIASES,
    REQUIRED_FIELDS,
)


logger = logging.getLogger(__name__)

_FIELD_BY_HEADER: dict[str, str] = {
    normalize_label(header): field_name
    for field_name, headers in HEADER_ALIASES.items()
    for header in headers
}


class RowParseError(ValueError):
    """A CSV row does not hold a valid poll."""


def map_header(header: list[str]) -> dict[str, int]:
    """Locate each logical field in a header row.

    Args:
        header: Column names of the file

    Returns:
        Logical field name -> column index. The first matching column wins.
    """
    columns: dict[str, int] = {}
    for idx, name in enumerate(header):
        field_name = _FIELD_BY_HEADER.get(normalize_label(name))
        if field_name is not None and field_name not in columns:
            columns[field_name] = idx
    return columns


def _cell(row: list[str], columns: dict[str, int], field_name: str) -> str | None:
    idx = columns.get(field_name)
    if idx is None or idx >= len(row):
        return None
    return row[idx].strip()


def _parse_votes(value: str) -> int:
    """Parse a vote count cell, allowing thousands separators."""
    text = value.replace(",", "").replace(" ", "").replace("\u00a0", "")
    try:
        return int(text)
    except ValueError:
        raise RowParseError(f"invalid vote count {value!r}") from None


def parse_row(row: list[str], columns: dict[str, int]) -> Poll:
    """Build a poll from one CSV row.

    Raises:
        RowParseError: If a required value is missing or malformed
    """
    values: dict[str, str] = {}
    for field_name in REQUIRED_FIELDS:
        value = _cell(row, columns, field_name)
        if value is None:
            raise RowParseError(f"missing column {field_name!r}")
        values[field_name] = value

    if not values["riding"]:
        raise RowParseError("empty riding name")
    if not values["last_name"]:
        raise RowParseError("empty candidate family name")

    try:
        return Poll(
            riding=values["riding"],
            party=Party.from_label(values["party"]),
            last_name=values["last_name"],
            first_name=_cell(row, columns, "first_name") or "",
            votes=_parse_votes(values["votes"]),
        )
    except InvalidPollError as e:
        raise RowParseError(e.reason) from e


def parse_csv_text(text: str, source: str) -> PollLoadResult:
    """Parse the contents of one result file.

    Rows that cannot be parsed are recorded and skipped.

    Raises:
        RowParseError: If the header lacks a required field
    """
    result = PollLoadResult()
    reader = csv.reader(io.StringIO(text))
    header = next(reader, None)
    if header is None:
        return result

    columns = map_header(header)
    missing = [f for f in REQUIRED_FIELDS if f not in columns]
    if missing:
        raise RowParseError(f"header lacks {', '.join(missing)}")

    for row in reader:
        if not any(cell.strip() for cell in row):
            continue
        try:
            result.polls.append(parse_row(row, columns))
        except RowParseError as e:
            error = RowError(source=source, line=reader.line_num, reason=str(e))
            logger.warning("Skipping row %s", error)
            result.row_errors.append(error)
    return result


def read_text(
    file_path: Path,
    encoding: str = DEFAULT_ENCODING,
    fallback_encoding: str | None = FALLBACK_ENCODING,
) -> str:
    """Read a result file, retrying with the fallback encoding if needed."""
    try:
        return file_path.read_text(encoding=encoding)
    except UnicodeDecodeError:
        if not fallback_encoding:
            raise
        logger.info(
            "%s is not %s, retrying as %s", file_path, encoding, fallback_encoding
        )
        return file_path.read_text(encoding=fallback_encoding)


def parse_csv_file(
    file_path: Path,
    encoding: str = DEFAULT_ENCODING,
    fallback_encoding: str | None = FALLBACK_ENCODING,
) -> PollLoadResult:
    """Parse one result file.

    An unreadable file or one without the expected header is skipped and
    listed in ``files_skipped``.

    Args:
        file_path: CSV file path
        encoding: Encoding tried first
        fallback_encoding: Encoding tried when the first one fails

    Returns:
        Polls and row errors of the file
    """
    try:
        text = read_text(file_path, encoding, fallback_encoding)
        result = parse_csv_text(text, file_path.name)
    except (OSError, UnicodeDecodeError, RowParseError, csv.Error) as e:
        logger.error("Skipping file %s: %s", file_path, e)
        return PollLoadResult(files_skipped=[file_path])

    result.files_read.append(file_path)
    logger.debug(
        "%s: %d polls, %d rows skipped",
        file_path.name,
        len(result.polls),
        len(result.row_errors),
    )
    return result
