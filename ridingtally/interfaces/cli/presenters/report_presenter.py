"""Report presenter for the command line.

Turns report records into a JSON array or a text table. Output depends only
on the records, so repeated runs print identical text.
"""

import json
import math

from collections.abc import Sequence
from typing import Any

import pandas as pd


OUTPUT_FORMATS = ("json", "table")

_FLOAT_COLUMNS = ("ratio", "margin", "share")


def _json_safe(value: Any) -> Any:
    # JSON has no NaN; a riding without votes has no margin
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class ReportPresenter:
    """Renders report records for stdout."""

    def __init__(self, output_format: str = "json") -> None:
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    @staticmethod
    def to_rows(records: Sequence[Any]) -> list[dict[str, Any]]:
        return [record.to_dict() for record in records]

    def to_dataframe(self, records: Sequence[Any]) -> pd.DataFrame:
        """Records as a DataFrame, one column per record field."""
        return pd.DataFrame(self.to_rows(records))

    def render(self, records: Sequence[Any], footer: str | None = None) -> str:
        """Render the records in the configured format.

        Args:
            records: Report records (any object with ``to_dict``)
            footer: Extra line appended to table output

        Returns:
            Text to print, without a trailing newline
        """
        if self.output_format == "json":
            return self._render_json(records)
        return self._render_table(records, footer)

    def _render_json(self, records: Sequence[Any]) -> str:
        rows = [
            {key: _json_safe(value) for key, value in row.items()}
            for row in self.to_rows(records)
        ]
        return json.dumps(rows, ensure_ascii=False, indent=2)

    def _render_table(self, records: Sequence[Any], footer: str | None) -> str:
        if not records:
            text = "No records."
        else:
            df = self.to_dataframe(records)
            formatters = {
                column: "{:.4f}".format
                for column in _FLOAT_COLUMNS
                if column in df.columns
            }
            text = df.to_string(index=False, formatters=formatters, na_rep="-")
        if footer:
            text = f"{text}\n{footer}"
        return text
