"""Tests for ReportPresenter."""

import json
import math

import pytest

from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.report_records import (
    VictoryMargin,
    VoteCount,
)
from ridingtally.interfaces.cli.presenters.report_presenter import ReportPresenter
from tests.fixtures.poll_factories import make_poll


@pytest.fixture
def counts() -> list[VoteCount]:
    return [
        VoteCount(party=Party.LIB, votes=60, ratio=0.6, seats=2),
        VoteCount(party=Party.BLQ, votes=40, ratio=0.4, seats=1),
    ]


class TestReportPresenter:
    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            ReportPresenter("xml")

    def test_json(self, counts: list[VoteCount]) -> None:
        text = ReportPresenter("json").render(counts)
        assert json.loads(text) == [
            {"party": "LIB", "votes": 60, "ratio": 0.6, "seats": 2},
            {"party": "BLQ", "votes": 40, "ratio": 0.4, "seats": 1},
        ]

    def test_json_empty(self) -> None:
        assert ReportPresenter("json").render([]) == "[]"

    def test_json_nan_becomes_null(self) -> None:
        margins = [VictoryMargin(riding="R1", winner=Party.LIB, margin=math.nan)]
        text = ReportPresenter("json").render(margins)
        assert "NaN" not in text
        assert json.loads(text) == [{"riding": "R1", "winner": "LIB", "margin": None}]

    def test_json_keeps_accents(self) -> None:
        polls = [make_poll("Québec", Party.BLQ, "Bérubé", votes=3)]
        assert "Bérubé" in ReportPresenter("json").render(polls)

    def test_table(self, counts: list[VoteCount]) -> None:
        lines = ReportPresenter("table").render(counts).splitlines()

        assert lines[0].split() == ["party", "votes", "ratio", "seats"]
        assert lines[1].split() == ["LIB", "60", "0.6000", "2"]
        assert lines[2].split() == ["BLQ", "40", "0.4000", "1"]

    def test_table_footer(self) -> None:
        polls = [make_poll("R1", Party.CON, "Smith", votes=5)]
        text = ReportPresenter("table").render(polls, footer="Polls: 1")
        assert text.splitlines()[-1] == "Polls: 1"

    def test_table_empty(self) -> None:
        assert ReportPresenter("table").render([], footer="Polls: 0") == (
            "No records.\nPolls: 0"
        )

    def test_render_is_repeatable(self, counts: list[VoteCount]) -> None:
        presenter = ReportPresenter("table")
        assert presenter.render(counts) == presenter.render(counts)
