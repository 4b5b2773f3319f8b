"""Tests for Riding."""

import math

import pytest

from ridingtally.domain.entities.riding import Candidate, Riding
from ridingtally.domain.value_objects.party import Party
from tests.fixtures.poll_factories import make_riding


class TestWinner:
    def test_most_votes_wins(self) -> None:
        riding = make_riding("R1", {Party.CON: 25, Party.LIB: 20})
        assert riding.winner() is Party.CON

    def test_was_winner(self) -> None:
        riding = make_riding("R1", {Party.CON: 25, Party.LIB: 20})
        assert riding.was_winner(Party.CON)
        assert not riding.was_winner(Party.LIB)
        assert not riding.was_winner(Party.NDP)

    def test_tie_goes_to_first_party_in_order(self) -> None:
        riding = make_riding("R1", {Party.NDP: 30, Party.CON: 30, Party.GRN: 5})
        assert riding.winner() is Party.CON

    def test_tie_break_independent_of_insertion_order(self) -> None:
        a = make_riding("R1", {Party.PPC: 10, Party.LIB: 10})
        b = make_riding("R1", {Party.LIB: 10, Party.PPC: 10})
        assert a.winner() is b.winner() is Party.LIB

    def test_empty_riding_has_no_winner(self) -> None:
        assert Riding("Empty", {}).winner() is None


class TestVictoryMargin:
    def test_margin(self) -> None:
        riding = make_riding("R1", {Party.CON: 25, Party.LIB: 20})
        assert riding.victory_margin() == pytest.approx(5 / 45)

    def test_uses_top_two_only(self) -> None:
        riding = make_riding("R1", {Party.CON: 50, Party.LIB: 30, Party.NDP: 20})
        assert riding.victory_margin() == pytest.approx(0.2)

    def test_exact_tie_is_zero(self) -> None:
        riding = make_riding("R1", {Party.CON: 10, Party.LIB: 10})
        assert riding.victory_margin() == 0.0

    def test_single_candidate_has_no_margin(self) -> None:
        assert make_riding("R1", {Party.LIB: 100}).victory_margin() is None

    def test_no_votes_gives_nan(self) -> None:
        margin = make_riding("R1", {Party.CON: 0, Party.LIB: 0}).victory_margin()
        assert margin is not None
        assert math.isnan(margin)

    def test_unopposed_by_votes_is_one(self) -> None:
        riding = make_riding("R1", {Party.CON: 40, Party.LIB: 0})
        assert riding.victory_margin() == 1.0


class TestAccessors:
    def test_total_votes(self) -> None:
        riding = make_riding("R1", {Party.CON: 25, Party.LIB: 20})
        assert riding.total_votes() == 45

    def test_votes_for(self) -> None:
        riding = make_riding("R1", {Party.CON: 25})
        assert riding.votes_for(Party.CON) == 25
        assert riding.votes_for(Party.LIB) is None

    def test_parties_in_party_order(self) -> None:
        riding = make_riding("R1", {Party.OTH: 1, Party.GRN: 2, Party.LIB: 3})
        assert riding.parties == [Party.LIB, Party.GRN, Party.OTH]

    def test_contains_and_len(self) -> None:
        riding = make_riding("R1", {Party.CON: 1, Party.LIB: 2})
        assert Party.CON in riding
        assert Party.NDP not in riding
        assert len(riding) == 2

    def test_candidates_are_read_only(self) -> None:
        riding = make_riding("R1", {Party.CON: 1})
        with pytest.raises(TypeError):
            riding.candidates[Party.LIB] = Candidate("X", "", 1)  # type: ignore[index]

    def test_source_mapping_changes_do_not_leak(self) -> None:
        source = {Party.CON: Candidate("Smith", "", 1)}
        riding = Riding("R1", source)
        source[Party.LIB] = Candidate("Jones", "", 2)
        assert Party.LIB not in riding

    def test_full_name(self) -> None:
        assert Candidate("Chapman", "Matthew", 33).full_name == "Matthew Chapman"
        assert Candidate("Chapman", "", 33).full_name == "Chapman"


class TestOtherVotes:
    def test_counted_in_total_only(self) -> None:
        riding = Riding(
            "R1",
            {
                Party.LIB: Candidate("Lee", "", 30),
                Party.IND: Candidate("Adams", "", 20, other_votes=15),
            },
        )
        assert riding.total_votes() == 65
        assert riding.votes_for(Party.IND) == 20
        assert riding.winner() is Party.LIB
        assert riding.victory_margin() == pytest.approx(10 / 65)

    def test_party_votes(self) -> None:
        candidate = Candidate("Adams", "", 20, other_votes=15)
        assert candidate.party_votes == 35
        assert Candidate("Lee", "", 30).party_votes == 30
