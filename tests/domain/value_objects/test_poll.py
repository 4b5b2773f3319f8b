"""Tests for Poll."""

import pytest

from ridingtally.domain.exceptions import InvalidPollError
from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.poll import Poll
from tests.fixtures.poll_factories import make_poll


class TestPollValidation:
    def test_negative_votes_rejected(self) -> None:
        with pytest.raises(InvalidPollError) as exc_info:
            make_poll(votes=-1)
        assert "non-negative" in exc_info.value.reason

    def test_non_integer_votes_rejected(self) -> None:
        with pytest.raises(InvalidPollError):
            make_poll(votes="12")  # type: ignore[arg-type]

    def test_bool_votes_rejected(self) -> None:
        with pytest.raises(InvalidPollError):
            make_poll(votes=True)

    def test_zero_votes_allowed(self) -> None:
        assert make_poll(votes=0).votes == 0


class TestFuse:
    def test_adds_votes(self) -> None:
        a = make_poll(votes=10)
        b = make_poll(votes=15)
        assert a.fuse(b).votes == 25

    def test_keeps_first_record_fields(self) -> None:
        a = make_poll(riding="Avalon", first_name="Matthew", votes=1)
        b = make_poll(riding="Avalon", first_name="Matt", votes=2)
        fused = a.fuse(b)
        assert fused.first_name == "Matthew"
        assert fused.riding == "Avalon"

    def test_inputs_unchanged(self) -> None:
        a = make_poll(votes=10)
        b = make_poll(votes=15)
        a.fuse(b)
        assert a.votes == 10
        assert b.votes == 15


class TestKeys:
    def test_fusion_key_ignores_first_name(self) -> None:
        a = make_poll(first_name="Matthew")
        b = make_poll(first_name="Matt")
        assert a.fusion_key == b.fusion_key

    def test_sort_key_orders_riding_then_party_then_name(self) -> None:
        polls = [
            make_poll(riding="B", party=Party.LIB, last_name="A"),
            make_poll(riding="A", party=Party.CON, last_name="A"),
            make_poll(riding="A", party=Party.LIB, last_name="Z"),
            make_poll(riding="A", party=Party.LIB, last_name="B"),
        ]
        ordered = sorted(polls, key=lambda p: p.sort_key)
        assert [(p.riding, p.party, p.last_name) for p in ordered] == [
            ("A", Party.LIB, "B"),
            ("A", Party.LIB, "Z"),
            ("A", Party.CON, "A"),
            ("B", Party.LIB, "A"),
        ]

    def test_riding_spelling_variants_share_keys(self) -> None:
        a = make_poll(riding="Québec")
        b = make_poll(riding="QUÉBEC")
        assert a.riding_key == b.riding_key == "québec"
        assert a.fusion_key == b.fusion_key
        assert a.sort_key == b.sort_key

    def test_to_dict_uses_party_code(self) -> None:
        poll = Poll("R1", Party.NDP, "Layton", "Jack", 7)
        assert poll.to_dict() == {
            "riding": "R1",
            "party": "NDP",
            "last_name": "Layton",
            "first_name": "Jack",
            "votes": 7,
        }
