"""Riding construction domain service."""

import logging

from collections.abc import Iterable, Sequence
from itertools import groupby

from ridingtally.domain.entities.riding import Candidate, Riding
from ridingtally.domain.services.poll_fusion_service import sort_polls
from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.poll import Poll


logger = logging.getLogger(__name__)


def build_ridings(fused_polls: Iterable[Poll]) -> list[Riding]:
    """Group fused polls into ridings.

    Every poll becomes the candidate of its party in its riding. Riding names
    that differ only in case or Unicode form name the same riding;
    the first spelling in sort order is kept. Polls must already be fused by
    riding, party and last name.

    Args:
        fused_polls: Output of ``fuse_polls``

    Returns:
        Ridings sorted by name
    """
    return [
        _build_riding(group[0].riding, group)
        for group in (
            list(polls)
            for _, polls in groupby(
                sort_polls(fused_polls), key=lambda poll: poll.riding_key
            )
        )
    ]


def _build_riding(name: str, polls: Sequence[Poll]) -> Riding:
    candidates: dict[Party, Candidate] = {}
    for party, group in groupby(polls, key=lambda poll: poll.party):
        candidates[party] = _candidate_for_slot(name, party, list(group))
    return Riding(name, candidates)


def _candidate_for_slot(riding: str, party: Party, polls: Sequence[Poll]) -> Candidate:
    """Build the single candidate a party may hold in a riding.

    Several candidates under one party (independents, or minor parties that
    all fall into the catch-all) share the slot: the leading candidate keeps
    it with their own votes, and the others' votes are carried as
    ``other_votes`` so that riding and party totals stay complete.
    """
    top = max(polls, key=lambda poll: poll.votes)
    other_votes = sum(poll.votes for poll in polls) - top.votes
    if len(polls) > 1:
        logger.warning(
            "%s: %d candidates under %s, %s keeps the slot (%d other votes)",
            riding,
            len(polls),
            party.name,
            top.last_name,
            other_votes,
        )
    return Candidate(
        last_name=top.last_name,
        first_name=top.first_name,
        votes=top.votes,
        other_votes=other_votes,
    )
