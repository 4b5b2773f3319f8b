"""Poll fusion domain service.

A candidate's count in a riding is split over many polling stations, and
sometimes over several files. Sorting by (riding, party, last name) makes
every candidate's polls contiguous; each run is then folded into one poll.
"""

from collections.abc import Iterable
from functools import reduce
from itertools import groupby

from ridingtally.domain.value_objects.poll import Poll


def sort_polls(polls: Iterable[Poll]) -> list[Poll]:
    """Sort polls by riding, party order and last name.

    The sort is stable, so polls sharing a key keep their input order.
    """
    return sorted(polls, key=lambda poll: poll.sort_key)


def fuse_polls(polls: Iterable[Poll]) -> list[Poll]:
    """Fuse the polls of each candidate into a single poll.

    Polls are grouped by riding (ignoring case and Unicode form), party and
    last name. The fused poll keeps the first poll's first name and riding
    spelling, with the votes of the whole group.

    Args:
        polls: Raw polls in any order

    Returns:
        One poll per candidate, in sort order
    """
    return [
        reduce(Poll.fuse, group)
        for _, group in groupby(sort_polls(polls), key=lambda poll: poll.fusion_key)
    ]


def total_votes(polls: Iterable[Poll]) -> int:
    return sum(poll.votes for poll in polls)
