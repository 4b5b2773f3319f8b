"""Election report domain service.

Each report is computed from the full list of ridings and returns a list of
report records. Nothing is cached between calls.
"""

from __future__ import annotations

import math

from collections import Counter
from collections.abc import Sequence

from ridingtally.domain.entities.riding import Riding
from ridingtally.domain.value_objects.party import Party
from ridingtally.domain.value_objects.report_records import (
    ComboVictory,
    PartyResults,
    VictoryMargin,
    VoteCount,
)


class ElectionReportService:
    """Derives party-wide and riding-level reports from fused ridings."""

    def totals(self, ridings: Sequence[Riding]) -> list[VoteCount]:
        """Popular vote and seats won by each party.

        Args:
            ridings: All ridings of the election

        Returns:
            One record per party that ran at least one candidate, by seats,
            then votes (both descending), then party order
        """
        seats: Counter[Party] = Counter()
        votes: Counter[Party] = Counter()
        for riding in ridings:
            winner = riding.winner()
            if winner is not None:
                seats[winner] += 1
            for party, candidate in riding:
                votes[party] += candidate.party_votes

        all_votes = sum(votes.values())
        counts = [
            VoteCount(
                party=party,
                votes=party_votes,
                ratio=party_votes / all_votes if all_votes else 0.0,
                seats=seats[party],
            )
            for party, party_votes in votes.items()
        ]
        return sorted(counts, key=lambda c: (-c.seats, -c.votes, c.party.order))

    def combined_victories(
        self, ridings: Sequence[Riding], party: Party, ally: Party
    ) -> list[ComboVictory]:
        """Ridings ``party`` would have taken with ``ally``'s votes added.

        Only ridings won by a third party are considered. Ridings where ``party``
        or ``ally`` did not run are skipped.
        """
        victories: list[ComboVictory] = []
        for riding in ridings:
            winner = riding.winner()
            if winner is None or winner in (party, ally):
                continue
            party_votes = riding.votes_for(party)
            ally_votes = riding.votes_for(ally)
            winner_votes = riding.votes_for(winner)
            if party_votes is None or ally_votes is None or winner_votes is None:
                continue

            combined = party_votes + ally_votes
            if combined > winner_votes:
                victories.append(
                    ComboVictory(
                        riding=riding.name,
                        winner=winner,
                        winner_votes=winner_votes,
                        combined_votes=combined,
                        difference=combined - winner_votes,
                    )
                )
        return victories

    def victory_margins(self, ridings: Sequence[Riding]) -> list[VictoryMargin]:
        """Victory margin of every contested riding, closest race first.

        Ridings with fewer than two candidates are left out. Ridings without
        any vote have a NaN margin and are listed last.
        """
        margins: list[VictoryMargin] = []
        for riding in ridings:
            margin = riding.victory_margin()
            winner = riding.winner()
            if margin is None or winner is None:
                continue
            margins.append(
                VictoryMargin(riding=riding.name, winner=winner, margin=margin)
            )
        return sorted(margins, key=_margin_sort_key)

    def party_performance(
        self, ridings: Sequence[Riding], party: Party
    ) -> list[PartyResults]:
        """Vote share of ``party``'s candidate in every riding it contested.

        Returns:
            Records sorted by ascending vote share
        """
        results: list[PartyResults] = []
        for riding in ridings:
            candidate = riding.candidate(party)
            if candidate is None:
                continue
            total = riding.total_votes()
            results.append(
                PartyResults(
                    riding=riding.name,
                    party=party,
                    last_name=candidate.last_name,
                    first_name=candidate.first_name,
                    votes=candidate.votes,
                    total_votes=total,
                    share=candidate.votes / total if total else 0.0,
                    won=riding.was_winner(party),
                )
            )
        return sorted(results, key=lambda r: (r.share, r.riding))


def _margin_sort_key(margin: VictoryMargin) -> tuple[bool, float, str]:
    # NaN does not compare; rank it after every real margin
    is_nan = math.isnan(margin.margin)
    return (is_nan, 0.0 if is_nan else margin.margin, margin.riding)
