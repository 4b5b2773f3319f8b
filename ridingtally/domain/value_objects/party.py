"""Political affiliation value object.

Party labels in Elections Canada poll-by-poll files change from one general
election to the next (bilingual labels, renamed parties, abbreviations).
Every known label is listed once in ``_PARTY_ALIASES``; anything else is
reported under ``Party.OTH``.
"""

from enum import Enum
from functools import total_ordering

from ridingtally.domain.utils.labels import normalize_label


@total_ordering
class Party(Enum):
    """A candidate's political affiliation.

    Declaration order is the total order used for sorting and for breaking
    ties between equally placed candidates.
    """

    LIB = "Liberal"
    CON = "Conservative"
    NDP = "NDP-New Democratic Party"
    BLQ = "Bloc Québécois"
    GRN = "Green Party"
    PPC = "People's Party"
    COM = "Communist"
    IND = "Independent"
    ML = "Marxist-Leninist"
    CHP = "Christian Heritage Party"
    LBT = "Libertarian"
    RHI = "Rhinoceros"
    ANML = "Animal Protection Party"
    MAR = "Marijuana Party"
    PC = "Progressive Canadian"
    VCP = "Veterans Coalition"
    CEN = "Centrist"
    MAV = "Maverick Party"
    FREE = "Free Party Canada"
    NLP = "National Citizens Alliance"
    UNP = "United Party"
    CAP = "Canadian Action"
    PIR = "Pirate"
    REF = "Reform Party"
    ALL = "Canadian Alliance"
    SC = "Social Credit"
    PCP = "Progressive Conservative"
    FPC = "Canada's Fourth Front"
    WBP = "Western Block Party"
    OTH = "Other"

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.order < other.order  # type: ignore[attr-defined]

    @property
    def order(self) -> int:
        """Position of the party in declaration order."""
        return _PARTY_ORDER[self]

    @property
    def label(self) -> str:
        """Display name of the party."""
        return self.value

    @classmethod
    def from_label(cls, label: str | None) -> "Party":
        """Map a raw affiliation label to its party.

        Unknown or empty labels map to ``Party.OTH``.
        """
        if not label:
            return cls.OTH
        return _PARTY_ALIASES.get(normalize_label(label), cls.OTH)

    @classmethod
    def parse(cls, text: str) -> "Party | None":
        """Resolve a user supplied party name, enum code or label.

        Unlike ``from_label`` this returns ``None`` for unknown text so that
        callers can reject it.
        """
        code = text.strip().upper()
        if code in cls.__members__:
            return cls[code]
        return _PARTY_ALIASES.get(normalize_label(text))


_PARTY_ORDER: dict[Party, int] = {party: i for i, party in enumerate(Party)}


# Raw labels seen across the 2004–2021 publications, English and French.
_RAW_ALIASES: dict[Party, tuple[str, ...]] = {
    Party.LIB: (
        "Liberal",
        "Libéral",
        "Liberal Party of Canada",
        "Parti libéral du Canada",
        "Lib.",
        "LIB",
    ),
    Party.CON: (
        "Conservative",
        "Conservateur",
        "Conservative Party of Canada",
        "Parti conservateur du Canada",
        "Cons.",
        "CPC",
        "CON",
    ),
    Party.NDP: (
        "NDP-New Democratic Party",
        "NPD-Nouveau Parti démocratique",
        "New Democratic Party",
        "Nouveau Parti démocratique",
        "NDP",
        "NPD",
        "N.D.P.",
    ),
    Party.BLQ: (
        "Bloc Québécois",
        "Bloc Quebecois",
        "Bloc",
        "BQ",
    ),
    Party.GRN: (
        "Green Party",
        "Parti Vert",
        "Green Party of Canada",
        "Parti vert du Canada",
        "Green",
        "GP",
    ),
    Party.PPC: (
        "People's Party",
        "People's Party - PPC",
        "Parti populaire - PPC",
        "People's Party of Canada",
        "Parti populaire du Canada",
        "Parti populaire",
        "PPC",
    ),
    Party.COM: (
        "Communist",
        "Communiste",
        "Communist Party of Canada",
        "Parti communiste du Canada",
    ),
    Party.IND: (
        "Independent",
        "Indépendant",
        "Indépendante",
        "Ind.",
        "No Affiliation",
        "Aucune appartenance",
    ),
    Party.ML: (
        "Marxist-Leninist",
        "Marxiste-Léniniste",
        "Marxist-Leninist Party of Canada",
        "Parti marxiste-léniniste du Canada",
    ),
    Party.CHP: (
        "Christian Heritage Party",
        "Parti de l'Héritage Chrétien",
        "CHP Canada",
        "PHC Canada",
    ),
    Party.LBT: (
        "Libertarian",
        "Libertarien",
        "Libertarian Party of Canada",
        "Parti libertarien du Canada",
    ),
    Party.RHI: (
        "Rhinoceros",
        "Rhinocéros",
        "Parti Rhinocéros Party",
        "neorhino.ca",
    ),
    Party.ANML: (
        "Animal Protection Party",
        "Parti pour la Protection des Animaux",
        "Animal Alliance/Environment Voters",
        "Animal Alliance Environment Voters Party of Canada",
        "AAEV Party of Canada",
    ),
    Party.MAR: (
        "Marijuana Party",
        "Parti Marijuana",
        "Radical Marijuana",
    ),
    Party.PC: (
        "Progressive Canadian",
        "Progressiste canadien",
        "PC Party",
    ),
    Party.VCP: (
        "Veterans Coalition",
        "Coalition des anciens combattants",
        "Canadian Veterans Coalition Party",
    ),
    Party.CEN: (
        "Centrist",
        "Centriste",
        "Parti Centriste",
    ),
    Party.MAV: (
        "Maverick Party",
        "Parti Maverick",
    ),
    Party.FREE: (
        "Free Party Canada",
        "Parti Libre Canada",
    ),
    Party.NLP: (
        "National Citizens Alliance",
        "Alliance nationale des citoyens",
    ),
    Party.UNP: (
        "United Party",
        "Parti Uni",
        "United Party of Canada",
        "Parti Uni du Canada",
    ),
    Party.CAP: (
        "Canadian Action",
        "Action canadienne",
        "Canadian Action Party",
        "Parti action canadienne",
    ),
    Party.PIR: (
        "Pirate",
        "Pirate Party",
        "Parti Pirate",
    ),
    Party.REF: (
        "Reform Party",
        "Parti réformiste",
        "Reform",
    ),
    Party.ALL: (
        "Canadian Alliance",
        "Alliance canadienne",
        "Canadian Reform Conservative Alliance",
    ),
    Party.SC: (
        "Social Credit",
        "Crédit social",
    ),
    Party.PCP: (
        "Progressive Conservative",
        "Progressiste-conservateur",
        "P.C.",
    ),
    Party.FPC: (
        "Canada's Fourth Front",
        "Quatrième front du Canada",
    ),
    Party.WBP: (
        "Western Block Party",
        "Parti Bloc de l'Ouest",
    ),
    Party.OTH: (
        "Other",
        "Autre",
    ),
}


def _build_alias_table() -> dict[str, Party]:
    table: dict[str, Party] = {}
    for party, labels in _RAW_ALIASES.items():
        for raw in (party.value, *labels):
            key = normalize_label(raw)
            bound = table.setdefault(key, party)
            if bound is not party:
                raise ValueError(f"Label {raw!r} bound to both {bound} and {party}")
    return table


_PARTY_ALIASES: dict[str, Party] = _build_alias_table()
