"""Elections Canada poll-by-poll file constants."""

# Logical field -> column headers used for it across publications
HEADER_ALIASES: dict[str, tuple[str, ...]] = {
    "riding": (
        "Electoral District Name_English/Nom de circonscription_Anglais",
        "Electoral District Name/Nom de circonscription",
        "Electoral District Name",
        "Electoral District",
        "Riding",
    ),
    "party": (
        "Political Affiliation Name_English/Appartenance politique_Anglais",
        "Political Affiliation Name/Appartenance politique",
        "Political Affiliation Name_English",
        "Political Affiliation",
        "Party",
    ),
    "last_name": (
        "Candidate’s Family Name/Nom de famille du candidat",
        "Candidate Family Name/Nom de famille du candidat",
        "Candidate’s Family Name",
        "Family Name",
        "Last Name",
        "last_name",
    ),
    "first_name": (
        "Candidate’s First Name/Prénom du candidat",
        "Candidate First Name/Prénom du candidat",
        "Candidate’s First Name",
        "First Name",
        "first_name",
    ),
    "votes": (
        "Candidate Poll Votes Count/Votes du candidat pour le bureau",
        "Candidate Poll Votes Count",
        "Poll Votes",
        "Votes",
    ),
}

REQUIRED_FIELDS: tuple[str, ...] = ("riding", "party", "last_name", "votes")

RESULT_FILE_SUFFIXES: tuple[str, ...] = (".csv",)

DEFAULT_ENCODING = "utf-8-sig"
FALLBACK_ENCODING = "cp1252"
