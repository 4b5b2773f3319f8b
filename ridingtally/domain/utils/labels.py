"""Label normalization helpers."""

import re
import unicodedata


_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "`": "'", "´": "'"})


def normalize_label(label: str) -> str:
    """Normalize a label for alias lookup.

    Unicode is NFC-normalized, apostrophes unified, case folded and runs of
    whitespace collapsed. A leading byte order mark is dropped.
    """
    text = unicodedata.normalize("NFC", label).lstrip("\ufeff")
    text = text.translate(_APOSTROPHES)
    return re.sub(r"\s+", " ", text).strip().casefold()
