import re
import unicodedata

# "Năm 1945, " at the start of a story
_YEAR_PREFIX_RE = re.compile(r"^Năm [0-9]+,\s*", re.IGNORECASE)
_PAREN_YEAR_RE = re.compile(r"\([0-9]+\)")
_DIEN_RA_NAM_RE = re.compile(r"diễn ra năm [0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_year_prefix(text: str) -> str:
    """Remove a leading "Năm <digits>, " (any case)."""
    return _YEAR_PREFIX_RE.sub("", text, count=1)


def strip_given_year_prefix(text: str, year: str) -> str:
    """Remove a leading "Năm <year>, " for one specific year label."""
    return re.sub(rf"^Năm {re.escape(year)},\s*", "", text, count=1, flags=re.IGNORECASE)


def keep_letters_numbers_spaces(text: str) -> str:
    """
    Drop every char that is not a Unicode letter, number or whitespace.
    Combining marks count as punctuation here, so callers should NFC first.
    """
    return "".join(
        c for c in text
        if c.isspace() or unicodedata.category(c)[0] in ("L", "N")
    )


def normalize_for_similarity(text: str) -> str:
    """
    Similarity text for dedup, never rendered.

    - NFC (composed and decomposed diacritics compare equal)
    - Strips "Năm XXXX, " prefix, "(XXXX)" annotations, "diễn ra năm XXXX"
    - Removes punctuation, collapses whitespace
    """
    if not text:
        return ""

    result = unicodedata.normalize("NFC", text).strip()
    result = strip_year_prefix(result)
    result = _PAREN_YEAR_RE.sub("", result)
    result = _DIEN_RA_NAM_RE.sub("", result)
    result = keep_letters_numbers_spaces(result)
    result = _WHITESPACE_RE.sub(" ", result).strip()
    return result
