"""Tools for turning cell text into numbers and significance letters."""

import math
import re

from ...core.constants import KEYWORDS

_TRAILING_LETTERS = re.compile(r"([A-Z]+)\s*$")
_WHITESPACE = re.compile(r"\s+")


def parse_number(text: str | None) -> float | None:
    """
    Parse a numeric cell.

    Thousands separators and a trailing percent sign are removed. Empty or
    non-numeric text yields None rather than zero: None means "no data" while
    0.0 is a measured zero.
    """
    if text is None:
        return None
    cleaned = text.strip().replace(",", "")
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    # float() accepts digit-group underscores, spreadsheets do not
    if not cleaned or "_" in cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_sig(text: str | None) -> str:
    """
    Extract significance letters from a %Sig cell.

    Numeric and empty cells give "". Otherwise the trailing run of letters is
    kept, which drops alpha-level prefixes such as the "15" in "15  BC".
    """
    if text is None:
        return ""
    cleaned = _WHITESPACE.sub(" ", text).strip().upper()
    if not cleaned or parse_number(cleaned) is not None:
        return ""
    match = _TRAILING_LETTERS.search(cleaned)
    return match.group(1) if match else ""


def is_total_label(label: str) -> bool:
    """Whether a row label names a total row."""
    return label.strip().casefold() in KEYWORDS.TOTAL_LABELS
