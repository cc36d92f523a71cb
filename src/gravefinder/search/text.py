"""Normalization and tokenization shared by indexing and querying.

Indexing and query resolution must agree on these rules exactly, otherwise
an indexed lookup and the linear-scan fallback return different records.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Tuple

_TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")
_YEAR = re.compile(r"\b\d{4}\b", re.ASCII)
_DIGITS = re.compile(r"(\d+)", re.ASCII)

# Sorts after every other section regardless of its number
TRAILING_SECTION = "100A"


def normalize(value: Any) -> str:
    """Lower-case, trimmed string form of `value`; None becomes ""."""
    if value is None:
        return ""
    return str(value).strip().lower()


def tokenize(value: Any) -> List[str]:
    """Split on runs of non-alphanumerics, dropping one-character tokens."""
    return [t for t in _TOKEN_SPLIT.split(normalize(value)) if len(t) > 1]


def extract_years(*values: Any) -> List[str]:
    """Return the distinct standalone 4-digit runs found in `values`, in order.

    "6/22/1966" yields "1966"; no date parsing is attempted.
    """
    joined = " ".join("" if v is None else str(v) for v in values)
    return list(dict.fromkeys(_YEAR.findall(joined)))


def section_sort_key(value: Any) -> Tuple[bool, Tuple[Tuple[int, int, str], ...]]:
    """Natural, case-insensitive ordering key for section tokens.

    Digit runs compare numerically ("9" before "12"). Exactly "100A" sorts
    last; "100a" sorts by its number.
    """
    text = "" if value is None else str(value).strip()
    parts: List[Tuple[int, int, str]] = []
    for i, chunk in enumerate(_DIGITS.split(text.casefold())):
        if i % 2:
            parts.append((0, int(chunk), ""))
        elif chunk:
            parts.append((1, 0, chunk))
    return (text == TRAILING_SECTION, tuple(parts))


def sort_section_values(values: Iterable[Any]) -> List[Any]:
    """Return `values` ordered by `section_sort_key`."""
    return sorted(values, key=section_sort_key)
