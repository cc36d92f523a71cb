"""Classification of raw search-box input into a structured intent.

Rules are tried in a fixed order and the first match wins. A bare 4-digit
input is a year before it is a section or lot number.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from gravefinder.search.text import normalize

YEAR_PATTERN = re.compile(r"\d{4}", re.ASCII)
SECTION_PATTERN = re.compile(r"(section|sec)\s*([a-zA-Z0-9]+)", re.IGNORECASE)
LOT_PATTERN = re.compile(r"lot\s*(\d+)", re.IGNORECASE | re.ASCII)
TOUR_PATTERN = re.compile(r"(.*?)\s*tour", re.IGNORECASE)
NUMBER_PATTERN = re.compile(r"\d+", re.ASCII)


class QueryKind(str, Enum):
    EMPTY = "empty"
    YEAR = "year"
    SECTION = "section"
    LOT = "lot"
    TOUR = "tour"
    NUMBER = "number"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class QueryIntent:
    """A classified query: its kind and the normalized term to look up."""

    kind: QueryKind
    term: str = ""


def classify_query(query_text: str, *, tours_enabled: bool = False) -> QueryIntent:
    """Classify `query_text`.

    Parameters
    ----------
    query_text:
        Raw user input, e.g. "sec 12", "lot 9", "1851", "civil war tour".
    tours_enabled:
        Whether tour names can be resolved. Without a resolver, "... tour"
        inputs fall through to the numeric and free-text rules.
    """
    text = normalize(query_text)
    if not text:
        return QueryIntent(QueryKind.EMPTY)

    if YEAR_PATTERN.fullmatch(text):
        return QueryIntent(QueryKind.YEAR, text)

    match = SECTION_PATTERN.fullmatch(text)
    if match:
        return QueryIntent(QueryKind.SECTION, normalize(match.group(2)))

    match = LOT_PATTERN.fullmatch(text)
    if match:
        return QueryIntent(QueryKind.LOT, normalize(match.group(1)))

    if tours_enabled:
        match = TOUR_PATTERN.fullmatch(text)
        if match:
            return QueryIntent(QueryKind.TOUR, normalize(match.group(1)))

    if NUMBER_PATTERN.fullmatch(text):
        return QueryIntent(QueryKind.NUMBER, text)

    return QueryIntent(QueryKind.TEXT, text)
