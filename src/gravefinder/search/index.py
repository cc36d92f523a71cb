"""Inverted indexes over a fixed burial record collection.

`build_search_index` walks the collection once and files every record under
its section, lot, birth/death years, label tokens and tour-name tokens. The
index is never updated in place: a changed collection gets a new index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from gravefinder.search.text import extract_years, normalize, tokenize

logger = logging.getLogger(__name__)

TourNameResolver = Callable[[Any], str]


@dataclass(slots=True)
class SearchIndex:
    """Key -> records mappings; lists keep collection order."""

    by_section: Dict[str, List[Any]] = field(default_factory=dict)
    by_lot: Dict[str, List[Any]] = field(default_factory=dict)
    by_year: Dict[str, List[Any]] = field(default_factory=dict)
    by_token: Dict[str, List[Any]] = field(default_factory=dict)
    by_tour_token: Dict[str, List[Any]] = field(default_factory=dict)

    def stats(self) -> Dict[str, int]:
        """Number of distinct keys per mapping."""
        return {
            "sections": len(self.by_section),
            "lots": len(self.by_lot),
            "years": len(self.by_year),
            "tokens": len(self.by_token),
            "tour_tokens": len(self.by_tour_token),
        }


def record_label(record: Any) -> str:
    """Lower-cased searchable label, preferring the cached form."""
    cached = getattr(record, "searchable_label_lower", None)
    if cached:
        return str(cached)
    return normalize(getattr(record, "searchable_label", None))


def _add(mapping: Dict[str, List[Any]], key: str, record: Any) -> None:
    if not key:
        return
    mapping.setdefault(key, []).append(record)


def build_search_index(
    records: Iterable[Any], *, get_tour_name: Optional[TourNameResolver] = None
) -> SearchIndex:
    """Build a `SearchIndex` over `records`.

    Parameters
    ----------
    records:
        Burial records in display order. Missing attributes index as empty.
    get_tour_name:
        Optional resolver from record to tour display name. When omitted no
        tour tokens are indexed.
    """
    index = SearchIndex()
    count = 0
    for record in records:
        count += 1
        _add(index.by_section, normalize(getattr(record, "section", None)), record)
        _add(index.by_lot, normalize(getattr(record, "lot", None)), record)

        for year in extract_years(getattr(record, "birth", None), getattr(record, "death", None)):
            _add(index.by_year, year, record)

        for token in dict.fromkeys(tokenize(record_label(record))):
            _add(index.by_token, token, record)

        if get_tour_name is not None:
            tour_name = normalize(get_tour_name(record))
            if tour_name:
                for token in dict.fromkeys(tokenize(tour_name)):
                    _add(index.by_tour_token, token, record)

    logger.debug("Indexed %d burial records: %s", count, index.stats())
    return index
