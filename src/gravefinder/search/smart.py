"""Query resolution against a `SearchIndex` with linear-scan fallbacks.

Each intent prefers its index mapping and scans the full collection when no
index (or no matching index entry) is available. Index hits are deduplicated
by record identity since one record can sit under several keys.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from gravefinder.records import identity_key
from gravefinder.search.index import SearchIndex, TourNameResolver, record_label
from gravefinder.search.query import QueryKind, classify_query
from gravefinder.search.text import normalize, tokenize

logger = logging.getLogger(__name__)


def dedupe(records: Iterable[Any]) -> List[Any]:
    """Drop repeated records by identity key, keeping first occurrences."""
    seen = set()
    out: List[Any] = []
    for record in records:
        key = identity_key(record)
        if key in seen:
            continue
        seen.add(key)
        out.append(record)
    return out


def _lookup(index: Optional[SearchIndex], mapping_name: str, key: str) -> Optional[List[Any]]:
    # An absent index or sub-map behaves like a miss
    mapping = getattr(index, mapping_name, None) if index is not None else None
    if not mapping or not key:
        return None
    return mapping.get(key) or None


def _field(record: Any, name: str) -> str:
    value = getattr(record, name, None)
    return "" if value is None else str(value)


def _in_dates(record: Any, text: str) -> bool:
    return text in _field(record, "birth") or text in _field(record, "death")


def smart_search(
    records: Sequence[Any],
    query_text: str,
    *,
    index: Optional[SearchIndex] = None,
    get_tour_name: Optional[TourNameResolver] = None,
) -> List[Any]:
    """Classify `query_text` and return matching records.

    Parameters
    ----------
    records:
        The collection `index` was built from; scanned when the index misses.
    query_text:
        Raw user input.
    index:
        Optional index from `build_search_index`.
    get_tour_name:
        Optional record -> tour name resolver, the same one used at build time.
        Enables "<name> tour" queries and tour-name matching of free text.
    """
    intent = classify_query(query_text, tours_enabled=get_tour_name is not None)
    term = intent.term
    kind = intent.kind

    if kind is QueryKind.EMPTY:
        return []

    if kind is QueryKind.YEAR:
        hits = _lookup(index, "by_year", term)
        if hits:
            return dedupe(hits)
        return [r for r in records if _in_dates(r, term)]

    if kind is QueryKind.SECTION:
        hits = _lookup(index, "by_section", term)
        if hits:
            return dedupe(hits)
        return [r for r in records if normalize(getattr(r, "section", None)) == term]

    if kind is QueryKind.LOT:
        hits = _lookup(index, "by_lot", term)
        if hits:
            return dedupe(hits)
        return [r for r in records if normalize(getattr(r, "lot", None)) == term]

    if kind is QueryKind.TOUR and get_tour_name is not None:
        tokens = tokenize(term)
        pool = (_lookup(index, "by_tour_token", tokens[0]) if tokens else None) or records
        return dedupe(r for r in pool if term in normalize(get_tour_name(r)))

    if kind is QueryKind.NUMBER:
        matches: List[Any] = []
        for mapping_name in ("by_section", "by_lot", "by_year"):
            matches.extend(_lookup(index, mapping_name, term) or [])
        if matches:
            return dedupe(matches)
        return [
            r
            for r in records
            if normalize(getattr(r, "section", None)) == term
            or normalize(getattr(r, "lot", None)) == term
            or _in_dates(r, term)
        ]

    # Free text: scan only the most selective token's records when indexed
    pool: Sequence[Any] = records
    tokens = tokenize(term)
    if tokens and index is not None and getattr(index, "by_token", None) is not None:
        pools = [p for p in (index.by_token.get(t) for t in tokens) if p]
        if pools:
            pool = min(pools, key=len)

    results = dedupe(
        r
        for r in pool
        if term in record_label(r)
        or (get_tour_name is not None and term in normalize(get_tour_name(r)))
    )
    logger.debug("Query %r (%s) matched %d records", term, kind.value, len(results))
    return results
