"""A record collection paired with its search index.

`BurialDirectory` makes the rebuild-on-change contract explicit: the index is
rebuilt by `rebuild()` or by `ensure_version()` when the caller reports a new
collection version, never implicitly per query.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Hashable, Iterable, List, Optional, Tuple

from gravefinder.search.index import SearchIndex, TourNameResolver, build_search_index
from gravefinder.search.query import QueryIntent, classify_query
from gravefinder.search.smart import smart_search
from gravefinder.search.text import sort_section_values

logger = logging.getLogger(__name__)


def _plain(value: Any) -> str:
    return "" if value is None else str(value).strip()


def is_named(record: Any) -> bool:
    """True when the record has a first or last name and so can be searched."""
    return bool(
        _plain(getattr(record, "first_name", None)) or _plain(getattr(record, "last_name", None))
    )


class BurialDirectory:
    """Owns burial records, their version token and their `SearchIndex`.

    All records are kept for section browsing; only named records are indexed
    and searched.
    """

    def __init__(
        self,
        records: Iterable[Any] = (),
        *,
        get_tour_name: Optional[TourNameResolver] = None,
        version: Optional[Hashable] = None,
    ) -> None:
        self._get_tour_name = get_tour_name
        self._counter = itertools.count(1)
        self._records: Tuple[Any, ...] = ()
        self._searchable: Tuple[Any, ...] = ()
        self._index = SearchIndex()
        self._version: Optional[Hashable] = None
        self.rebuild(records, version=version)

    @property
    def records(self) -> Tuple[Any, ...]:
        return self._records

    @property
    def searchable_records(self) -> Tuple[Any, ...]:
        return self._searchable

    @property
    def index(self) -> SearchIndex:
        return self._index

    @property
    def version(self) -> Optional[Hashable]:
        return self._version

    @property
    def get_tour_name(self) -> Optional[TourNameResolver]:
        return self._get_tour_name

    def __len__(self) -> int:
        return len(self._records)

    def rebuild(self, records: Iterable[Any], *, version: Optional[Hashable] = None) -> SearchIndex:
        """Replace the collection and rebuild the index.

        When `version` is omitted an internal counter supplies a fresh token.
        """
        self._records = tuple(records)
        self._searchable = tuple(r for r in self._records if is_named(r))
        self._index = build_search_index(self._searchable, get_tour_name=self._get_tour_name)
        self._version = version if version is not None else next(self._counter)
        logger.info(
            "Rebuilt burial index: %d records, %d searchable (version %r)",
            len(self._records),
            len(self._searchable),
            self._version,
        )
        return self._index

    def ensure_version(self, records: Iterable[Any], version: Hashable) -> bool:
        """Rebuild only if `version` differs from the current one.

        Returns True when a rebuild happened.
        """
        if version == self._version:
            return False
        self.rebuild(records, version=version)
        return True

    def classify(self, query_text: str) -> QueryIntent:
        return classify_query(query_text, tours_enabled=self._get_tour_name is not None)

    def search(self, query_text: str, *, limit: Optional[int] = None) -> List[Any]:
        """Resolve `query_text` against the owned index, optionally capped."""
        results = smart_search(
            self._searchable,
            query_text,
            index=self._index,
            get_tour_name=self._get_tour_name,
        )
        if limit is not None:
            return results[: max(0, int(limit))]
        return results

    def sections(self) -> List[str]:
        """Distinct non-empty section values in section order."""
        distinct = dict.fromkeys(_plain(getattr(r, "section", None)) for r in self._records)
        return sort_section_values(s for s in distinct if s)

    def filter_section(
        self, section: str, *, lot: Optional[str] = None, tier: Optional[str] = None
    ) -> List[Any]:
        """Records in `section`, restricted to `lot` and/or `tier` when given.

        Values compare as exact trimmed strings, as the section picker does.
        """
        wanted = _plain(section)
        if not wanted:
            return []
        lot_value = _plain(lot)
        tier_value = _plain(tier)
        out: List[Any] = []
        for record in self._records:
            if _plain(getattr(record, "section", None)) != wanted:
                continue
            if lot_value and _plain(getattr(record, "lot", None)) != lot_value:
                continue
            if tier_value and _plain(getattr(record, "tier", None)) != tier_value:
                continue
            out.append(record)
        return out
