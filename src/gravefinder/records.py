"""Burial record model.

A `BurialRecord` is one flat entry of the cemetery's burial dataset (the
`properties` of a GeoJSON feature plus its point coordinates). The search
core only reads a handful of attributes from it; helpers here read those
attributes defensively so any object exposing the same names can be indexed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping, Optional, Tuple, Union


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _object_id(value: Any) -> Optional[Union[int, str]]:
    # Malformed ids (lists, objects) are kept as text so they stay hashable
    if value is None or isinstance(value, (int, str)):
        return value
    return str(value)


def make_searchable_label(first_name: Any, last_name: Any, section: Any, lot: Any) -> str:
    """Return the display/search label, e.g. "Jane Doe (Section 12, Lot 8)"."""
    return f"{_text(first_name)} {_text(last_name)} (Section {_text(section)}, Lot {_text(lot)})"


@dataclass(frozen=True, slots=True)
class BurialRecord:
    """One burial entry.

    Attributes
    ----------
    object_id: int | str | None
        The dataset's `OBJECTID`, the preferred identity.
    key: str | None
        Optional explicit key used when no `OBJECTID` exists.
    section, lot, tier, grave: str
        Plot location tokens. Sections may contain letters (e.g. "100A").
    birth, death: str
        Free-form date strings; years are extracted by pattern, not parsed.
    tour_key: str
        Tag naming the tour this record belongs to (dataset `title`).
    searchable_label, searchable_label_lower: str
        Precomputed label and its lower-cased form for repeated searches.
    coordinates: tuple[float, float] | None
        (longitude, latitude) of the grave marker when known.
    properties: Mapping[str, Any]
        The raw dataset properties the record was built from.
    """

    object_id: Optional[Union[int, str]] = None
    key: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    section: str = ""
    lot: str = ""
    tier: str = ""
    grave: str = ""
    birth: str = ""
    death: str = ""
    tour_key: str = ""
    searchable_label: str = ""
    searchable_label_lower: str = ""
    coordinates: Optional[Tuple[float, float]] = None
    properties: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        *,
        coordinates: Optional[Tuple[float, float]] = None,
    ) -> BurialRecord:
        """Build a record from dataset properties (`OBJECTID`, `First_Name`, ...).

        A `searchableLabel` property is used as-is when present; otherwise the
        label is derived from name, section and lot.
        """
        props = dict(properties or {})
        first_name = _text(props.get("First_Name"))
        last_name = _text(props.get("Last_Name"))
        section = _text(props.get("Section"))
        lot = _text(props.get("Lot"))
        label = _text(props.get("searchableLabel")) or make_searchable_label(
            first_name, last_name, section, lot
        )
        key = props.get("key")
        return cls(
            object_id=_object_id(props.get("OBJECTID")),
            key=None if key is None else str(key),
            first_name=first_name,
            last_name=last_name,
            section=section,
            lot=lot,
            tier=_text(props.get("Tier")),
            grave=_text(props.get("Grave")),
            birth=_text(props.get("Birth")),
            death=_text(props.get("Death")),
            tour_key=_text(props.get("title")),
            searchable_label=label,
            searchable_label_lower=label.lower(),
            coordinates=coordinates,
            properties=props,
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def identity_key(self) -> Union[int, str]:
        return identity_key(self)


def identity_key(record: Any) -> Union[int, str]:
    """Return the deduplication key for a record.

    `object_id` wins, then `key`, then the composite
    "first_last_section_lot". Distinct records that lack both ids and share
    name, section and lot collapse onto the same composite.
    """
    object_id = getattr(record, "object_id", None)
    if object_id is not None:
        return object_id if isinstance(object_id, Hashable) else str(object_id)
    key = getattr(record, "key", None)
    if key is not None:
        return key if isinstance(key, Hashable) else str(key)
    parts = (
        getattr(record, "first_name", None),
        getattr(record, "last_name", None),
        getattr(record, "section", None),
        getattr(record, "lot", None),
    )
    return "_".join(str(p) if p else "" for p in parts)
