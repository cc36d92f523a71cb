"""Static tour catalog for the cemetery map.

Maps the tour tag stored on each burial record (the dataset's `title`) to a
display name and marker color. `tour_name_for` is the `get_tour_name`
collaborator handed to the search index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True, slots=True)
class Tour:
    key: str
    name: str
    color: str


TOURS: Dict[str, Tour] = {
    t.key: t
    for t in (
        Tour("Lot7", "Soldier's Lot (Section 75, Lot 7)", "#7587ff"),
        Tour("Sec49", "Section 49", "#75ff87"),
        Tour("Notable", "Notables Tour 2020", "#ff7700"),
        Tour("Indep", "Independence Tour 2020", "#7700ff"),
        Tour("Afr", "African American Tour 2020", "#eedd00"),
        Tour("Art", "Artists Tour 2020", "#ff4277"),
        Tour("Groups", "Associations, Societies, & Groups Tour 2020", "#86cece"),
        Tour("AuthPub", "Authors & Publishers Tour 2020", "#996038"),
        Tour("Business", "Business & Finance Tour 2020", "#558e76"),
        Tour("CivilWar", "Civil War Tour 2020", "#a0a0a0"),
        Tour("Pillars", "Pillars of Society Tour 2020", "#d10008"),
        Tour("MayorsOfAlbany", "Mayors of Albany", "#ff00dd"),
        Tour("GAR", "Grand Army of the Republic", "#000080"),
    )
}


def tour_name_for(record: Any) -> str:
    """Return the display name of the record's tour, or "" when it has none."""
    tour = TOURS.get(getattr(record, "tour_key", None) or "")
    return tour.name if tour else ""


def tour_names() -> List[str]:
    """Display names of all tours in catalog order."""
    return [t.name for t in TOURS.values()]
