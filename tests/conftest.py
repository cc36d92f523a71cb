from typing import Any, List

import pytest

from gravefinder.records import BurialRecord


def make_records() -> List[BurialRecord]:
    rows = [
        {
            "OBJECTID": 1,
            "First_Name": "Jane",
            "Last_Name": "Doe",
            "Section": "12",
            "Lot": "8",
            "Tier": "1",
            "Grave": "3",
            "Birth": "1812",
            "Death": "1899",
            "title": "Notable",
        },
        {
            "OBJECTID": 2,
            "First_Name": "John",
            "Last_Name": "Smith",
            "Section": "3",
            "Lot": "12",
            "Tier": "2",
            "Birth": "1812",
            "Death": "1844",
        },
        {
            "OBJECTID": 3,
            "First_Name": "Ada",
            "Last_Name": "Lovelace",
            "Section": "100A",
            "Lot": "9",
            "Birth": "1815",
            "Death": "1852",
            "title": "CivilWar",
        },
    ]
    return [BurialRecord.from_properties(r) for r in rows]


def fixture_tour_name(record: Any) -> str:
    if record.tour_key == "Notable":
        return "Notables Tour 2020"
    if record.tour_key == "CivilWar":
        return "Civil War Tour 2020"
    return ""


@pytest.fixture
def records() -> List[BurialRecord]:
    return make_records()


@pytest.fixture
def get_tour_name():
    return fixture_tour_name


def ids(results: List[Any]) -> List[Any]:
    return [r.object_id for r in results]
