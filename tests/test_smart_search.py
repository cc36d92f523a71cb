import pytest

from gravefinder.records import BurialRecord
from gravefinder.search.index import SearchIndex, build_search_index
from gravefinder.search.query import QueryKind, classify_query
from gravefinder.search.smart import dedupe, smart_search

from conftest import ids

# ---------- Classification ----------


@pytest.mark.parametrize(
    "text, kind, term",
    [
        ("   ", QueryKind.EMPTY, ""),
        ("1851", QueryKind.YEAR, "1851"),
        ("Section 100A", QueryKind.SECTION, "100a"),
        ("sec12", QueryKind.SECTION, "12"),
        ("LOT 9", QueryKind.LOT, "9"),
        ("lot 9a", QueryKind.TEXT, "lot 9a"),
        ("Civil War Tour", QueryKind.TOUR, "civil war"),
        ("12", QueryKind.NUMBER, "12"),
        ("123456", QueryKind.NUMBER, "123456"),
        ("  Jane Doe ", QueryKind.TEXT, "jane doe"),
    ],
)
def test_classify_query(text, kind, term) -> None:
    intent = classify_query(text, tours_enabled=True)
    assert intent.kind is kind
    assert intent.term == term


def test_tour_rule_requires_a_resolver() -> None:
    assert classify_query("civil war tour").kind is QueryKind.TEXT


# ---------- End-to-end with index ----------


@pytest.mark.parametrize(
    "query, expected",
    [
        ("section 12", [1]),
        ("lot 9", [3]),
        ("civil war tour", [3]),
        ("1812", [1, 2]),
        ("jane doe", [1]),
        ("12", [1, 2]),
        ("notables", [1]),
    ],
)
def test_smart_search_with_index(records, get_tour_name, query, expected) -> None:
    index = build_search_index(records, get_tour_name=get_tour_name)
    assert ids(smart_search(records, query, index=index, get_tour_name=get_tour_name)) == expected


def test_linear_name_search_without_index(records, get_tour_name) -> None:
    assert ids(smart_search(records, "lovelace", get_tour_name=get_tour_name)) == [3]


@pytest.mark.parametrize(
    "query",
    ["1812", "1852", "section 100a", "sec 3", "lot 8", "lot 12", "notables tour", "civil tour",
     "12", "3", "1899", "smith", "doe (section", "war", "nobody"],
)
def test_index_and_linear_scan_agree(records, get_tour_name, query) -> None:
    index = build_search_index(records, get_tour_name=get_tour_name)
    with_index = smart_search(records, query, index=index, get_tour_name=get_tour_name)
    without_index = smart_search(records, query, get_tour_name=get_tour_name)
    assert set(ids(with_index)) == set(ids(without_index))


def test_year_extraction_from_full_dates() -> None:
    rec = BurialRecord.from_properties(
        {"OBJECTID": 10, "First_Name": "Ed", "Birth": "7/21/1951", "Death": "1/26/2011"}
    )
    index = build_search_index([rec])
    for idx in (index, None):
        assert smart_search([rec], "1951", index=idx) == [rec]
        assert smart_search([rec], "2011", index=idx) == [rec]
        assert smart_search([rec], "1950", index=idx) == []


def test_numeric_union_returns_each_record_once() -> None:
    by_section = BurialRecord(object_id=1, section="12", lot="1", birth="1812")
    by_lot = BurialRecord(object_id=2, section="4", lot="12")
    records = [by_section, by_lot]
    index = build_search_index(records)
    assert smart_search(records, "12", index=index) == [by_section, by_lot]


def test_numeric_union_dedupes_record_matching_several_maps() -> None:
    rec = BurialRecord(object_id=1, section="12", lot="12")
    index = build_search_index([rec])
    assert smart_search([rec], "12", index=index) == [rec]


def test_empty_query_short_circuits(records, get_tour_name) -> None:
    index = build_search_index(records, get_tour_name=get_tour_name)
    assert smart_search(records, "   ", index=index, get_tour_name=get_tour_name) == []
    assert smart_search(records, "", get_tour_name=get_tour_name) == []
    assert smart_search(records, None) == []


def test_free_text_matches_tour_name_substring(records, get_tour_name) -> None:
    index = build_search_index(records, get_tour_name=get_tour_name)
    assert ids(smart_search(records, "war", index=index, get_tour_name=get_tour_name)) == [3]
    assert smart_search(records, "war", index=index) == []


def test_tour_query_with_unindexed_first_token_scans_everything(records, get_tour_name) -> None:
    assert ids(smart_search(records, "war tour", index=SearchIndex(), get_tour_name=get_tour_name)) == [3]


def test_missing_sub_maps_fall_back_to_linear_scan(records) -> None:
    partial = SearchIndex(by_section=None, by_lot=None, by_year=None, by_token=None)  # type: ignore[arg-type]
    assert ids(smart_search(records, "section 3", index=partial)) == [2]
    assert ids(smart_search(records, "1815", index=partial)) == [3]
    assert ids(smart_search(records, "smith", index=partial)) == [2]


def test_index_miss_falls_back_to_linear_substring_match(records) -> None:
    index = build_search_index(records)
    # "899" is not a standalone year or key, but it is inside a death date
    assert ids(smart_search(records, "899", index=index)) == [1]


def test_results_are_repeatable_across_rebuilt_indexes(records, get_tour_name) -> None:
    a = build_search_index(records, get_tour_name=get_tour_name)
    b = build_search_index(records, get_tour_name=get_tour_name)
    for query in ("1812", "doe", "12", "civil war tour", "sec 100a"):
        assert smart_search(records, query, index=a, get_tour_name=get_tour_name) == smart_search(
            records, query, index=b, get_tour_name=get_tour_name
        )


def test_dedupe_uses_composite_key_without_ids() -> None:
    a = BurialRecord(first_name="Jane", last_name="Doe", section="12", lot="8")
    b = BurialRecord(first_name="Jane", last_name="Doe", section="12", lot="8", grave="2")
    c = BurialRecord(first_name="Jane", last_name="Doe", section="12", lot="9")
    assert dedupe([a, b, c, a]) == [a, c]
