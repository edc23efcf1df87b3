import pytest

from cafe_finder.cafes.errors import InvalidCountError, UnknownCityError
from cafe_finder.cafes.lookup import (
    filter_cafes,
    find_cafes,
    handle_query,
    parse_count,
    parse_query,
    serialize,
    truncate,
)
from cafe_finder.cafes.models import CafeQuery
from cafe_finder.cafes.registry import CityRegistry

REGISTRY = CityRegistry({
    "moscow": ["Мир кофе", "Сладкоежка", "Кофе и завтраки"],
    "berlin": ["Café Größe", "Strasse Kaffee"],
})


def test_parse_query_requires_known_city():
    with pytest.raises(UnknownCityError):
        parse_query({}, REGISTRY)
    with pytest.raises(UnknownCityError):
        parse_query({"city": "MOSCOW"}, REGISTRY)


def test_parse_query_defaults():
    query = parse_query({"city": "moscow"}, REGISTRY)
    assert query == CafeQuery(city="moscow", count=None, search=None)


@pytest.mark.parametrize("raw", ["na", "-1", "+1", " 1", "1_0", "", "٣"])
def test_parse_count_rejects(raw):
    with pytest.raises(InvalidCountError) as exc_info:
        parse_count(raw)
    assert exc_info.value.message == "incorrect count"


def test_parse_count_accepts_digits():
    assert parse_count(None) is None
    assert parse_count("0") == 0
    assert parse_count("007") == 7


def test_filter_is_unicode_case_insensitive():
    assert filter_cafes(REGISTRY.lookup("moscow"), "КОФЕ") == ["Мир кофе", "Кофе и завтраки"]
    # casefold maps ß to ss
    assert filter_cafes(REGISTRY.lookup("berlin"), "STRASSE") == ["Strasse Kaffee"]
    assert filter_cafes(REGISTRY.lookup("berlin"), "größe") == ["Café Größe"]


def test_filter_empty_search_keeps_all():
    cafes = REGISTRY.lookup("moscow")
    assert filter_cafes(cafes, None) == list(cafes)
    assert filter_cafes(cafes, "") == list(cafes)


def test_truncate():
    cafes = ["a", "b", "c"]
    assert truncate(cafes, None) == cafes
    assert truncate(cafes, 0) == []
    assert truncate(cafes, 2) == ["a", "b"]
    assert truncate(cafes, 10) == cafes


def test_serialize():
    assert serialize([]) == ""
    assert serialize(["a", "b"]) == "a,b"


def test_find_cafes_filters_then_truncates():
    query = CafeQuery(city="moscow", count=1, search="кофе")
    assert find_cafes(REGISTRY, query) == ["Мир кофе"]


def test_handle_query():
    assert handle_query({"city": "moscow", "count": "2"}, REGISTRY) == "Мир кофе,Сладкоежка"
    assert handle_query({"city": "moscow", "search": "фасоль"}, REGISTRY) == ""
