"""Tests for photo search."""

from photo_catalog.domain.models import Visibility
from photo_catalog.services.search import SearchService
from tests.conftest import OTHER_ID, OWNER_ID, InMemoryContentStore


def test_search_never_leaks_other_users_private_photos(
    catalog: InMemoryContentStore,
) -> None:
    service = SearchService(catalog)

    results = service.search("lake", OWNER_ID)

    assert {photo.id for photo in results} == {5, 6}
    for photo in results:
        assert photo.visibility is Visibility.PUBLIC or photo.owner == OWNER_ID


def test_search_is_case_insensitive_across_fields(
    catalog: InMemoryContentStore,
) -> None:
    service = SearchService(catalog)

    assert [p.id for p in service.search("MOUNTAIN", OWNER_ID)] == [6]
    assert [p.id for p in service.search("hike", OWNER_ID)] == [6]
    assert [p.id for p in service.search("Sun", OWNER_ID)] == [5]


def test_other_user_sees_own_private_match(catalog: InMemoryContentStore) -> None:
    service = SearchService(catalog)

    assert {p.id for p in service.search("lake", OTHER_ID)} == {6, 8}


def test_blank_query_returns_nothing(catalog: InMemoryContentStore) -> None:
    service = SearchService(catalog)

    assert service.search("", OWNER_ID) == []
    assert service.search("   ", OWNER_ID) == []


def test_anonymous_search_sees_only_public(catalog: InMemoryContentStore) -> None:
    service = SearchService(catalog)

    assert [p.id for p in service.search("lake", None)] == [6]


def test_surrounding_spaces_are_part_of_the_query(
    catalog: InMemoryContentStore,
) -> None:
    service = SearchService(catalog)

    assert [p.id for p in service.search("lake ", OWNER_ID)] == [5]
    assert service.search("lake ", OTHER_ID) == []
