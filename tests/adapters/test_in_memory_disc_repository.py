"""
Test suite for InMemoryDiscRepository.

This suite is the reference for the DiscRepository contract:
- Filter semantics (exact match, AND across fields)
- Limit applied after filtering
- Lookup by identifier
- Distinct values over the whole collection
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from wheel_fitter.adapters.in_memory_disc_repository import InMemoryDiscRepository
from wheel_fitter.domain.disc import Disc, DiscFilters


@pytest.fixture()
def discs() -> list[Disc]:
    return [
        Disc(id="1", brand="Vossen", diameter=18, width=8.0, pcd="5x114.3", et=35, dia=60.1, price=Decimal("650.00")),
        Disc(id="2", brand="BBS", diameter=18, width=8.5, pcd="5x112", et=45, dia=66.6, price=Decimal("900.00")),
        Disc(id="3", brand="Enkei", diameter=17, width=7.5, pcd="5x114.3", et=35, dia=60.1, price=Decimal("300.00")),
        Disc(id="4", brand="Vossen", diameter=19, width=8.5, pcd="5x112", et=35, dia=66.6, price=Decimal("780.00")),
    ]


# ==============================================================================
# Filter Edge Cases
# ==============================================================================


def test_search_without_filters_returns_all_in_insertion_order(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    result = repo.search(filters=DiscFilters(), limit=50)

    assert [disc.id for disc in result] == ["1", "2", "3", "4"]


def test_search_diameter_exact_match(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    result = repo.search(filters=DiscFilters(diameter=18), limit=50)

    assert [disc.id for disc in result] == ["1", "2"]


def test_search_pcd_is_exact_text_match(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    assert repo.search(filters=DiscFilters(pcd="5x114"), limit=50) == []
    assert [d.id for d in repo.search(filters=DiscFilters(pcd="5x114.3"), limit=50)] == ["1", "3"]


def test_search_width_matches_integer_query_against_float(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    result = repo.search(filters=DiscFilters(width=8), limit=50)

    assert [disc.id for disc in result] == ["1"]


def test_search_combines_filters_with_and(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    result = repo.search(filters=DiscFilters(pcd="5x112", et=35), limit=50)

    assert [disc.id for disc in result] == ["4"]


def test_search_limit_applies_after_filtering(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    result = repo.search(filters=DiscFilters(et=35), limit=2)

    assert [disc.id for disc in result] == ["1", "3"]


# ==============================================================================
# Lookup & Distinct Values
# ==============================================================================


def test_get_by_id(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    assert repo.get_by_id("3") == discs[2]
    assert repo.get_by_id("missing") is None


def test_distinct_values_cover_whole_collection(discs: list[Disc]) -> None:
    repo = InMemoryDiscRepository(discs)

    assert sorted(repo.distinct_values("diameter")) == [17, 18, 19]
    assert sorted(repo.distinct_values("pcd")) == ["5x112", "5x114.3"]
    assert sorted(repo.distinct_values("et")) == [35, 45]


def test_empty_repository() -> None:
    repo = InMemoryDiscRepository([])

    assert repo.search(filters=DiscFilters(), limit=10) == []
    assert repo.distinct_values("width") == []
