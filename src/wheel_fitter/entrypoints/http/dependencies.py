"""
Dependency injection for FastAPI routes.

Key principle: Database sessions should be per-request, not cached.
Only stateless singletons should use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from wheel_fitter.adapters.httpx_image_fetcher import HttpxImageFetcher
from wheel_fitter.adapters.postgres_car_repository import PostgresCarRepository
from wheel_fitter.adapters.postgres_disc_repository import PostgresDiscRepository
from wheel_fitter.infra.config import image_fetch_timeout_seconds
from wheel_fitter.infra.db.session import get_session
from wheel_fitter.ports.image_fetcher import ImageFetcher
from wheel_fitter.use_cases.get_disc_filter_options import GetDiscFilterOptions
from wheel_fitter.use_cases.list_cars import ListCars
from wheel_fitter.use_cases.resolve_fitting import ResolveFitting
from wheel_fitter.use_cases.search_discs import SearchDiscs


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache(maxsize=1)
def get_image_fetcher() -> ImageFetcher:
    """Stateless singleton: each fetch opens its own HTTP client."""
    return HttpxImageFetcher(timeout=image_fetch_timeout_seconds())


def get_list_cars_use_case(db: Session = Depends(get_db)) -> ListCars:
    return ListCars(car_repository=PostgresCarRepository(session=db))


def get_search_discs_use_case(db: Session = Depends(get_db)) -> SearchDiscs:
    return SearchDiscs(disc_repository=PostgresDiscRepository(session=db))


def get_disc_filter_options_use_case(db: Session = Depends(get_db)) -> GetDiscFilterOptions:
    return GetDiscFilterOptions(disc_repository=PostgresDiscRepository(session=db))


def get_resolve_fitting_use_case(
    db: Session = Depends(get_db),
    image_fetcher: ImageFetcher = Depends(get_image_fetcher),
) -> ResolveFitting:
    """
    Factory function that returns a configured ResolveFitting use case.

    Both repositories share the request's session.

    Args:
        db: Database session (injected by FastAPI via Depends(get_db))
        image_fetcher: Downloader for renders stored as remote URLs

    Returns:
        ResolveFitting: Configured use case instance
    """
    return ResolveFitting(
        car_repository=PostgresCarRepository(session=db),
        disc_repository=PostgresDiscRepository(session=db),
        image_fetcher=image_fetcher,
    )
