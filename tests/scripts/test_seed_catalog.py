from __future__ import annotations

import random
import uuid
from decimal import Decimal
from unittest.mock import Mock

from scripts.seed_catalog import EMBEDDED_RENDER, ensure_vossen_renders, generate_car, generate_disc
from wheel_fitter.adapters.in_memory_car_repository import InMemoryCarRepository
from wheel_fitter.adapters.in_memory_disc_repository import InMemoryDiscRepository
from wheel_fitter.adapters.postgres_car_repository import PostgresCarRepository
from wheel_fitter.domain.disc import Disc
from wheel_fitter.domain.images import EmbeddedImage, parse_image_ref
from wheel_fitter.infra.db.models.car import CarRow
from wheel_fitter.infra.db.models.disc import DiscRow
from wheel_fitter.ports.image_fetcher import ImageFetcher
from wheel_fitter.use_cases.resolve_fitting import ResolveFitting, ResolveFittingRequest


class NoNetworkImageFetcher(ImageFetcher):
    def fetch(self, url: str) -> EmbeddedImage:
        raise AssertionError(f"unexpected fetch of {url}")


def vossen_disc(diameter: int) -> DiscRow:
    return DiscRow(
        brand="Vossen",
        diameter=diameter,
        width=8.0,
        pcd="5x114.3",
        et=35,
        dia=60.1,
        price=Decimal("650.00"),
    )


def test_embedded_render_is_a_usable_data_uri() -> None:
    image = parse_image_ref(EMBEDDED_RENDER)

    assert isinstance(image, EmbeddedImage)
    assert image.media_type == "image/png"


def test_corolla_gets_embedded_render_per_vossen_diameter() -> None:
    corolla = CarRow(
        make="Toyota",
        model="Corolla",
        fitting_combinations=[
            {"disc_brand": "Vossen", "disc_diameter": 18, "predefined_image": "https://cdn.example.com/v18.png"},
            {"disc_brand": "BBS", "disc_diameter": 19, "predefined_image": "https://cdn.example.com/b19.png"},
        ],
    )

    ensure_vossen_renders(corolla, [vossen_disc(18), vossen_disc(20), vossen_disc(18)])

    vossen = [c for c in corolla.fitting_combinations if c["disc_brand"] == "Vossen"]
    assert [c["disc_diameter"] for c in vossen] == [18, 20]
    assert all(c["predefined_image"] == EMBEDDED_RENDER for c in vossen)
    assert {"disc_brand": "BBS", "disc_diameter": 19, "predefined_image": "https://cdn.example.com/b19.png"} in (
        corolla.fitting_combinations
    )


def test_seeded_corolla_resolves_without_fetching() -> None:
    random.seed(7)
    discs = [generate_disc() for _ in range(20)] + [vossen_disc(18)]
    corolla = generate_car("Toyota", "Corolla", discs)
    ensure_vossen_renders(corolla, discs)
    corolla.id = uuid.uuid4()

    car = PostgresCarRepository(Mock())._to_domain(corolla)
    disc = Disc(
        id="vossen-18",
        brand="Vossen",
        diameter=18,
        width=8.0,
        pcd="5x114.3",
        et=35,
        dia=60.1,
        price=Decimal("650.00"),
    )
    use_case = ResolveFitting(
        car_repository=InMemoryCarRepository([car]),
        disc_repository=InMemoryDiscRepository([disc]),
        image_fetcher=NoNetworkImageFetcher(),
    )

    result = use_case.execute(ResolveFittingRequest(car_id=car.id, disc_id="vossen-18"))

    assert result.result_image.data_uri == EMBEDDED_RENDER
