#!/usr/bin/env python3
"""
Seed the cars and discs tables with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Creates the tables if they do not exist yet
- Always includes the Toyota Corolla with Vossen renders

Usage:
    python scripts/seed_catalog.py
"""

from __future__ import annotations

import random
import sys
from decimal import Decimal

from wheel_fitter.infra.db.models.base import Base
from wheel_fitter.infra.db.models.car import CarRow
from wheel_fitter.infra.db.models.disc import DiscRow
from wheel_fitter.infra.db.session import get_engine, get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_DISCS = 60  # Number of discs to generate

RENDER_BASE_URL = "https://cdn.example.com/renders"

# 1x1 PNG; Corolla + Vossen renders are stored inline so they resolve without a CDN
EMBEDDED_RENDER = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# ==============================================================================
# Catalog Data
# ==============================================================================

# Disc brands with price bands (per disc)
DISC_BRANDS = {
    "Vossen": (Decimal("450"), Decimal("900")),
    "BBS": (Decimal("500"), Decimal("1200")),
    "OZ Racing": (Decimal("300"), Decimal("700")),
    "Enkei": (Decimal("200"), Decimal("450")),
    "Replica": (Decimal("90"), Decimal("200")),
}

DIAMETERS = [15, 16, 17, 18, 19, 20]
WIDTHS = [6.5, 7.0, 7.5, 8.0, 8.5, 9.0]
PCDS = ["4x100", "5x100", "5x108", "5x112", "5x114.3", "5x120"]
ETS = [20, 30, 35, 38, 40, 45, 50]
DIAS = [54.1, 56.1, 57.1, 60.1, 64.1, 66.6, 72.6]

CARS = [
    ("Toyota", "Corolla"),
    ("Toyota", "Camry"),
    ("Honda", "Civic"),
    ("Mazda", "Mazda3"),
    ("Volkswagen", "Golf"),
    ("BMW", "Serie 3"),
]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_disc() -> DiscRow:
    """Generate a single random disc with realistic data."""
    brand = random.choice(list(DISC_BRANDS))
    low, high = DISC_BRANDS[brand]
    diameter = random.choice(DIAMETERS)

    # Bigger discs cost more: +8% per inch above 15"
    base = Decimal(random.randint(int(low), int(high)))
    price = (base * (Decimal("1") + Decimal("0.08") * (diameter - 15))).quantize(Decimal("0.01"))

    slug = brand.lower().replace(" ", "-")
    return DiscRow(
        brand=brand,
        diameter=diameter,
        width=random.choice(WIDTHS),
        pcd=random.choice(PCDS),
        et=random.choice(ETS),
        dia=random.choice(DIAS),
        price=price,
        image_url=f"https://cdn.example.com/discs/{slug}-{diameter}.png",
    )


def generate_car(make: str, model: str, discs: list[DiscRow]) -> CarRow:
    """Generate a car with renders for a few of the seeded brand/diameter pairs."""
    pairs = sorted({(disc.brand, disc.diameter) for disc in discs})
    chosen = random.sample(pairs, k=min(4, len(pairs)))

    slug = f"{make}-{model}".lower().replace(" ", "-")
    combinations = [
        {
            "disc_brand": brand,
            "disc_diameter": diameter,
            "predefined_image": f"{RENDER_BASE_URL}/{slug}/{brand.lower().replace(' ', '-')}-{diameter}.png",
        }
        for brand, diameter in chosen
    ]

    return CarRow(
        make=make,
        model=model,
        image=f"https://cdn.example.com/cars/{slug}.png",
        fitting_combinations=combinations,
    )


def ensure_vossen_renders(corolla: CarRow, discs: list[DiscRow]) -> None:
    """Give the Corolla an embedded render for every seeded Vossen diameter."""
    others = [c for c in corolla.fitting_combinations if c["disc_brand"] != "Vossen"]
    vossen = [
        {"disc_brand": "Vossen", "disc_diameter": diameter, "predefined_image": EMBEDDED_RENDER}
        for diameter in sorted({disc.diameter for disc in discs if disc.brand == "Vossen"})
    ]
    corolla.fitting_combinations = vossen + others


def seed_catalog(num_discs: int = NUM_DISCS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random discs and cars.

    Args:
        num_discs: Number of discs to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding catalog with {num_discs} discs and {len(CARS)} cars (seed={seed})...")

    Base.metadata.create_all(get_engine())

    with get_session() as session:
        # Step 1: Clear existing data (idempotent)
        print("🗑️  Clearing existing catalog...")
        deleted_cars = session.query(CarRow).delete()
        deleted_discs = session.query(DiscRow).delete()
        print(f"   Deleted {deleted_cars} cars and {deleted_discs} discs")

        # Step 2: Generate and insert
        discs = [generate_disc() for _ in range(num_discs)]
        cars = [generate_car(make, model, discs) for make, model in CARS]
        ensure_vossen_renders(cars[0], discs)

        session.add_all(discs)
        session.add_all(cars)
        session.flush()

        print(f"✅ Successfully seeded {len(discs)} discs and {len(cars)} cars!")

        print("\n📊 Sample cars:")
        for i, car in enumerate(cars, 1):
            print(f"   {i}. {car.make} {car.model} - {len(car.fitting_combinations)} renders")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_catalog()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
