#!/usr/bin/env python3
"""
Seed the vehicles table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices correlated with year + make band, plates in both formats

Requires the schema (and the optional equipment catalog) to be migrated:
    alembic upgrade head

Usage:
    python scripts/seed_vehicles.py
"""

from __future__ import annotations

import random
import string
import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sqlalchemy import select

from vehicle_inventory.domain.portal_package import PackageTier, Portal
from vehicle_inventory.infra.db.models import (
    OptionalEquipmentRow,
    PortalPackageRow,
    VehicleOptionalRow,
    VehicleRow,
)
from vehicle_inventory.infra.db.session import get_session


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_VEHICLES = 30  # Number of vehicles to generate
CURRENT_YEAR = datetime.now(timezone.utc).year


# ==============================================================================
# Market Data
# ==============================================================================

# Make categories with price bands (base prices in BRL)
MAKES = {
    "economy": {
        "makes": ["Fiat", "Chevrolet", "Renault", "Hyundai"],
        "base_price_min": Decimal("60000"),
        "base_price_max": Decimal("110000"),
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Volkswagen", "Jeep"],
        "base_price_min": Decimal("110000"),
        "base_price_max": Decimal("220000"),
    },
    "premium": {
        "makes": ["BMW", "Audi", "Volvo"],
        "base_price_min": Decimal("250000"),
        "base_price_max": Decimal("480000"),
    },
}

MODELS_BY_MAKE = {
    "Fiat": ["Argo", "Mobi", "Pulse", "Toro"],
    "Chevrolet": ["Onix", "Tracker", "S10", "Spin"],
    "Renault": ["Kwid", "Duster", "Sandero"],
    "Hyundai": ["HB20", "Creta"],
    "Toyota": ["Corolla", "Hilux", "Yaris", "SW4"],
    "Honda": ["Civic", "HR-V", "City"],
    "Volkswagen": ["Polo", "T-Cross", "Nivus", "Golf GTI"],
    "Jeep": ["Renegade", "Compass", "Commander"],
    "BMW": ["320i", "X1", "X5"],
    "Audi": ["A3", "Q3", "Q5"],
    "Volvo": ["XC40", "XC60"],
}

COLORS = ["Black", "White", "Silver", "Gray", "Red", "Blue"]


# ==============================================================================
# Generators
# ==============================================================================


def calculate_price(make: str, year: int) -> Decimal:
    """
    Calculate price based on make category and year.

    Price depreciates ~8% per year from a random base in the category band,
    capped at 60%, rounded to the nearest 500.
    """
    category = next(
        (data for data in MAKES.values() if make in data["makes"]),
        MAKES["mid_range"],
    )
    base_price = Decimal(
        random.randint(int(category["base_price_min"]), int(category["base_price_max"]))
    )

    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(Decimal("0.08") * years_old, Decimal("0.60"))
    price = base_price * (Decimal("1") - depreciation)

    return max((price / 500).quantize(Decimal("1")) * 500, Decimal("20000"))


def generate_plate(used: set[str]) -> str:
    """ABC1D23 (current) or ABC1234 (legacy), never repeating a plate."""
    while True:
        letters = "".join(random.choices(string.ascii_uppercase, k=3))
        if random.random() < 0.5:
            plate = (
                f"{letters}{random.randint(0, 9)}"
                f"{random.choice(string.ascii_uppercase)}{random.randint(0, 99):02d}"
            )
        else:
            plate = f"{letters}{random.randint(0, 9999):04d}"
        if plate not in used:
            used.add(plate)
            return plate


def generate_vehicle(optional_ids: list[int], used_plates: set[str]) -> VehicleRow:
    """Generate a single random vehicle with optionals and some portal packages."""
    category = random.choice(list(MAKES.keys()))
    make = random.choice(MAKES[category]["makes"])
    model = random.choice(MODELS_BY_MAKE[make])

    # Year: last 10 years, weighted toward newer
    years = list(range(CURRENT_YEAR - 9, CURRENT_YEAR + 1))
    year = random.choices(years, weights=range(1, len(years) + 1), k=1)[0]

    years_old = CURRENT_YEAR - year
    odometer_km = random.randint(0, max(1000, years_old * 15000))

    chosen_optionals = random.sample(optional_ids, k=random.randint(0, len(optional_ids)))

    packages = [
        PortalPackageRow(portal=int(portal), tier=int(random.choice(list(PackageTier))))
        for portal in Portal
        if random.random() < 0.4
    ]

    return VehicleRow(
        make=make,
        model=model,
        year=year,
        plate=generate_plate(used_plates),
        odometer_km=odometer_km,
        color=random.choice(COLORS),
        price=calculate_price(make, year),
        optional_links=[VehicleOptionalRow(optional_id=optional_id) for optional_id in chosen_optionals],
        packages=packages,
    )


def seed_vehicles(num_vehicles: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random vehicle data.

    Args:
        num_vehicles: Number of vehicles to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🌱 Seeding database with {num_vehicles} vehicles (seed={seed})...")

    with get_session() as session:
        # Step 1: Clear existing data (idempotent); ORM cascade clears children
        print("🗑️  Clearing existing vehicles...")
        existing = session.execute(select(VehicleRow)).scalars().all()
        for row in existing:
            session.delete(row)
        session.flush()
        print(f"   Deleted {len(existing)} existing vehicles")

        optional_ids = list(session.execute(select(OptionalEquipmentRow.id)).scalars().all())
        if not optional_ids:
            print("⚠️  Optional equipment catalog is empty; run `alembic upgrade head` first")

        # Step 2: Generate and insert new vehicles
        print(f"🚗 Generating {num_vehicles} vehicles...")
        used_plates: set[str] = set()
        vehicles = [generate_vehicle(optional_ids, used_plates) for _ in range(num_vehicles)]

        session.add_all(vehicles)
        session.flush()

        print(f"✅ Successfully seeded {len(vehicles)} vehicles!")

        print("\n📊 Sample vehicles:")
        for i, vehicle in enumerate(vehicles[:5], 1):
            print(
                f"   {i}. {vehicle.year} {vehicle.make} {vehicle.model} [{vehicle.plate}] - "
                f"R${vehicle.price:,.2f} ({len(vehicle.optional_links)} optionals)"
            )

        if len(vehicles) > 5:
            print(f"   ... and {len(vehicles) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_vehicles()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
