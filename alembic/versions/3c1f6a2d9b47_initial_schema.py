"""Initial schema: vehicles, photos, optional equipment, portal packages

Revision ID: 3c1f6a2d9b47
Revises:
Create Date: 2026-10-19 10:02:11.418230

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f6a2d9b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("make", sa.String(length=100), nullable=False),
        sa.Column("model", sa.String(length=100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("plate", sa.String(length=10), nullable=False),
        sa.Column("odometer_km", sa.Integer(), nullable=True),
        sa.Column("color", sa.String(length=50), nullable=False),
        sa.Column("price", sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column("registered_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plate"),
    )

    optional_equipment = op.create_table(
        "optional_equipment",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "vehicle_photos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vehicle_id", sa.Integer(), nullable=False),
        sa.Column("image_base64", sa.Text(), nullable=False),
        sa.Column("filename", sa.String(length=255), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("uploaded_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["vehicle_id"], ["vehicles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "vehicle_id", "display_order", name="uq_vehicle_photos_vehicle_order"
        ),
    )
    op.create_index(
        op.f("ix_vehicle_photos_vehicle_id"), "vehicle_photos", ["vehicle_id"], unique=False
    )

    op.create_table(
        "vehicle_optionals",
        sa.Column("vehicle_id", sa.Integer(), nullable=False),
        sa.Column("optional_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["vehicle_id"], ["vehicles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["optional_id"], ["optional_equipment.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("vehicle_id", "optional_id"),
    )
    op.create_index(
        op.f("ix_vehicle_optionals_optional_id"),
        "vehicle_optionals",
        ["optional_id"],
        unique=False,
    )

    op.create_table(
        "portal_packages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vehicle_id", sa.Integer(), nullable=False),
        sa.Column("portal", sa.Integer(), nullable=False),
        sa.Column("tier", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["vehicle_id"], ["vehicles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("vehicle_id", "portal", name="uq_portal_packages_vehicle_portal"),
    )
    op.create_index(
        op.f("ix_portal_packages_vehicle_id"), "portal_packages", ["vehicle_id"], unique=False
    )

    # Optional equipment catalog
    op.bulk_insert(
        optional_equipment,
        [
            {"name": "Air Conditioning"},
            {"name": "Alarm"},
            {"name": "Airbag"},
            {"name": "ABS Brakes"},
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_portal_packages_vehicle_id"), table_name="portal_packages")
    op.drop_table("portal_packages")
    op.drop_index(op.f("ix_vehicle_optionals_optional_id"), table_name="vehicle_optionals")
    op.drop_table("vehicle_optionals")
    op.drop_index(op.f("ix_vehicle_photos_vehicle_id"), table_name="vehicle_photos")
    op.drop_table("vehicle_photos")
    op.drop_table("optional_equipment")
    op.drop_table("vehicles")
