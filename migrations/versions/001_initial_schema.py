"""Initial schema: regions, locations, vehicles, price lists, extras, reservations.

Revision ID: 001
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    location_type = sa.Enum("airport", "hotel", "other", name="location_type")
    price_type = sa.Enum("per_vehicle", "per_person", name="price_type")
    transfer_type = sa.Enum("private", "shared", name="transfer_type")

    # ── bolge ─────────────────────────────────────────────────────────
    op.create_table(
        "bolge",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ── locations ─────────────────────────────────────────────────────
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", location_type, nullable=False, server_default="other"),
        sa.Column("address", sa.String(255), nullable=False, server_default=""),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("bolge_id", sa.Integer, sa.ForeignKey("bolge.id"), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_locations_bolge", "locations", ["bolge_id"])

    # ── vehicles ──────────────────────────────────────────────────────
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("luggage_capacity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("image_url", sa.String(500), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "idx_vehicles_active_capacity", "vehicles", ["is_active", "capacity"]
    )

    # ── price_lists ───────────────────────────────────────────────────
    op.create_table(
        "price_lists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("from_bolge_id", sa.Integer, sa.ForeignKey("bolge.id"), nullable=True),
        sa.Column("to_bolge_id", sa.Integer, sa.ForeignKey("bolge.id"), nullable=True),
        sa.Column("vehicle_type", sa.String(50), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="TRY"),
        sa.Column("price_type", price_type, nullable=False, server_default="per_vehicle"),
        sa.Column("transfer_type", transfer_type, nullable=False, server_default="private"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "idx_price_lists_route",
        "price_lists",
        ["from_bolge_id", "to_bolge_id", "vehicle_type"],
    )

    # ── extras ────────────────────────────────────────────────────────
    op.create_table(
        "extras",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ── reservations ──────────────────────────────────────────────────
    op.create_table(
        "reservations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(32), unique=True, nullable=False),
        sa.Column("pickup_location_id", sa.Integer, sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("dropoff_location_id", sa.Integer, sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("vehicle_id", sa.Integer, sa.ForeignKey("vehicles.id"), nullable=False),
        sa.Column("reservation_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("passenger_count", sa.Integer, nullable=False),
        sa.Column("customer_name", sa.String(120), nullable=False),
        sa.Column("customer_last_name", sa.String(120), nullable=False),
        sa.Column("customer_email", sa.String(255), nullable=False),
        sa.Column("customer_phone", sa.String(40), nullable=False),
        sa.Column("flight_number", sa.String(20), nullable=True),
        sa.Column("notes", sa.Text, nullable=True),
        sa.Column("total_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="TRY"),
        sa.Column("payment_method", sa.String(20), nullable=True),
        sa.Column("extras", sa.JSON, nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="pending_confirmation"),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("idx_reservations_status", "reservations", ["status"])
    op.create_index("idx_reservations_pickup_time", "reservations", ["reservation_time"])


def downgrade() -> None:
    op.drop_table("reservations")
    op.drop_table("extras")
    op.drop_table("price_lists")
    op.drop_table("vehicles")
    op.drop_table("locations")
    op.drop_table("bolge")
    op.execute("DROP TYPE IF EXISTS transfer_type")
    op.execute("DROP TYPE IF EXISTS price_type")
    op.execute("DROP TYPE IF EXISTS location_type")
