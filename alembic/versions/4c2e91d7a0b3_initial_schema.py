"""initial schema and roles

Revision ID: 4c2e91d7a0b3
Revises:
Create Date: 2026-10-19 10:12:41.508317

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c2e91d7a0b3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    roles = op.create_table(
        "roles",
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.Column("role_name", sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint("role_id"),
    )

    op.create_table(
        "accounts",
        sa.Column("account_id", sa.String(length=10), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("gender", sa.String(length=10), nullable=True),
        sa.Column("identity_card", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("image", sa.String(length=255), nullable=True),
        sa.Column("register_date", sa.Date(), nullable=True),
        sa.Column("status", sa.Integer(), nullable=True),
        sa.Column("role_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["role_id"], ["roles.role_id"]),
        sa.PrimaryKeyConstraint("account_id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("ix_accounts_role_id", "accounts", ["role_id"])

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.String(length=10), nullable=False),
        sa.Column("account_id", sa.String(length=10), nullable=False),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.account_id"]),
        sa.PrimaryKeyConstraint("employee_id"),
    )
    op.create_index("ix_employees_account_id", "employees", ["account_id"], unique=True)

    op.create_table(
        "foods",
        sa.Column("food_id", sa.Integer(), nullable=False),
        sa.Column("category", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=True),
        sa.Column("image", sa.String(length=255), nullable=True),
        sa.Column("status", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("created_date", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_date", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("food_id"),
    )

    op.create_table(
        "invoices",
        sa.Column("invoice_id", sa.String(length=20), nullable=False),
        sa.Column("account_id", sa.String(length=10), nullable=True),
        sa.Column("booking_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.Integer(), nullable=True),
        sa.Column("total_money", sa.Numeric(precision=18, scale=2), nullable=True),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.account_id"]),
        sa.PrimaryKeyConstraint("invoice_id"),
    )
    op.create_index("ix_invoices_account_id", "invoices", ["account_id"])

    op.create_table(
        "food_invoices",
        sa.Column("food_invoice_id", sa.Integer(), nullable=False),
        sa.Column("invoice_id", sa.String(length=20), nullable=False),
        sa.Column("food_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(precision=18, scale=2), nullable=False),
        sa.CheckConstraint("quantity >= 1", name="ck_food_invoice_quantity_positive"),
        sa.CheckConstraint("price >= 0", name="ck_food_invoice_price_non_negative"),
        sa.ForeignKeyConstraint(["invoice_id"], ["invoices.invoice_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["food_id"], ["foods.food_id"]),
        sa.PrimaryKeyConstraint("food_invoice_id"),
    )
    op.create_index("ix_food_invoices_invoice_id", "food_invoices", ["invoice_id"])
    op.create_index("ix_food_invoices_food_id", "food_invoices", ["food_id"])

    op.create_table(
        "seat_types",
        sa.Column("seat_type_id", sa.Integer(), nullable=False),
        sa.Column("type_name", sa.String(length=50), nullable=True),
        sa.Column("price_percent", sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column("color_hex", sa.String(length=7), nullable=False),
        sa.PrimaryKeyConstraint("seat_type_id"),
    )

    # fixed role ids the services rely on
    op.bulk_insert(
        roles,
        [
            {"role_id": 1, "role_name": "admin"},
            {"role_id": 2, "role_name": "employee"},
            {"role_id": 3, "role_name": "member"},
        ],
    )


def downgrade():
    op.drop_table("seat_types")
    op.drop_index("ix_food_invoices_food_id", table_name="food_invoices")
    op.drop_index("ix_food_invoices_invoice_id", table_name="food_invoices")
    op.drop_table("food_invoices")
    op.drop_index("ix_invoices_account_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("foods")
    op.drop_index("ix_employees_account_id", table_name="employees")
    op.drop_table("employees")
    op.drop_index("ix_accounts_role_id", table_name="accounts")
    op.drop_table("accounts")
    op.drop_table("roles")
