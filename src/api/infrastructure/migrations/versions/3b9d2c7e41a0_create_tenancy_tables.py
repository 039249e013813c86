"""create tenancy tables

Create the tenants table and the tenant-owned team_members, properties and
rental_applications tables. Every tenant-owned table references tenants.id
with RESTRICT so tenants can only be soft-disabled while they own data.

Revision ID: 3b9d2c7e41a0
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3b9d2c7e41a0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _tenant_fk() -> sa.Column:
    return sa.Column(
        "tenant_id",
        sa.String(length=26),
        sa.ForeignKey("tenants.id", ondelete="RESTRICT"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tenants",
        sa.Column("id", sa.String(length=26), primary_key=True),
        sa.Column("slug", sa.String(length=63), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("owner_user_id", sa.String(length=255), nullable=False),
        sa.Column(
            "is_disabled", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        *_timestamps(),
        sa.UniqueConstraint("slug", name="uq_tenants_slug"),
    )
    op.create_index("ix_tenants_owner_user_id", "tenants", ["owner_user_id"])

    op.create_table(
        "team_members",
        sa.Column("id", sa.String(length=26), primary_key=True),
        _tenant_fk(),
        sa.Column("user_id", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("invited_email", sa.String(length=255), nullable=True),
        sa.Column("invite_token", sa.String(length=64), nullable=True),
        sa.Column("invite_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("invited_by", sa.String(length=255), nullable=True),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint(
            "tenant_id", "user_id", name="uq_team_members_tenant_user"
        ),
        sa.UniqueConstraint("invite_token", name="uq_team_members_invite_token"),
    )
    op.create_index("ix_team_members_tenant_id", "team_members", ["tenant_id"])

    op.create_table(
        "properties",
        sa.Column("id", sa.String(length=26), primary_key=True),
        _tenant_fk(),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=500), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("tenant_id", "slug", name="uq_properties_tenant_slug"),
    )
    op.create_index("ix_properties_tenant_id", "properties", ["tenant_id"])

    op.create_table(
        "rental_applications",
        sa.Column("id", sa.String(length=26), primary_key=True),
        _tenant_fk(),
        sa.Column("applicant_id", sa.String(length=255), nullable=False),
        sa.Column("property_slug", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_rental_applications_tenant_id", "rental_applications", ["tenant_id"]
    )
    op.create_index(
        "ix_rental_applications_applicant_id",
        "rental_applications",
        ["applicant_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(
        "ix_rental_applications_applicant_id", table_name="rental_applications"
    )
    op.drop_index("ix_rental_applications_tenant_id", table_name="rental_applications")
    op.drop_table("rental_applications")

    op.drop_index("ix_properties_tenant_id", table_name="properties")
    op.drop_table("properties")

    op.drop_index("ix_team_members_tenant_id", table_name="team_members")
    op.drop_table("team_members")

    op.drop_index("ix_tenants_owner_user_id", table_name="tenants")
    op.drop_table("tenants")
