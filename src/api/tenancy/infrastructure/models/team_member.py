"""SQLAlchemy ORM model for the team_members table.

Stores landlord team memberships and pending invitations. Permissions are
not stored; they are derived from the role when the aggregate is loaded.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TenantOwnedMixin, TimestampMixin


class TeamMemberModel(Base, TenantOwnedMixin, TimestampMixin):
    """ORM model for team_members table.

    A user holds at most one membership per tenant. Pending invitations have
    no user yet; NULL user ids do not collide under the unique constraint.
    """

    __tablename__ = "team_members"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    invited_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    invite_token: Mapped[str | None] = mapped_column(String(64), nullable=True)
    invite_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    invited_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    joined_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        UniqueConstraint("tenant_id", "user_id", name="uq_team_members_tenant_user"),
        UniqueConstraint("invite_token", name="uq_team_members_invite_token"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<TeamMemberModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"role={self.role}, status={self.status})>"
        )
