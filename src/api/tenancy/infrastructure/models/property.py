"""SQLAlchemy ORM model for the properties table."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TenantOwnedMixin, TimestampMixin


class PropertyModel(Base, TenantOwnedMixin, TimestampMixin):
    """ORM model for properties table.

    Property slugs are unique per tenant, not globally.
    """

    __tablename__ = "properties"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "slug", name="uq_properties_tenant_slug"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<PropertyModel(id={self.id}, tenant_id={self.tenant_id}, slug={self.slug})>"
