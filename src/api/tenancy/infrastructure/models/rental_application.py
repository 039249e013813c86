"""SQLAlchemy ORM model for the rental_applications table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TenantOwnedMixin, TimestampMixin


class RentalApplicationModel(Base, TenantOwnedMixin, TimestampMixin):
    """ORM model for rental_applications table."""

    __tablename__ = "rental_applications"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    applicant_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    property_slug: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<RentalApplicationModel(id={self.id}, tenant_id={self.tenant_id}, "
            f"status={self.status})>"
        )
