"""SQLAlchemy ORM model for the Warranty entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gateway.infrastructure.database.base import Base


class WarrantyModel(Base):
    """ORM model — maps to the 'warranties' table."""

    __tablename__ = "warranties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    customer_identification: Mapped[str] = mapped_column(String(100), nullable=False)
    customer_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    customer_cellphone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    seller_id: Mapped[str] = mapped_column(String(255), nullable=False)
    seller_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    products_relation_ids: Mapped[list | None] = mapped_column(JSON, nullable=True)
    notes_relation_ids: Mapped[list | None] = mapped_column(JSON, nullable=True)

    user_created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    user_created_name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_created_id: Mapped[str] = mapped_column(String(255), nullable=False)
    user_created_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    user_updated_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    user_updated_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_updated_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_updated_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    user_updated_status_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    user_updated_status_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_updated_status_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_updated_status_img: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    __table_args__ = (
        Index("ix_warranties_seller", "seller_id"),
        Index("ix_warranties_status", "status"),
        Index("ix_warranties_customer_identification", "customer_identification"),
        Index("ix_warranties_created", "user_created_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<WarrantyModel(id={self.id}, customer='{self.customer_name}', "
            f"status='{self.status}', active={self.is_active})>"
        )
