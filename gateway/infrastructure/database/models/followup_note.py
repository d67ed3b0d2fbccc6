"""SQLAlchemy ORM model for the FollowupNote entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gateway.infrastructure.database.base import Base


class FollowupNoteModel(Base):
    """ORM model — maps to the 'client_followup_notes' table."""

    __tablename__ = "client_followup_notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    tag: Mapped[str | None] = mapped_column(String(100), nullable=True)
    file_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False)
    client_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_by_user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by_user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_by_user_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_by_user_email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    updated_by_user_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_by_user_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_by_user_image: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_client_followup_notes_client", "client_id"),
        Index("ix_client_followup_notes_created", "created_at"),
        Index("ix_client_followup_notes_updated", "updated_at"),
    )

    def __repr__(self) -> str:
        return f"<FollowupNoteModel(id={self.id}, client='{self.client_id}', title='{self.title}')>"
