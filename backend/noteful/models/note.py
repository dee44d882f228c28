"""
Noteful Backend — Note SQLAlchemy Model
========================================

What:  ORM model representing the `notes` table.
Who:   Used by the note gateway for CRUD operations and by
       `Database.create_all()` for schema creation.

Table Design:
    - id: integer identity assigned by the database
    - name, content: required text
    - modified: timezone-aware timestamp, defaults to insert time
    - folder_id: references folders.id; the application never checks that
      the folder exists, the store enforces whatever it enforces
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Note(Base):
    """A content record optionally associated with a folder."""

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # Generic DateTime(timezone=True) so the same model runs on PostgreSQL
    # (TIMESTAMP WITH TIME ZONE) and on the SQLite test database
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    folder_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("folders.id"),
        nullable=True,
    )

    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, name='{self.name}', "
            f"folder_id={self.folder_id})>"
        )
