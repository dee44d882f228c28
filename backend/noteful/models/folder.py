"""
Noteful Backend — Folder SQLAlchemy Model
==========================================

What:  ORM model representing the `folders` table.
Who:   Used by the folder gateway for CRUD operations and by
       `Database.create_all()` for schema creation.

Table Design:
    - id: integer identity assigned by the database, never by the client
    - name: free text, not unique
    Deleting a folder does not touch the notes that reference it.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful.database import Base


class Folder(Base):
    """A named container for notes."""

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, name='{self.name}')>"
