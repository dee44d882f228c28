"""
Noteful Backend — Note Request/Response Schemas
================================================

What:  Pydantic models for the note endpoints.
Why:   Parse JSON bodies, serialize rows, and feed the OpenAPI docs.

As with folders, request fields are Optional so that required-field checks
(and their exact messages) live in the route handler.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteResponse(BaseModel):
    """Full note row as returned by every note endpoint."""
    id: int = Field(description="Server-generated note identifier")
    name: str = Field(description="Note title")
    modified: datetime = Field(description="Last modification time (ISO 8601)")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id")
    content: str = Field(description="Note body")

    model_config = {"from_attributes": True}


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    `name` and `content` are required by the handler. `folder_id` and
    `modified` are passed through; `modified` defaults to now when omitted.
    """
    name: Optional[str] = None
    content: Optional[str] = None
    folder_id: Optional[int] = None
    modified: Optional[datetime] = None

    model_config = {"extra": "ignore"}


class NoteUpdate(BaseModel):
    """Body of PATCH /api/notes/{id}. Any subset of name, folder_id, content."""
    name: Optional[str] = None
    folder_id: Optional[int] = None
    content: Optional[str] = None

    model_config = {"extra": "ignore"}
