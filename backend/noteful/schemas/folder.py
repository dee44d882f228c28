"""
Noteful Backend — Folder Request/Response Schemas
==================================================

What:  Pydantic models for the folder endpoints.
Why:   FastAPI parses JSON bodies into these and serializes responses from them.

Request fields are all Optional on purpose: a missing `name` must produce
the API's own 400 message, not FastAPI's 422 validation payload. The
route handler decides what is required. Unknown fields are dropped.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderResponse(BaseModel):
    """Full folder row as returned by every folder endpoint."""
    id: int = Field(description="Server-generated folder identifier")
    name: str = Field(description="Folder name")

    model_config = {"from_attributes": True}


class FolderCreate(BaseModel):
    """Body of POST /api/folders."""
    name: Optional[str] = Field(default=None, description="Folder name (required)")

    model_config = {"extra": "ignore"}


class FolderUpdate(BaseModel):
    """Body of PATCH /api/folders/{id}. Only `name` is updatable."""
    name: Optional[str] = Field(default=None, description="New folder name")

    model_config = {"extra": "ignore"}
