"""
Noteful Backend — Note Route Handlers
======================================

What:  CRUD endpoints for notes under /api/notes.
How:   Validate the body, call the note gateway, shape the response.

Compatibility quirks kept on purpose:
    - Not-found message is "Note Not Found" (folders say "Folder does not exist")
    - POST answers with `Location: /notes/{id}`, without the /api prefix
    - `folder_id` is never checked against the folders table
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError
from noteful.models.note import Note
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from noteful.services.gateway import note_gateway
from noteful.validation import NOTE_UPDATABLE_FIELDS, pick_updates, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

NOTE_NOT_FOUND = "Note Not Found"
NOTE_UPDATE_REQUIRED = "Request body must contain either 'name', 'folder_id', 'content'"


async def _get_note_or_404(db: AsyncSession, note_id: int) -> Note:
    note = await note_gateway.get_by_id(db, note_id)
    if note is None:
        raise NotFoundError(message=NOTE_NOT_FOUND, resource="note", resource_id=note_id)
    return note


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    notes = await note_gateway.list_all(db)
    return [NoteResponse.model_validate(note) for note in notes]


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    note = await _get_note_or_404(db, note_id)
    return NoteResponse.model_validate(note)


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing name or content", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    response: Response,
    payload: Optional[NoteCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note.

    Required: `name`, then `content` (the first missing one is reported).
    Optional: `folder_id`, `modified` (defaults to the insert time).
    """
    fields = payload.model_dump(exclude_unset=True) if payload else {}
    require_fields(fields, ("name", "content"), "'{field}' is required")

    new_note = {
        "name": fields["name"],
        "content": fields["content"],
        "folder_id": fields.get("folder_id"),
    }
    if fields.get("modified") is not None:
        new_note["modified"] = fields["modified"]

    note = await note_gateway.insert(db, new_note)
    logger.info("Note %s created in folder %s", note.id, note.folder_id)

    response.headers["Location"] = f"/notes/{note.id}"
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await _get_note_or_404(db, note_id)
    await note_gateway.delete_by_id(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Body has none of the updatable fields", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note",
)
async def update_note(
    note_id: int,
    payload: Optional[NoteUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """Update any subset of name, folder_id and content."""
    await _get_note_or_404(db, note_id)

    fields = payload.model_dump(exclude_unset=True) if payload else {}
    updates = pick_updates(fields, NOTE_UPDATABLE_FIELDS, NOTE_UPDATE_REQUIRED)

    await note_gateway.update(db, note_id, updates)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
