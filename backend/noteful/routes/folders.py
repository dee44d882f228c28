"""
Noteful Backend — Folder Route Handlers
========================================

What:  CRUD endpoints for folders under /api/folders.
How:   Validate the body, call the folder gateway, shape the response.
       Not-found and validation failures are raised as application
       exceptions; the global handlers render them.

Existence checks:
    DELETE and PATCH look the folder up first and answer 404 if it is gone.
    The lookup and the write are separate statements with no locking; a
    concurrent delete between them simply affects zero rows.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.exceptions import NotFoundError
from noteful.models.folder import Folder
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from noteful.services.gateway import folder_gateway
from noteful.validation import FOLDER_UPDATABLE_FIELDS, pick_updates, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Folders"])

FOLDER_NOT_FOUND = "Folder does not exist"


async def _get_folder_or_404(db: AsyncSession, folder_id: int) -> Folder:
    folder = await folder_gateway.get_by_id(db, folder_id)
    if folder is None:
        raise NotFoundError(message=FOLDER_NOT_FOUND, resource="folder", resource_id=folder_id)
    return folder


@router.get(
    "/folders",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(db: AsyncSession = Depends(get_db_session)) -> List[FolderResponse]:
    folders = await folder_gateway.list_all(db)
    return [FolderResponse.model_validate(folder) for folder in folders]


@router.get(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a single folder by ID",
)
async def get_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    folder = await _get_folder_or_404(db, folder_id)
    return FolderResponse.model_validate(folder)


@router.post(
    "/folders",
    response_model=FolderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing name", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    response: Response,
    payload: Optional[FolderCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    """
    Create a folder from `{"name": ...}`.

    Responds 201 with the stored row and a Location header pointing at it.
    """
    fields = payload.model_dump(exclude_unset=True) if payload else {}
    require_fields(fields, ("name",), "Missing '{field}' in request body")

    folder = await folder_gateway.insert(db, {"name": fields["name"]})
    logger.info("Folder %s created", folder.id)

    response.headers["Location"] = f"/api/folders/{folder.id}"
    return FolderResponse.model_validate(folder)


@router.delete(
    "/folders/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Delete a folder",
)
async def delete_folder(
    folder_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await _get_folder_or_404(db, folder_id)
    await folder_gateway.delete_by_id(db, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/folders/{folder_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Body has no name", "model": ErrorResponse},
        404: {"description": "Folder not found", "model": ErrorResponse},
    },
    summary="Rename a folder",
)
async def update_folder(
    folder_id: int,
    payload: Optional[FolderUpdate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Update a folder's name. Unknown fields in the body are ignored.

    The 404 check runs before body validation, so an unknown id answers 404
    even when the body is empty.
    """
    await _get_folder_or_404(db, folder_id)

    fields = payload.model_dump(exclude_unset=True) if payload else {}
    updates = pick_updates(fields, FOLDER_UPDATABLE_FIELDS, "Request body must contain a name")

    await folder_gateway.update(db, folder_id, updates)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
