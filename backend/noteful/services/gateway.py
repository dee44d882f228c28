"""
Noteful Backend — Persistence Gateway
======================================

What:  The five store operations every entity type needs: list-all,
       get-by-id, insert, update, delete.
Why:   Keeps SQL out of the route handlers. There is no business logic here.
How:   One generic `TableGateway` bound to an ORM model; module-level
       instances for folders and notes. Each method takes the request's
       AsyncSession, so the gateway itself holds no connection state.

Error Handling Strategy:
    A missing row is not an error at this layer: `get_by_id` returns None
    and `update`/`delete_by_id` return a row count of 0. Any SQLAlchemyError
    is logged and re-raised as DatabaseError so the global handler can
    answer with a 500.
"""

import logging
from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import Base
from noteful.exceptions import DatabaseError
from noteful.models.folder import Folder
from noteful.models.note import Note

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class TableGateway(Generic[ModelT]):
    """
    Passthrough CRUD operations for a single table.

    Attributes:
        model: ORM class whose table this gateway reads and writes
    """

    def __init__(self, model: Type[ModelT]):
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def _database_error(self, operation: str, exc: Exception, **context: Any) -> DatabaseError:
        logger.error(
            "Database error during %s on %s: %s",
            operation,
            self.table_name,
            str(exc),
            exc_info=True,
        )
        return DatabaseError(
            context={
                "operation": operation,
                "table": self.table_name,
                "error_type": type(exc).__name__,
                "original_error": str(exc),
                **context,
            },
        )

    async def list_all(self, db: AsyncSession) -> List[ModelT]:
        """SELECT * with no filter, ordering or pagination."""
        try:
            result = await db.execute(select(self.model))
        except SQLAlchemyError as e:
            raise self._database_error("list_all", e) from e
        return list(result.scalars().all())

    async def get_by_id(self, db: AsyncSession, entity_id: int) -> Optional[ModelT]:
        """Returns the row with this id, or None."""
        try:
            result = await db.execute(
                select(self.model).where(self.model.id == entity_id)
            )
        except SQLAlchemyError as e:
            raise self._database_error("get_by_id", e, id=entity_id) from e
        return result.scalar_one_or_none()

    async def insert(self, db: AsyncSession, fields: Mapping[str, Any]) -> ModelT:
        """
        Persists a new row and returns it with generated values populated.

        The refresh re-reads the row so the returned object carries exactly
        what the store holds (generated id, server defaults, stored
        timestamp precision), making it identical to a later get_by_id.
        """
        entity = self.model(**fields)
        db.add(entity)
        try:
            await db.flush()
            await db.refresh(entity)
        except SQLAlchemyError as e:
            raise self._database_error("insert", e) from e
        logger.info("Inserted %s row id=%s", self.table_name, entity.id)
        return entity

    async def update(
        self, db: AsyncSession, entity_id: int, fields: Mapping[str, Any]
    ) -> int:
        """Updates only the supplied columns; returns rows affected."""
        statement = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**dict(fields))
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(statement)
        except SQLAlchemyError as e:
            raise self._database_error("update", e, id=entity_id) from e
        logger.info(
            "Updated %s row id=%s fields=%s", self.table_name, entity_id, sorted(fields)
        )
        return result.rowcount

    async def delete_by_id(self, db: AsyncSession, entity_id: int) -> int:
        """Deletes the row with this id; returns rows affected."""
        try:
            result = await db.execute(
                delete(self.model)
                .where(self.model.id == entity_id)
                .execution_options(synchronize_session=False)
            )
        except SQLAlchemyError as e:
            raise self._database_error("delete_by_id", e, id=entity_id) from e
        logger.info("Deleted %s row id=%s", self.table_name, entity_id)
        return result.rowcount


# ── Gateway Instances ─────────────────────────────────────────────────────
# Stateless: the session is passed into every call
folder_gateway: TableGateway[Folder] = TableGateway(Folder)
note_gateway: TableGateway[Note] = TableGateway(Note)
