"""
Base Repository

Generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- list()         → List records with pagination and equality filters
- count()        → Count records with equality filters
- create()       → Insert a new record
- update()       → Patch an existing record
- delete()       → Hard delete a record

Error Translation:
==================
Every statement goes through _execute()/_flush()/_refresh(), which translate
SQLAlchemy failures into application errors:

    IntegrityError   → ValidationError  (unique constraint, bad reference)
    SQLAlchemyError  → StorageError     (anything else, no retry)

flush() vs commit():
====================
Repository methods only flush; the request-scoped session in get_db()
commits. Services that need a durable write before a side effect commit
the session themselves.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable
from sqlalchemy.sql.functions import count as sql_count

from acrossmedia.shared.core.exceptions import StorageError, ValidationError
from acrossmedia.shared.core.logging import get_logger
from acrossmedia.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)

logger = get_logger("repositories")


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Example:
        class VideoRepository(BaseRepository[Video]):
            def __init__(self, session: AsyncSession):
                super().__init__(Video, session)
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # STATEMENT EXECUTION
    # ═══════════════════════════════════════════════════════════════════════════

    async def _execute(self, statement: Executable):
        """Execute a statement, translating database failures."""
        try:
            return await self.session.execute(statement)
        except IntegrityError as e:
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(
                "Database statement failed",
                model=self.model.__name__,
                error=str(e),
            )
            raise StorageError(f"{self.model.__name__} query failed") from e

    async def _flush(self) -> None:
        """Flush pending changes, translating database failures."""
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            logger.error(
                "Database flush failed",
                model=self.model.__name__,
                error=str(e),
            )
            raise StorageError(f"{self.model.__name__} write failed") from e

    async def _refresh(self, instance: ModelType) -> None:
        """Reload DB-generated values, translating database failures."""
        try:
            await self.session.refresh(instance)
        except SQLAlchemyError as e:
            logger.error(
                "Database refresh failed",
                model=self.model.__name__,
                error=str(e),
            )
            raise StorageError(f"{self.model.__name__} read failed") from e

    async def commit(self) -> None:
        """
        Commit the session's transaction.

        Only for services that must make a write durable before a side
        effect (such as sending email); everything else relies on get_db().
        """
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise self._integrity_error(e) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Database commit failed", model=self.model.__name__, error=str(e))
            raise StorageError(f"{self.model.__name__} commit failed") from e

    def _integrity_error(self, error: IntegrityError) -> ValidationError:
        logger.warning(
            "Integrity constraint violated",
            model=self.model.__name__,
            error=str(error.orig),
        )
        return ValidationError(
            f"{self.model.__name__} conflicts with an existing record",
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID.

        Returns:
            The model instance if found, None otherwise
        """
        result = await self._execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = "created_at",
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List records with pagination and optional equality filters.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return
            filters: Dict of field=value for WHERE clauses
            order_by: Field name to order results by
            order_desc: Descending when True

        Returns:
            List of model instances
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            query = query.order_by(order_field.desc() if order_desc else order_field)

        query = query.offset(offset).limit(limit)

        result = await self._execute(query)
        return list(result.scalars().all())

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """Count records with optional equality filters."""
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self._execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new record.

        Returns:
            The created instance with DB-generated values loaded

        Raises:
            ValidationError: On unique constraint violation
            StorageError: On any other database failure
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self._flush()
        await self._refresh(instance)
        return instance

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Patch a record by ID.

        Only fields that exist on the model and are not None are applied.

        Returns:
            Updated instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self._flush()
        await self._refresh(instance)
        return instance

    async def delete(self, record_id: UUID) -> bool:
        """
        Permanently delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self._flush()
        return True
