"""Base repository: shared session handling and single-statement CRUD helpers."""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with add, get_row, count and delete_by_id.

    Subclasses map ORM rows to application DTOs; ORM instances never leave
    the repository.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_row(self, entity_id: int) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record and load server defaults (id, timestamps)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def count(self, *criteria: Any) -> int:
        """Return number of rows matching criteria (all rows when none given)."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def delete_by_id(self, entity_id: int) -> int:
        """Delete by primary key with one DELETE statement; return rows deleted."""
        model: Any = self.model
        result = await self.db.execute(delete(self.model).where(model.id == entity_id))
        return result.rowcount or 0
