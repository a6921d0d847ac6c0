"""Repository dependencies (composition root).

Read routes get a plain session (get_db); write routes get a session inside
a transaction (get_db_transactional) that commits when the route returns,
before the response is sent. scope="function" runs the dependency exit
ahead of response serialization, so a failed commit surfaces as a 500.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.infrastructure.persistence.database import get_db, get_db_transactional
from taskboard.infrastructure.persistence.repositories import TaskRepository, UserRepository


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for read paths."""
    return UserRepository(db)


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional, scope="function")],
) -> UserRepository:
    """User repository bound to the request transaction."""
    return UserRepository(db)


async def get_task_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskRepository:
    """Task repository for read paths."""
    return TaskRepository(db)


async def get_task_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional, scope="function")],
) -> TaskRepository:
    """Task repository bound to the request transaction."""
    return TaskRepository(db)
