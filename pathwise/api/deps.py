"""API dependencies.

Collaborators are created by the application lifespan and stored on
``app.state``; handlers reach them only through these dependencies.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from pathwise.agent.llm import GenerationClient
from pathwise.core.database import Database
from pathwise.services.store import RoadmapStore, SQLRoadmapStore


def get_database(request: Request) -> Database:
    return request.app.state.db


async def get_db(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async with database.session() as session:
        yield session


async def get_store(db: Annotated[AsyncSession, Depends(get_db)]) -> RoadmapStore:
    return SQLRoadmapStore(db)


def get_generation_client(request: Request) -> GenerationClient:
    return request.app.state.generation_client


StoreDep = Annotated[RoadmapStore, Depends(get_store)]
GenerationClientDep = Annotated[GenerationClient, Depends(get_generation_client)]
