"""Persistence for roadmaps, topics and progress.

``RoadmapStore`` is the only persistence surface the services use;
``SQLRoadmapStore`` is the relational backend over an async SQLAlchemy session.
"""

from abc import ABC, abstractmethod

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pathwise.agent.schemas import GeneratedRoadmap
from pathwise.core.errors import PersistenceError
from pathwise.core.logging import get_logger
from pathwise.models import ProgressRecord, Roadmap, RoadmapTopic
from pathwise.models.roadmap import new_id, utcnow
from pathwise.schemas.roadmap import GenerateRoadmapRequest

logger = get_logger(__name__)


class RoadmapStore(ABC):
    @abstractmethod
    async def create_roadmap(
        self, params: GenerateRoadmapRequest, generated: GeneratedRoadmap
    ) -> Roadmap:
        """Persist a roadmap header and all of its topics atomically."""
        raise NotImplementedError

    @abstractmethod
    async def get_roadmap(self, roadmap_id: str) -> tuple[Roadmap, list[RoadmapTopic]] | None:
        """Return the roadmap and its topics ordered by order_index, or None."""
        raise NotImplementedError

    @abstractmethod
    async def upsert_progress(self, roadmap_id: str, topic_id: str, completed: bool) -> ProgressRecord:
        raise NotImplementedError

    @abstractmethod
    async def list_progress(self, roadmap_id: str) -> list[ProgressRecord]:
        raise NotImplementedError


class SQLRoadmapStore(RoadmapStore):
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create_roadmap(
        self, params: GenerateRoadmapRequest, generated: GeneratedRoadmap
    ) -> Roadmap:
        """Persist a roadmap header and all of its topics atomically.

        Header and topics are committed together; on failure nothing is
        written.

        Note: This function commits the transaction.
        """
        roadmap_id = new_id()
        roadmap = Roadmap(
            id=roadmap_id,
            title=generated.title,
            goal=params.goal,
            total_days=params.total_days,
            hours_per_day=params.hours_per_day,
            skill_level=params.skill_level.value,
            focus_areas=list(params.focus_areas),
            is_custom=True,
        )
        topics = [
            RoadmapTopic(
                id=new_id(),
                roadmap_id=roadmap_id,
                title=t.title,
                description=t.description,
                order_index=t.order,
                estimated_hours=t.estimated_hours,
                learning_objectives=list(t.learning_objectives),
                video_suggestions=list(t.video_suggestions),
                practice_questions=[q.model_dump() for q in t.practice_questions],
            )
            for t in generated.topics
        ]

        try:
            self.db.add(roadmap)
            await self.db.flush()
            self.db.add_all(topics)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Roadmap write failed", roadmap_id=roadmap_id, error=str(e))
            raise PersistenceError(f"Failed to save roadmap: {e}") from e

        logger.info("Roadmap created", roadmap_id=roadmap_id, topics_count=len(topics))
        return roadmap

    async def get_roadmap(self, roadmap_id: str) -> tuple[Roadmap, list[RoadmapTopic]] | None:
        try:
            roadmap = await self.db.get(Roadmap, roadmap_id)
            if not roadmap:
                return None
            result = await self.db.execute(
                select(RoadmapTopic)
                .where(RoadmapTopic.roadmap_id == roadmap_id)
                .order_by(RoadmapTopic.order_index.asc())
            )
            return roadmap, list(result.scalars().all())
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch roadmap: {e}") from e

    async def _find_progress(self, roadmap_id: str, topic_id: str) -> ProgressRecord | None:
        result = await self.db.execute(
            select(ProgressRecord).where(
                ProgressRecord.roadmap_id == roadmap_id,
                ProgressRecord.topic_id == topic_id,
            )
        )
        return result.scalar_one_or_none()

    async def _apply_progress(self, roadmap_id: str, topic_id: str, completed: bool) -> ProgressRecord:
        record = await self._find_progress(roadmap_id, topic_id)
        now = utcnow()
        if record is None:
            record = ProgressRecord(
                roadmap_id=roadmap_id,
                topic_id=topic_id,
                completed=completed,
                created_at=now,
                updated_at=now,
            )
            self.db.add(record)
        else:
            record.completed = completed
            record.updated_at = now
        await self.db.flush()
        return record

    async def upsert_progress(self, roadmap_id: str, topic_id: str, completed: bool) -> ProgressRecord:
        """Insert or overwrite the completion flag for (roadmap_id, topic_id).

        Note: This function commits the transaction.
        """
        try:
            try:
                record = await self._apply_progress(roadmap_id, topic_id, completed)
                await self.db.commit()
            except IntegrityError:
                # A concurrent request inserted the same pair first; overwrite it
                await self.db.rollback()
                record = await self._apply_progress(roadmap_id, topic_id, completed)
                await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise PersistenceError(f"Failed to update progress: {e}") from e
        return record

    async def list_progress(self, roadmap_id: str) -> list[ProgressRecord]:
        try:
            result = await self.db.execute(
                select(ProgressRecord).where(ProgressRecord.roadmap_id == roadmap_id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch progress: {e}") from e
