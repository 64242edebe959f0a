"""Tests for the SQL roadmap store."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pathwise.agent.llm_utils import normalize_roadmap
from pathwise.agent.schemas import GeneratedRoadmap, GeneratedTopic
from pathwise.core.database import Database
from pathwise.core.errors import PersistenceError
from pathwise.models import ProgressRecord, Roadmap, RoadmapTopic
from pathwise.schemas.roadmap import GenerateRoadmapRequest, SkillLevel
from pathwise.services.store import SQLRoadmapStore


def _request(**overrides) -> GenerateRoadmapRequest:
    data = {
        "goal": "Learn SQL",
        "total_days": 14,
        "hours_per_day": 2,
        "skill_level": SkillLevel.BEGINNER,
        "focus_areas": ["Database"],
    }
    data.update(overrides)
    return GenerateRoadmapRequest(**data)


async def _count(database: Database, model) -> int:
    async with database.session() as session:
        return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.asyncio
async def test_create_and_get_roadmap(test_session: AsyncSession, roadmap_json) -> None:
    store = SQLRoadmapStore(test_session)
    generated = normalize_roadmap(roadmap_json(count=10))

    roadmap = await store.create_roadmap(_request(), generated)
    assert roadmap.id
    assert roadmap.title == "SQL Foundations"
    assert roadmap.is_custom is True
    assert roadmap.skill_level == "beginner"
    assert roadmap.focus_areas == ["Database"]

    found = await store.get_roadmap(roadmap.id)
    assert found is not None
    fetched, topics = found
    assert fetched.id == roadmap.id
    assert [t.order_index for t in topics] == list(range(1, 11))
    assert topics[0].learning_objectives == ["Objective 1.1", "Objective 1.2", "Objective 1.3"]
    assert topics[0].video_suggestions == ["topic 1 tutorial"]
    assert topics[0].practice_questions[0]["difficulty"] == "Easy"


@pytest.mark.asyncio
async def test_order_index_is_declared_order(test_session: AsyncSession, roadmap_json) -> None:
    store = SQLRoadmapStore(test_session)
    generated = normalize_roadmap(roadmap_json(orders=[3, 1, 2]))

    roadmap = await store.create_roadmap(_request(), generated)
    _, topics = await store.get_roadmap(roadmap.id)

    assert [(t.order_index, t.title) for t in topics] == [
        (1, "Topic 1"),
        (2, "Topic 2"),
        (3, "Topic 3"),
    ]


@pytest.mark.asyncio
async def test_get_missing_roadmap(test_session: AsyncSession) -> None:
    store = SQLRoadmapStore(test_session)
    assert await store.get_roadmap("does-not-exist") is None


@pytest.mark.asyncio
async def test_failed_topic_insert_writes_nothing(
    database: Database, test_session: AsyncSession
) -> None:
    store = SQLRoadmapStore(test_session)
    # Bypass validation to force a unique (roadmap_id, order_index) violation
    generated = GeneratedRoadmap.model_construct(
        title="Broken",
        topics=[
            GeneratedTopic(title="A", estimated_hours=1, order=1),
            GeneratedTopic(title="B", estimated_hours=1, order=1),
        ],
    )

    with pytest.raises(PersistenceError):
        await store.create_roadmap(_request(), generated)

    assert await _count(database, Roadmap) == 0
    assert await _count(database, RoadmapTopic) == 0


@pytest.mark.asyncio
async def test_deleting_roadmap_cascades_to_topics(
    database: Database, test_session: AsyncSession, roadmap_json
) -> None:
    store = SQLRoadmapStore(test_session)
    roadmap = await store.create_roadmap(_request(), normalize_roadmap(roadmap_json(count=8)))
    assert await _count(database, RoadmapTopic) == 8

    async with database.session() as session:
        await session.execute(delete(Roadmap).where(Roadmap.id == roadmap.id))

    assert await _count(database, RoadmapTopic) == 0


@pytest.mark.asyncio
async def test_upsert_progress_is_idempotent(database: Database, test_session: AsyncSession) -> None:
    store = SQLRoadmapStore(test_session)

    first = await store.upsert_progress("r1", "t1", True)
    created_at = first.created_at
    second = await store.upsert_progress("r1", "t1", True)

    assert second.id == first.id
    assert second.completed is True
    assert second.created_at == created_at
    assert await _count(database, ProgressRecord) == 1


@pytest.mark.asyncio
async def test_upsert_progress_toggles(test_session: AsyncSession) -> None:
    store = SQLRoadmapStore(test_session)

    await store.upsert_progress("r1", "t1", True)
    record = await store.upsert_progress("r1", "t1", False)
    assert record.completed is False
    assert record.updated_at >= record.created_at

    record = await store.upsert_progress("r1", "t1", True)
    assert record.completed is True


@pytest.mark.asyncio
async def test_list_progress_filters_by_roadmap(test_session: AsyncSession) -> None:
    store = SQLRoadmapStore(test_session)
    await store.upsert_progress("r1", "t1", True)
    await store.upsert_progress("r1", "t2", False)
    await store.upsert_progress("r2", "t1", True)

    records = await store.list_progress("r1")
    assert sorted((r.topic_id, r.completed) for r in records) == [("t1", True), ("t2", False)]
    assert await store.list_progress("unknown") == []


@pytest.mark.asyncio
async def test_timestamps_read_back_as_utc(
    database: Database, test_session: AsyncSession, roadmap_json
) -> None:
    store = SQLRoadmapStore(test_session)
    roadmap = await store.create_roadmap(_request(), normalize_roadmap(roadmap_json(count=8)))
    await store.upsert_progress("r1", "t1", True)

    # A fresh session loads rows from the database, not the identity map
    async with database.session() as session:
        fresh = SQLRoadmapStore(session)
        loaded, topics = await fresh.get_roadmap(roadmap.id)
        (record,) = await fresh.list_progress("r1")

        assert loaded.created_at == roadmap.created_at
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert topics[0].created_at.tzinfo is not None
        assert record.created_at.utcoffset() == timedelta(0)

        updated = await fresh.upsert_progress("r1", "t1", False)
        assert updated.updated_at >= updated.created_at


@pytest.mark.asyncio
async def test_naive_timestamps_are_stored_as_utc(database: Database) -> None:
    written = datetime(2026, 1, 2, 3, 4, 5)
    async with database.session() as session:
        session.add(ProgressRecord(roadmap_id="r1", topic_id="t1", created_at=written, updated_at=written))

    async with database.session() as session:
        (record,) = await SQLRoadmapStore(session).list_progress("r1")
        assert record.created_at == written.replace(tzinfo=timezone.utc)


class _RacingStore(SQLRoadmapStore):
    """Lets another session insert the same pair between lookup and insert."""

    def __init__(self, db: AsyncSession, database: Database) -> None:
        super().__init__(db)
        self.database = database
        self.raced = False

    async def _find_progress(self, roadmap_id: str, topic_id: str) -> ProgressRecord | None:
        if not self.raced:
            self.raced = True
            async with self.database.session() as other:
                other.add(ProgressRecord(roadmap_id=roadmap_id, topic_id=topic_id, completed=False))
            return None
        return await super()._find_progress(roadmap_id, topic_id)


@pytest.mark.asyncio
async def test_upsert_progress_overwrites_concurrent_insert(
    database: Database, test_session: AsyncSession
) -> None:
    store = _RacingStore(test_session, database)

    record = await store.upsert_progress("r1", "t1", True)

    assert store.raced is True
    assert record.completed is True
    assert await _count(database, ProgressRecord) == 1
    async with database.session() as session:
        (stored,) = await SQLRoadmapStore(session).list_progress("r1")
        assert stored.id == record.id
        assert stored.completed is True
