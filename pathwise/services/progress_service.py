"""Per-topic progress tracking."""

from pathwise.core.errors import InvalidRequestError
from pathwise.core.logging import get_logger
from pathwise.models import ProgressRecord
from pathwise.services.store import RoadmapStore

logger = get_logger(__name__)


async def set_progress(store: RoadmapStore, roadmap_id: str, topic_id: str, completed: bool) -> bool:
    """Mark a topic completed or not completed.

    Upserts the (roadmap_id, topic_id) record. The referenced roadmap and
    topic are not checked for existence.

    Returns:
        The completed value that was applied
    """
    if not roadmap_id or not topic_id:
        raise InvalidRequestError("Roadmap ID and Topic ID are required")

    record = await store.upsert_progress(roadmap_id, topic_id, completed)
    logger.info(
        "Progress updated",
        roadmap_id=roadmap_id,
        topic_id=topic_id,
        completed=record.completed,
    )
    return record.completed


async def get_progress(store: RoadmapStore, roadmap_id: str) -> list[ProgressRecord]:
    """List progress records for a roadmap, unordered."""
    if not roadmap_id:
        raise InvalidRequestError("Roadmap ID is required")
    return await store.list_progress(roadmap_id)
