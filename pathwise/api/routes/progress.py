"""Progress API routes."""

from typing import Annotated

from fastapi import APIRouter, Query

from pathwise.api.deps import StoreDep
from pathwise.schemas.progress import (
    ProgressListResponse,
    ProgressResponse,
    ProgressUpdate,
    ProgressUpdateResponse,
)
from pathwise.services import progress_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("", response_model=ProgressUpdateResponse)
async def update_progress(data: ProgressUpdate, store: StoreDep) -> dict:
    """Mark a topic as completed or not completed."""
    completed = await progress_service.set_progress(
        store, data.roadmap_id, data.topic_id, data.completed
    )
    return {"success": True, "completed": completed}


@router.get("", response_model=ProgressListResponse)
async def list_progress(
    store: StoreDep,
    roadmap_id: Annotated[str | None, Query(alias="roadmapId")] = None,
) -> dict:
    """Get all progress records of a roadmap."""
    records = await progress_service.get_progress(store, roadmap_id or "")
    return ProgressListResponse(
        progress=[ProgressResponse.model_validate(r) for r in records]
    ).model_dump(mode="json")
