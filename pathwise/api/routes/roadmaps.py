"""Roadmap API routes."""

from fastapi import APIRouter

from pathwise.api.deps import GenerationClientDep, StoreDep
from pathwise.schemas.roadmap import (
    GenerateRoadmapRequest,
    GenerateRoadmapResponse,
    RoadmapDetailResponse,
)
from pathwise.services import roadmap_service

router = APIRouter(prefix="/roadmaps", tags=["roadmaps"])


@router.post("/generate", response_model=GenerateRoadmapResponse)
async def generate_roadmap(
    data: GenerateRoadmapRequest,
    store: StoreDep,
    client: GenerationClientDep,
) -> dict:
    """Generate a learning roadmap with the LLM and save it."""
    result = await roadmap_service.generate_roadmap(store, client, data)
    return result.model_dump(mode="json", by_alias=True)


@router.get("/{roadmap_id}", response_model=RoadmapDetailResponse)
async def get_roadmap(roadmap_id: str, store: StoreDep) -> dict:
    """Get a roadmap and its topics in order."""
    detail = await roadmap_service.get_roadmap_detail(store, roadmap_id)
    return detail.model_dump(mode="json")
