"""Roadmap generation and retrieval."""

from pathwise.agent.llm import GenerationClient
from pathwise.agent.llm_utils import normalize_roadmap
from pathwise.agent.prompts import build_roadmap_prompt
from pathwise.core.errors import NotFoundError
from pathwise.core.logging import get_logger
from pathwise.schemas.roadmap import (
    GenerateRoadmapRequest,
    GenerateRoadmapResponse,
    RoadmapDetailResponse,
    RoadmapResponse,
    TopicResponse,
)
from pathwise.services.store import RoadmapStore

logger = get_logger(__name__)


async def generate_roadmap(
    store: RoadmapStore,
    client: GenerationClient,
    request: GenerateRoadmapRequest,
) -> GenerateRoadmapResponse:
    """Generate a roadmap with the LLM and persist it.

    Args:
        store: Persistence backend
        client: Generation client
        request: Validated request parameters

    Returns:
        Identifier, title and topic count of the stored roadmap

    Raises:
        GenerationFailed: The provider call failed
        MalformedGenerationOutput: The output was not a valid roadmap
        PersistenceError: The roadmap could not be stored
    """
    prompt = build_roadmap_prompt(
        goal=request.goal,
        total_days=request.total_days,
        hours_per_day=request.hours_per_day,
        skill_level=request.skill_level.value,
        focus_areas=request.focus_areas,
    )

    logger.info(
        "Generating roadmap",
        goal=request.goal,
        total_days=request.total_days,
        hours_per_day=request.hours_per_day,
        skill_level=request.skill_level.value,
    )
    content = await client.generate(prompt)
    generated = normalize_roadmap(content)

    budget = request.total_days * request.hours_per_day
    if generated.total_hours > budget:
        # Advisory only; the plan is kept as generated
        logger.warning(
            "Generated roadmap exceeds time budget",
            total_hours=generated.total_hours,
            budget=budget,
        )

    roadmap = await store.create_roadmap(request, generated)
    logger.info("Roadmap generated", roadmap_id=roadmap.id, title=roadmap.title)

    return GenerateRoadmapResponse(
        roadmap_id=roadmap.id,
        title=roadmap.title,
        topics_count=len(generated.topics),
    )


async def get_roadmap_detail(store: RoadmapStore, roadmap_id: str) -> RoadmapDetailResponse:
    """Get a roadmap with its topics in order_index order."""
    found = await store.get_roadmap(roadmap_id)
    if found is None:
        raise NotFoundError("Roadmap not found")

    roadmap, topics = found
    return RoadmapDetailResponse(
        roadmap=RoadmapResponse.model_validate(roadmap),
        topics=[TopicResponse.model_validate(t) for t in topics],
    )
