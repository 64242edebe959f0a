"""Code visualizer API route."""

from fastapi import APIRouter

from pathwise.api.deps import GenerationClientDep
from pathwise.schemas.visualization import VisualizeRequest, VisualizeResponse
from pathwise.services import visualization_service

router = APIRouter(tags=["visualize"])


@router.post("/visualize", response_model=VisualizeResponse)
async def visualize_code(data: VisualizeRequest, client: GenerationClientDep) -> dict:
    """Trace code execution step by step with the LLM."""
    visualization = await visualization_service.visualize_code(client, data.code, data.language)
    return VisualizeResponse(visualization=visualization).model_dump(mode="json")
