"""Pydantic schemas."""

from pathwise.schemas.progress import (
    ProgressListResponse,
    ProgressResponse,
    ProgressUpdate,
    ProgressUpdateResponse,
)
from pathwise.schemas.roadmap import (
    GenerateRoadmapRequest,
    GenerateRoadmapResponse,
    RoadmapDetailResponse,
    RoadmapResponse,
    SkillLevel,
    TopicResponse,
)
from pathwise.schemas.visualization import VisualizeRequest, VisualizeResponse

__all__ = [
    "SkillLevel",
    "GenerateRoadmapRequest",
    "GenerateRoadmapResponse",
    "RoadmapResponse",
    "TopicResponse",
    "RoadmapDetailResponse",
    "ProgressUpdate",
    "ProgressUpdateResponse",
    "ProgressResponse",
    "ProgressListResponse",
    "VisualizeRequest",
    "VisualizeResponse",
]
