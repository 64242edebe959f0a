"""Roadmap schemas for API requests and responses."""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    PositiveInt,
    StringConstraints,
    field_validator,
)

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SkillLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class GenerateRoadmapRequest(BaseModel):
    """Request body for roadmap generation.

    totalDays is expected in 7-365 and hoursPerDay in 0.5-12; only
    positivity is enforced.
    """

    model_config = ConfigDict(populate_by_name=True)

    goal: NonEmptyStr
    total_days: PositiveInt = Field(alias="totalDays")
    hours_per_day: PositiveFloat = Field(alias="hoursPerDay")
    skill_level: SkillLevel = Field(alias="skillLevel")
    focus_areas: list[str] = Field(default_factory=list, alias="focusAreas")

    @field_validator("focus_areas", mode="before")
    @classmethod
    def _null_focus_areas(cls, value: Any) -> Any:
        return [] if value is None else value


class GenerateRoadmapResponse(BaseModel):
    """Result of a successful generation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    roadmap_id: str = Field(alias="roadmapId")
    title: str
    topics_count: int = Field(alias="topicsCount")


class RoadmapResponse(BaseModel):
    """Roadmap header response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    goal: str
    total_days: int
    hours_per_day: float
    skill_level: str
    focus_areas: list[str]
    is_custom: bool
    created_at: datetime


class TopicResponse(BaseModel):
    """Topic response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    roadmap_id: str
    title: str
    description: str
    order_index: int
    estimated_hours: float
    learning_objectives: list[str]
    video_suggestions: list[str]
    practice_questions: list[dict[str, Any]]
    created_at: datetime


class RoadmapDetailResponse(BaseModel):
    """A roadmap with its topics ordered by order_index."""

    roadmap: RoadmapResponse
    topics: list[TopicResponse]
