"""Progress schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from pathwise.schemas.roadmap import NonEmptyStr


class ProgressUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    roadmap_id: NonEmptyStr = Field(alias="roadmapId")
    topic_id: NonEmptyStr = Field(alias="topicId")
    completed: bool = False


class ProgressUpdateResponse(BaseModel):
    success: bool = True
    completed: bool


class ProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    roadmap_id: str
    topic_id: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class ProgressListResponse(BaseModel):
    success: bool = True
    progress: list[ProgressResponse]
