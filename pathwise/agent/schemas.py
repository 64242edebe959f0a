"""Pydantic models for structured generation output.

The provider is untrusted; these models are the field-by-field contract its
output must meet before anything is persisted or returned.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


class PracticeQuestion(BaseModel):
    """A practice problem suggested for a topic."""

    title: str = Field(min_length=1)
    difficulty: Literal["Easy", "Medium", "Hard"]
    platform: str = ""
    url: str = ""


class GeneratedTopic(BaseModel):
    """A topic as declared by the generator."""

    title: str = Field(min_length=1)
    description: str = ""
    estimated_hours: float = Field(gt=0)
    order: int = Field(ge=1)
    learning_objectives: list[str] = Field(default_factory=list)
    video_suggestions: list[str] = Field(default_factory=list)
    practice_questions: list[PracticeQuestion] = Field(default_factory=list)

    @field_validator("learning_objectives", "video_suggestions", "practice_questions", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value


class GeneratedRoadmap(BaseModel):
    """Roadmap shape the generator must return."""

    title: str = Field(min_length=1)
    topics: list[GeneratedTopic] = Field(min_length=1, max_length=50)

    @model_validator(mode="after")
    def _orders_are_contiguous(self) -> "GeneratedRoadmap":
        orders = sorted(t.order for t in self.topics)
        expected = list(range(1, len(self.topics) + 1))
        if orders != expected:
            raise ValueError(f"topic orders must be exactly 1..{len(self.topics)}, got {orders}")
        return self

    @property
    def total_hours(self) -> float:
        return sum(t.estimated_hours for t in self.topics)


class VisualizationStep(BaseModel):
    """One step of a code execution trace."""

    step: int = Field(ge=1)
    line: int = Field(ge=0)
    description: str
    variables: dict[str, Any] = Field(default_factory=dict)
    highlight: str = ""

    @field_validator("variables", mode="before")
    @classmethod
    def _null_variables(cls, value: Any) -> Any:
        return {} if value is None else value


class CodeVisualization(BaseModel):
    """Step-by-step execution trace of a code snippet."""

    steps: list[VisualizationStep] = Field(min_length=1)
    summary: str = ""
