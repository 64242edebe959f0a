"""Code visualization schemas."""

from pydantic import BaseModel, field_validator

from pathwise.agent.schemas import CodeVisualization
from pathwise.schemas.roadmap import NonEmptyStr


class VisualizeRequest(BaseModel):
    code: str
    language: NonEmptyStr

    @field_validator("code")
    @classmethod
    def _code_not_blank(cls, value: str) -> str:
        # Leading indentation is significant, so the code itself is not stripped
        if not value.strip():
            raise ValueError("code must not be empty")
        return value


class VisualizeResponse(BaseModel):
    success: bool = True
    visualization: CodeVisualization
