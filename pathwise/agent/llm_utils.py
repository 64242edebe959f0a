"""LLM output normalization.

The provider contract is "well-formed JSON, possibly wrapped in a markdown
code fence". Anything weaker is rejected; no repair is attempted.
"""

import json
import re
from typing import Any

from pydantic import BaseModel, ValidationError

from pathwise.agent.schemas import CodeVisualization, GeneratedRoadmap
from pathwise.core.errors import MalformedGenerationOutput
from pathwise.core.logging import get_logger

logger = get_logger(__name__)

# Opening fence with optional language tag, e.g. ```json
_OPEN_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_CLOSE_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence.

    Only applies when the content starts with a fence; otherwise the trimmed
    text is returned unchanged.
    """
    text = text.strip()
    if not text.startswith("```"):
        return text
    text = _OPEN_FENCE.sub("", text, count=1)
    text = _CLOSE_FENCE.sub("", text, count=1)
    return text.strip()


def parse_generation_output(content: str | None) -> dict[str, Any]:
    """Parse raw generator content into a JSON object.

    Raises:
        MalformedGenerationOutput: If content is empty, not valid JSON after
            fence stripping, or not a JSON object.
    """
    if not content or not content.strip():
        raise MalformedGenerationOutput("Empty generation output")

    cleaned = strip_code_fences(content)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse generation output", error=str(e), content_preview=content[:200])
        raise MalformedGenerationOutput(f"Malformed generation output: {e}") from e

    if not isinstance(data, dict):
        raise MalformedGenerationOutput(
            f"Malformed generation output: expected a JSON object, got {type(data).__name__}"
        )
    return data


def _validate(model: type[BaseModel], data: dict[str, Any]) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        # Report the first few problems only; LLM output can produce dozens
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()[:5]
        )
        logger.error("Generation output failed validation", model=model.__name__, problems=problems)
        raise MalformedGenerationOutput(f"Malformed generation output: {problems}") from e


def normalize_roadmap(content: str | None) -> GeneratedRoadmap:
    """Parse and validate a generated roadmap."""
    roadmap: GeneratedRoadmap = _validate(GeneratedRoadmap, parse_generation_output(content))
    return roadmap


def normalize_visualization(content: str | None) -> CodeVisualization:
    """Parse and validate a generated code visualization."""
    visualization: CodeVisualization = _validate(CodeVisualization, parse_generation_output(content))
    return visualization
