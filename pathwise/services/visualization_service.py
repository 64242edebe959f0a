"""Step-by-step code execution visualization."""

from pathwise.agent.llm import GenerationClient
from pathwise.agent.llm_utils import normalize_visualization
from pathwise.agent.prompts import build_visualization_prompt
from pathwise.agent.schemas import CodeVisualization
from pathwise.core.logging import get_logger

logger = get_logger(__name__)


async def visualize_code(client: GenerationClient, code: str, language: str) -> CodeVisualization:
    logger.info("Visualizing code", language=language, code_length=len(code))
    content = await client.generate(build_visualization_prompt(code, language))
    visualization = normalize_visualization(content)
    logger.info("Code visualization generated", steps=len(visualization.steps))
    return visualization
