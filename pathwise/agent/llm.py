"""LLM provider client."""

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from pathwise.agent.prompts import PromptPair
from pathwise.core.config import Settings
from pathwise.core.errors import GenerationFailed
from pathwise.core.logging import get_logger

logger = get_logger(__name__)


def build_chat_model(settings: Settings) -> ChatOpenAI:
    """Create the provider chat model from settings."""
    kwargs: dict = {
        "model": settings.GENERATION_MODEL,
        "temperature": settings.GENERATION_TEMPERATURE,
        "max_tokens": settings.GENERATION_MAX_TOKENS,
        "max_retries": settings.GENERATION_MAX_RETRIES,
        "base_url": settings.GENERATION_BASE_URL,
        "timeout": settings.GENERATION_TIMEOUT,
    }
    if settings.GENERATION_API_KEY:
        kwargs["api_key"] = settings.GENERATION_API_KEY

    logger.info(
        "Initializing LLM",
        model=settings.GENERATION_MODEL,
        base_url=settings.GENERATION_BASE_URL,
    )
    return ChatOpenAI(**kwargs)


class GenerationClient:
    """Single-shot text generation against a chat model.

    Every failure is reported as GenerationFailed carrying the provider's
    message; transient and permanent failures are not distinguished. When
    built from settings the chat model is created on the first call, so a
    missing provider key only fails generation requests.
    """

    def __init__(self, llm: BaseChatModel | None = None, *, settings: Settings | None = None) -> None:
        if llm is None and settings is None:
            raise ValueError("GenerationClient needs a chat model or settings")
        self.llm = llm
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "GenerationClient":
        return cls(settings=settings)

    async def generate(self, prompt: PromptPair) -> str:
        try:
            if self.llm is None:
                self.llm = build_chat_model(self.settings)
            resp = await self.llm.ainvoke(
                [
                    SystemMessage(content=prompt.system),
                    HumanMessage(content=prompt.user),
                ]
            )
        except Exception as e:
            logger.error("Generation call failed", error=str(e))
            raise GenerationFailed(f"Generation failed: {e}") from e

        content = resp.content
        if not isinstance(content, str):
            # Multi-part content: keep the text parts
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )
        return content.strip()
