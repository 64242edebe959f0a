"""Tests for the generation client."""

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import SystemMessage

from pathwise.agent.llm import GenerationClient, build_chat_model
from pathwise.agent.prompts import PromptPair
from pathwise.core.config import Settings
from pathwise.core.errors import GenerationFailed

PROMPT = PromptPair(system="system text", user="user text")


class _FailingModel:
    def __init__(self, error: Exception) -> None:
        self.error = error

    async def ainvoke(self, messages):
        raise self.error


class _RecordingModel(FakeListChatModel):
    seen: list = []

    async def ainvoke(self, messages, *args, **kwargs):
        self.seen.append(messages)
        return await super().ainvoke(messages, *args, **kwargs)


@pytest.mark.asyncio
async def test_generate_returns_stripped_content() -> None:
    client = GenerationClient(FakeListChatModel(responses=['  {"title": "x"}\n']))
    assert await client.generate(PROMPT) == '{"title": "x"}'


@pytest.mark.asyncio
async def test_generate_sends_system_and_user_messages() -> None:
    model = _RecordingModel(responses=["ok"])
    model.seen.clear()
    await GenerationClient(model).generate(PROMPT)

    messages = model.seen[0]
    assert isinstance(messages[0], SystemMessage)
    assert messages[0].content == "system text"
    assert messages[1].content == "user text"


@pytest.mark.asyncio
async def test_provider_error_becomes_generation_failed() -> None:
    client = GenerationClient(_FailingModel(RuntimeError("401 invalid api key")))
    with pytest.raises(GenerationFailed, match="401 invalid api key"):
        await client.generate(PROMPT)


@pytest.mark.asyncio
async def test_network_error_becomes_generation_failed() -> None:
    client = GenerationClient(_FailingModel(ConnectionError("connection reset")))
    with pytest.raises(GenerationFailed, match="connection reset"):
        await client.generate(PROMPT)


def test_chat_model_uses_settings() -> None:
    settings = Settings(
        GENERATION_API_KEY="test-key",
        GENERATION_MODEL="sonar-pro",
        GENERATION_MAX_TOKENS=1234,
    )
    model = build_chat_model(settings)
    assert model.model_name == "sonar-pro"
    assert model.max_retries == 0
    assert model.openai_api_base == "https://api.perplexity.ai"


def test_from_settings_without_key_defers_model(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("GENERATION_API_KEY", raising=False)

    client = GenerationClient.from_settings(Settings(_env_file=None))
    assert client.llm is None


@pytest.mark.asyncio
async def test_missing_key_fails_on_generate(monkeypatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("GENERATION_API_KEY", raising=False)
    settings = Settings(_env_file=None, GENERATION_BASE_URL="http://127.0.0.1:9", GENERATION_TIMEOUT=1)

    client = GenerationClient.from_settings(settings)
    with pytest.raises(GenerationFailed, match="Generation failed"):
        await client.generate(PROMPT)


def test_client_needs_model_or_settings() -> None:
    with pytest.raises(ValueError):
        GenerationClient()


@pytest.mark.asyncio
async def test_empty_content_is_returned_for_the_normalizer() -> None:
    client = GenerationClient(FakeListChatModel(responses=["   \n"]))
    assert await client.generate(PROMPT) == ""
