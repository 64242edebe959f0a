"""Shared fixtures: a throwaway database, a stub generation client and an HTTP client."""

import json
from collections.abc import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from pathwise.agent.llm import GenerationClient
from pathwise.agent.prompts import PromptPair
from pathwise.core.config import Settings
from pathwise.core.database import Database
from pathwise.main import create_app


class StubGenerationClient(GenerationClient):
    """Returns canned responses in order and records every prompt."""

    def __init__(self, responses: list[str] | None = None, error: Exception | None = None) -> None:
        self.llm = None
        self.responses = list(responses or [])
        self.error = error
        self.prompts: list[PromptPair] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    async def generate(self, prompt: PromptPair) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as session:
        yield session


@pytest.fixture
def stub_llm() -> StubGenerationClient:
    return StubGenerationClient()


@pytest_asyncio.fixture
async def client(database: Database, stub_llm: StubGenerationClient) -> AsyncGenerator[AsyncClient, None]:
    app = create_app(Settings(ENV="test"), database=database, generation_client=stub_llm)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def roadmap_json() -> Callable[..., str]:
    """Build generator output for a roadmap with ``count`` topics."""

    def _build(
        count: int = 10,
        hours: float = 2.5,
        title: str = "SQL Foundations",
        orders: list[int] | None = None,
        fence: str | None = None,
    ) -> str:
        orders = orders or list(range(1, count + 1))
        payload = {
            "title": title,
            "topics": [
                {
                    "title": f"Topic {order}",
                    "description": f"What to learn in topic {order}",
                    "estimated_hours": hours,
                    "learning_objectives": [f"Objective {order}.{i}" for i in range(1, 4)],
                    "order": order,
                    "video_suggestions": [f"topic {order} tutorial"],
                    "practice_questions": [
                        {
                            "title": f"Problem {order}",
                            "difficulty": "Easy",
                            "platform": "LeetCode",
                            "url": f"https://leetcode.com/problems/{order}",
                        }
                    ],
                }
                for order in orders
            ],
        }
        text = json.dumps(payload, indent=2)
        if fence is not None:
            text = f"```{fence}\n{text}\n```"
        return text

    return _build
