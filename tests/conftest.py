from types import SimpleNamespace
from typing import Any

import pytest

from app.config import Config
from domain.catalog import load_catalog
from domain.errors import GenerationError
from domain.models import Catalog
from domain.prompts import StoryPrompt


STORY = "Alice님은 기원전 7632년에 빅토리아 시대의 굴뚝 청소부(이)었습니다.\n\n굴뚝은 아직 없었습니다."


class FakeLLM:
    def __init__(self, story: str = STORY, fail: bool = False) -> None:
        self.story_text = story
        self.fail = fail
        self.prompts: list[StoryPrompt] = []
        self.closed = False

    async def story(self, prompt: StoryPrompt) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise GenerationError("Failed to generate story.")
        return self.story_text

    async def close(self) -> None:
        self.closed = True


class FakeCompletions:
    def __init__(self, response: Any = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def completion(content: str | None) -> Any:
    message = SimpleNamespace(role="assistant", content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai_client(completions: FakeCompletions) -> Any:
    async def close() -> None:
        pass

    return SimpleNamespace(chat=SimpleNamespace(completions=completions), close=close)


@pytest.fixture
def catalog() -> Catalog:
    return load_catalog(Config().catalog_path)


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def failing_llm() -> FakeLLM:
    return FakeLLM(fail=True)
