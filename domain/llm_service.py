import logging

import openai
from openai.types.chat import (
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)

from domain.aopenai import (
    DEFAULT_MODEL,
    MAX_TOKENS,
    TEMPERATURE,
    TIMEOUT,
    openai_client_factory,
)
from domain.errors import GenerationError
from domain.prompts import STORY_SYSTEM_PROMPT, StoryPrompt


logger = logging.getLogger(__name__)


class LLMService:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
        timeout: float = TIMEOUT,
    ) -> None:
        self._openai_client = openai_client
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout

    @property
    def openai_client(self) -> openai.AsyncClient:
        # Created on first use so the app starts without a credential.
        if self._openai_client is None:
            self._openai_client = openai_client_factory(
                self.api_key, timeout=self.timeout
            )
        return self._openai_client

    async def story(self, prompt: StoryPrompt) -> str:
        """One chat completion for `prompt`. Raises `GenerationError`."""
        system_message: ChatCompletionSystemMessageParam = {
            "role": "system",
            "content": STORY_SYSTEM_PROMPT,
        }
        user_message: ChatCompletionUserMessageParam = {
            "role": "user",
            "content": str(prompt),
        }
        messages: list[ChatCompletionMessageParam] = [system_message, user_message]

        logger.debug("Requesting story for %s (%s)", prompt.name, prompt.title)
        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.OpenAIError as e:
            logger.warning("Story generation failed: %r", e)
            raise GenerationError("Failed to generate story.") from e

        if not resp.choices:
            raise GenerationError("Completion returned no choices.")
        content = resp.choices[0].message.content
        if not content or not content.strip():
            raise GenerationError("Completion returned no content.")
        return content.strip()

    async def close(self) -> None:
        if self._openai_client is not None:
            await self._openai_client.close()
