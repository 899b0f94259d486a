import os

import httpx
import openai


DEFAULT_MODEL = "gpt-4o-mini"
MAX_TOKENS = 500
TEMPERATURE = 0.8
TIMEOUT = 30.0


def openai_client_factory(
    token: str | None = None,
    *,
    timeout: float = TIMEOUT,
) -> openai.AsyncClient:
    """OpenAI client with a single attempt per request.

    Raises `openai.OpenAIError` when no token is given and `OPENAI_API_KEY`
    is not set. Nothing is opened in that case.
    """
    token = os.environ.get("OPENAI_API_KEY") if token is None else token
    if not token:
        raise openai.OpenAIError("OPENAI_API_KEY is not set.")
    return openai.AsyncClient(
        api_key=token,
        max_retries=0,
        timeout=timeout,
        http_client=httpx.AsyncClient(timeout=timeout),
    )
