import logging
from typing import Sequence

from domain.errors import GenerationError, ValidationError
from domain.formatting import YearLabels, fallback_story, year_label
from domain.llm_service import LLMService
from domain.models import Revelation
from domain.past_life import resolve
from domain.prompts import StoryPrompt


logger = logging.getLogger(__name__)


def require(value: str | None, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required.")
    return value


async def request_narrative(
    name: str,
    title: str,
    year: int,
    *,
    llm: LLMService,
    labels: YearLabels | None = None,
) -> str:
    """Ask the llm for a story about this past life.

    Raises `ValidationError` for a blank name or title and `GenerationError`
    when the llm fails. Makes exactly one attempt.
    """
    require(name, "Name")
    require(title, "Title")
    prompt = StoryPrompt(name=name, title=title, year_label=year_label(year, labels))
    return await llm.story(prompt)


async def reveal_past_life(
    name: str,
    *,
    catalog: Sequence[str],
    llm: LLMService,
    labels: YearLabels | None = None,
) -> Revelation:
    """Resolve a name and narrate it, falling back to a canned sentence."""
    require(name, "Name")
    past_life = resolve(name, catalog)
    label = year_label(past_life.year, labels)

    try:
        story = await request_narrative(
            name, past_life.title, past_life.year, llm=llm, labels=labels
        )
    except GenerationError:
        logger.warning("Using fallback story for %s", name)
        return Revelation(
            name=name,
            past_life=past_life,
            year_label=label,
            story=fallback_story(name, past_life.title, past_life.year, labels),
            fallback=True,
        )

    return Revelation(name=name, past_life=past_life, year_label=label, story=story)
