import re

from jinja2 import Environment
from markupsafe import Markup

from domain.models import Revelation


PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")


def paragraphs_html(text: str) -> Markup:
    """Escaped text, one `<p>` per blank-line separated paragraph.

    Everything else is kept as written. Single newlines survive inside a
    paragraph and are shown by `white-space: pre-wrap`.
    """
    text = text.replace("\r\n", "\n")
    parts = [p.strip("\n") for p in PARAGRAPH_BREAK.split(text)]
    return Markup("\n").join(
        Markup("<p>{}</p>").format(p) for p in parts if p.strip()
    )


class RevelationPage:
    def __init__(
        self,
        revelation: Revelation,
        *,
        environment: Environment,
        template_name: str = "revelation.html",
    ) -> None:
        self.revelation = revelation
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.revelation.past_life.title

    @property
    def story(self) -> Markup:
        return paragraphs_html(self.revelation.story)

    def render(self) -> str:
        return self.env.get_template(self.name).render(page=self)
