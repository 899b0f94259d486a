import logging
from pathlib import Path

from domain.errors import ConfigurationError
from domain.models import Catalog


logger = logging.getLogger(__name__)


def parse_titles(text: str) -> list[str]:
    titles: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        titles.append(line)
    return titles


def load_catalog(path: Path | str) -> Catalog:
    """Read the title catalog. One title per line, `#` starts a comment line."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ConfigurationError(f"Could not read title catalog {path}.") from e

    catalog = Catalog(parse_titles(text))
    logger.info("Loaded %d past life titles from %s", len(catalog), path)
    return catalog
