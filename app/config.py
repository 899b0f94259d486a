from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings

from domain.aopenai import DEFAULT_MODEL, MAX_TOKENS, TEMPERATURE, TIMEOUT
from domain.formatting import BCE_LABEL, CE_LABEL, YearLabels


ROOT = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    log_level: str = "INFO"
    assets_dir: Path = ROOT / "assets"
    html_dir: Path = ROOT / "assets" / "html"
    catalog_path: Path = ROOT / "assets" / "data" / "titles.txt"
    openai_api_key: str | None = None
    story_model: str = DEFAULT_MODEL
    story_max_tokens: int = MAX_TOKENS
    story_temperature: float = TEMPERATURE
    llm_timeout: float = TIMEOUT
    year_label_bce: str = BCE_LABEL
    year_label_ce: str = CE_LABEL

    @property
    def year_labels(self) -> YearLabels:
        return YearLabels(bce=self.year_label_bce, ce=self.year_label_ce)
