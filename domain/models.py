from dataclasses import dataclass
from typing import Iterable, Iterator

from domain.errors import ConfigurationError


class Catalog:
    """Ordered, read-only list of past life titles."""

    def __init__(self, titles: Iterable[str]) -> None:
        self._titles = tuple(titles)
        if not self._titles:
            raise ConfigurationError("The title catalog is empty.")

    def __repr__(self) -> str:
        return f"<Catalog(titles={len(self._titles)})>"

    def __len__(self) -> int:
        return len(self._titles)

    def __getitem__(self, idx: int) -> str:
        return self._titles[idx]

    def __iter__(self) -> Iterator[str]:
        return iter(self._titles)

    def __contains__(self, title: object) -> bool:
        return title in self._titles

    @property
    def titles(self) -> tuple[str, ...]:
        return self._titles


@dataclass(frozen=True)
class PastLife:
    title: str
    year: int

    def to_dict(self) -> dict[str, str | int]:
        return {"title": self.title, "year": self.year}


@dataclass(frozen=True)
class Revelation:
    name: str
    past_life: PastLife
    year_label: str
    story: str
    fallback: bool = False
