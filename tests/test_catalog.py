from pathlib import Path

import pytest

from app.config import Config
from domain.catalog import load_catalog, parse_titles
from domain.errors import ConfigurationError


def test_parse_titles_skips_comments_and_blanks() -> None:
    text = "# header\n\n  King  \n#comment\nJester\n\n"
    assert parse_titles(text) == ["King", "Jester"]


def test_load_shipped_catalog() -> None:
    catalog = load_catalog(Config().catalog_path)
    assert len(catalog) == 100
    assert catalog[0] == "고대 이집트의 고양이 집사"
    assert len(set(catalog)) == len(catalog)


def test_load_catalog(tmp_path: Path) -> None:
    path = tmp_path / "titles.txt"
    path.write_text("King\nQueen\n", encoding="utf-8")
    catalog = load_catalog(path)
    assert catalog.titles == ("King", "Queen")
    assert "Queen" in catalog


def test_load_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "titles.txt"
    path.write_text("# nothing here\n\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_catalog(path)


def test_load_missing_catalog(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_catalog(tmp_path / "missing.txt")
