import pytest

from domain.formatting import YearLabels, fallback_story, year_label
from domain.prompts import StoryPrompt


@pytest.mark.parametrize(
    "year,expected",
    (
        (-30000, "기원전 30000년"),
        (-7632, "기원전 7632년"),
        (-1, "기원전 1년"),
        (0, "서기 0년"),
        (1999, "서기 1999년"),
    ),
)
def test_year_label(year: int, expected: str) -> None:
    assert year_label(year) == expected


def test_year_label_custom() -> None:
    labels = YearLabels(bce="{year} BCE", ce="{year} CE")
    assert year_label(-44, labels) == "44 BCE"
    assert year_label(1066, labels) == "1066 CE"


def test_fallback_story() -> None:
    got = fallback_story("Alice", "궁정 광대", -7632)
    assert "Alice" in got
    assert "궁정 광대" in got
    assert "기원전 7632년" in got


def test_story_prompt() -> None:
    prompt = StoryPrompt(name="Bob", title="해적 선장", year_label="서기 1700년")
    text = str(prompt)
    assert "유저 이름: Bob" in text
    assert "전생: 해적 선장" in text
    assert "활동 시기: 서기 1700년" in text
    assert '"Bob님은 서기 1700년에 해적 선장(이)었습니다."로 시작하세요.' in text
    assert "{" not in text
