"""Presentation text shared by the prompt, the fallback story and the page."""

BCE_LABEL = "기원전 {year}년"
CE_LABEL = "서기 {year}년"

FALLBACK_STORY = (
    "신비로운 운명의 가림막이 잠시 드리워졌지만, "
    "당신은 분명 {year_label}의 {title}이었습니다. "
    "({name}님을 위한 기본 스토리)"
)


class YearLabels:
    def __init__(self, bce: str | None = None, ce: str | None = None) -> None:
        self.bce = BCE_LABEL if bce is None else bce
        self.ce = CE_LABEL if ce is None else ce


def year_label(year: int, labels: YearLabels | None = None) -> str:
    labels = YearLabels() if labels is None else labels
    if year < 0:
        return labels.bce.format(year=abs(year))
    return labels.ce.format(year=year)


def fallback_story(
    name: str,
    title: str,
    year: int,
    labels: YearLabels | None = None,
) -> str:
    return FALLBACK_STORY.format(
        name=name,
        title=title,
        year_label=year_label(year, labels),
    )
