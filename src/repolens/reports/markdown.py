"""Markdown 리포트 생성 모듈."""

from collections import Counter
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import NamedTuple

from repolens.models import (
    LanguageBreakdown,
    PrimaryLanguageStrategy,
    RepositoryAnalysis,
    RepositorySummary,
    TagCategory,
)

MAX_BAR_LENGTH = 40
CHART_LIMIT = 10
LABEL_WIDTH = 20
BAR_GLYPH = "█"


class BarChartItem(NamedTuple):
    """막대 차트 항목."""

    label: str
    count: int


def render_bar_chart(
    items: list[BarChartItem],
    max_bar_length: int = MAX_BAR_LENGTH,
    limit: int = CHART_LIMIT,
) -> str:
    """빈도 분포를 가로 막대 차트 텍스트로 렌더링한다.

    count 내림차순으로 정렬하며 동률은 입력 순서를 유지한다. 막대 길이는 최대값
    대비 비율이고, 퍼센트는 잘린 항목까지 포함한 전체 합계 기준이다.
    """
    if not items:
        return ""

    max_count = max(item.count for item in items)
    total = sum(item.count for item in items)
    ranked = sorted(items, key=lambda item: item.count, reverse=True)[:limit]

    lines = []
    for item in ranked:
        bar_length = round(item.count / max_count * max_bar_length) if max_count else 0
        percentage = item.count / total * 100 if total else 0.0
        lines.append(
            f"{item.label.ljust(LABEL_WIDTH)} {BAR_GLYPH * bar_length} "
            f"{item.count} ({percentage:.1f}%)"
        )
    return "\n".join(lines) + "\n"


def primary_language(
    repo: RepositorySummary,
    languages: LanguageBreakdown | None,
    strategy: PrimaryLanguageStrategy = PrimaryLanguageStrategy.first,
) -> str | None:
    """저장소의 주 언어를 결정한다.

    언어 분포가 없거나 비어 있으면 GitHub가 보고한 language로 대체한다.
    """
    if languages:
        if strategy is PrimaryLanguageStrategy.max_bytes:
            # max()는 동률일 때 먼저 나온 키를 반환
            return max(languages, key=lambda name: languages[name])
        return next(iter(languages))
    return repo.language


def count_languages(
    repositories: Iterable[RepositorySummary],
    languages_by_repo: Mapping[str, LanguageBreakdown],
    strategy: PrimaryLanguageStrategy = PrimaryLanguageStrategy.first,
) -> Counter[str]:
    """저장소별 주 언어의 빈도를 센다."""
    counts: Counter[str] = Counter()
    for repo in repositories:
        language = primary_language(repo, languages_by_repo.get(repo.name), strategy)
        if language:
            counts[language] += 1
    return counts


def count_tags(
    analyses: Iterable[RepositoryAnalysis],
    category: TagCategory,
) -> Counter[str]:
    """모든 분석 결과에서 카테고리별 태그 빈도를 센다."""
    counts: Counter[str] = Counter()
    for analysis in analyses:
        if category is TagCategory.framework:
            counts.update(analysis.frameworks)
        else:
            counts.update(analysis.tools)
    return counts


def format_date(value: datetime) -> str:
    """날짜를 'Jan 5, 2024' 형식으로 포맷한다."""
    return f"{value:%b} {value.day}, {value.year}"


def _chart_section(title: str, counts: Counter[str]) -> list[str]:
    """분포 하나를 코드 블록 차트 섹션으로 만든다."""
    if not counts:
        return []
    # Counter는 삽입 순서를 유지하므로 동률 순서가 보존된다
    items = [BarChartItem(label, count) for label, count in counts.items()]
    return [f"## {title}", "", "```", render_bar_chart(items) + "```", ""]


def _join_tags(tags: list[str]) -> str:
    """태그 목록을 쉼표로 잇는다. 비어 있으면 '-'."""
    return ", ".join(tags) or "-"


def render_report(
    username: str,
    repositories: list[RepositorySummary],
    languages_by_repo: Mapping[str, LanguageBreakdown],
    analysis_by_repo: Mapping[str, RepositoryAnalysis],
    *,
    generated_at: datetime | None = None,
    strategy: PrimaryLanguageStrategy = PrimaryLanguageStrategy.first,
) -> str:
    """저장소 목록과 분석 결과로 Markdown 리포트를 생성한다."""
    generated_at = generated_at or datetime.now(UTC)
    total_stars = sum(repo.stargazers_count for repo in repositories)

    lines = [
        f"# {username}'s GitHub Profile Report",
        "",
        f"> Generated on {generated_at:%B} {generated_at.day}, {generated_at.year}",
        "",
        "## Overview",
        "",
        f"- **Total Repositories:** {len(repositories)}",
        f"- **Total Stars:** ⭐ {total_stars}",
    ]

    if repositories:
        created = [repo.created_at for repo in repositories]
        date_range = f"{format_date(min(created))} - {format_date(max(created))}"
    else:
        date_range = "N/A"
    lines += [f"- **Date Range:** {date_range}", ""]

    analyses = list(analysis_by_repo.values())
    lines += _chart_section(
        "Languages", count_languages(repositories, languages_by_repo, strategy)
    )
    lines += _chart_section(
        "Frameworks", count_tags(analyses, TagCategory.framework)
    )
    lines += _chart_section(
        "Tools & Technologies", count_tags(analyses, TagCategory.tool)
    )

    lines += [
        "## Repositories",
        "",
        "| Repository | ⭐ Stars | Language | Frameworks | Tools | Created | Updated |",
        "|------------|---------|----------|------------|-------|---------|---------|",
    ]

    ranked = sorted(repositories, key=lambda repo: repo.stargazers_count, reverse=True)
    for repo in ranked:
        analysis = analysis_by_repo.get(repo.name)
        language = primary_language(repo, languages_by_repo.get(repo.name), strategy)
        frameworks = _join_tags(analysis.frameworks) if analysis else "-"
        tools = _join_tags(analysis.tools) if analysis else "-"
        lines.append(
            f"| [{repo.name}]({repo.html_url}) | {repo.stargazers_count} "
            f"| {language or 'N/A'} | {frameworks} | {tools} "
            f"| {format_date(repo.created_at)} | {format_date(repo.updated_at)} |"
        )

    all_tags = sorted(
        {tag for a in analyses for tag in (*a.frameworks, *a.tools)}
    )
    if all_tags:
        lines += ["", "## All Tags", "", " • ".join(f"`{tag}`" for tag in all_tags)]

    return "\n".join(lines) + "\n"
