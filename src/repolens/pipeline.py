"""리포트 생성 파이프라인."""

import asyncio
import logging
from collections.abc import Callable

from pydantic import BaseModel, Field

from repolens.analyzers import RepositoryAnalyzer
from repolens.models import (
    LanguageBreakdown,
    PrimaryLanguageStrategy,
    RepositoryAnalysis,
    RepositorySummary,
)
from repolens.reports import render_report
from repolens.sources.base import RepositorySource
from repolens.tagging import TaggingEngine

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


class ReportResult(BaseModel):
    """파이프라인 실행 결과."""

    markdown: str = Field(description="렌더링된 Markdown 리포트")
    repositories: list[RepositorySummary] = Field(description="수집된 저장소 목록")
    languages: dict[str, LanguageBreakdown] = Field(
        default_factory=dict, description="저장소 이름 -> 언어 분포"
    )
    analyses: dict[str, RepositoryAnalysis] = Field(
        default_factory=dict, description="저장소 이름 -> 분석 결과"
    )


async def fetch_languages_many(
    source: RepositorySource,
    repositories: list[RepositorySummary],
) -> dict[str, LanguageBreakdown]:
    """모든 저장소의 언어 분포를 병렬로 가져온다. 하나라도 실패하면 예외를 전파한다."""
    tasks = [source.fetch_languages(repo.owner.login, repo.name) for repo in repositories]
    results = await asyncio.gather(*tasks)
    names = [repo.name for repo in repositories]
    return dict(zip(names, results, strict=True))


async def generate_report(
    username: str,
    source: RepositorySource,
    engine: TaggingEngine,
    *,
    strategy: PrimaryLanguageStrategy = PrimaryLanguageStrategy.first,
    on_progress: ProgressCallback | None = None,
) -> ReportResult:
    """저장소 수집부터 Markdown 렌더링까지 실행한다."""

    def _progress(message: str) -> None:
        logger.info(message)
        if on_progress:
            on_progress(message)

    # 1. 저장소 목록
    _progress(f"Fetching repositories for {username}...")
    repositories = await source.list_repositories(username)
    _progress(f"Found {len(repositories)} repositories")

    # 2. 언어 분포 (병렬)
    _progress("Fetching languages for all repositories...")
    languages = await fetch_languages_many(source, repositories)

    # 3. 매니페스트 분석 및 태깅 (병렬)
    _progress("Analyzing repositories...")
    analyzer = RepositoryAnalyzer(source, engine)
    analyses = await analyzer.analyze_many(repositories)
    _progress(f"Analyzed {len(analyses)} repositories")

    # 4. 렌더링
    markdown = render_report(
        username,
        repositories,
        languages,
        analyses,
        strategy=strategy,
    )
    return ReportResult(
        markdown=markdown,
        repositories=repositories,
        languages=languages,
        analyses=analyses,
    )
