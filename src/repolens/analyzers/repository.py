"""저장소 단위 분석 모듈."""

import asyncio
import json
import logging
from typing import Any

from repolens.models import (
    ClassificationContext,
    RepositoryAnalysis,
    RepositorySummary,
)
from repolens.sources.base import RepositorySource
from repolens.tagging import TaggingEngine

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
DOCKERFILE = "Dockerfile"
REQUIREMENTS_TXT = "requirements.txt"
WORKFLOWS_DIR = ".github/workflows"


def parse_package_json(content: str) -> dict[str, str]:
    """package.json에서 dependencies와 devDependencies를 합친다.

    Raises:
        ValueError: JSON이 아니거나 최상위가 객체가 아닌 경우
    """
    data: Any = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("package.json root is not an object")

    merged: dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        deps = data.get(section) or {}
        if not isinstance(deps, dict):
            raise ValueError(f"'{section}' is not an object")
        merged.update({name: str(version) for name, version in deps.items()})
    return merged


class RepositoryAnalyzer:
    """저장소의 매니페스트와 보조 파일을 조회해 태그를 붙인다."""

    def __init__(self, source: RepositorySource, engine: TaggingEngine) -> None:
        """
        Args:
            source: 저장소 메타데이터 소스 (보통 GitHubClient)
            engine: 태깅 엔진
        """
        self.source = source
        self.engine = engine

    async def _fetch_text(self, owner: str, repo: str, path: str) -> str | None:
        """파일 내용을 가져온다. 없거나 실패하면 None."""
        content = await self.source.fetch_file_content(owner, repo, path)
        if not content.is_found:
            logger.debug(f"{owner}/{repo}/{path}: {content.status.value}")
            return None
        return content.text

    async def _load_dependencies(self, owner: str, repo: str) -> dict[str, str] | None:
        """package.json을 읽어 의존성 맵을 만든다. 실패하면 None."""
        content = await self._fetch_text(owner, repo, PACKAGE_JSON)
        if not content:
            return None

        try:
            return parse_package_json(content)
        except (ValueError, RecursionError) as e:
            # 과도하게 중첩된 JSON은 RecursionError
            logger.warning(f"Failed to parse package.json for {owner}/{repo}: {e}")
            return None

    async def _none(self) -> None:
        """조회를 건너뛴 자리를 채운다."""
        return None

    async def analyze(self, owner: str, repo: str) -> RepositoryAnalysis:
        """저장소 하나를 분석한다. 개별 조회 실패는 해당 정보만 비운다."""
        (
            has_package_json,
            has_dockerfile,
            has_python_requirements,
            has_ci,
        ) = await asyncio.gather(
            self.source.file_exists(owner, repo, PACKAGE_JSON),
            self.source.file_exists(owner, repo, DOCKERFILE),
            self.source.file_exists(owner, repo, REQUIREMENTS_TXT),
            self.source.directory_exists(owner, repo, WORKFLOWS_DIR),
        )

        dependencies, requirements = await asyncio.gather(
            self._load_dependencies(owner, repo) if has_package_json else self._none(),
            self._fetch_text(owner, repo, REQUIREMENTS_TXT)
            if has_python_requirements
            else self._none(),
        )

        context = ClassificationContext(
            dependencies=dependencies,
            python_requirements=requirements,
            has_dockerfile=has_dockerfile,
            has_ci=has_ci,
        )
        tags = self.engine.classify(context)

        return RepositoryAnalysis(
            has_package_json=has_package_json,
            has_dockerfile=has_dockerfile,
            has_ci=has_ci,
            has_python_requirements=has_python_requirements,
            frameworks=tags.frameworks,
            tools=tags.tools,
            dependencies=dependencies,
        )

    async def analyze_many(
        self,
        repositories: list[RepositorySummary],
    ) -> dict[str, RepositoryAnalysis]:
        """여러 저장소를 병렬로 분석한다."""
        tasks = [self.analyze(repo.owner.login, repo.name) for repo in repositories]
        results = await asyncio.gather(*tasks)
        names = [repo.name for repo in repositories]
        return dict(zip(names, results, strict=True))
