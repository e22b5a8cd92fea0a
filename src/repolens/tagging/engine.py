"""규칙 기반 태깅 엔진."""

import logging
from collections.abc import Iterable

from repolens.models import ClassificationContext, TagCategory, TagResult, TagRule
from repolens.tagging.rules import (
    DEFAULT_TAG_RULES,
    DOCKER_TAG,
    GITHUB_ACTIONS_TAG,
    PYTHON_FRAMEWORK_TAGS,
)

logger = logging.getLogger(__name__)


class _TagCollector:
    """카테고리별로 태그를 중복 없이 모은다."""

    def __init__(self) -> None:
        self.frameworks: dict[str, None] = {}
        self.tools: dict[str, None] = {}

    def add(self, rule: TagRule) -> None:
        """규칙의 카테고리에 맞춰 태그를 추가한다."""
        if rule.category is TagCategory.framework:
            self.frameworks[rule.tag] = None
        else:
            self.tools[rule.tag] = None

    def result(self) -> TagResult:
        """모은 태그를 TagResult로 변환한다."""
        return TagResult(frameworks=list(self.frameworks), tools=list(self.tools))


class TaggingEngine:
    """의존성, 파일 존재 여부, requirements 원문으로 저장소를 태깅한다.

    카탈로그는 인스턴스마다 독립된 순서 있는 리스트이며, 규칙 순서가 곧 매칭 순서다.
    """

    def __init__(self, rules: Iterable[TagRule] | None = None) -> None:
        """
        Args:
            rules: 초기 규칙 목록. None이면 기본 카탈로그를 사용.
        """
        self._rules: list[TagRule] = list(
            DEFAULT_TAG_RULES if rules is None else rules
        )

    @property
    def rules(self) -> list[TagRule]:
        """현재 카탈로그의 복사본을 반환한다."""
        return list(self._rules)

    def get_rule(self, tag: str) -> TagRule | None:
        """태그에 해당하는 첫 번째 규칙을 반환한다."""
        for rule in self._rules:
            if rule.tag == tag:
                return rule
        return None

    def add_rule(self, rule: TagRule) -> None:
        """규칙을 카탈로그 끝에 추가한다."""
        self._rules.append(rule)

    def remove_rule(self, tag: str) -> bool:
        """태그에 해당하는 규칙을 모두 제거한다. 제거된 규칙이 있으면 True."""
        before = len(self._rules)
        self._rules = [rule for rule in self._rules if rule.tag != tag]
        removed = len(self._rules) < before
        if removed:
            logger.debug(f"Removed tag rule: {tag}")
        return removed

    def _match_dependencies(
        self, dependencies: dict[str, str], collector: _TagCollector
    ) -> None:
        """의존성 키와 정확히 일치하는 규칙을 찾는다."""
        for rule in self._rules:
            # 규칙마다 첫 번째로 일치한 패턴만 사용
            if any(pattern in dependencies for pattern in rule.patterns):
                collector.add(rule)

    def _match_flag(self, tag: str, collector: _TagCollector) -> None:
        """파일 존재 플래그에 해당하는 카탈로그 태그를 추가한다."""
        # 카탈로그에서 제거된 태그는 플래그가 있어도 내보내지 않는다
        rule = self.get_rule(tag)
        if rule is not None:
            collector.add(rule)

    def _match_python_requirements(
        self, content: str, collector: _TagCollector
    ) -> None:
        """requirements 원문에서 Python 웹 프레임워크를 찾는다."""
        lowered = content.lower()
        for rule in self._rules:
            if rule.category is not TagCategory.framework:
                continue
            if rule.tag not in PYTHON_FRAMEWORK_TAGS:
                continue
            if any(pattern.lower() in lowered for pattern in rule.patterns):
                collector.add(rule)

    def classify(self, context: ClassificationContext) -> TagResult:
        """분류 컨텍스트로부터 프레임워크/도구 태그를 생성한다."""
        collector = _TagCollector()

        if context.dependencies is not None:
            self._match_dependencies(context.dependencies, collector)

        if context.has_dockerfile:
            self._match_flag(DOCKER_TAG, collector)

        if context.has_ci:
            self._match_flag(GITHUB_ACTIONS_TAG, collector)

        if context.python_requirements and context.python_requirements.strip():
            self._match_python_requirements(context.python_requirements, collector)

        return collector.result()
