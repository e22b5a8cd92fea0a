"""저장소 분석 모듈."""

from repolens.analyzers.repository import RepositoryAnalyzer, parse_package_json

__all__ = ["RepositoryAnalyzer", "parse_package_json"]
