"""데이터 소스 모듈."""

from repolens.sources.base import RepositorySource
from repolens.sources.github import GitHubClient

__all__ = ["GitHubClient", "RepositorySource"]
