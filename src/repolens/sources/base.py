"""소스 프로토콜 정의."""

from typing import Protocol

from repolens.models import FileContent, LanguageBreakdown, RepositorySummary


class RepositorySource(Protocol):
    """저장소 메타데이터 소스 프로토콜."""

    async def list_repositories(self, username: str) -> list[RepositorySummary]:
        """저장소 목록을 가져온다."""
        ...

    async def fetch_languages(self, owner: str, repo: str) -> LanguageBreakdown:
        """언어별 바이트 수를 가져온다."""
        ...

    async def file_exists(self, owner: str, repo: str, path: str) -> bool:
        """파일 존재 여부를 확인한다."""
        ...

    async def directory_exists(self, owner: str, repo: str, path: str) -> bool:
        """비어있지 않은 디렉터리인지 확인한다."""
        ...

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> FileContent:
        """파일 내용을 가져온다."""
        ...
