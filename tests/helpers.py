"""테스트 데이터 헬퍼."""

from collections.abc import Callable
from typing import Any

from repolens.models import FileContent, FileFetchStatus, RepositorySummary

RepoFactory = Callable[..., RepositorySummary]


def repo_payload(
    name: str,
    stars: int = 0,
    language: str | None = None,
    created_at: str = "2023-01-01T00:00:00Z",
    updated_at: str = "2024-01-01T00:00:00Z",
    owner: str = "octocat",
) -> dict[str, Any]:
    """GitHub API 형식의 저장소 JSON을 만든다."""
    return {
        "id": 1,
        "name": name,
        "full_name": f"{owner}/{name}",
        "private": False,
        "owner": {"login": owner, "id": 1, "html_url": f"https://github.com/{owner}"},
        "html_url": f"https://github.com/{owner}/{name}",
        "description": None,
        "fork": False,
        "stargazers_count": stars,
        "watchers_count": stars,
        "language": language,
        "created_at": created_at,
        "updated_at": updated_at,
        "pushed_at": updated_at,
    }


class FakeSource:
    """메모리 기반 RepositorySource 구현."""

    def __init__(
        self,
        files: dict[str, str | None] | None = None,
        directories: dict[str, list[str]] | None = None,
        repositories: list[dict[str, Any]] | None = None,
        languages: dict[str, dict[str, int]] | None = None,
    ) -> None:
        """
        Args:
            files: "owner/repo/path" -> 내용. None이면 존재하지만 내용 조회 실패.
            directories: "owner/repo/path" -> 항목 이름 목록
            repositories: list_repositories가 반환할 저장소 JSON
            languages: 저장소 이름 -> 언어 분포
        """
        self.files = files or {}
        self.directories = directories or {}
        self.repositories = repositories or []
        self.languages = languages or {}
        self.calls: list[str] = []

    async def list_repositories(self, username: str) -> list[RepositorySummary]:
        self.calls.append(f"list:{username}")
        return [RepositorySummary.model_validate(item) for item in self.repositories]

    async def fetch_languages(self, owner: str, repo: str) -> dict[str, int]:
        self.calls.append(f"languages:{owner}/{repo}")
        if repo not in self.languages:
            raise RuntimeError(f"languages unavailable for {owner}/{repo}")
        return self.languages[repo]

    async def file_exists(self, owner: str, repo: str, path: str) -> bool:
        self.calls.append(f"exists:{owner}/{repo}/{path}")
        return f"{owner}/{repo}/{path}" in self.files

    async def directory_exists(self, owner: str, repo: str, path: str) -> bool:
        self.calls.append(f"dir:{owner}/{repo}/{path}")
        return bool(self.directories.get(f"{owner}/{repo}/{path}"))

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> FileContent:
        self.calls.append(f"content:{owner}/{repo}/{path}")
        key = f"{owner}/{repo}/{path}"
        if key not in self.files:
            return FileContent(status=FileFetchStatus.not_found)
        text = self.files[key]
        if text is None:
            return FileContent(status=FileFetchStatus.failed)
        return FileContent(status=FileFetchStatus.found, text=text)
