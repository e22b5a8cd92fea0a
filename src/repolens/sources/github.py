"""GitHub REST API 클라이언트."""

import base64
import logging
from types import TracebackType
from typing import Any

import httpx

from repolens.models import (
    FileContent,
    FileFetchStatus,
    LanguageBreakdown,
    RepositorySummary,
)

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"


class GitHubClient:
    """GitHub API에서 저장소 메타데이터와 파일 정보를 가져온다.

    목록/언어 조회는 실패 시 예외를 던지고, 파일 존재 여부와 내용 조회는
    실패를 False 또는 FileContent 상태로 흡수한다.
    """

    def __init__(
        self,
        token: str | None = None,
        base_url: str = GITHUB_API_BASE,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            token: GitHub 개인 액세스 토큰. None이면 인증 없이 요청.
            base_url: GitHub API 주소
            timeout: HTTP 요청 타임아웃 (초)
            transport: 테스트용 httpx 트랜스포트
        """
        headers = {"Accept": "application/vnd.github.v3+json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """HTTP 연결을 정리한다."""
        await self._client.aclose()

    async def list_repositories(self, username: str) -> list[RepositorySummary]:
        """사용자 또는 조직의 저장소 목록을 가져온다 (첫 페이지만)."""
        response = await self._client.get(f"/users/{username}/repos")
        response.raise_for_status()

        data: list[dict[str, Any]] = response.json()
        return [RepositorySummary.model_validate(item) for item in data]

    async def fetch_languages(self, owner: str, repo: str) -> LanguageBreakdown:
        """저장소의 언어별 바이트 수를 가져온다."""
        response = await self._client.get(f"/repos/{owner}/{repo}/languages")
        response.raise_for_status()

        languages: LanguageBreakdown = response.json()
        return languages

    async def _get_contents(
        self, owner: str, repo: str, path: str
    ) -> httpx.Response | None:
        """contents API를 호출한다. 네트워크 오류는 None으로 반환한다."""
        try:
            return await self._client.get(f"/repos/{owner}/{repo}/contents/{path}")
        except httpx.RequestError as e:
            logger.warning(f"Failed to fetch {owner}/{repo}/{path}: {e}")
            return None

    async def file_exists(self, owner: str, repo: str, path: str) -> bool:
        """저장소 루트 기준 경로에 파일이 있는지 확인한다."""
        response = await self._get_contents(owner, repo, path)
        return response is not None and response.is_success

    async def directory_exists(self, owner: str, repo: str, path: str) -> bool:
        """디렉터리가 존재하고 비어있지 않은지 확인한다."""
        response = await self._get_contents(owner, repo, path)
        if response is None or not response.is_success:
            return False

        try:
            data = response.json()
        except (ValueError, RecursionError):
            return False
        return isinstance(data, list) and len(data) > 0

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> FileContent:
        """파일 내용을 가져와 base64 디코딩한다."""
        response = await self._get_contents(owner, repo, path)
        if response is None:
            return FileContent(status=FileFetchStatus.failed)
        if response.status_code == 404:
            return FileContent(status=FileFetchStatus.not_found)
        if not response.is_success:
            logger.warning(
                f"Unexpected status {response.status_code} for {owner}/{repo}/{path}"
            )
            return FileContent(status=FileFetchStatus.failed)

        try:
            data = response.json()
        except (ValueError, RecursionError):
            logger.warning(f"Invalid JSON for {owner}/{repo}/{path}")
            return FileContent(status=FileFetchStatus.failed)

        # 디렉터리는 리스트로 응답되고 content가 없다
        encoded = data.get("content") if isinstance(data, dict) else None
        if not encoded:
            return FileContent(status=FileFetchStatus.not_found)
        if not isinstance(encoded, str):
            logger.warning(f"Unexpected content type for {owner}/{repo}/{path}")
            return FileContent(status=FileFetchStatus.failed)

        try:
            text = base64.b64decode(encoded).decode("utf-8")
        except ValueError as e:
            # binascii.Error, UnicodeDecodeError, 비 ASCII 입력 모두 ValueError
            logger.warning(f"Failed to decode {owner}/{repo}/{path}: {e}")
            return FileContent(status=FileFetchStatus.failed)

        return FileContent(status=FileFetchStatus.found, text=text)
