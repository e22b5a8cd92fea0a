"""GitHub 클라이언트 테스트."""

import base64
import json
from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

from helpers import repo_payload
from repolens.models import FileFetchStatus
from repolens.sources.github import GitHubClient


def _encode(text: str) -> str:
    # GitHub는 60자마다 줄바꿈을 넣어 base64를 반환한다
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))


def _handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    routes: dict[str, httpx.Response] = {
        "/users/octocat/repos": httpx.Response(
            200, json=[repo_payload("hello", stars=3), repo_payload("world")]
        ),
        "/users/ghost/repos": httpx.Response(404, json={"message": "Not Found"}),
        "/repos/octocat/hello/languages": httpx.Response(
            200, json={"TypeScript": 1200, "CSS": 300}
        ),
        "/repos/octocat/empty/languages": httpx.Response(200, json={}),
        "/repos/octocat/broken/languages": httpx.Response(500),
        "/repos/octocat/hello/contents/package.json": httpx.Response(
            200,
            json={
                "type": "file",
                "encoding": "base64",
                "content": _encode(json.dumps({"dependencies": {"react": "^18"}})),
            },
        ),
        "/repos/octocat/hello/contents/.github/workflows": httpx.Response(
            200, json=[{"name": "ci.yml", "type": "file"}]
        ),
        "/repos/octocat/hello/contents/docs": httpx.Response(200, json=[]),
        "/repos/octocat/hello/contents/binary.bin": httpx.Response(
            200, json={"content": base64.b64encode(b"\xff\xfe\xfa").decode()}
        ),
        "/repos/octocat/hello/contents/src": httpx.Response(
            200, json=[{"name": "index.ts", "type": "file"}]
        ),
        "/repos/octocat/hello/contents/garbage": httpx.Response(200, text="not json"),
        "/repos/octocat/hello/contents/forbidden": httpx.Response(403),
        "/repos/octocat/hello/contents/non-ascii": httpx.Response(
            200, json={"content": "cmVhY3Q=\u00e9"}
        ),
        "/repos/octocat/hello/contents/list-content": httpx.Response(
            200, json={"content": ["x"]}
        ),
    }
    if path.startswith("/repos/octocat/offline/"):
        raise httpx.ConnectError("connection refused", request=request)
    return routes.get(path, httpx.Response(404, json={"message": "Not Found"}))


@pytest_asyncio.fixture
async def client() -> AsyncIterator[GitHubClient]:
    """MockTransport를 사용하는 GitHubClient를 반환한다."""
    async with GitHubClient(
        token="secret", transport=httpx.MockTransport(_handler)
    ) as github:
        yield github


class TestGitHubClient:
    """GitHubClient 테스트."""

    @pytest.mark.asyncio
    async def test_sends_auth_headers(self) -> None:
        """토큰과 Accept 헤더를 함께 보낸다."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with GitHubClient(
            token="secret", transport=httpx.MockTransport(handler)
        ) as github:
            await github.list_repositories("octocat")

        assert seen[0].headers["Authorization"] == "Bearer secret"
        assert seen[0].headers["Accept"] == "application/vnd.github.v3+json"

    @pytest.mark.asyncio
    async def test_no_token_no_auth_header(self) -> None:
        """토큰이 없으면 Authorization 헤더를 보내지 않는다."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        async with GitHubClient(transport=httpx.MockTransport(handler)) as github:
            await github.list_repositories("octocat")

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_list_repositories(self, client: GitHubClient) -> None:
        """저장소 목록을 RepositorySummary로 변환한다."""
        repos = await client.list_repositories("octocat")
        assert [repo.name for repo in repos] == ["hello", "world"]
        assert repos[0].stargazers_count == 3
        assert repos[0].owner.login == "octocat"
        assert repos[0].created_at.year == 2023

    @pytest.mark.asyncio
    async def test_list_repositories_error(self, client: GitHubClient) -> None:
        """목록 조회 실패는 예외로 전파된다."""
        with pytest.raises(httpx.HTTPStatusError):
            await client.list_repositories("ghost")

    @pytest.mark.asyncio
    async def test_list_repositories_network_error(self) -> None:
        """목록 조회 중 네트워크 오류는 그대로 전파된다."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with GitHubClient(
            token="secret", transport=httpx.MockTransport(handler)
        ) as github:
            with pytest.raises(httpx.RequestError):
                await github.list_repositories("octocat")

    @pytest.mark.asyncio
    async def test_fetch_languages_keeps_order(self, client: GitHubClient) -> None:
        """언어 분포는 응답 순서를 유지한다."""
        languages = await client.fetch_languages("octocat", "hello")
        assert list(languages) == ["TypeScript", "CSS"]

    @pytest.mark.asyncio
    async def test_fetch_languages_empty(self, client: GitHubClient) -> None:
        """언어가 없는 저장소는 빈 dict를 반환한다."""
        assert await client.fetch_languages("octocat", "empty") == {}

    @pytest.mark.asyncio
    async def test_fetch_languages_error(self, client: GitHubClient) -> None:
        """언어 조회 실패는 예외로 전파된다."""
        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_languages("octocat", "broken")

    @pytest.mark.asyncio
    async def test_file_exists(self, client: GitHubClient) -> None:
        """성공 응답이면 파일이 존재한다."""
        assert await client.file_exists("octocat", "hello", "package.json") is True
        assert await client.file_exists("octocat", "hello", "Dockerfile") is False

    @pytest.mark.asyncio
    async def test_file_exists_swallows_network_error(
        self, client: GitHubClient
    ) -> None:
        """네트워크 오류는 존재하지 않는 것으로 취급한다."""
        assert await client.file_exists("octocat", "offline", "package.json") is False

    @pytest.mark.asyncio
    async def test_directory_exists(self, client: GitHubClient) -> None:
        """비어있지 않은 디렉터리만 존재로 판단한다."""
        assert await client.directory_exists("octocat", "hello", ".github/workflows")
        assert not await client.directory_exists("octocat", "hello", "docs")
        assert not await client.directory_exists("octocat", "hello", "missing")
        assert not await client.directory_exists("octocat", "hello", "package.json")
        assert not await client.directory_exists("octocat", "hello", "garbage")

    @pytest.mark.asyncio
    async def test_directory_exists_swallows_network_error(
        self, client: GitHubClient
    ) -> None:
        """네트워크 오류가 나면 디렉터리가 없는 것으로 취급한다."""
        exists = await client.directory_exists("octocat", "offline", ".github/workflows")
        assert exists is False

    @pytest.mark.asyncio
    async def test_fetch_file_content_found(self, client: GitHubClient) -> None:
        """base64 내용을 디코딩한다."""
        content = await client.fetch_file_content("octocat", "hello", "package.json")
        assert content.status is FileFetchStatus.found
        assert json.loads(content.text or "") == {"dependencies": {"react": "^18"}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("repo", "path", "expected"),
        [
            ("hello", "missing.txt", FileFetchStatus.not_found),
            ("hello", "src", FileFetchStatus.not_found),
            ("hello", "binary.bin", FileFetchStatus.failed),
            ("hello", "garbage", FileFetchStatus.failed),
            ("hello", "forbidden", FileFetchStatus.failed),
            ("hello", "non-ascii", FileFetchStatus.failed),
            ("hello", "list-content", FileFetchStatus.failed),
            ("offline", "package.json", FileFetchStatus.failed),
        ],
    )
    async def test_fetch_file_content_absent(
        self,
        client: GitHubClient,
        repo: str,
        path: str,
        expected: FileFetchStatus,
    ) -> None:
        """없는 파일과 실패는 예외 없이 상태로 구분된다."""
        content = await client.fetch_file_content("octocat", repo, path)
        assert content.status is expected
        assert content.text is None
