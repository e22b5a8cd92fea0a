"""데이터 모델 정의."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# 언어명 -> 바이트 수 (API 응답 순서 유지)
LanguageBreakdown = dict[str, int]


def _dedupe(tags: list[str]) -> list[str]:
    """순서를 유지하면서 중복 태그를 제거한다."""
    return list(dict.fromkeys(tags))


class PrimaryLanguageStrategy(str, Enum):
    """주 언어 선택 방식."""

    first = "first"
    max_bytes = "max-bytes"


class TagCategory(str, Enum):
    """태그 분류."""

    framework = "framework"
    tool = "tool"


class RepositoryOwner(BaseModel):
    """저장소 소유자 정보."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(description="소유자 로그인 (사용자 또는 조직)")
    html_url: str = Field(default="", description="소유자 프로필 URL")


class RepositorySummary(BaseModel):
    """GitHub API에서 가져온 저장소 스냅샷."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(description="저장소 이름")
    full_name: str = Field(default="", description="저장소 전체 이름 (owner/repo)")
    owner: RepositoryOwner = Field(description="소유자")
    html_url: str = Field(description="저장소 URL")
    private: bool = Field(default=False, description="비공개 여부")
    fork: bool = Field(default=False, description="포크 여부")
    description: str | None = Field(default=None, description="저장소 설명")
    stargazers_count: int = Field(default=0, description="스타 수")
    watchers_count: int = Field(default=0, description="watcher 수")
    language: str | None = Field(default=None, description="GitHub가 보고한 주 언어")
    created_at: datetime = Field(description="생성 시각")
    updated_at: datetime = Field(description="마지막 수정 시각")


class TagRule(BaseModel):
    """태그 카탈로그 항목."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(description="태그 식별자")
    category: TagCategory = Field(description="framework 또는 tool")
    patterns: tuple[str, ...] = Field(description="매칭할 의존성 이름 (순서대로 검사)")


class ClassificationContext(BaseModel):
    """태깅 시점에 알고 있는 저장소 정보."""

    dependencies: dict[str, str] | None = Field(
        default=None, description="의존성 이름 -> 버전 문자열"
    )
    python_requirements: str | None = Field(
        default=None, description="requirements.txt 원문"
    )
    has_dockerfile: bool = Field(default=False, description="Dockerfile 존재 여부")
    has_ci: bool = Field(default=False, description="CI 워크플로 디렉터리 존재 여부")


class TagResult(BaseModel):
    """태깅 결과."""

    model_config = ConfigDict(frozen=True)

    frameworks: list[str] = Field(default_factory=list, description="프레임워크 태그")
    tools: list[str] = Field(default_factory=list, description="도구 태그")

    @field_validator("frameworks", "tools")
    @classmethod
    def _unique(cls, value: list[str]) -> list[str]:
        return _dedupe(value)


class FileFetchStatus(str, Enum):
    """파일 내용 조회 결과 상태."""

    found = "found"
    not_found = "not_found"
    failed = "failed"


class FileContent(BaseModel):
    """파일 내용 조회 결과."""

    model_config = ConfigDict(frozen=True)

    status: FileFetchStatus = Field(description="조회 상태")
    text: str | None = Field(default=None, description="디코딩된 파일 내용")

    @property
    def is_found(self) -> bool:
        return self.status is FileFetchStatus.found


class RepositoryAnalysis(BaseModel):
    """저장소 단위 분석 결과."""

    model_config = ConfigDict(frozen=True)

    has_package_json: bool = Field(default=False, description="package.json 존재 여부")
    has_dockerfile: bool = Field(default=False, description="Dockerfile 존재 여부")
    has_ci: bool = Field(default=False, description="GitHub Actions 워크플로 존재 여부")
    has_python_requirements: bool = Field(
        default=False, description="requirements.txt 존재 여부"
    )
    frameworks: list[str] = Field(default_factory=list, description="프레임워크 태그")
    tools: list[str] = Field(default_factory=list, description="도구 태그")
    dependencies: dict[str, str] | None = Field(
        default=None, description="package.json의 dependencies + devDependencies"
    )

    @field_validator("frameworks", "tools")
    @classmethod
    def _unique(cls, value: list[str]) -> list[str]:
        return _dedupe(value)
