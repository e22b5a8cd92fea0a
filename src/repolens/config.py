"""설정 관리 모듈."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from repolens.models import PrimaryLanguageStrategy


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = Field(default=None, description="GitHub 개인 액세스 토큰")
    github_api_base: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 주소",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP 요청 타임아웃 (초)",
    )

    output_path: str = Field(
        default="./repolens_report.md",
        description="리포트 출력 경로",
    )
    primary_language_strategy: PrimaryLanguageStrategy = Field(
        default=PrimaryLanguageStrategy.first,
        description="주 언어 선택 방식",
    )


settings = Settings()
