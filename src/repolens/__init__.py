"""GitHub 저장소 분석 및 리포트 생성 도구."""

__version__ = "0.1.0"
