"""공용 테스트 픽스처."""

from typing import Any

import pytest
from helpers import RepoFactory, repo_payload

from repolens.models import RepositorySummary


@pytest.fixture
def make_repo() -> RepoFactory:
    """RepositorySummary 팩토리를 반환한다."""

    def _make(name: str, **kwargs: Any) -> RepositorySummary:
        return RepositorySummary.model_validate(repo_payload(name, **kwargs))

    return _make
