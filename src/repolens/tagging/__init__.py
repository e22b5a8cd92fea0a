"""태깅 엔진 모듈."""

from repolens.tagging.engine import TaggingEngine
from repolens.tagging.rules import DEFAULT_TAG_RULES, PYTHON_FRAMEWORK_TAGS

__all__ = ["DEFAULT_TAG_RULES", "PYTHON_FRAMEWORK_TAGS", "TaggingEngine"]
