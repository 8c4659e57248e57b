"""
lessonview Catalog

Course, chapter and lesson resolution against the platform API.

Usage:
    from lessonview.catalog import build_resolver, build_extractor

    resolver = build_resolver(config)
    lesson_id = resolver.resolve_lesson_id("learn-python", 2, 3)
    readme = build_extractor(config).extract_readme(lesson_id)
"""

from ..api.client import ApiClient
from ..utils.env_config import LessonViewConfig
from .models import Chapter, Course, CourseSummary, Lesson, LessonPayload
from .readme import ReadmeExtractor
from .resolver import CatalogResolver


def build_resolver(config: LessonViewConfig) -> CatalogResolver:
    """Resolver using the configured API base and slug strategy."""
    return CatalogResolver(ApiClient(config), strategy=config.strategy)


def build_extractor(config: LessonViewConfig) -> ReadmeExtractor:
    """Readme extractor using the configured API base."""
    return ReadmeExtractor(ApiClient(config))


__all__ = [
    'CatalogResolver',
    'ReadmeExtractor',
    'Course',
    'CourseSummary',
    'Chapter',
    'Lesson',
    'LessonPayload',
    'build_resolver',
    'build_extractor',
]
