"""
Catalog Resolver

Walks courses -> chapters -> lessons by 1-based, human-facing numbers.

Two ways of turning a course slug into a course UUID are supported, chosen
once when the resolver is built:

    slug  - ask the dedicated slug lookup endpoint
    scan  - fetch every course and pick the one whose Slug matches
"""

import logging
from typing import List, Tuple

from ..api.client import ApiClient
from ..commands.base import OutOfRangeError, ResponseShapeError, error_context
from .models import Chapter, Course, CourseSummary, Lesson, require

logger = logging.getLogger(__name__)

STRATEGY_SLUG = 'slug'
STRATEGY_SCAN = 'scan'


def _check_number(number: int, what: str) -> None:
    if number < 1:
        raise OutOfRangeError(f"{what.capitalize()} numbers start at 1, got {number}")


def select_chapter(chapters: List[Chapter], chapter_number: int, course_slug: str) -> Chapter:
    """Pick chapter N (1-based) from the course's chapter list."""
    _check_number(chapter_number, "chapter")
    if len(chapters) < chapter_number:
        raise OutOfRangeError(f"No chapter {chapter_number} in course '{course_slug}'")
    return chapters[chapter_number - 1]


def select_lesson(lessons: List[Lesson], lesson_number: int,
                  chapter_number: int, course_slug: str) -> Lesson:
    """Pick lesson N (1-based) from a chapter's lesson list."""
    _check_number(lesson_number, "lesson")
    if len(lessons) < lesson_number:
        raise OutOfRangeError(
            f"No lesson {lesson_number} in chapter {chapter_number} of course '{course_slug}'"
        )
    return lessons[lesson_number - 1]


class CatalogResolver:
    """Resolves course slugs and chapter/lesson numbers to API identifiers."""

    def __init__(self, client: ApiClient, strategy: str = STRATEGY_SLUG):
        if strategy not in (STRATEGY_SLUG, STRATEGY_SCAN):
            raise ValueError(f"Unknown resolution strategy: {strategy}")
        self.client = client
        self.strategy = strategy

    # ==================== Courses ====================

    def resolve_course_id(self, slug: str) -> str:
        """
        Resolve a course slug to the course UUID.

        Raises:
            ResponseShapeError: no course with this slug, or it has no UUID
            FetchError: the lookup request failed
        """
        if self.strategy == STRATEGY_SCAN:
            return self._scan_for_course_id(slug)

        with error_context(f"Failed to look up course '{slug}'"):
            course = Course.from_slug_lookup(self.client.course_by_slug(slug))

        course = require(course, "No course found with this slug")
        return require(course.id, "No ID found for this course")

    def _scan_for_course_id(self, slug: str) -> str:
        with error_context("Failed to fetch course list"):
            courses = Course.list_from(self.client.all_courses())

        logger.debug(f"Scanning {len(courses)} courses for slug '{slug}'")
        for course in courses:
            if course.slug == slug:
                return require(course.id, "No ID found for this course")

        raise ResponseShapeError("No course found with this slug")

    def fetch_course(self, slug: str) -> Course:
        """Resolve the slug and fetch the full course document."""
        course_id = self.resolve_course_id(slug)
        logger.debug(f"Course '{slug}' has ID {course_id}")

        with error_context(f"Failed to fetch course '{slug}'"):
            return Course.from_dict(self.client.course(course_id))

    def _chapters(self, slug: str) -> List[Chapter]:
        course = self.fetch_course(slug)
        return require(course.chapters, "No chapters found in this course")

    def list_courses(self) -> List[Tuple[str, str]]:
        """
        List (slug, title) for every course, sorted by slug.

        Raises:
            ResponseShapeError: a course is missing its slug or title
        """
        with error_context("Failed to fetch course list"):
            summaries = CourseSummary.list_from(self.client.courses_overview())

        results = []
        for summary in summaries:
            slug = require(summary.slug, "No slug found for a course")
            title = require(summary.title, "No title found for a course")
            results.append((slug, title))

        results.sort(key=lambda pair: pair[0])
        return results

    # ==================== Chapters & Lessons ====================

    def list_chapters(self, slug: str) -> List[str]:
        """Chapter titles of a course, in course order."""
        chapters = self._chapters(slug)
        return [require(chapter.title, "No title found for a chapter") for chapter in chapters]

    def list_lessons(self, slug: str, chapter_number: int) -> List[str]:
        """Lesson titles of chapter N (1-based) of a course, in chapter order."""
        chapter = select_chapter(self._chapters(slug), chapter_number, slug)
        lessons = require(chapter.lessons, "No lessons found in this chapter")
        return [require(lesson.title, "No title found for a lesson") for lesson in lessons]

    def resolve_lesson_id(self, slug: str, chapter_number: int, lesson_number: int) -> str:
        """
        Resolve (course slug, chapter number, lesson number) to a lesson UUID.

        Numbers are 1-based positions in the arrays the API returns.

        Raises:
            OutOfRangeError: chapter or lesson number is not in the course
            ResponseShapeError: a required field is missing
            FetchError: a request failed
        """
        chapter = select_chapter(self._chapters(slug), chapter_number, slug)
        lessons = require(chapter.lessons, "No lessons found in this chapter")
        lesson = select_lesson(lessons, lesson_number, chapter_number, slug)
        return require(lesson.id, "No UUID found for this lesson")
