"""
Course Commands

Listings of courses, chapters and lessons, formatted for highlighting:
course listings as TOML-style `slug = "title"` lines, chapter and lesson
listings as YAML-style `N: title` lines.
"""

import logging
from typing import Iterable, List, Tuple

from .base import CommandResult, CommandError, error_context
from ..catalog import build_resolver
from ..utils.env_config import LessonViewConfig

logger = logging.getLogger(__name__)


def _toml_string(value: str) -> str:
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'


def format_course_listing(courses: Iterable[Tuple[str, str]]) -> str:
    """One `slug = "title"` line per course."""
    return "".join(f"{slug} = {_toml_string(title)}\n" for slug, title in courses)


def format_numbered(titles: Iterable[str]) -> str:
    """One `N: title` line per entry, numbered from 1."""
    return "".join(f"{i}: {title}\n" for i, title in enumerate(titles, start=1))


def list_courses(config: LessonViewConfig) -> CommandResult:
    """
    List every course slug with its title, sorted by slug.

    Returns:
        CommandResult with data['courses'] as (slug, title) pairs
    """
    try:
        with error_context("Failed to get course slugs"):
            courses = build_resolver(config).list_courses()
    except CommandError as e:
        return CommandResult.from_error(e)

    return CommandResult.ok(
        f"Found {len(courses)} courses",
        data={
            'courses': courses,
            'text': format_course_listing(courses),
            'language': 'toml',
        },
    )


def _titles_result(titles: List[str], what: str) -> CommandResult:
    return CommandResult.ok(
        f"Found {len(titles)} {what}",
        data={
            what: titles,
            'text': format_numbered(titles),
            'language': 'yaml',
        },
    )


def list_chapters(config: LessonViewConfig, course: str) -> CommandResult:
    """List the chapter titles of a course, numbered from 1."""
    try:
        with error_context("Failed to get chapters"):
            chapters = build_resolver(config).list_chapters(course)
    except CommandError as e:
        return CommandResult.from_error(e)

    return _titles_result(chapters, 'chapters')


def list_lessons(config: LessonViewConfig, course: str, chapter: int) -> CommandResult:
    """List the lesson titles of one chapter of a course, numbered from 1."""
    try:
        with error_context("Failed to get lessons"):
            lessons = build_resolver(config).list_lessons(course, chapter)
    except CommandError as e:
        return CommandResult.from_error(e)

    return _titles_result(lessons, 'lessons')
