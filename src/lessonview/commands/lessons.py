"""
Lesson Commands

Fetch a lesson readme and reflow it for the terminal.
"""

import logging

from .base import CommandResult, CommandError, error_context
from ..catalog import build_extractor, build_resolver
from ..render import INSTALL_HINT, Renderer
from ..utils.env_config import LessonViewConfig

logger = logging.getLogger(__name__)


def _converter_missing(renderer: Renderer) -> CommandResult:
    return CommandResult.not_available(
        f"Converter '{renderer.converter}' not found",
        fix_hint=INSTALL_HINT,
    )


def _render_readme(config: LessonViewConfig, renderer: Renderer, lesson_id: str) -> CommandResult:
    try:
        with error_context("Failed to get lesson readme"):
            readme = build_extractor(config).extract_readme(lesson_id)

        with error_context("Failed to prettify readme"):
            text = renderer.prettify(readme)
    except CommandError as e:
        logger.debug(f"Readme for lesson {lesson_id} failed: {e}")
        return CommandResult.from_error(e)

    return CommandResult.ok(
        f"Rendered lesson {lesson_id}",
        data={'text': text, 'language': 'markdown', 'lesson_id': lesson_id},
    )


def show(config: LessonViewConfig, course: str, chapter: int, lesson: int) -> CommandResult:
    """
    Render the readme of lesson N in chapter M of a course.

    Args:
        config: Active configuration
        course: Course slug
        chapter: 1-based chapter number
        lesson: 1-based lesson number within the chapter

    Returns:
        CommandResult with the prettified readme in data['text']
    """
    renderer = Renderer(config)
    if not renderer.is_available():
        return _converter_missing(renderer)

    try:
        with error_context("Failed to get lesson ID"):
            lesson_id = build_resolver(config).resolve_lesson_id(course, chapter, lesson)
    except CommandError as e:
        return CommandResult.from_error(e)

    logger.debug(f"{course} chapter {chapter} lesson {lesson} -> {lesson_id}")
    return _render_readme(config, renderer, lesson_id)


def show_by_id(config: LessonViewConfig, lesson_id: str) -> CommandResult:
    """Render the readme of a lesson given its UUID directly."""
    renderer = Renderer(config)
    if not renderer.is_available():
        return _converter_missing(renderer)

    return _render_readme(config, renderer, lesson_id)
