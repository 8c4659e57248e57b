"""
lessonview Commands Layer

UI-independent operations. Each returns a CommandResult; on success
result.data holds the 'text' to print and the 'language' to highlight it as,
on failure result.data['chain'] holds the error and its causes.

Usage:
    from lessonview.commands import lessons, courses

    result = lessons.show(config, "learn-python", chapter=2, lesson=3)
    result = lessons.show_by_id(config, "2c7f...")
    result = courses.list_courses(config)
    result = courses.list_chapters(config, "learn-python")
    result = courses.list_lessons(config, "learn-python", chapter=2)

The submodules are imported on demand; this package only exports the shared
result and error types.
"""

from .base import (
    CommandResult,
    ResultStatus,
    CommandError,
    FetchError,
    ResponseShapeError,
    OutOfRangeError,
    ConverterError,
    ConverterOutputError,
    ConfigError,
    error_context,
)

__all__ = [
    'CommandResult',
    'ResultStatus',
    'CommandError',
    'FetchError',
    'ResponseShapeError',
    'OutOfRangeError',
    'ConverterError',
    'ConverterOutputError',
    'ConfigError',
    'error_context',
]
