"""
lessonview - read learning-platform lesson readmes in the terminal

Usage:
    lessonview list-courses
    lessonview list-chapters --course learn-python
    lessonview list-lessons --course learn-python --chapter 2
    lessonview show --course learn-python --chapter 2 --lesson 3
    lessonview show --id 2c7f6b0e-...
    lessonview config
"""

import logging
import sys

import click

from .__version__ import __version__
from .commands import CommandError, CommandResult
from .commands import courses, lessons
from .utils.console import (
    get_console,
    print_error_chain,
    print_syntax,
)
from .utils.env_config import STRATEGIES, LessonViewConfig, load_config, show_config_summary
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _emit(ctx: click.Context, result: CommandResult) -> None:
    """Print a command result, or its error chain and exit 1."""
    if not result:
        print_error_chain(result.data.get('chain') or [result.message])
        sys.exit(1)

    config = ctx.obj['config']
    print_syntax(
        result.data['text'],
        result.data['language'],
        theme=config.syntax_theme,
        plain=ctx.obj['plain'],
    )


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--api-url', metavar='URL', help='Base URL of the platform API')
@click.option('--converter', metavar='PATH', help='Document converter executable (default: pandoc)')
@click.option('--strategy', type=click.Choice(STRATEGIES),
              help='How to resolve a course slug: lookup endpoint or scan of all courses')
@click.option('--plain', is_flag=True, help='Print without syntax highlighting')
@click.option('--log-file', metavar='PATH', help='Also write debug logs to this file')
@click.version_option(__version__, prog_name='lessonview')
@click.pass_context
def main(ctx, debug, api_url, converter, strategy, plain, log_file):
    """View learning-platform lesson readmes in the terminal."""
    try:
        config = load_config(
            api_url=api_url.rstrip('/') if api_url else None,
            converter=converter,
            strategy=strategy,
            debug=True if debug else None,
            log_file=log_file,
        )
    except CommandError as e:
        # the config command reports invalid settings itself
        if ctx.invoked_subcommand != 'config':
            print_error_chain(e.chain())
            sys.exit(1)
        config = LessonViewConfig()

    setup_logging(
        level=logging.DEBUG if config.debug else config.log_level,
        log_file=config.log_file,
    )
    logger.debug(f"lessonview {__version__} using {config.api_url} ({config.strategy} strategy)")

    ctx.obj = {'config': config, 'plain': plain}


@main.command()
@click.option('--course', '-c', metavar='SLUG', help='Course slug')
@click.option('--chapter', '-p', type=click.IntRange(min=1), help='Chapter number (from 1)')
@click.option('--lesson', '-l', type=click.IntRange(min=1), help='Lesson number (from 1)')
@click.option('--id', 'lesson_id', metavar='UUID', help='Lesson UUID, instead of course/chapter/lesson')
@click.pass_context
def show(ctx, course, chapter, lesson, lesson_id):
    """Show the readme for a given lesson."""
    triple = (course, chapter, lesson)

    if lesson_id:
        if any(v is not None for v in triple):
            raise click.UsageError("--id cannot be combined with --course/--chapter/--lesson")
        result = lessons.show_by_id(ctx.obj['config'], lesson_id)
    else:
        if any(v is None for v in triple):
            raise click.UsageError("Give --course, --chapter and --lesson, or --id")
        result = lessons.show(ctx.obj['config'], course, chapter, lesson)

    _emit(ctx, result)


@main.command('list-courses')
@click.pass_context
def list_courses(ctx):
    """List the slugs of all available courses."""
    _emit(ctx, courses.list_courses(ctx.obj['config']))


@main.command('list-chapters')
@click.option('--course', '-c', metavar='SLUG', required=True, help='Course slug')
@click.pass_context
def list_chapters(ctx, course):
    """List the chapters of a given course."""
    _emit(ctx, courses.list_chapters(ctx.obj['config'], course))


@main.command('list-lessons')
@click.option('--course', '-c', metavar='SLUG', required=True, help='Course slug')
@click.option('--chapter', '-p', type=click.IntRange(min=1), required=True, help='Chapter number (from 1)')
@click.pass_context
def list_lessons(ctx, course, chapter):
    """List the lessons in a given course chapter."""
    _emit(ctx, courses.list_lessons(ctx.obj['config'], course, chapter))


@main.command('config')
def show_config():
    """Show current configuration and where each value came from."""
    show_config_summary(get_console())

