"""
lessonview Console Manager

Provides shared Rich Console instances for consistent output formatting:
one bound to stdout for rendered content, one bound to stderr for errors.

Usage:
    from lessonview.utils.console import get_console
    get_console().print("[success]Done[/success]")
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.theme import Theme

_console: Optional[Console] = None
_error_console: Optional[Console] = None

LESSONVIEW_THEME = Theme({
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red bold",
    "heading": "bold magenta",
    "dim": "dim white",
    "cause": "red",
})


def get_console() -> Console:
    """Get the shared stdout Console instance."""
    global _console

    if _console is None:
        _console = Console(theme=LESSONVIEW_THEME, highlight=False)

    return _console


def get_error_console() -> Console:
    """Get the shared stderr Console instance."""
    global _error_console

    if _error_console is None:
        _error_console = Console(theme=LESSONVIEW_THEME, stderr=True, highlight=False)

    return _error_console


def print_syntax(text: str, language: str, theme: str = "monokai",
                 plain: bool = False, console: Console = None) -> None:
    """
    Write text to the terminal with syntax highlighting.

    Args:
        text: Content to print
        language: Highlighting grammar ('markdown', 'toml' or 'yaml')
        theme: Pygments style name
        plain: Skip highlighting and write the raw text
        console: Console to write to (defaults to the shared stdout console)
    """
    console = console or get_console()

    if plain or not console.is_terminal:
        console.file.write(text)
        if text and not text.endswith('\n'):
            console.file.write('\n')
        console.file.flush()
        return

    console.print(Syntax(text, language, theme=theme, word_wrap=True))


def print_error_chain(chain: List[str], console: Console = None) -> None:
    """
    Print an error and each of its causes.

    The first entry is the outermost context; the rest are printed as an
    indented 'Caused by' list.
    """
    console = console or get_error_console()
    if not chain:
        return

    console.print(f"[error]Error:[/error] {escape(chain[0])}")
    if len(chain) > 1:
        console.print("\n[dim]Caused by:[/dim]")
        for i, cause in enumerate(chain[1:]):
            console.print(f"    [cause]{i}: {escape(cause)}[/cause]")
