"""Environment configuration loader and validator"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Any

from dotenv import dotenv_values
from rich.table import Table

STRATEGIES = ('slug', 'scan')

# Default configuration values
DEFAULTS = {
    # Remote API
    'LESSONVIEW_API_URL': 'https://api.boot.dev',
    'LESSONVIEW_STRATEGY': 'slug',

    # Rendering
    'LESSONVIEW_CONVERTER': 'pandoc',
    'LESSONVIEW_SYNTAX_THEME': 'monokai',

    # Logging
    'LOG_LEVEL': 'WARNING',
    'LOG_FILE': '',
    'DEBUG_MODE': 'false',
}

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class LessonViewConfig:
    """Process-lifetime settings handed to the client, resolver and renderer."""
    api_url: str = DEFAULTS['LESSONVIEW_API_URL']
    strategy: str = DEFAULTS['LESSONVIEW_STRATEGY']
    converter: str = DEFAULTS['LESSONVIEW_CONVERTER']
    syntax_theme: str = DEFAULTS['LESSONVIEW_SYNTAX_THEME']
    log_level: str = DEFAULTS['LOG_LEVEL']
    log_file: Optional[str] = None
    debug: bool = False


def find_env_file() -> Optional[Path]:
    """Find the .env file in standard locations"""
    search_paths = [
        Path.cwd() / '.env',
        Path.home() / '.config' / 'lessonview' / '.env',
        Path.home() / '.lessonview.env',
    ]

    for path in search_paths:
        if path.exists():
            return path

    return None


def load_env_file(env_path: Optional[Path] = None) -> Dict[str, str]:
    """Load variables from a .env file into the environment.

    Variables already set in the process environment win over the file.

    Args:
        env_path: Optional path to .env file. If None, auto-discovers.

    Returns:
        Dictionary of variables read from the file
    """
    if env_path is None:
        env_path = find_env_file()

    if env_path is None or not env_path.exists():
        return {}

    loaded = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    for key, value in loaded.items():
        os.environ.setdefault(key, value)

    return loaded


def get_config(key: str, default: Optional[str] = None) -> str:
    """Get configuration value from environment or defaults

    Priority:
    1. Environment variable
    2. Provided default
    3. Built-in default
    """
    return os.environ.get(key, default or DEFAULTS.get(key, ''))


def get_config_bool(key: str, default: bool = False) -> bool:
    """Get boolean configuration value"""
    value = get_config(key, str(default).lower())
    return value.lower() in ('true', 'yes', '1', 'on')


def validate_config() -> Dict[str, Any]:
    """Validate current configuration and return status

    Returns:
        Dictionary with validation results
    """
    results = {
        'valid': True,
        'warnings': [],
        'errors': [],
        'config': {}
    }

    api_url = get_config('LESSONVIEW_API_URL')
    if not api_url.startswith(('http://', 'https://')):
        results['warnings'].append(f"LESSONVIEW_API_URL is not an http(s) URL: {api_url}")
    results['config']['api_url'] = api_url

    strategy = get_config('LESSONVIEW_STRATEGY').lower()
    if strategy not in STRATEGIES:
        results['errors'].append(f"Invalid LESSONVIEW_STRATEGY: {strategy}")
        results['valid'] = False
    results['config']['strategy'] = strategy

    log_level = get_config('LOG_LEVEL').upper()
    if log_level not in VALID_LOG_LEVELS:
        results['errors'].append(f"Invalid LOG_LEVEL: {log_level}")
        results['valid'] = False
    results['config']['log_level'] = log_level
    results['config']['log_file'] = get_config('LOG_FILE') or None

    results['config']['converter'] = get_config('LESSONVIEW_CONVERTER')
    results['config']['syntax_theme'] = get_config('LESSONVIEW_SYNTAX_THEME')
    results['config']['debug_mode'] = get_config_bool('DEBUG_MODE')

    return results


def load_config(**overrides) -> LessonViewConfig:
    """Build a LessonViewConfig from the environment and .env file.

    Keyword overrides (e.g. from command-line options) take precedence;
    None values are ignored.

    Raises:
        ConfigError: if the resolution strategy is not recognised
    """
    from ..commands.base import ConfigError

    load_env_file()

    values = {
        'api_url': get_config('LESSONVIEW_API_URL').rstrip('/'),
        'strategy': get_config('LESSONVIEW_STRATEGY').lower(),
        'converter': get_config('LESSONVIEW_CONVERTER'),
        'syntax_theme': get_config('LESSONVIEW_SYNTAX_THEME'),
        'log_level': get_config('LOG_LEVEL').upper(),
        'log_file': get_config('LOG_FILE') or None,
        'debug': get_config_bool('DEBUG_MODE'),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})

    if values['strategy'] not in STRATEGIES:
        raise ConfigError(
            f"Unknown resolution strategy '{values['strategy']}' "
            f"(expected one of: {', '.join(STRATEGIES)})"
        )

    return LessonViewConfig(**values)


def build_config_table() -> Table:
    """Build a table of every setting, its value and where it came from"""
    table = Table(title="Current Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="yellow")

    env_file = find_env_file()
    file_values = dotenv_values(env_file) if env_file else {}

    for key in sorted(DEFAULTS.keys()):
        env_value = os.environ.get(key)

        if env_value is not None:
            value = env_value
            source = ".env" if key in file_values else "env var"
        else:
            value = DEFAULTS[key]
            source = "default"

        table.add_row(key, value, source)

    return table


def show_config_summary(console) -> None:
    """Display current configuration summary"""
    console.print(build_config_table())

    env_file = find_env_file()
    if env_file:
        console.print(f"\n[dim]Loaded from: {env_file}[/dim]")
    else:
        console.print("\n[dim]No .env file found, using defaults[/dim]")

    validation = validate_config()
    for warning in validation['warnings']:
        console.print(f"[warning]⚠ {warning}[/warning]")
    for error in validation['errors']:
        console.print(f"[error]✗ {error}[/error]")
