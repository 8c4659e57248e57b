"""
Render Pipeline

Reflows lesson readmes to terminal width by handing them to an external
document converter (pandoc by default).
"""

import logging
import os
import shutil
import subprocess
import tempfile

from .commands.base import ConverterError, ConverterOutputError
from .utils.env_config import LessonViewConfig

logger = logging.getLogger(__name__)

WRAP_COLUMNS = 80
DEFAULT_CONVERTER = "pandoc"

INSTALL_HINT = "Install pandoc: https://pandoc.org/installing.html (e.g. sudo apt install pandoc)"


def converter_available(converter: str = DEFAULT_CONVERTER) -> bool:
    """Check whether the converter executable can be found."""
    return shutil.which(converter) is not None


def converter_command(converter: str, input_path: str) -> list:
    """Command line that converts input_path to markdown wrapped at WRAP_COLUMNS."""
    return [converter, input_path, '-t', 'markdown', f'--columns={WRAP_COLUMNS}']


def prettify(raw_text: str, converter: str = DEFAULT_CONVERTER) -> str:
    """
    Reflow text to WRAP_COLUMNS columns via the external converter.

    The text is written to a temporary file which is removed before this
    function returns, whether or not the conversion succeeded.

    Args:
        raw_text: Markdown source to reflow
        converter: Converter executable name or path

    Returns:
        The converter's standard output

    Raises:
        ConverterError: the converter could not be started or exited non-zero
        ConverterOutputError: the converter's output is not valid UTF-8
    """
    tmp = tempfile.NamedTemporaryFile(
        mode='w', encoding='utf-8', suffix='.md', prefix='lessonview_', delete=False
    )
    try:
        with tmp:
            tmp.write(raw_text)

        cmd = converter_command(converter, tmp.name)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ConverterError(f"Failed to invoke the converter '{converter}'") from e

        if result.returncode != 0:
            stderr = result.stderr.decode('utf-8', errors='replace').strip()
            message = f"Converter '{converter}' exited with status {result.returncode}"
            if stderr:
                message += f": {stderr}"
            raise ConverterError(message)

        try:
            return result.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise ConverterOutputError("Converter output was not valid UTF-8 text") from e
    finally:
        try:
            os.unlink(tmp.name)
        except FileNotFoundError:
            pass


class Renderer:
    """Render pipeline bound to the configured converter."""

    def __init__(self, config: LessonViewConfig):
        self.converter = config.converter

    def is_available(self) -> bool:
        return converter_available(self.converter)

    def prettify(self, raw_text: str) -> str:
        return prettify(raw_text, converter=self.converter)
