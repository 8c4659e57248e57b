"""
lessonview - read learning-platform lesson readmes in the terminal.
"""

from .__version__ import __version__

__all__ = ['__version__']
