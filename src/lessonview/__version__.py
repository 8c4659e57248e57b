"""Version information for lessonview"""

__version__ = "0.3.0"
