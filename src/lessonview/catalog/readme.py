"""Readme extraction from lesson documents"""

import logging

from ..api.client import ApiClient
from ..commands.base import ResponseShapeError, error_context
from .models import LessonPayload, require

logger = logging.getLogger(__name__)


class ReadmeExtractor:
    """Fetches a lesson by UUID and pulls out its readme text."""

    def __init__(self, client: ApiClient):
        self.client = client

    def extract_readme(self, lesson_id: str) -> str:
        """
        Return the raw readme of a lesson.

        Raises:
            ResponseShapeError: no Lesson object, no LessonData* entry, or
                no string Readme inside it
            FetchError: the lesson request failed
        """
        with error_context(f"Failed to fetch lesson {lesson_id}"):
            payload = LessonPayload.from_dict(self.client.lesson(lesson_id))

        if not payload.found:
            raise ResponseShapeError("No lesson found with this UUID")
        require(payload.lesson_data_key, "No lesson data found")

        if payload.extra_keys:
            logger.debug(
                f"Lesson {lesson_id} has several lesson data entries; "
                f"using {payload.lesson_data_key}, ignoring {', '.join(payload.extra_keys)}"
            )

        return require(payload.readme, "No readme found in lesson data")
