"""
Remote Content Client

Blocking JSON-over-HTTP access to the learning platform API.

Every call is a single GET with no retries and no explicit timeout;
failures surface as FetchError with the transport exception chained.
"""

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any

from ..__version__ import __version__
from ..commands.base import FetchError
from ..utils.env_config import LessonViewConfig

logger = logging.getLogger(__name__)

# Endpoint path templates, relative to the API base URL
COURSES_OVERVIEW = "/v1/static/courses/overview"
COURSE_BY_SLUG = "/v1/static/courses/slug/{slug}"
ALL_COURSES = "/v1/courses"
COURSE_BY_ID = "/v1/courses/{course_uuid}"
LESSON_BY_ID = "/v1/static/lessons/{lesson_uuid}"

USER_AGENT = f"lessonview/{__version__}"


def fetch_json(url: str) -> Any:
    """
    GET a URL and decode the body as JSON.

    Args:
        url: Absolute URL to fetch

    Returns:
        The decoded JSON value (dict, list, str, number, bool or None)

    Raises:
        FetchError: on network failure, non-success HTTP status, or a body
            that is not UTF-8 JSON
    """
    logger.debug(f"GET {url}")

    req = urllib.request.Request(url, method='GET')
    req.add_header('User-Agent', USER_AGENT)
    req.add_header('Accept', 'application/json')

    try:
        with urllib.request.urlopen(req) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        raise FetchError(f"HTTP {e.code}: {e.reason} ({url})") from e
    except urllib.error.URLError as e:
        raise FetchError(f"Connection error: {e.reason} ({url})") from e
    except OSError as e:
        raise FetchError(f"Connection error: {e} ({url})") from e

    try:
        data = json.loads(body.decode('utf-8'))
    except (UnicodeDecodeError, ValueError) as e:
        raise FetchError(f"Response was not valid JSON ({url})") from e

    logger.debug(f"Received {len(body)} bytes from {url}")
    return data


class ApiClient:
    """Builds endpoint URLs against a configured base and fetches them."""

    def __init__(self, config: LessonViewConfig):
        self.base_url = config.api_url.rstrip('/')

    def url_for(self, template: str, **params: str) -> str:
        """Fill a path template, URL-quoting each parameter."""
        quoted = {k: urllib.parse.quote(str(v), safe='') for k, v in params.items()}
        return self.base_url + template.format(**quoted)

    def get(self, template: str, **params: str) -> Any:
        return fetch_json(self.url_for(template, **params))

    def courses_overview(self) -> Any:
        return self.get(COURSES_OVERVIEW)

    def course_by_slug(self, slug: str) -> Any:
        return self.get(COURSE_BY_SLUG, slug=slug)

    def all_courses(self) -> Any:
        return self.get(ALL_COURSES)

    def course(self, course_uuid: str) -> Any:
        return self.get(COURSE_BY_ID, course_uuid=course_uuid)

    def lesson(self, lesson_uuid: str) -> Any:
        return self.get(LESSON_BY_ID, lesson_uuid=lesson_uuid)
