"""Pytest fixtures shared by the lessonview tests.

Provides a fake platform API: URLs map to canned JSON documents so the
client, resolver, commands and CLI can be exercised without the network.
"""

import json
import sys
import urllib.error
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lessonview.utils.env_config import LessonViewConfig  # noqa: E402

API = "https://api.test"


def make_response(body):
    """Context-manager mock standing in for urlopen()'s response."""
    if not isinstance(body, bytes):
        body = json.dumps(body).encode('utf-8')
    response = MagicMock()
    response.__enter__ = MagicMock(return_value=response)
    response.__exit__ = MagicMock(return_value=False)
    response.read.return_value = body
    return response


class FakeApi:
    """Routes urlopen() calls to canned bodies and records requested URLs."""

    def __init__(self):
        self.routes = {}
        self.requested = []

    def add(self, path, body):
        self.routes[API + path] = body
        return self

    def __call__(self, req, *args, **kwargs):
        url = req.full_url if hasattr(req, 'full_url') else req
        self.requested.append(url)
        if url not in self.routes:
            raise urllib.error.HTTPError(url, 404, 'Not Found', {}, None)
        body = self.routes[url]
        if isinstance(body, Exception):
            raise body
        return make_response(body)


@pytest.fixture
def fake_api():
    """Patch urllib.request.urlopen with a FakeApi for the test's duration."""
    api = FakeApi()
    with patch('urllib.request.urlopen', side_effect=api):
        yield api


@pytest.fixture
def config():
    return LessonViewConfig(api_url=API, strategy='slug', converter='pandoc')


@pytest.fixture
def course_api(fake_api):
    """
    A fake API holding one course, 'learn-go', with two chapters:

        1. Basics      - lessons L1-1, L1-2, L1-3
        2. Functions   - lesson L2-1
    """
    fake_api.add('/v1/static/courses/overview', [
        {'Slug': 'learn-go', 'Title': 'Learn Go'},
        {'Slug': 'intro-python', 'Title': 'Intro to Python'},
    ])
    fake_api.add('/v1/static/courses/slug/learn-go', {
        'Course': {'UUID': 'course-go', 'Slug': 'learn-go', 'Title': 'Learn Go'},
    })
    fake_api.add('/v1/courses', [
        {'UUID': 'course-py', 'Slug': 'intro-python', 'Title': 'Intro to Python'},
        {'UUID': 'course-go', 'Slug': 'learn-go', 'Title': 'Learn Go'},
    ])
    fake_api.add('/v1/courses/course-go', {
        'UUID': 'course-go',
        'Slug': 'learn-go',
        'Title': 'Learn Go',
        'Chapters': [
            {
                'Title': 'Basics',
                'Lessons': [
                    {'UUID': 'L1-1', 'Title': 'Variables'},
                    {'UUID': 'L1-2', 'Title': 'Types'},
                    {'UUID': 'L1-3', 'Title': 'Constants'},
                ],
            },
            {
                'Title': 'Functions',
                'Lessons': [
                    {'UUID': 'L2-1', 'Title': 'Parameters'},
                ],
            },
        ],
    })
    fake_api.add('/v1/static/lessons/L1-2', {
        'Lesson': {
            'UUID': 'L1-2',
            'LessonDataMarkdown': {'Readme': '# Types\n\nGo has types.'},
        },
    })
    return fake_api
