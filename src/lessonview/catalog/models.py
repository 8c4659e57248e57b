"""
Catalog records

Typed shapes for the documents the API returns. Response bodies are decoded
into these once, at the boundary. Container shape mismatches become
ResponseShapeError there. Scalar fields that are absent or of the wrong type
decode to None, so each operation requires only the fields it actually uses.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TypeVar

from ..commands.base import ResponseShapeError

logger = logging.getLogger(__name__)

T = TypeVar('T')

LESSON_DATA_PREFIX = "LessonData"


def require(value: Optional[T], message: str) -> T:
    """Return value, or raise ResponseShapeError(message) if it is None."""
    if value is None:
        raise ResponseShapeError(message)
    return value


def _expect_mapping(data: Any, what: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ResponseShapeError(f"Expected {what} to be an object, got {type(data).__name__}")
    return data


def _expect_list(data: Any, what: str) -> List[Any]:
    if not isinstance(data, list):
        raise ResponseShapeError(f"Expected {what} to be a list, got {type(data).__name__}")
    return data


def _opt_str(data: Dict[str, Any], key: str) -> Optional[str]:
    """Optional string field; a value of any other type decodes to None."""
    value = data.get(key)
    return value if isinstance(value, str) else None


def _opt_objects(data: Dict[str, Any], key: str) -> Optional[List[Dict[str, Any]]]:
    """Optional array field, keeping only its object entries, in order."""
    value = data.get(key)
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, dict)]


@dataclass
class CourseSummary:
    """Entry of the courses overview listing"""
    slug: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'CourseSummary':
        data = _expect_mapping(data, "a course summary")
        return cls(slug=_opt_str(data, 'Slug'), title=_opt_str(data, 'Title'))

    @classmethod
    def list_from(cls, data: Any) -> List['CourseSummary']:
        return [cls.from_dict(item) for item in _expect_list(data, "the course overview")]


@dataclass
class Lesson:
    """Lesson reference inside a chapter"""
    id: Optional[str] = None
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Lesson':
        return cls(id=_opt_str(data, 'UUID'), title=_opt_str(data, 'Title'))


@dataclass
class Chapter:
    """Ordered group of lessons; position in the course is its array index"""
    title: Optional[str] = None
    lessons: Optional[List[Lesson]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Chapter':
        lessons = _opt_objects(data, 'Lessons')
        return cls(
            title=_opt_str(data, 'Title'),
            lessons=[Lesson.from_dict(item) for item in lessons] if lessons is not None else None,
        )


@dataclass
class Course:
    """Full course document"""
    id: Optional[str] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    chapters: Optional[List[Chapter]] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Course':
        data = _expect_mapping(data, "the course")
        chapters = _opt_objects(data, 'Chapters')
        return cls(
            id=_opt_str(data, 'UUID'),
            slug=_opt_str(data, 'Slug'),
            title=_opt_str(data, 'Title'),
            chapters=[Chapter.from_dict(item) for item in chapters] if chapters is not None else None,
        )

    @classmethod
    def list_from(cls, data: Any) -> List['Course']:
        items = _expect_list(data, "the course list")
        return [cls.from_dict(item) for item in items if isinstance(item, dict)]

    @classmethod
    def from_slug_lookup(cls, data: Any) -> Optional['Course']:
        """Decode {"Course": {...}}; None when the Course object is absent."""
        data = _expect_mapping(data, "the course lookup")
        course = data.get('Course')
        if not isinstance(course, dict):
            return None
        return cls.from_dict(course)


@dataclass
class LessonPayload:
    """Readme-bearing part of a lesson document"""
    found: bool = False
    lesson_data_key: Optional[str] = None
    readme: Optional[str] = None
    extra_keys: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'LessonPayload':
        """
        Decode {"Lesson": {"LessonData<Type>": {"Readme": ...}}}.

        The first key starting with "LessonData" is used; its suffix is not
        interpreted. A Readme that is missing or not a string decodes to None.
        """
        data = _expect_mapping(data, "the lesson")
        lesson = data.get('Lesson')
        if not isinstance(lesson, dict):
            return cls(found=False)

        keys = [k for k in lesson if k.startswith(LESSON_DATA_PREFIX)]
        if not keys:
            return cls(found=True)

        lesson_data = lesson[keys[0]]
        readme = lesson_data.get('Readme') if isinstance(lesson_data, dict) else None
        if not isinstance(readme, str):
            readme = None

        return cls(
            found=True,
            lesson_data_key=keys[0],
            readme=readme,
            extra_keys=keys[1:],
        )
