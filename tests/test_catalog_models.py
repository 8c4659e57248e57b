"""
Tests for catalog record decoding.

Run: python3 -m pytest tests/test_catalog_models.py -v
"""

import pytest

from lessonview.catalog.models import (
    Chapter,
    Course,
    CourseSummary,
    LessonPayload,
    require,
)
from lessonview.commands.base import ResponseShapeError


class TestRequire:
    """Tests for the require helper."""

    def test_present(self):
        """Test a present value is returned unchanged."""
        assert require("x", "missing") == "x"

    def test_empty_string_is_present(self):
        """Test an empty string counts as present."""
        assert require("", "missing") == ""

    def test_missing(self):
        """Test None raises with the given message."""
        with pytest.raises(ResponseShapeError, match="No ID found for this course"):
            require(None, "No ID found for this course")


class TestCourseSummary:
    """Tests for overview entries."""

    def test_list_from(self):
        """Test decoding an overview array."""
        summaries = CourseSummary.list_from([
            {'Slug': 'b', 'Title': 'B', 'Extra': 1},
            {'Slug': 'a'},
        ])
        assert summaries == [CourseSummary('b', 'B'), CourseSummary('a', None)]

    def test_overview_not_a_list(self):
        """Test a non-array overview is a shape error."""
        with pytest.raises(ResponseShapeError, match="course overview"):
            CourseSummary.list_from({'Slug': 'a'})

    def test_entry_not_an_object(self):
        """Test a non-object overview entry is a shape error."""
        with pytest.raises(ResponseShapeError):
            CourseSummary.list_from(['a'])

    def test_title_wrong_type(self):
        """Test a non-string title decodes to None."""
        summary = CourseSummary.from_dict({'Slug': 'a', 'Title': 7})
        assert summary.slug == 'a'
        assert summary.title is None


class TestCourse:
    """Tests for full course documents."""

    def test_nested_decoding(self):
        """Test chapters and lessons decode in array order."""
        course = Course.from_dict({
            'UUID': 'c1',
            'Chapters': [
                {'Title': 'One', 'Lessons': [{'UUID': 'a'}, {'UUID': 'b', 'Title': 'B'}]},
                {'Title': 'Two'},
            ],
        })

        assert course.id == 'c1'
        assert [c.title for c in course.chapters] == ['One', 'Two']
        assert [l.id for l in course.chapters[0].lessons] == ['a', 'b']
        assert course.chapters[0].lessons[1].title == 'B'
        assert course.chapters[1].lessons is None

    def test_missing_chapters(self):
        """Test a course without Chapters decodes with chapters=None."""
        assert Course.from_dict({'UUID': 'c1'}).chapters is None

    def test_non_object_entries_skipped(self):
        """Test non-object chapter entries are dropped, keeping order."""
        course = Course.from_dict({'Chapters': [{'Title': 'A'}, None, 'junk', {'Title': 'B'}]})
        assert [c.title for c in course.chapters] == ['A', 'B']

    def test_position_fields_ignored(self):
        """Test a declared chapter number does not reorder chapters."""
        chapter = Chapter.from_dict({'Title': 'X', 'Number': 9, 'Lessons': []})
        assert chapter.title == 'X'
        assert chapter.lessons == []

    def test_not_an_object(self):
        """Test a non-object course document is a shape error."""
        with pytest.raises(ResponseShapeError):
            Course.from_dict([])

    def test_slug_lookup(self):
        """Test decoding the slug lookup wrapper."""
        course = Course.from_slug_lookup({'Course': {'UUID': 'c1'}})
        assert course.id == 'c1'

    def test_slug_lookup_without_course(self):
        """Test a lookup response without Course yields None."""
        assert Course.from_slug_lookup({'Error': 'not found'}) is None

    def test_list_from(self):
        """Test decoding the all-courses array."""
        courses = Course.list_from([{'UUID': 'a', 'Slug': 'x'}, {'UUID': 'b', 'Slug': 'y'}])
        assert [c.slug for c in courses] == ['x', 'y']


class TestLessonPayload:
    """Tests for lesson documents."""

    def test_markdown_lesson(self):
        """Test the readme is found under a LessonData key."""
        payload = LessonPayload.from_dict({'Lesson': {'LessonDataMarkdown': {'Readme': '# Hi'}}})
        assert payload.found is True
        assert payload.lesson_data_key == 'LessonDataMarkdown'
        assert payload.readme == '# Hi'

    @pytest.mark.parametrize('key', [
        'LessonDataCodeCompletion',
        'LessonDataCodeTests',
        'LessonDataMultipleChoice',
        'LessonData',
    ])
    def test_any_suffix(self, key):
        """Test the key suffix is not interpreted."""
        payload = LessonPayload.from_dict({'Lesson': {'UUID': 'l', key: {'Readme': 'text'}}})
        assert payload.readme == 'text'

    def test_no_lesson(self):
        """Test a response without Lesson is not found."""
        assert LessonPayload.from_dict({}).found is False

    def test_no_lesson_data(self):
        """Test a lesson without LessonData has no key."""
        payload = LessonPayload.from_dict({'Lesson': {'UUID': 'l', 'Data': {}}})
        assert payload.found is True
        assert payload.lesson_data_key is None

    def test_readme_not_a_string(self):
        """Test a non-string readme decodes to None."""
        payload = LessonPayload.from_dict({'Lesson': {'LessonDataX': {'Readme': 42}}})
        assert payload.lesson_data_key == 'LessonDataX'
        assert payload.readme is None

    def test_several_lesson_data_keys(self):
        """Test the first LessonData key wins and the rest are recorded."""
        payload = LessonPayload.from_dict({'Lesson': {
            'LessonDataA': {'Readme': 'first'},
            'LessonDataB': {'Readme': 'second'},
        }})
        assert payload.readme == 'first'
        assert payload.extra_keys == ['LessonDataB']
