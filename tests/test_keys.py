"""Tests for lesson keys, route paths, and route parsing."""

import pytest

from lessonplayer.classroom import (
    ChapterCursor,
    chapter_path,
    lesson_complete_path,
    lesson_key,
    parse_complete_path,
    parse_path,
    parse_route_params,
)


class TestKeysAndPaths:
    """Test string templates shared with stored data and routes."""

    @pytest.mark.parametrize("number,expected", [(1, "lesson1"), (3, "lesson3"), (12, "lesson12")])
    def test_lesson_key(self, number, expected):
        assert lesson_key(number) == expected

    def test_chapter_path(self):
        assert chapter_path(2, 4) == "/lesson/2/chapter/4"

    def test_lesson_complete_path(self):
        assert lesson_complete_path(3) == "/lesson-complete/3"


class TestCursor:
    """Test cursor derivation from route params."""

    def test_params_are_one_based(self):
        cursor = parse_route_params({"lesson": "3", "chapter": "2"})
        assert cursor == ChapterCursor(lesson_number=3, chapter_index=1)
        assert cursor.chapter_number == 2
        assert cursor.lesson_key == "lesson3"

    @pytest.mark.parametrize("params", [
        {},
        {"lesson": "1"},
        {"lesson": "one", "chapter": "1"},
        {"lesson": "1", "chapter": ""},
        {"lesson": None, "chapter": "1"},
    ])
    def test_unparseable_params(self, params):
        assert parse_route_params(params) is None

    def test_parse_path(self):
        assert parse_path("/lesson/3/chapter/3") == ChapterCursor(3, 2)
        assert parse_path("/lesson/3/chapter/3/") == ChapterCursor(3, 2)

    @pytest.mark.parametrize("path", ["/", "/lesson-complete/3", "/lesson/3", "/lesson/x/chapter/1"])
    def test_parse_path_rejects(self, path):
        assert parse_path(path) is None


class TestLessonCompletePath:
    """Test lesson-complete route parsing."""

    def test_parse(self):
        assert parse_complete_path("/lesson-complete/3") == 3
        assert parse_complete_path("/lesson-complete/12/") == 12

    @pytest.mark.parametrize("path", [
        "/lesson-complete/abc",
        "/lesson-complete/",
        "/lesson-complete/3/extra",
        "/lesson/3/chapter/3",
        "/",
    ])
    def test_rejects(self, path):
        assert parse_complete_path(path) is None

    def test_round_trip_with_builder(self):
        assert parse_complete_path(lesson_complete_path(7)) == 7

    def test_resolves_catalog_lesson(self, catalog):
        assert catalog.get_lesson(parse_complete_path("/lesson-complete/2")).title == "Conditionals"
        assert catalog.get_lesson(parse_complete_path("/lesson-complete/9")) is None
