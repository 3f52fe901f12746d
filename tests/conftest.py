"""Shared fixtures for LessonPlayer tests."""

import pytest
import yaml

from lessonplayer.schemas import (
    Catalog,
    ChapterCode,
    ChapterInstruction,
    LessonMeta,
    ProgressRecord,
)


def _codes(n: int) -> list[ChapterCode]:
    return [ChapterCode(initial_code=f"# start {i}", answer_code=f"print({i})") for i in range(n)]


def _instructions(n: int, prefix: str) -> list[ChapterInstruction]:
    return [ChapterInstruction(title=f"{prefix} {i + 1}", content=f"Step {i + 1}") for i in range(n)]


@pytest.fixture
def catalog() -> Catalog:
    """Three lessons with 3, 4 and 0 chapters; English complete, Korean partial."""
    return Catalog(
        lessons=[
            LessonMeta(title="Basics", chapters=["a", "b", "c"]),
            LessonMeta(title="Conditionals", chapters=["a", "b", "c", "d"]),
            LessonMeta(title="Empty", chapters=[]),
        ],
        instructions={
            "en": {
                "lesson1": _instructions(3, "Basics"),
                "lesson2": _instructions(4, "Conditionals"),
            },
            "ko": {
                "lesson1": _instructions(1, "기초"),
            },
        },
        codes={
            "lesson1": _codes(3),
            "lesson2": _codes(4),
            "lesson3": [],
        },
    )


@pytest.fixture
def signed_in() -> ProgressRecord:
    return ProgressRecord(progress={"lesson1": 1, "lesson2": 2}, is_loaded=True, is_empty=False)


@pytest.fixture
def content_dir(tmp_path):
    """A content directory on disk in the loader's YAML layout."""
    (tmp_path / "instructions").mkdir()
    (tmp_path / "lessons.yaml").write_text(yaml.safe_dump({
        "lessons": [
            {"title": "Basics", "chapters": ["Hello", "Names"]},
        ],
    }), encoding="utf-8")
    (tmp_path / "codes.yaml").write_text(yaml.safe_dump({
        "lesson1": [
            {"initial_code": "# hi", "answer_code": "print('hi')"},
            {"initial_code": "name = ''", "answer_code": "name = 'Ada'"},
        ],
    }), encoding="utf-8")
    (tmp_path / "instructions" / "en.yaml").write_text(yaml.safe_dump({
        "lesson1": [
            {"title": "Hello", "content": "Print a greeting."},
            {"title": "Names", "content": "Assign a name.", "hint": "Use quotes."},
        ],
    }), encoding="utf-8")
    return tmp_path
