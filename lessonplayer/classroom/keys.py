"""
Lesson keys, route paths, and route parsing.

Lesson keys use the fixed template "lesson" + number (no separator, no
padding) so they match existing persisted progress data.
"""

import logging
import re
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_CHAPTER_PATH = re.compile(r"^/lesson/(?P<lesson>[^/]+)/chapter/(?P<chapter>[^/]+)/?$")
_COMPLETE_PATH = re.compile(r"^/lesson-complete/(?P<lesson>[^/]+)/?$")


@dataclass(frozen=True)
class ChapterCursor:
    """(lesson, chapter) currently displayed. Derived from the route, never stored."""
    lesson_number: int   # 1-based
    chapter_index: int   # 0-based

    @property
    def chapter_number(self) -> int:
        return self.chapter_index + 1

    @property
    def lesson_key(self) -> str:
        return lesson_key(self.lesson_number)


def lesson_key(lesson_number: int) -> str:
    """Content/progress key for a lesson, e.g. lesson3."""
    return f"lesson{lesson_number}"


def chapter_path(lesson_number: int, chapter_number: int) -> str:
    """Route for a chapter (both 1-based)."""
    return f"/lesson/{lesson_number}/chapter/{chapter_number}"


def lesson_complete_path(lesson_number: int) -> str:
    return f"/lesson-complete/{lesson_number}"


def parse_route_params(params: Mapping[str, str]) -> Optional[ChapterCursor]:
    """
    Build a cursor from route params {"lesson": "3", "chapter": "2"}.

    Returns None when either param is missing or not an integer.
    """
    try:
        lesson = int(params["lesson"])
        chapter = int(params["chapter"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Unparseable route params: %r", dict(params))
        return None
    return ChapterCursor(lesson_number=lesson, chapter_index=chapter - 1)


def parse_path(path: str) -> Optional[ChapterCursor]:
    """Parse a /lesson/{n}/chapter/{m} path into a cursor."""
    match = _CHAPTER_PATH.match(path)
    if not match:
        return None
    return parse_route_params(match.groupdict())


def parse_complete_path(path: str) -> Optional[int]:
    """Lesson number from a /lesson-complete/{n} path, or None."""
    match = _COMPLETE_PATH.match(path)
    if not match:
        return None
    try:
        return int(match.group("lesson"))
    except ValueError:
        logger.warning("Unparseable lesson-complete path: %s", path)
        return None
