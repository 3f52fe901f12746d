"""
ChapterNavigator - Route-driven chapter stepping within a lesson.

Provides:
- Next/back transitions between chapters
- Lesson-complete transition after the last chapter
- Boundary guards for button rendering
- Chapter-completion signalling to the profile owner

The cursor is re-derived from route params on every call; the navigator
keeps no "current chapter" of its own.
"""

import logging
from typing import Callable, Mapping, Optional

from lessonplayer.schemas import Catalog

from .keys import ChapterCursor, chapter_path, lesson_complete_path, parse_route_params
from .resolver import NavigationFlags, boundary_flags, chapter_total

logger = logging.getLogger(__name__)

PushFn = Callable[[str], None]
CompletionFn = Callable[[str, int], None]


def next_destination(cursor: ChapterCursor, total_chapters: Optional[int]) -> Optional[str]:
    """
    Path reached by "next" from the cursor.

    The last chapter leads to the lesson-complete page. Returns None when the
    code catalog is not ready (total is None) or the cursor lies outside the
    lesson.
    """
    if total_chapters is None:
        return None
    last_index = total_chapters - 1
    if cursor.chapter_index < 0 or cursor.chapter_index > last_index:
        return None
    if cursor.chapter_index == last_index:
        return lesson_complete_path(cursor.lesson_number)
    return chapter_path(cursor.lesson_number, cursor.chapter_number + 1)


def previous_destination(cursor: ChapterCursor) -> Optional[str]:
    """Path reached by "back"; None on the first chapter."""
    if cursor.chapter_index <= 0:
        return None
    return chapter_path(cursor.lesson_number, cursor.chapter_number - 1)


class ChapterNavigator:
    """
    Issue chapter transitions through the routing collaborator.

    Combines the Catalog (chapter counts) with route params (cursor) and
    hands resulting paths to `push`.
    """

    def __init__(
        self,
        catalog: Catalog,
        push: PushFn,
        on_chapter_complete: Optional[CompletionFn] = None,
    ):
        """
        Initialize navigator.

        Args:
            catalog: Content snapshot used for chapter counts
            push: Routing primitive that navigates to a path
            on_chapter_complete: Optional callback(lesson_key, completed_count)
                proposing a progress increment; not awaited
        """
        self.catalog = catalog
        self.push = push
        self.on_chapter_complete = on_chapter_complete

    def total_for(self, cursor: ChapterCursor) -> Optional[int]:
        return chapter_total(self.catalog, cursor.lesson_key)

    # -------------------------------------------------------------------------
    # Guards
    # -------------------------------------------------------------------------

    def flags(self, params: Mapping[str, str]) -> Optional[NavigationFlags]:
        """Back/next guards for the current route, or None if it is unparseable."""
        cursor = parse_route_params(params)
        if cursor is None:
            return None
        return boundary_flags(cursor, self.total_for(cursor))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def go_next(self, params: Mapping[str, str]) -> Optional[str]:
        """
        Move to the next chapter, or to lesson-complete from the last one.

        Returns the pushed path, or None if nothing happened.
        """
        cursor = parse_route_params(params)
        if cursor is None:
            return None

        path = next_destination(cursor, self.total_for(cursor))
        if path is None:
            logger.debug("Ignoring next from %s", cursor)
            return None

        self.push(path)
        return path

    def go_back(self, params: Mapping[str, str]) -> Optional[str]:
        """Move to the previous chapter. No-op on the first chapter."""
        cursor = parse_route_params(params)
        if cursor is None:
            return None

        path = previous_destination(cursor)
        if path is None:
            logger.debug("Ignoring back from %s", cursor)
            return None

        self.push(path)
        return path

    def complete_chapter(self, params: Mapping[str, str], passed: bool) -> Optional[str]:
        """
        Handle a code-evaluation result for the current chapter.

        On a pass, propose the new completed count to the profile owner and
        move on via go_next. A failed result does nothing.
        """
        if not passed:
            return None

        cursor = parse_route_params(params)
        if cursor is None:
            return None
        if next_destination(cursor, self.total_for(cursor)) is None:
            return None

        if self.on_chapter_complete is not None:
            self.on_chapter_complete(cursor.lesson_key, cursor.chapter_number)
        return self.go_next(params)
