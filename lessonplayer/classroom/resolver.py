"""
Progression resolver - resume chapter, progress display, navigation bounds.

All functions are pure: they take a Catalog / ProgressRecord snapshot and
return plain values. Nothing here raises for a degenerate (zero-chapter)
lesson or a missing profile.
"""

from dataclasses import dataclass
from typing import Optional

from lessonplayer.schemas import Catalog, LessonMeta, ProgressRecord

from .keys import ChapterCursor, chapter_path, lesson_key


@dataclass(frozen=True)
class ResumePoint:
    chapter_to_start: int  # 1-based; 0 for a lesson with no chapters
    progress_label: str


@dataclass(frozen=True)
class LessonListEntry:
    """One row of the lesson list with its resume link."""
    lesson_number: int
    lesson_key: str
    title: str
    total_chapters: int
    completed_count: int
    chapter_to_start: int
    progress_label: str
    path: str


@dataclass(frozen=True)
class NavigationFlags:
    """Button guards for the chapter view."""
    is_less_than_one: bool
    is_greater_than_total: bool
    ready: bool = True

    @property
    def back_disabled(self) -> bool:
        return not self.ready or self.is_less_than_one

    @property
    def next_disabled(self) -> bool:
        return not self.ready or self.is_greater_than_total


# -----------------------------------------------------------------------------
# Resume / display
# -----------------------------------------------------------------------------

def chapter_to_start(completed_count: int, total_chapters: int) -> int:
    """
    Chapter number to resume at.

    One past the last completed chapter, capped at the final chapter. A fully
    completed lesson resumes at its last chapter; a lesson with no chapters
    yields 0.
    """
    if completed_count >= total_chapters:
        return total_chapters
    return completed_count + 1


def progress_label(completed_count: int, total_chapters: int, profile: ProgressRecord) -> str:
    """Label like (2/4) for a loaded, signed-in learner; empty otherwise."""
    if not profile.shows_progress:
        return ""
    return f"({completed_count}/{total_chapters})"


def progress_fraction(completed_count: int, total_chapters: int) -> float:
    if total_chapters <= 0:
        return 0.0
    return min(completed_count, total_chapters) / total_chapters


def resolve_resume(lesson_number: int, lesson: LessonMeta, profile: ProgressRecord) -> ResumePoint:
    """Resume chapter and progress label for one lesson."""
    completed = profile.completed_count(lesson_key(lesson_number))
    total = lesson.total_chapters
    return ResumePoint(
        chapter_to_start=chapter_to_start(completed, total),
        progress_label=progress_label(completed, total, profile),
    )


def build_lesson_list(catalog: Catalog, profile: ProgressRecord) -> list[LessonListEntry]:
    """Lesson list rows in catalog order, each with its resume path."""
    entries = []
    for index, lesson in enumerate(catalog.lessons):
        number = index + 1
        key = lesson_key(number)
        resume = resolve_resume(number, lesson, profile)
        entries.append(LessonListEntry(
            lesson_number=number,
            lesson_key=key,
            title=lesson.title,
            total_chapters=lesson.total_chapters,
            completed_count=profile.completed_count(key),
            chapter_to_start=resume.chapter_to_start,
            progress_label=resume.progress_label,
            path=chapter_path(number, resume.chapter_to_start),
        ))
    return entries


# -----------------------------------------------------------------------------
# Navigation bounds
# -----------------------------------------------------------------------------

def chapter_total(catalog: Catalog, key: str) -> Optional[int]:
    """
    Chapter count that drives navigation: the length of the lesson's code list.

    Returns None while the code catalog is not loaded. An unknown lesson key
    counts as 0 chapters.
    """
    if catalog.codes is None:
        return None
    return len(catalog.codes.get(key, []))


def is_less_than_one(chapter_index: int) -> bool:
    return chapter_index <= 0


def is_greater_than_total(chapter_index: int, total_chapters: int) -> bool:
    return chapter_index >= total_chapters - 1


def boundary_flags(cursor: ChapterCursor, total_chapters: Optional[int]) -> NavigationFlags:
    """
    Guards for back/next buttons, from the current lesson's own chapter count.

    A None total (code catalog not ready) disables both directions.
    """
    if total_chapters is None:
        return NavigationFlags(is_less_than_one=True, is_greater_than_total=True, ready=False)
    return NavigationFlags(
        is_less_than_one=is_less_than_one(cursor.chapter_index),
        is_greater_than_total=is_greater_than_total(cursor.chapter_index, total_chapters),
    )


def step_progress(cursor: ChapterCursor, total_chapters: int) -> tuple[int, int]:
    """(current, total) for the step progress bar, current clamped to the lesson."""
    if total_chapters <= 0:
        return (0, 0)
    current = max(0, min(cursor.chapter_index, total_chapters - 1))
    return (current, total_chapters)
