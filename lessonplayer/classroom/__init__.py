"""
LessonPlayer Classroom - Runtime components for resolving and navigating lessons.

This module provides:
- CatalogLoader: Load content from YAML files
- Resolver: Resume chapter, progress label, navigation bounds
- Content: Localized instruction and code lookup
- ChapterNavigator: Route-driven chapter stepping
"""

from .keys import (
    ChapterCursor,
    lesson_key,
    chapter_path,
    lesson_complete_path,
    parse_route_params,
    parse_path,
    parse_complete_path,
)

from .loader import (
    CatalogLoader,
)

from .resolver import (
    ResumePoint,
    LessonListEntry,
    NavigationFlags,
    chapter_to_start,
    progress_label,
    progress_fraction,
    resolve_resume,
    build_lesson_list,
    chapter_total,
    is_less_than_one,
    is_greater_than_total,
    boundary_flags,
    step_progress,
)

from .content import (
    ChapterContent,
    resolve_instruction,
    resolve_code,
    resolve_chapter_content,
)

from .navigator import (
    ChapterNavigator,
    next_destination,
    previous_destination,
)

__all__ = [
    # Keys
    "ChapterCursor",
    "lesson_key",
    "chapter_path",
    "lesson_complete_path",
    "parse_route_params",
    "parse_path",
    "parse_complete_path",
    # Loader
    "CatalogLoader",
    # Resolver
    "ResumePoint",
    "LessonListEntry",
    "NavigationFlags",
    "chapter_to_start",
    "progress_label",
    "progress_fraction",
    "resolve_resume",
    "build_lesson_list",
    "chapter_total",
    "is_less_than_one",
    "is_greater_than_total",
    "boundary_flags",
    "step_progress",
    # Content
    "ChapterContent",
    "resolve_instruction",
    "resolve_code",
    "resolve_chapter_content",
    # Navigator
    "ChapterNavigator",
    "next_destination",
    "previous_destination",
]
