"""
Content resolver - localized instruction and code scaffold for one chapter.

Lookup short-circuits at the first missing level (locale -> lesson ->
chapter index) and returns None instead of raising, so partially
translated content only ever shows less.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, TypeVar

from lessonplayer.schemas import Catalog, ChapterCode, ChapterInstruction

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ChapterContent:
    instruction: ChapterInstruction
    initial_code: Optional[str]
    answer_code: Optional[str]


def _item_at(items: Sequence[T], index: int) -> Optional[T]:
    """Bounds-checked indexing; negative indexes do not wrap."""
    if 0 <= index < len(items):
        return items[index]
    return None


def resolve_instruction(
    catalog: Catalog, locale: str, lesson_key: str, chapter_index: int
) -> Optional[ChapterInstruction]:
    localized = catalog.instructions.get(locale)
    if localized is None:
        logger.debug("No instructions for locale %s", locale)
        return None

    chapters = localized.get(lesson_key)
    if chapters is None:
        logger.debug("No %s instructions for %s", locale, lesson_key)
        return None

    instruction = _item_at(chapters, chapter_index)
    if instruction is None:
        logger.debug("Chapter index %d out of range for %s/%s", chapter_index, locale, lesson_key)
    return instruction


def resolve_code(catalog: Catalog, lesson_key: str, chapter_index: int) -> ChapterCode:
    """Code scaffold for a chapter; an empty scaffold when anything is missing."""
    if catalog.codes is None:
        return ChapterCode()
    code = _item_at(catalog.codes.get(lesson_key, []), chapter_index)
    return code or ChapterCode()


def resolve_chapter_content(
    catalog: Catalog, locale: str, lesson_key: str, chapter_index: int
) -> Optional[ChapterContent]:
    """
    Resolve everything the chapter view needs.

    Returns:
        ChapterContent, or None (unavailable) when the locale, lesson, or
        chapter has no instruction. Missing code degrades to None fields.
    """
    instruction = resolve_instruction(catalog, locale, lesson_key, chapter_index)
    if instruction is None:
        return None

    code = resolve_code(catalog, lesson_key, chapter_index)
    return ChapterContent(
        instruction=instruction,
        initial_code=code.initial_code,
        answer_code=code.answer_code,
    )
