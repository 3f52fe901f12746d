"""
Content catalog schemas for LessonPlayer.

Defines Pydantic models for the static course content:
- Lesson metadata (title, ordered chapter titles)
- Localized chapter instructions
- Starter/answer code scaffolds
"""

from pydantic import BaseModel
from typing import Optional


class ChapterInstruction(BaseModel):
    """Instructional payload shown beside the code editor."""
    title: str = ""
    content: str = ""
    hint: Optional[str] = None


class ChapterCode(BaseModel):
    initial_code: Optional[str] = None
    answer_code: Optional[str] = None


class LessonMeta(BaseModel):
    """
    Lesson entry from lessons.yaml.
    List position + 1 is the lesson number; chapter order is meaningful.
    """
    title: str
    chapters: list[str] = []

    @property
    def total_chapters(self) -> int:
        return len(self.chapters)


# locale -> lesson key -> ordered chapter payloads
LocalizedInstructions = dict[str, dict[str, list[ChapterInstruction]]]


class Catalog(BaseModel):
    """
    Immutable content snapshot.

    `codes` is None until the code catalog has been loaded; lookups treat
    that as "not ready" rather than as an empty lesson.
    """
    lessons: list[LessonMeta] = []
    instructions: LocalizedInstructions = {}
    codes: Optional[dict[str, list[ChapterCode]]] = None

    model_config = {"frozen": True}

    def get_lesson(self, lesson_number: int) -> Optional[LessonMeta]:
        """Get lesson metadata by 1-based lesson number."""
        if lesson_number < 1 or lesson_number > len(self.lessons):
            return None
        return self.lessons[lesson_number - 1]

    @property
    def locales(self) -> list[str]:
        return sorted(self.instructions)
