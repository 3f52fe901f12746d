"""
Progress record schema for LessonPlayer.

The record is owned by the profile collaborator; the engine only reads it.
"""

from pydantic import BaseModel, NonNegativeInt


class ProgressRecord(BaseModel):
    """Completed-chapter counts per lesson key, plus profile load flags."""
    progress: dict[str, NonNegativeInt] = {}
    is_loaded: bool = False
    is_empty: bool = True  # anonymous / no profile

    model_config = {"frozen": True}

    @property
    def shows_progress(self) -> bool:
        """Progress is meaningful only for a loaded, non-anonymous profile."""
        return self.is_loaded and not self.is_empty

    def completed_count(self, lesson_key: str) -> int:
        """Completed chapters for a lesson; 0 while unloaded, anonymous, or absent."""
        if not self.shows_progress:
            return 0
        return self.progress.get(lesson_key, 0)

    def with_completion(self, lesson_key: str, completed: int) -> "ProgressRecord":
        """
        Return a copy with the lesson count raised to `completed`.

        Counts never decrease: a smaller value leaves the record unchanged.
        """
        current = self.progress.get(lesson_key, 0)
        if completed <= current:
            return self
        return self.model_copy(update={"progress": {**self.progress, lesson_key: completed}})
