"""
LessonPlayer Schemas - Pydantic models for the lesson player.

This module exports all schema classes for:
- Catalog: lesson metadata, localized instructions, code scaffolds
- Progress: learner progress record
"""

# Catalog schemas
from .catalog import (
    ChapterInstruction,
    ChapterCode,
    LessonMeta,
    LocalizedInstructions,
    Catalog,
)

# Progress schemas
from .progress import (
    ProgressRecord,
)

__all__ = [
    # Catalog
    'ChapterInstruction',
    'ChapterCode',
    'LessonMeta',
    'LocalizedInstructions',
    'Catalog',
    # Progress
    'ProgressRecord',
]
