"""LessonPlayer - lesson progression and navigation for a programming course."""

__version__ = "0.1.0"
