"""
Runtime settings for LessonPlayer.

Values come from the environment (optionally a .env file):
- LESSONPLAYER_CONTENT_DIR: content directory (default: content)
- LESSONPLAYER_LOCALE: default locale (default: en)
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


DEFAULT_CONTENT_DIR = Path("content")
DEFAULT_LOCALE = "en"


@dataclass
class Settings:
    content_dir: Path = DEFAULT_CONTENT_DIR
    default_locale: str = DEFAULT_LOCALE


def load_settings() -> Settings:
    """Read settings from the environment after loading .env."""
    load_dotenv()
    return Settings(
        content_dir=Path(os.getenv("LESSONPLAYER_CONTENT_DIR", str(DEFAULT_CONTENT_DIR))),
        default_locale=os.getenv("LESSONPLAYER_LOCALE", DEFAULT_LOCALE),
    )
