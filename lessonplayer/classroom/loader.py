"""
CatalogLoader - Load the content catalog from a directory of YAML files.

Layout:
- lessons.yaml: {"lessons": [{"title": ..., "chapters": [...]}]}
- codes.yaml: {"lesson1": [{"initial_code": ..., "answer_code": ...}]}
- instructions/<locale>.yaml: {"lesson1": [{"title": ..., "content": ...}]}
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from lessonplayer.schemas import Catalog

logger = logging.getLogger(__name__)

LESSONS_FILE = "lessons.yaml"
CODES_FILE = "codes.yaml"
INSTRUCTIONS_DIR = "instructions"


def _read_yaml(file_path: Path) -> Any:
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class CatalogLoader:
    """
    Load catalog data from a content directory.

    The returned Catalog is a frozen snapshot; reload to pick up edits.
    """

    def __init__(self, content_dir: str | Path):
        """
        Initialize loader with path to the content directory.

        Args:
            content_dir: Directory containing lessons.yaml
        """
        self.content_dir = Path(content_dir)
        if not (self.content_dir / LESSONS_FILE).exists():
            raise FileNotFoundError(f"Lesson catalog not found: {self.content_dir / LESSONS_FILE}")

    def load_lessons(self) -> list[dict]:
        data = _read_yaml(self.content_dir / LESSONS_FILE) or {}
        return data.get("lessons", [])

    def load_codes(self) -> Optional[dict]:
        """Code scaffolds, or None when codes.yaml is absent."""
        file_path = self.content_dir / CODES_FILE
        if not file_path.exists():
            return None
        return _read_yaml(file_path) or {}

    def get_available_locales(self) -> list[str]:
        """List locales with an instructions file."""
        dir_path = self.content_dir / INSTRUCTIONS_DIR
        if not dir_path.exists():
            return []
        return sorted(p.stem for p in dir_path.glob("*.yaml"))

    def load_instructions(self) -> dict[str, dict]:
        dir_path = self.content_dir / INSTRUCTIONS_DIR
        return {
            locale: _read_yaml(dir_path / f"{locale}.yaml") or {}
            for locale in self.get_available_locales()
        }

    def load(self) -> Catalog:
        """
        Load and validate the full catalog.

        Raises:
            yaml.YAMLError: If a file is not valid YAML
            pydantic.ValidationError: If content does not match the schema
        """
        catalog = Catalog(
            lessons=self.load_lessons(),
            instructions=self.load_instructions(),
            codes=self.load_codes(),
        )
        logger.info(
            "Loaded %d lessons from %s (locales: %s)",
            len(catalog.lessons),
            self.content_dir,
            ", ".join(catalog.locales) or "none",
        )
        return catalog
