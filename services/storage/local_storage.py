"""
Local file storage implementation.
A key-value store of text values persisted to one JSON file.
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    """Handles local key-value persistence."""

    def __init__(self, file_path: Path):
        """
        Initialize local storage.

        Args:
            file_path: Path to the backing JSON file
        """
        self.file_path = Path(file_path)

    def _read_all(self) -> Dict[str, str]:
        """Read every entry; an unreadable file reads as an empty store."""
        if not self.file_path.exists():
            return {}

        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Could not read local store %s: %s", self.file_path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Local store %s is not a key-value object, ignoring", self.file_path)
            return {}

        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, entries: Dict[str, str]) -> None:
        """
        Write every entry with an atomic replace.

        Raises:
            OSError: If write fails
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = self.file_path.with_suffix(self.file_path.suffix + ".tmp")

        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(entries, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, self.file_path)

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored text for key, or None when absent."""
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """
        Store text under key, overwriting any previous value.

        Raises:
            OSError: If write fails
        """
        entries = self._read_all()
        entries[key] = str(value)
        self._write_all(entries)

