"""Common base for answers and questions stored as per-item text files."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import ClassVar, Union

StrPath = Union[str, "PathLike[str]"]

DEFAULT_MOMENT = datetime(2000, 1, 1, 12, 0, 0)


@dataclass
class BasicInfo(ABC):
    """An item written by a user: its id, author, creation time and text."""

    info_id: int = 0
    user_id: int = 0
    date_time: datetime = DEFAULT_MOMENT
    content: str = ""

    section: ClassVar[str] = ""

    def _field_path(self, data_dir: StrPath, folder: str) -> Path:
        return Path(data_dir) / self.section / folder / f"{self.info_id}.txt"

    def _read_field(self, data_dir: StrPath, folder: str) -> str:
        """Return the text stored for this item in ``folder``, or "" if absent."""
        try:
            return self._field_path(data_dir, folder).read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def _write_field(self, data_dir: StrPath, folder: str, text: str) -> None:
        path = self._field_path(data_dir, folder)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    @abstractmethod
    def read_info(self, data_dir: StrPath) -> None:
        """Load this item's stored fields from ``data_dir``."""

    @abstractmethod
    def write_info(self, data_dir: StrPath) -> None:
        """Store this item's fields under ``data_dir``."""