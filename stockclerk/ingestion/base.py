"""Base adapter interface for data ingestion."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError


class BaseAdapter(ABC):
    """Abstract base class for all ingestion adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> BaseModel:
        """Parse a file and return a typed model."""
        ...

    @abstractmethod
    def validate(self, data: Any) -> list[str]:
        """Check parsed data for suspicious content. Returns warning messages."""
        ...

    @staticmethod
    def _read_json(file_path: Path) -> Any:
        """Load JSON from ``file_path``.

        Raises FileNotFoundError for a missing file, UnicodeDecodeError for
        non-UTF-8 content, JSONDecodeError for malformed JSON, and OSError
        when the path cannot be read.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return json.loads(file_path.read_text(encoding="utf-8"))


def first_error(exc: ValidationError) -> tuple[str, str]:
    """Dotted location and message of the first pydantic validation error."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "root"
    return field, error["msg"]
