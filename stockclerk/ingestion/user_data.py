"""Adapter for user data files: filer income, filing status and grants."""

import json
import logging
from collections import Counter
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from stockclerk.exceptions import DataValidationError
from stockclerk.ingestion.base import BaseAdapter, first_error
from stockclerk.models.grant import UserData

logger = logging.getLogger(__name__)


class UserDataAdapter(BaseAdapter):
    """Reads a user data JSON file.

    Expected shape::

        {
          "income": 160000,
          "filing_status": "single",
          "grants": [{"price": 8.16, "total": 3750, "start": "2016-02-08"}]
        }
    """

    def parse(self, file_path: Path) -> UserData:
        try:
            raw = self._read_json(file_path)
        except FileNotFoundError:
            raise
        except json.JSONDecodeError as exc:
            raise DataValidationError(file_path.name, f"invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise DataValidationError(file_path.name, f"not UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise DataValidationError(file_path.name, f"cannot read file: {exc}") from exc
        try:
            data = UserData.model_validate(raw)
        except ValidationError as exc:
            field, message = first_error(exc)
            raise DataValidationError(field, message) from exc
        logger.info("Loaded %d grant(s) from %s", len(data.grants), file_path)
        return data

    def validate(self, data: UserData, exercise_date: date | None = None) -> list[str]:
        warnings: list[str] = []
        for grant, count in Counter(data.grants).items():
            if count > 1:
                warnings.append(f"Grant {grant} appears {count} times and is counted once")
        for grant in data.grants:
            if grant.total == 0:
                warnings.append(f"Grant starting {grant.start.isoformat()} has no shares")
            if exercise_date is not None and grant.start > exercise_date:
                warnings.append(
                    f"Grant {grant} starts after the exercise date {exercise_date.isoformat()}"
                )
        return warnings
