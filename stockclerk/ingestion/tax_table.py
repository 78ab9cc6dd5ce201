"""Adapter for tax table JSON files."""

import json
import logging
from decimal import Decimal
from itertools import pairwise
from pathlib import Path

from pydantic import ValidationError

from stockclerk.exceptions import TaxTableError
from stockclerk.ingestion.base import BaseAdapter, first_error
from stockclerk.models.enums import FilingStatus
from stockclerk.models.taxes import TaxInformation, TaxTable

logger = logging.getLogger(__name__)

# Largest difference between a stated base amount and the recomputed one
BASE_AMOUNT_TOLERANCE = Decimal("1.00")


class TaxTableAdapter(BaseAdapter):
    """Reads a tax table keyed by ``single``, ``married``, ``married_separately``
    and ``head_of_household``, each holding ``deduction`` and ``brackets``."""

    def parse(self, file_path: Path) -> TaxTable:
        try:
            raw = self._read_json(file_path)
        except FileNotFoundError:
            raise
        except json.JSONDecodeError as exc:
            raise TaxTableError(file_path, f"invalid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise TaxTableError(file_path, f"not UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise TaxTableError(file_path, f"cannot read file: {exc}") from exc
        try:
            table = TaxTable.model_validate(raw)
        except ValidationError as exc:
            field, message = first_error(exc)
            raise TaxTableError(file_path, f"{field}: {message}") from exc
        logger.info("Loaded tax table from %s", file_path)
        return table

    def validate(self, data: TaxTable) -> list[str]:
        warnings: list[str] = []
        for status in FilingStatus:
            warnings.extend(self._validate_information(status, data.for_status(status)))
        return warnings

    @staticmethod
    def _validate_information(status: FilingStatus, info: TaxInformation) -> list[str]:
        warnings: list[str] = []
        if info.brackets[0].start.in_cents != 0:
            warnings.append(f"{status}: first bracket starts at {info.brackets[0].start}, not $0.00")
        for lower, upper in pairwise(info.brackets):
            if upper.rate <= lower.rate:
                warnings.append(
                    f"{status}: rate {upper.rate}% at {upper.start} does not exceed {lower.rate}%"
                )
            expected = (
                lower.base_amount.to_decimal()
                + (upper.start - lower.start).to_decimal() * lower.rate / 100
            )
            if abs(upper.base_amount.to_decimal() - expected) > BASE_AMOUNT_TOLERANCE:
                warnings.append(
                    f"{status}: base amount {upper.base_amount} at {upper.start} "
                    f"differs from computed ${expected:,.2f}"
                )
        return warnings
