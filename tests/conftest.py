"""Shared test fixtures for Stock Clerk."""

import json
from datetime import date
from pathlib import Path

import pytest

from stockclerk.engines.brackets import tax_table_for_year
from stockclerk.models.enums import FilingStatus
from stockclerk.models.grant import Filer, Grant
from stockclerk.models.money import Money
from stockclerk.models.taxes import TaxBracket, TaxInformation, TaxTable

# 2018-style single brackets with no deduction, so gross income lines up
# with bracket starts directly.
FLAT_BRACKETS = [
    ("0", 10),
    ("9525", 12),
    ("38700", 22),
    ("82500", 24),
    ("157500", 32),
    ("200000", 35),
    ("500000", 37),
]


def _information(deduction: str = "0") -> TaxInformation:
    return TaxInformation(
        brackets=[TaxBracket(start=Money.new(start), rate=rate) for start, rate in FLAT_BRACKETS],
        deduction=Money.new(deduction),
    )


@pytest.fixture
def flat_table() -> TaxTable:
    info = _information()
    return TaxTable(single=info, married=info, married_separately=info, head_of_household=info)


@pytest.fixture
def table_2024() -> TaxTable:
    return tax_table_for_year(2024)


@pytest.fixture
def sample_grant() -> Grant:
    return Grant(price=Money.new(8.16), total=3750, start=date(2016, 2, 8))


@pytest.fixture
def sample_filer() -> Filer:
    return Filer(income=Money.new(160000), filing_status=FilingStatus.SINGLE)


@pytest.fixture
def user_data_json() -> dict:
    return {
        "income": 160000,
        "filing_status": "single",
        "grants": [{"price": 8.16, "total": 3750, "start": "2016-02-08"}],
    }


@pytest.fixture
def user_data_file(tmp_path: Path, user_data_json: dict) -> Path:
    path = tmp_path / "user.json"
    path.write_text(json.dumps(user_data_json))
    return path


@pytest.fixture
def flat_table_file(tmp_path: Path, flat_table: TaxTable) -> Path:
    path = tmp_path / "taxes.json"
    path.write_text(flat_table.model_dump_json(indent=2))
    return path
