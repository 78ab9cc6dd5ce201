"""Unit tests for the TaxTableAdapter."""

import json

import pytest

from stockclerk.exceptions import TaxTableError
from stockclerk.ingestion.tax_table import TaxTableAdapter
from stockclerk.models.money import Money


@pytest.fixture
def adapter():
    return TaxTableAdapter()


@pytest.fixture
def table_2024_json(table_2024) -> dict:
    return json.loads(table_2024.model_dump_json())


class TestParse:
    def test_parse(self, adapter, flat_table_file, flat_table):
        assert adapter.parse(flat_table_file) == flat_table

    def test_optional_bracket_fields_default(self, adapter, tmp_path, table_2024_json):
        for info in table_2024_json.values():
            for bracket in info["brackets"]:
                del bracket["capital_gain_rate"]
                del bracket["base_amount"]
        path = tmp_path / "taxes.json"
        path.write_text(json.dumps(table_2024_json))
        table = adapter.parse(path)
        assert table.single.brackets[3].base_amount == Money.zero()
        assert table.single.brackets[3].capital_gain_rate == 0

    def test_missing_status(self, adapter, tmp_path, table_2024_json):
        del table_2024_json["head_of_household"]
        path = tmp_path / "taxes.json"
        path.write_text(json.dumps(table_2024_json))
        with pytest.raises(TaxTableError, match="head_of_household"):
            adapter.parse(path)

    def test_empty_brackets(self, adapter, tmp_path, table_2024_json):
        table_2024_json["married"]["brackets"] = []
        path = tmp_path / "taxes.json"
        path.write_text(json.dumps(table_2024_json))
        with pytest.raises(TaxTableError, match="empty"):
            adapter.parse(path)

    def test_invalid_json(self, adapter, tmp_path):
        path = tmp_path / "taxes.json"
        path.write_text("[")
        with pytest.raises(TaxTableError, match="invalid JSON"):
            adapter.parse(path)

    def test_non_utf8_file(self, adapter, tmp_path):
        path = tmp_path / "taxes.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(TaxTableError, match="not UTF-8 text"):
            adapter.parse(path)

    def test_missing_file(self, adapter, tmp_path):
        with pytest.raises(FileNotFoundError):
            adapter.parse(tmp_path / "taxes.json")


class TestValidate:
    def test_bundled_table_is_consistent(self, adapter, table_2024):
        assert adapter.validate(table_2024) == []

    def test_flags_inconsistent_base_amount(self, adapter, tmp_path, table_2024_json):
        table_2024_json["single"]["brackets"][2]["base_amount"] = "9999.00"
        path = tmp_path / "taxes.json"
        path.write_text(json.dumps(table_2024_json))
        warnings = adapter.validate(adapter.parse(path))
        assert any("base amount $9,999.00" in w for w in warnings)

    def test_flags_non_increasing_rate(self, adapter, tmp_path, table_2024_json):
        table_2024_json["single"]["brackets"][1]["rate"] = 10
        path = tmp_path / "taxes.json"
        path.write_text(json.dumps(table_2024_json))
        warnings = adapter.validate(adapter.parse(path))
        assert any("does not exceed 10%" in w for w in warnings)
