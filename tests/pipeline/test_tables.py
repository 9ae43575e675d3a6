import json

import pytest

from seasoning.models.tables import ConversionTables
from seasoning.pipeline.tables import (
    ConversionTableError,
    load_conversion_tables,
    save_conversion_tables,
    seed_tables,
)


class TestSeedTables:
    def test_none_gives_empty_tables(self):
        tables = seed_tables(None)
        assert tables.selector == {}
        assert tables.ident == {}

    def test_model_is_used_as_is(self):
        existing = ConversionTables(selector={"\\.a": "\\.b"})
        assert seed_tables(existing) is existing

    def test_partial_mapping(self):
        tables = seed_tables({"ident": {"main-color": "a"}})
        assert tables.ident == {"main-color": "a"}
        assert tables.selector == {}

    @pytest.mark.parametrize(
        "data",
        [
            {"selector": {"\\.a": 1}},
            {"selector": ["\\.a"]},
            {"ident": {"a": None}},
            {"classes": {}},
        ],
    )
    def test_invalid_mapping_raises(self, data):
        with pytest.raises(ConversionTableError, match="Invalid conversion tables"):
            seed_tables(data)

    def test_non_mapping_raises(self):
        with pytest.raises(ConversionTableError, match="must be a mapping"):
            seed_tables(["selector"])


class TestLoadSave:
    def test_save_then_load(self, tmp_path):
        path = tmp_path / "tables.json"
        tables = ConversionTables(
            selector={"\\.button": "\\.a", "\\.existing-2": "\\.x \\#y"},
            ident={"main-color": "b"},
        )

        save_conversion_tables(tables, path)

        assert load_conversion_tables(path) == tables
        assert json.loads(path.read_text()) == {
            "selector": {"\\.button": "\\.a", "\\.existing-2": "\\.x \\#y"},
            "ident": {"main-color": "b"},
        }

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConversionTableError, match="Failed to read"):
            load_conversion_tables(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text("{not json")
        with pytest.raises(ConversionTableError, match="not valid JSON"):
            load_conversion_tables(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "tables.json"
        path.write_text(json.dumps({"selector": {"\\.a": ["\\.b"]}}))
        with pytest.raises(ConversionTableError):
            load_conversion_tables(path)
