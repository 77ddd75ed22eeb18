# ==============================================
# Tests for Labels Module
# ==============================================

import pytest

from tablemeta import ColumnNotFound, MemoryTable
from tablemeta.labels import label, set_label, labels, set_labels, delete_label


# ==============================================
# label / set_label
# ==============================================

class TestLabel:
    """Reading and writing a single column label."""

    def test_falls_back_to_column_name(self, gdp_table):
        """No label entry -> column name."""
        assert label(gdp_table, "ctry") == "ctry"
        assert label(gdp_table, "gdp") == "gdp"

    def test_position_reference(self, gdp_table):
        """1-based positions resolve to columns."""
        assert label(gdp_table, 1) == "ctry"
        assert label(gdp_table, 2) == "gdp"

    def test_set_then_get(self, gdp_table):
        set_label(gdp_table, "ctry", "Country")
        assert label(gdp_table, "ctry") == "Country"
        assert label(gdp_table, 1) == "Country"

    def test_set_by_position(self, gdp_table):
        set_label(gdp_table, 2, "GDP per capita")
        assert label(gdp_table, "gdp") == "GDP per capita"

    def test_label_stored_as_note(self, gdp_table):
        """Labels are string values with the note style."""
        set_label(gdp_table, "gdp", 2022)
        entry = gdp_table.get_col_metadata("gdp", "label")
        assert entry.value == "2022"
        assert entry.style == "note"

    def test_overwrite(self, gdp_table):
        set_label(gdp_table, "ctry", "Country")
        set_label(gdp_table, "ctry", "Nation")
        assert label(gdp_table, "ctry") == "Nation"

    def test_non_string_label_value_is_stringified(self, gdp_table):
        """A label entry written directly with a non-string value is read as str."""
        gdp_table.set_col_metadata("gdp", "label", 42, style="note")
        assert label(gdp_table, "gdp") == "42"

    def test_non_string_column_name(self):
        """Column names are returned as str."""
        table = MemoryTable({2022: [1, 2]})
        assert label(table, 1) == "2022"

    def test_read_has_no_side_effects(self, gdp_table):
        label(gdp_table, "ctry")
        assert list(gdp_table.col_metadata_keys()) == []


class TestColumnNotFound:
    """Unresolvable column references."""

    @pytest.mark.parametrize("column", [0, 3, -1, "missing"])
    def test_label_raises(self, gdp_table, column):
        with pytest.raises(ColumnNotFound):
            label(gdp_table, column)

    def test_set_label_raises(self, gdp_table):
        with pytest.raises(ColumnNotFound):
            set_label(gdp_table, "missing", "Nope")
        assert list(gdp_table.col_metadata_keys()) == []

    def test_bool_is_not_a_position(self, gdp_table):
        with pytest.raises(ColumnNotFound):
            label(gdp_table, True)

    def test_error_is_a_key_error(self, gdp_table):
        with pytest.raises(KeyError):
            label(gdp_table, "missing")

    def test_message_names_column(self, gdp_table):
        with pytest.raises(ColumnNotFound, match="'missing'") as excinfo:
            label(gdp_table, "missing")
        assert excinfo.value.column == "missing"


# ==============================================
# Bulk helpers
# ==============================================

class TestBulkLabels:
    """labels / set_labels / delete_label."""

    def test_labels_mixes_labels_and_names(self, gdp_table):
        set_label(gdp_table, "gdp", "GDP")
        assert labels(gdp_table) == ["ctry", "GDP"]

    def test_set_labels(self, gdp_table):
        set_labels(gdp_table, {"ctry": "Country", 2: "GDP"})
        assert labels(gdp_table) == ["Country", "GDP"]

    def test_set_labels_is_all_or_nothing(self, gdp_table):
        """An unknown column aborts before any label is written."""
        with pytest.raises(ColumnNotFound):
            set_labels(gdp_table, {"ctry": "Country", "missing": "Nope"})
        assert label(gdp_table, "ctry") == "ctry"

    def test_delete_label(self, gdp_table):
        set_label(gdp_table, "ctry", "Country")
        delete_label(gdp_table, "ctry")
        assert label(gdp_table, "ctry") == "ctry"
        assert list(gdp_table.col_metadata_keys()) == []

    def test_delete_missing_label_is_noop(self, gdp_table):
        delete_label(gdp_table, "gdp")
        assert label(gdp_table, "gdp") == "gdp"

    def test_delete_keeps_other_column_metadata(self, gdp_table):
        set_label(gdp_table, "gdp", "GDP")
        gdp_table.set_col_metadata("gdp", "unit", "USD")
        delete_label(gdp_table, "gdp")
        assert list(gdp_table.col_metadata_keys("gdp")) == ["unit"]

    def test_labels_with_integer_column_names(self):
        """Integer references are positions even when column names are integers."""
        table = MemoryTable({2: ["a"], 1: ["b"]})
        set_labels(table, {1: "first"})
        assert labels(table) == ["first", "1"]


# ==============================================
# Configuration
# ==============================================

class TestLabelConfig:
    """Label key and style come from the environment."""

    def test_custom_key_and_style(self, gdp_table, monkeypatch):
        monkeypatch.setenv("TABLEMETA_LABEL_KEY", "caption")
        monkeypatch.setenv("TABLEMETA_LABEL_STYLE", "default")
        set_label(gdp_table, "ctry", "Country")
        entry = gdp_table.get_col_metadata("ctry", "caption")
        assert entry.value == "Country"
        assert entry.style == "default"
        assert label(gdp_table, "ctry") == "Country"
