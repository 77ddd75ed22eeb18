# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - fresh_config    (autouse) → every test starts from default config
# - gdp_table       → MemoryTable with columns ctry, gdp
# - labelled_table  → gdp_table with labels and a title
# - gdp_frame       → pandas DataFrame with columns ctry, gdp
#
# ==============================================

import pandas as pd
import pytest

from tablemeta.config import reset_config
from tablemeta.tables import MemoryTable, NOTE_STYLE


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Drop cached config and any TABLEMETA_* overrides around each test."""
    for name in ("TABLEMETA_LABEL_KEY", "TABLEMETA_LABEL_STYLE", "TABLEMETA_DEFAULT_STYLE"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def gdp_table():
    """Two countries, no metadata."""
    return MemoryTable(ctry=["Poland", "Canada"], gdp=[41685, 57812])


@pytest.fixture
def labelled_table(gdp_table):
    """gdp_table with both columns labelled and a table title."""
    gdp_table.set_col_metadata("ctry", "label", "Country", style=NOTE_STYLE)
    gdp_table.set_col_metadata("gdp", "label", "GDP", style=NOTE_STYLE)
    gdp_table.set_metadata("title", "GDP per country", style=NOTE_STYLE)
    return gdp_table


@pytest.fixture
def gdp_frame():
    """Same data as gdp_table, as a DataFrame."""
    return pd.DataFrame({"ctry": ["Poland", "Canada"], "gdp": [41685, 57812]})
