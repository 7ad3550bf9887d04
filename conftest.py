import pytest

from library import Catalog, seed_catalog
from ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture
def catalog():
    # Fresh starter catalog for every test
    return seed_catalog()

@pytest.fixture
def empty_catalog():
    return Catalog()

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Output mode is process-wide; reset it so tests do not leak into each other
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
