"""Pytest fixtures for the Gilded Rose inventory."""

import pytest

from gilded_rose import settings
from gilded_rose.inventory import GildedRose
from gilded_rose.rules import QualityUpdateRules
from gilded_rose.schemas import Item


@pytest.fixture
def rules():
    return QualityUpdateRules(maximum_quality=50, minimum_quality=0, legendary_quality=80)


@pytest.fixture
def make_item():
    """Builds an item from keyword arguments."""
    def _make(name="Foo", sell_in=10, quality=5):
        return Item(name=name, sell_in=sell_in, quality=quality)
    return _make


@pytest.fixture
def advance_one_day():
    """Runs a single item through one end of day and returns the result."""
    def _advance(name, sell_in, quality):
        inn = GildedRose([Item(name=name, sell_in=sell_in, quality=quality)])
        inn.end_of_day()
        return inn.items[0]
    return _advance


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Points input and output directories at a temporary folder."""
    input_dir = tmp_path / "input"
    output_dir = tmp_path / "output"
    input_dir.mkdir()
    monkeypatch.setattr(settings, "INPUT_DIR", input_dir)
    monkeypatch.setattr(settings, "OUTPUT_DIR", output_dir)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)
    return tmp_path
