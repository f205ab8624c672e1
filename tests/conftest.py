"""
Pytest configuration and fixtures for the ParseDutch tests.
"""

import json
from pathlib import Path

import pytest

from parsedutch.nlcst.latin import LatinParser
from parsedutch.nlcst.parser import DutchParser

FIXTURES = Path(__file__).parent / "fixture"


@pytest.fixture
def dutch() -> DutchParser:
    """Dutch parser with positional information."""
    return DutchParser()


@pytest.fixture
def dutch_no_position() -> DutchParser:
    """Dutch parser without positional information."""
    return DutchParser({"position": False})


@pytest.fixture
def latin() -> LatinParser:
    """Latin parser without positional information."""
    return LatinParser(position=False)


@pytest.fixture
def load_fixture():
    """Load a json tree fixture by name."""

    def _load(name: str) -> dict:
        with open(FIXTURES / f"{name}.json", encoding="utf-8") as f:
            return json.load(f)

    return _load
