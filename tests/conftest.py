from __future__ import annotations

import random
import sys
from pathlib import Path

import numpy as np
import pytest
from hypothesis import settings

# Project root on the path so tests run without an installed package
sys.path.insert(0, str(Path(__file__).parent.parent))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "hypothesis: property-based tests")


# ---- Deterministic Testing Configuration ---------------------

DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    np.random.seed(DETERMINISTIC_SEED)
    yield
    random.seed()
    np.random.seed()


@pytest.fixture
def settings_file(tmp_path: Path):
    """Write a settings YAML file and return its path."""

    def _write(content: str) -> str:
        path = tmp_path / "settings.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


# Hypothesis settings for all property-based tests
settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=False,
    database=None,
)
settings.load_profile("deterministic")
