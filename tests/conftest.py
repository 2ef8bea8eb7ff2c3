"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from hue_samples import HueSample, sample_key

REPO_ROOT = Path(__file__).resolve().parents[1]


def make_samples(hue: str = "test", overrides: dict | None = None, count: int = 13) -> dict:
    """
    Synthetic ramp: h=200, s=20, lightness 95, 88, ... 11 for steps 0..12.
    """
    overrides = overrides or {}
    return {
        sample_key(hue, i): overrides.get(i, HueSample(200.0, 20.0, 95.0 - i * 7))
        for i in range(count)
    }


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def samples_csv() -> Path:
    """The shipped hue sample table."""
    return REPO_ROOT / "data" / "raw" / "hue_samples.csv"


@pytest.fixture
def test_samples() -> dict:
    return make_samples()
