"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import io
import sys
from pathlib import Path

import numpy as np
import pytest
from rich.console import Console

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adaptlearn.config import Settings
from adaptlearn.content.models import LessonContent
from adaptlearn.delivery.presenter import LessonPresenter


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def settings(tmp_path):
    """Settings that never block on a key press and read images from tmp_path."""
    return Settings(assets_dir=tmp_path, wait_for_key=False, thumbnail_width=16)


@pytest.fixture
def sample_image():
    """A small noisy RGB image."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=(12, 16, 3), dtype=np.uint8)


@pytest.fixture
def sample_lesson(sample_image):
    """Provide a sample lesson for testing."""
    return LessonContent(
        1,
        "Introduction to Fractions",
        sample_image,
        "Fractions represent parts of a whole...",
        "Audio explanation of fractions",
    )


@pytest.fixture
def algebra_lesson():
    return LessonContent(
        2,
        "Basic Algebra",
        np.full((8, 8, 3), 200, dtype=np.uint8),
        "Algebra is the study of mathematical symbols...",
        "Audio explanation of algebra",
    )


@pytest.fixture
def presenter(settings):
    """Presenter writing to in-memory consoles; read with .console.file.getvalue()."""
    return LessonPresenter(
        console=Console(file=io.StringIO(), width=120, color_system=None),
        err_console=Console(file=io.StringIO(), width=120, color_system=None),
        settings=settings,
    )
