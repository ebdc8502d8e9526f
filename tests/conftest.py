"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from recording_finder.config import ENGLISH, WeekdayLocale
from recording_finder.scan.models import FileRecord


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_scan_root(tmp_path: Path) -> Path:
    """Create a temporary directory acting as a scan root.

    Returns:
        Path to a clean temporary directory for recordings.
    """
    root = tmp_path / "recordings"
    root.mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for report artifacts.

    Returns:
        Path to a clean temporary directory for output files.
    """
    output_dir = tmp_path / "Output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


# =============================================================================
# Locale & Record Fixtures
# =============================================================================

@pytest.fixture
def english() -> WeekdayLocale:
    """English weekday locale."""
    return ENGLISH


@pytest.fixture
def record_factory():
    """Factory fixture for creating FileRecord objects with sensible defaults.

    Example:
        >>> record = record_factory(name="2024-06-14 Service.mp3", created=datetime(2024, 6, 10, 9))
    """
    def _create(
        name: str = "take.wav",
        full_path: str | None = None,
        created: datetime = datetime(2024, 6, 10, 9, 30, 0),
        modified: datetime | None = None,
        accessed: datetime | None = None,
        derived_day: str = "Unknown",
    ) -> FileRecord:
        return FileRecord(
            name=name,
            full_path=full_path or f"/recordings/{name}",
            created=created,
            modified=modified or created,
            accessed=accessed or created,
            derived_day=derived_day,
        )

    return _create


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status", "clear", "input"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.print_run_summary = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
