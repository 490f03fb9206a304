"""
Pytest configuration for StatusQuill
"""

import logging

import pytest

from statusquill.models import FontWeight, StyledLine


@pytest.fixture(autouse=True)
def configure_logging():
    """Reset the package logger so CLI runs do not leak handlers between tests."""
    package_logger = logging.getLogger("statusquill")
    yield
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def report_lines():
    """Styled lines shaped like a package status export."""
    return [
        StyledLine("Package Status Report", weight=FontWeight.BOLD, size=18),
        StyledLine("Generated: 2026-10-19 12:00", size=10, gap_before=6),
        StyledLine("Product", weight=FontWeight.BOLD, size=14, gap_before=12),
        StyledLine("Name: Insulin Pens", weight=FontWeight.BOLD),
        StyledLine("Temperature: 2 to 8"),
    ]


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
