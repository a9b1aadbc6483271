"""
Test configuration for hrefscan.

Provides shared HTML fixtures and keeps logging and environment settings
isolated between tests.
"""

import pytest

from hrefscan.observability import configure_logging

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests running the command end to end")


# ============================================================================
# Core Test Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Drop HREFSCAN_* variables and reset logging to its quiet default."""
    for name in ("STYLE", "URL", "ATTRIBUTE", "PARSER", "LOG_LEVEL"):
        monkeypatch.delenv(f"HREFSCAN_{name}", raising=False)
    configure_logging("WARNING")
    yield


@pytest.fixture
def duplicate_links_html() -> str:
    """Three anchors, two of which share a target."""
    return '<a href="/x">A</a><a href="/x">B</a><a href="/y">C</a>'


@pytest.fixture
def navigation_html() -> str:
    """A small page fragment with nested lists, a stylesheet and a named anchor."""
    return """
    <link rel="stylesheet" href="/style.css">
    <a name="top">Top</a>
    <nav class="menu">
        <ul>
            <li><a href="/home">Home</a>
                <ul>
                    <li><a class="sub" href="/home/news">News</a></li>
                </ul>
            </li>
            <li><a href="/about" id="about">About</a></li>
        </ul>
    </nav>
    <footer>
        <a href="/home">Home again</a>
        <a href="https://elsewhere.org/">Elsewhere</a>
    </footer>
    """
