"""
Shared fixtures for aba-ingest tests.

Synthetic ABA lines are produced by the builders in ``tests/aba_samples.py``;
this file exposes the common ones as fixtures.
"""

import pytest

from tests.aba_samples import SAMPLE_ABA, SAMPLE_LINES


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_aba() -> str:
    return SAMPLE_ABA


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "payments.aba"
    path.write_text(SAMPLE_ABA + "\n", encoding="latin-1")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full parse -> export flow)",
    )
