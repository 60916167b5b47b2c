"""Shared fixtures for litetest tests."""

import io
from pathlib import Path

import pytest

from litetest.discovery import TargetScanner
from litetest.runner import TestDriver

TESTS_DIR = Path(__file__).parent
SAMPLES_DIR = TESTS_DIR / "samples"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's LITETEST_CONFIG out of the tests."""
    monkeypatch.delenv("LITETEST_CONFIG", raising=False)


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_driver(stream: io.StringIO):
    """Factory for drivers rooted at the sample packages."""

    def _make(local_test_root: str = "", **kwargs) -> TestDriver:
        kwargs.setdefault("stream", stream)
        return TestDriver(
            "samples", local_test_root, project_root=TESTS_DIR, **kwargs
        )

    return _make


@pytest.fixture
def scanner() -> TargetScanner:
    return TargetScanner(SAMPLES_DIR)
