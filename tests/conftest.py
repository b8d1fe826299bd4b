"""Pytest configuration for qrng-cli tests."""

import sys
from pathlib import Path

import pytest

# Add src/ to path so 'cli', 'core' and 'adapters' can be imported
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.config import AppSettings  # noqa: E402
from core.domain.models import FetchOutcome, RequestParameters  # noqa: E402


@pytest.fixture
def settings(monkeypatch):
    """Settings with no intention delay and no exit pause."""
    monkeypatch.setenv("QRNG_CLI_INTENTION_DELAY_SECONDS", "0")
    monkeypatch.setenv("QRNG_CLI_PAUSE_ON_EXIT", "false")
    return AppSettings()


class FakeSource:
    """RandomSource stub that records requests and replays one outcome."""

    def __init__(self, outcome: FetchOutcome):
        self.outcome = outcome
        self.requests: list[RequestParameters] = []

    async def fetch(self, params: RequestParameters) -> FetchOutcome:
        self.requests.append(params)
        return self.outcome


@pytest.fixture
def fake_source_factory():
    return FakeSource
