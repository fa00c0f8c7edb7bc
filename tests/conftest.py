from __future__ import annotations

import pytest

from tests.helpers.model import make_collections
from transit_rules.domain.model import Collections  # noqa: TC001
from transit_rules.domain.report import Report  # noqa: TC001


@pytest.fixture
def collections() -> Collections:
    return make_collections()


@pytest.fixture
def report() -> Report:
    return Report()


@pytest.fixture(autouse=True)
def _clear_rules_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRANSIT_RULES_REPORT_PATH", raising=False)
    monkeypatch.delenv("TRANSIT_RULES_LOG_LEVEL", raising=False)
