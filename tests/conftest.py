from __future__ import annotations

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile("bang", database=None, deadline=None)
settings.load_profile("bang")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_bang_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BANG_MANIFEST", "BANG_VERBOSE", "BANG_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
