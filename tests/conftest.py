from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from wordlists.core.logging.setup import JsonFormatter


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    # Settings read ./config, ./.env and the process environment
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("APP_CONFIG_FILE", raising=False)
    for name in (
        "SAMPLING__SEED",
        "IO__ENCODING",
        "LOGGING__LEVEL",
        "CLASSIFIER__MIN_OCCURRENCES",
    ):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    # Drop handlers installed by setup_logging during the test
    for h in list(root.handlers):
        if isinstance(h.formatter, JsonFormatter):
            root.removeHandler(h)
    root.setLevel(level)

