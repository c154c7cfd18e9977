from __future__ import annotations

import pytest
from pydantic import ValidationError

from slime_finder.config import Settings


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("SLIME_FINDER_WORKER_COUNT", "3")
    monkeypatch.setenv("SLIME_FINDER_LOG_LEVEL", "DEBUG")

    current = Settings()

    assert current.worker_count == 3
    assert current.log_level == "DEBUG"
    assert current.section_queue_size == 8
    assert current.result_queue_size == 8


def test_settings_reject_empty_worker_pool(monkeypatch) -> None:
    monkeypatch.setenv("SLIME_FINDER_WORKER_COUNT", "0")

    with pytest.raises(ValidationError):
        Settings()
