"""Fixtures compartidos: cada test arranca con la instancia global vacía."""

import pytest

from blink import reset_blink


@pytest.fixture(autouse=True)
def clean_blink(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("BLINK_DEFAULT", raising=False)
    monkeypatch.delenv("BLINK_LOG_MISSES", raising=False)
    reset_blink()
    yield
    reset_blink()
