"""Tests de integración: el accesor global y la API de instancia juntos."""

import pytest

from blink import Blink, blink


@pytest.mark.integration
def test_accessor_and_instance_share_state() -> None:
    """Flujo: lo escrito por una vía se lee por la otra."""
    store = blink()
    store.put("a", 1)
    blink("b", 2)
    assert blink("a") == 1
    assert store.get("b") == 2
    assert store.all() == {"a": 1, "b": 2}


@pytest.mark.integration
def test_memoize_expensive_lookup_per_run() -> None:
    """Flujo: memoizar resultados durante una ejecución."""
    calls: list[str] = []

    def load_user(user_id: int) -> dict:
        calls.append(f"user.{user_id}")
        return {"id": user_id}

    for _ in range(3):
        for i in range(2):
            blink().once(f"user.{i}", lambda i=i: load_user(i))
    assert calls == ["user.0", "user.1"]
    assert blink().all_starting_with("user.") == {"user.0": {"id": 0}, "user.1": {"id": 1}}


@pytest.mark.integration
def test_explicit_store_is_independent_of_global() -> None:
    """Flujo: un store construido a mano no toca la instancia global."""
    local = Blink()
    local.put("k", "local")
    blink("k", "global")
    assert local.get("k") == "local"
    assert blink("k") == "global"
