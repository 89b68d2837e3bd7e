"""Accesor global ``blink()`` sobre una instancia compartida de :class:`Blink`.

``blink()`` devuelve la instancia, ``blink(key)`` lee y ``blink(key, value)``
escribe y devuelve ``value``. Para código que prefiera nombres explícitos
están ``get_blink``, ``set_blink`` y ``reset_blink``.
"""

from __future__ import annotations

import logging
from typing import Any

from blink.config import BlinkConfig
from blink.store import _MISSING, Blink

_logger = logging.getLogger(__name__)

_instance: Blink | None = None


def get_blink() -> Blink:
    """Devuelve la instancia compartida, creándola en el primer acceso.

    La config se lee del entorno al crearla, así que el primer acceso puede
    lanzar ``BlinkConfigError`` si ``BLINK_LOG_MISSES`` no es válido.
    """
    global _instance
    if _instance is None:
        _instance = Blink(BlinkConfig.from_env())
        _logger.debug("blink: instancia global creada")
    return _instance


def set_blink(store: Blink) -> Blink:
    """Sustituye la instancia compartida por ``store``."""
    global _instance
    _instance = store
    return store


def reset_blink() -> None:
    """Descarta la instancia compartida; el próximo acceso crea una vacía."""
    global _instance
    if _instance is not None:
        _logger.debug("blink: instancia global descartada")
    _instance = None


def blink(key: str = _MISSING, value: Any = _MISSING) -> Any:
    if key is _MISSING and value is not _MISSING:
        raise TypeError("blink() recibió value sin key")
    store = get_blink()
    if key is _MISSING:
        return store
    if value is _MISSING:
        return store.get(key)
    store.put(key, value)
    return value
