"""Configuración del store: qué devolver cuando falta una clave."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from blink.exceptions import BlinkConfigError

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise BlinkConfigError(f"{name}={value!r} no es un booleano válido")


@dataclasses.dataclass(frozen=True)
class BlinkConfig:
    """Política de lectura del store.

    Parameters
    ----------
    default : Any
        Valor que devuelven ``get`` y ``pull`` cuando la clave no existe y el
        llamador no pasa uno propio.
    log_misses : bool
        Registrar cada lectura fallida a nivel DEBUG.
    """

    default: Any = None
    log_misses: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> BlinkConfig:
        """Construye la config desde ``BLINK_DEFAULT`` y ``BLINK_LOG_MISSES``."""
        env = os.environ if environ is None else environ
        return cls(
            default=env.get("BLINK_DEFAULT"),
            log_misses=_env_bool("BLINK_LOG_MISSES", env.get("BLINK_LOG_MISSES"), False),
        )
