"""Almacén en memoria clave -> valor que vive lo que dura el proceso."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any

from blink.config import BlinkConfig
from blink.exceptions import InvalidKeyError

_logger = logging.getLogger(__name__)

# Marca "el llamador no pasó default"; None es un default legítimo.
_MISSING: Any = object()


def _check_key(key: object) -> str:
    if not isinstance(key, str):
        raise InvalidKeyError(key)
    return key


class Blink:
    """Almacén en memoria clave -> valor.

    La última escritura gana. Leer una clave que no existe nunca lanza:
    devuelve el ``default`` del llamador o, si no lo hay, el de la config.
    """

    def __init__(self, config: BlinkConfig | None = None) -> None:
        self.config = config or BlinkConfig()
        self._data: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        self._data[_check_key(key)] = value

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Devuelve el valor de ``key`` o el default si no existe."""
        key = _check_key(key)
        if key in self._data:
            return self._data[key]
        return self._miss(key, default)

    def has(self, key: str) -> bool:
        return _check_key(key) in self._data

    def all(self) -> dict[str, Any]:
        return dict(self._data)

    def all_starting_with(self, prefix: str) -> dict[str, Any]:
        """Entradas cuya clave empieza por ``prefix``."""
        prefix = _check_key(prefix)
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}

    def forget(self, key: str) -> None:
        self._data.pop(_check_key(key), None)

    def forget_starting_with(self, prefix: str) -> None:
        for key in list(self.all_starting_with(prefix)):
            del self._data[key]

    def flush(self) -> None:
        _logger.debug("blink: vaciando %d entradas", len(self._data))
        self._data.clear()

    def pull(self, key: str, default: Any = _MISSING) -> Any:
        """Como ``get``, pero elimina la entrada."""
        key = _check_key(key)
        if key in self._data:
            return self._data.pop(key)
        return self._miss(key, default)

    def increment(self, key: str, by: int = 1) -> int:
        """Suma ``by`` al valor de ``key`` (0 si no existe) y lo guarda."""
        value = self._data.get(_check_key(key), 0) + by
        self._data[key] = value
        return value

    def decrement(self, key: str, by: int = 1) -> int:
        return self.increment(key, -by)

    def once(self, key: str, callback: Callable[[], Any]) -> Any:
        """Memoiza ``callback()`` bajo ``key``.

        Si la clave ya existe (aunque valga None) no se llama al callback.
        """
        key = _check_key(key)
        if key not in self._data:
            self._data[key] = callback()
        return self._data[key]

    def _miss(self, key: str, default: Any) -> Any:
        if self.config.log_misses:
            _logger.debug("blink: clave ausente %r", key)
        return self.config.default if default is _MISSING else default

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._data

    def __getitem__(self, key: str) -> Any:
        return self._data[_check_key(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        self.forget(key)

    def __repr__(self) -> str:
        return f"Blink({len(self._data)} entradas)"
