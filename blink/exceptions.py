"""Excepciones del paquete blink."""


class BlinkError(Exception):
    """Base de todos los errores de blink."""


class InvalidKeyError(BlinkError, TypeError):
    """La clave no es un ``str``."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"las claves deben ser str, no {type(key).__name__}")


class BlinkConfigError(BlinkError, ValueError):
    """Configuración inválida o no reconocida."""
