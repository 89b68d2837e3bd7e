"""blink: almacén clave -> valor en memoria y accesor global ``blink()``."""

__version__ = "0.1.0"

from blink.config import BlinkConfig
from blink.exceptions import BlinkConfigError, BlinkError, InvalidKeyError
from blink.helpers import blink, get_blink, reset_blink, set_blink
from blink.store import Blink

__all__ = [
    "Blink",
    "BlinkConfig",
    "BlinkConfigError",
    "BlinkError",
    "InvalidKeyError",
    "blink",
    "get_blink",
    "reset_blink",
    "set_blink",
    "__version__",
]
