"""Adaptery obrazów dysków."""

from .base import DriverCapabilities, DriverError, ImageDriver, ImageReader
from .memory import InMemoryImage

__all__ = [
	"DriverCapabilities",
	"DriverError",
	"ImageDriver",
	"ImageReader",
	"InMemoryImage",
]

try:  # pragma: no cover - zależne od obecności pytsk3
    from .tsk import TskImageDriver

    __all__.append("TskImageDriver")
except ImportError:  # pragma: no cover - środowisko bez pytsk3
    TskImageDriver = None  # type: ignore[assignment]
