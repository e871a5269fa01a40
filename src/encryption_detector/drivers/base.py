"""Interfejs bazowy dla sterowników obrazów dysków."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from encryption_detector.core.models import Volume


class DriverError(RuntimeError):
    """Błąd specyficzny sterowników danych."""


@dataclass(slots=True)
class DriverCapabilities:
    """Opis obsługiwanych funkcji sterownika."""

    supports_volume_systems: bool = False
    supports_filesystem_probe: bool = False
    supported_formats: tuple[str, ...] = ()


class ImageReader(Protocol):
    """Minimalna zdolność wymagana przez detektor: odczyt bajtów spod offsetu.

    Odczyt poza końcem obrazu zwraca krótszy (ew. pusty) bufor. Błędy dostępu
    do obrazu zgłaszane są jako `DriverError`, `OSError` lub `RuntimeError`
    (surowy `pytsk3.Img_Info`); zamknięty plik zgłasza `ValueError`.
    """

    def read(self, offset: int, size: int) -> bytes:
        """Czyta surowe dane z obrazu."""


class ImageDriver(ImageReader, Protocol):
    """Pełny interfejs sterownika wykorzystywany przez skaner wolumenów."""

    name: str
    capabilities: DriverCapabilities

    def close(self) -> None:
        """Zwalnia zasoby sterownika."""

    def list_volumes(self) -> Iterable[Volume]:
        """Lista wolumenów dostępnych w otwartym obrazie."""

    def has_filesystem(self, volume: Volume) -> bool:
        """Czy pod offsetem wolumenu rozpoznano znany system plików."""
