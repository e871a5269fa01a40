"""Odczyt próbki bajtów z obrazu pod zadanym offsetem."""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from encryption_detector.drivers import DriverError, ImageReader

_logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Sample:
    """Okno bajtów odczytane z obrazu (istnieje tylko w trakcie jednej detekcji)."""

    offset: int
    requested: int
    data: bytes = b""
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def short(self) -> bool:
        return len(self.data) < self.requested

    def __len__(self) -> int:
        return len(self.data)


def read_sample(image: ImageReader, offset: int, size: int) -> Sample:
    """Czyta do `size` bajtów od `offset`; błędy obrazu zwraca w `Sample.error`."""

    if image is None:
        return Sample(offset=offset, requested=size, error="no image handle")
    if offset < 0:
        return Sample(offset=offset, requested=size, error=f"invalid offset {offset}")

    try:
        data = bytes(image.read(offset, size))
    except (DriverError, OSError, RuntimeError, ValueError) as exc:
        _logger.debug("sample-read-failed", offset=offset, size=size, error=str(exc))
        return Sample(offset=offset, requested=size, error=str(exc) or type(exc).__name__)

    if len(data) > size:
        data = data[:size]
    if len(data) < size:
        _logger.debug("sample-short-read", offset=offset, requested=size, read=len(data))
    return Sample(offset=offset, requested=size, data=data)


__all__ = ["Sample", "read_sample"]
