"""Obraz trzymany w pamięci (testy, benchmarki, bufory już odczytane)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from encryption_detector.core.models import Volume
from .base import DriverCapabilities, DriverError


@dataclass(slots=True)
class InMemoryImage:
    """Minimal driver-like object that supports raw reads.

    `fail_offsets` pozwala zasymulować błąd odczytu pod wskazanym offsetem.
    """

    data: bytes
    fail_offsets: frozenset[int] = field(default_factory=frozenset)
    name: str = "memory"
    capabilities: DriverCapabilities = field(default_factory=DriverCapabilities)

    def read(self, offset: int, size: int) -> bytes:
        if int(offset) in self.fail_offsets:
            raise DriverError("synthetic read failure")
        start = max(int(offset), 0)
        end = max(start + int(size), start)
        return self.data[start:end]

    def close(self) -> None:
        return None

    def list_volumes(self) -> Iterator[Volume]:
        yield Volume(identifier="image", offset=0, size=len(self.data), description="whole image")

    def has_filesystem(self, volume: Volume) -> bool:
        return False


__all__ = ["InMemoryImage"]
