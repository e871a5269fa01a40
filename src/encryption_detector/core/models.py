"""Modele danych używane w rdzeniu aplikacji."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

# Limit długości opisu zgodny z ogólnobibliotecznym limitem komunikatów błędów.
DESCRIPTION_MAX_LENGTH = 1024


class DetectionMethod(str, Enum):
    """Sposób, w jaki ustalono werdykt."""

    SIGNATURE = "signature"
    ENTROPY = "entropy"
    NONE = "none"
    READ_FAILURE = "read_failure"


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Werdykt detekcji szyfrowania dla pojedynczego regionu obrazu."""

    is_encrypted: bool
    description: str
    method: DetectionMethod = DetectionMethod.NONE
    signature: Optional[str] = None
    entropy: Optional[float] = None
    bytes_read: int = 0

    def bounded(self, max_length: int = DESCRIPTION_MAX_LENGTH) -> "DetectionResult":
        """Zwraca kopię z opisem obciętym do `max_length` znaków."""

        if max_length <= 0:
            raise ValueError("max_length musi być dodatnie")
        if len(self.description) <= max_length:
            return self
        return replace(self, description=self.description[:max_length])


@dataclass(frozen=True, slots=True)
class Volume:
    """Region obrazu (partycja lub cały obraz) przekazywany do detekcji."""

    identifier: str
    offset: int
    size: int
    description: str = ""


@dataclass(frozen=True, slots=True)
class ScanRecord:
    """Wynik sprawdzenia pojedynczego wolumenu przez skaner."""

    volume: Volume
    filesystem_recognized: bool
    result: DetectionResult | None = None

    @property
    def skipped(self) -> bool:
        return self.result is None
