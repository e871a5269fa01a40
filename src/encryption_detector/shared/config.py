"""Konfiguracja detektora (parametry strojone, bez pliku konfiguracyjnego)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from encryption_detector.core.models import DESCRIPTION_MAX_LENGTH

DEFAULT_WINDOW_SIZE = 64 * 1024
# Szyfrogram i dane skompresowane zbliżają się do 8 bitów/bajt, metadane
# systemów plików zostają wyraźnie niżej. Losowa próbka 512 B daje ok. 7.6.
DEFAULT_ENTROPY_THRESHOLD = 7.5

_ENV_WINDOW_SIZE = "ENCRYPTION_DETECTOR_WINDOW_SIZE"
_ENV_ENTROPY_THRESHOLD = "ENCRYPTION_DETECTOR_ENTROPY_THRESHOLD"
_ENV_DESCRIPTION_MAX_LENGTH = "ENCRYPTION_DETECTOR_DESCRIPTION_MAX_LENGTH"


@dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Parametry detekcji szyfrowania."""

    window_size: int = DEFAULT_WINDOW_SIZE
    entropy_threshold: float = DEFAULT_ENTROPY_THRESHOLD
    description_max_length: int = DESCRIPTION_MAX_LENGTH

    def __post_init__(self) -> None:
        if self.window_size <= 0:
            raise ValueError(f"window_size musi być dodatnie: {self.window_size}")
        if not 0.0 <= self.entropy_threshold <= 8.0:
            raise ValueError(f"entropy_threshold poza zakresem [0, 8]: {self.entropy_threshold}")
        if self.description_max_length <= 0:
            raise ValueError(f"description_max_length musi być dodatnie: {self.description_max_length}")

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Tworzy konfigurację z domyślnych wartości nadpisanych zmiennymi środowiskowymi.

        - `ENCRYPTION_DETECTOR_WINDOW_SIZE` (bajty)
        - `ENCRYPTION_DETECTOR_ENTROPY_THRESHOLD` (bity/bajt)
        - `ENCRYPTION_DETECTOR_DESCRIPTION_MAX_LENGTH` (znaki)

        Puste wartości oznaczają wartość domyślną.
        """

        return cls(
            window_size=_env_value(_ENV_WINDOW_SIZE, int, DEFAULT_WINDOW_SIZE),
            entropy_threshold=_env_value(_ENV_ENTROPY_THRESHOLD, float, DEFAULT_ENTROPY_THRESHOLD),
            description_max_length=_env_value(_ENV_DESCRIPTION_MAX_LENGTH, int, DESCRIPTION_MAX_LENGTH),
        )


def _env_value(key: str, cast, default):  # type: ignore[no-untyped-def]
    raw = (os.getenv(key) or "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"Nieprawidłowa wartość zmiennej {key}: {raw!r}") from exc
