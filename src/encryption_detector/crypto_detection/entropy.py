"""Heurystyczne wykrywanie szyfrowania na podstawie entropii.

Entropia Shannona liczona jest z histogramu 256 wartości bajtów próbki
(bity informacji na bajt, zakres [0, 8]). Próbka jest uznawana za
"statystycznie podobną do szyfrogramu", gdy wynik przekracza próg.

Uwaga: dane skompresowane (zip, obrazy, wideo, zlib/LZMA) osiągają wynik
podobny do szyfrogramu i ta metoda sama ich nie odróżni. Jest to ograniczenie
każdej detekcji opartej na entropii, nie błąd tej implementacji: werdykt
ENTROPY należy traktować jako wskazówkę, nie dowód.
"""

from __future__ import annotations

import math

from encryption_detector.shared.config import DEFAULT_ENTROPY_THRESHOLD

MAX_ENTROPY = 8.0


def shannon_entropy(data: bytes) -> float:
    if not data:
        return 0.0
    counts = [0] * 256
    for b in data:
        counts[b] += 1
    length = len(data)
    entropy = 0.0
    for c in counts:
        if c == 0:
            continue
        p = c / length
        entropy -= p * math.log2(p)
    return min(max(entropy, 0.0), MAX_ENTROPY)


class EntropyAnalyzer:
    """Oblicza entropię próbki i porównuje ją z progiem."""

    def __init__(self, threshold: float = DEFAULT_ENTROPY_THRESHOLD) -> None:
        if not 0.0 <= threshold <= MAX_ENTROPY:
            raise ValueError(f"Próg entropii poza zakresem [0, 8]: {threshold}")
        self._threshold = float(threshold)

    @property
    def threshold(self) -> float:
        return self._threshold

    def score(self, data: bytes) -> float:
        return shannon_entropy(data)

    def is_encryption_like(self, score: float) -> bool:
        return score > self._threshold


__all__ = ["EntropyAnalyzer", "MAX_ENTROPY", "shannon_entropy"]
