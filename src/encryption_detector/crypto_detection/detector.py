"""Detekcja szyfrowania regionu obrazu: odczyt próbki, sygnatury, entropia.

Detektor jest bezstanowy: każde wywołanie czyta własną próbkę i zwraca
nowy `DetectionResult`. Tabela sygnatur jest niezmienna i współdzielona.
Błędy odczytu nie są propagowane do wywołującego: kończą się werdyktem
"nie zaszyfrowane" z opisem przyczyny (fail-open), tak aby skan wielu
regionów nie przerywał się na jednym nieczytelnym fragmencie.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable

from structlog import get_logger

from encryption_detector.core.models import DetectionMethod, DetectionResult
from encryption_detector.drivers import ImageReader
from encryption_detector.shared.config import DetectorConfig

from .entropy import EntropyAnalyzer
from .sample import Sample, read_sample
from .signature_loader import SignatureEntry, SignatureTable
from .signatures import SignatureMatcher


class EncryptionDetector:
    """Orkiestrator: Reading -> Matching -> Scoring."""

    def __init__(
        self,
        *,
        config: DetectorConfig | None = None,
        signatures: SignatureTable | Iterable[SignatureEntry] | None = None,
    ) -> None:
        self._config = config or DetectorConfig()
        self._matcher = SignatureMatcher(signatures)
        self._analyzer = EntropyAnalyzer(self._config.entropy_threshold)
        self._logger = get_logger(__name__)

    @property
    def config(self) -> DetectorConfig:
        return self._config

    @property
    def signatures(self) -> SignatureTable:
        return self._matcher.signatures

    def detect(self, image: ImageReader, offset: int) -> DetectionResult:
        """Klasyfikuje region obrazu zaczynający się pod `offset`.

        Zwracany opis nie jest obcinany; limit długości stosuje `detect_encryption`.
        """

        sample = read_sample(image, offset, self._config.window_size)
        if sample.failed or not sample.data:
            return self._read_failure(sample)

        signature = self._matcher.match(sample.data)
        if signature is not None:
            return self._signature_result(sample, signature)

        return self._entropy_result(sample)

    # ------------------------------------------------------------------
    # Operacje pomocnicze
    # ------------------------------------------------------------------

    def _read_failure(self, sample: Sample) -> DetectionResult:
        reason = sample.error or "no data available (offset at or beyond end of image)"
        self._logger.debug("sample-unavailable", offset=sample.offset, reason=reason)
        return DetectionResult(
            is_encrypted=False,
            description=f"unable to read sample at offset {sample.offset}: {reason}",
            method=DetectionMethod.READ_FAILURE,
        )

    def _signature_result(self, sample: Sample, signature: SignatureEntry) -> DetectionResult:
        version = signature.extract_version(sample.data)
        description = f"{signature.name} header detected"
        if version:
            description = f"{description} (version {version})"
        self._logger.debug(
            "signature-matched",
            offset=sample.offset,
            signature=signature.identifier,
            version=version,
        )
        return DetectionResult(
            is_encrypted=True,
            description=description,
            method=DetectionMethod.SIGNATURE,
            signature=signature.identifier,
            bytes_read=len(sample),
        )

    def _entropy_result(self, sample: Sample) -> DetectionResult:
        score = self._analyzer.score(sample.data)
        threshold = self._analyzer.threshold
        encrypted = self._analyzer.is_encryption_like(score)
        self._logger.debug(
            "entropy-scored",
            offset=sample.offset,
            entropy=round(score, 4),
            threshold=threshold,
            bytes_read=len(sample),
        )
        if encrypted:
            description = f"entropy {score:.2f} exceeds threshold {threshold:.2f}"
        else:
            description = f"entropy {score:.2f} does not exceed threshold {threshold:.2f}"
        if sample.short:
            description += f" ({len(sample)} of {sample.requested} bytes read)"
        return DetectionResult(
            is_encrypted=encrypted,
            description=description,
            method=DetectionMethod.ENTROPY if encrypted else DetectionMethod.NONE,
            entropy=score,
            bytes_read=len(sample),
        )


@lru_cache(maxsize=1)
def _get_default_detector() -> EncryptionDetector:
    return EncryptionDetector()


def detect_encryption(
    image: ImageReader,
    offset: int,
    *,
    detector: EncryptionDetector | None = None,
) -> DetectionResult:
    """Sprawdza, czy region obrazu pod `offset` jest zaszyfrowany.

    Nigdy nie zgłasza wyjątku z powodu obrazu; opis jest obcięty do
    `DetectorConfig.description_max_length`.
    """

    detector = detector or _get_default_detector()
    result = detector.detect(image, offset)
    return result.bounded(detector.config.description_max_length)


__all__ = ["EncryptionDetector", "detect_encryption"]
