"""Signature (magic bytes) benchmark.

This benchmark validates that configured signatures are detected correctly using
`EncryptionDetector` on synthetic buffers.

Scope
- Evaluates the signature engine and configuration (JSON) together.
- Each signature is injected into a zeroed window and, separately, into a
  random window, so entropy never decides the verdict on its own.
- Does not require real disk images.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from encryption_detector.core.models import DetectionMethod
from encryption_detector.crypto_detection import EncryptionDetector, SignatureEntry, load_default_signatures
from encryption_detector.drivers import InMemoryImage
from encryption_detector.shared.config import DetectorConfig

from .synthetic import deterministic_random_bytes, zeros


@dataclass(frozen=True, slots=True)
class SignatureBenchmarkResult:
    name: str
    samples: int
    passed: int
    failed: int
    confusion: dict[str, int]
    metrics: dict[str, float]

    def to_dict(self) -> dict:
        return asdict(self)


def _inject(base: bytes, *, signature: SignatureEntry) -> bytes:
    buf = bytearray(base)
    if signature.end > len(buf):
        raise ValueError("Buffer too small for signature injection")
    buf[signature.offset : signature.end] = signature.pattern
    return bytes(buf)


def _confusion_key(expected_id: str, detected_id: str | None) -> str:
    return f"{expected_id} -> {detected_id or 'none'}"


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0.0 else num / den


def run_signature_benchmark(
    *,
    signatures: list[SignatureEntry] | None = None,
    seed: int = 1337,
) -> SignatureBenchmarkResult:
    sigs = list(signatures or load_default_signatures())
    window = max((sig.end for sig in sigs), default=0)
    window = max(window, 512)
    detector = EncryptionDetector(config=DetectorConfig(window_size=window), signatures=sigs)

    confusion: dict[str, int] = {}
    passed = 0
    failed = 0

    for sig in sigs:
        for base in (zeros(window), deterministic_random_bytes(window, seed=seed)):
            result = detector.detect(InMemoryImage(_inject(base, signature=sig)), 0)

            # An earlier, more specific entry may legitimately win on random data.
            detected_id = result.signature if result.method is DetectionMethod.SIGNATURE else None
            key = _confusion_key(sig.identifier, detected_id)
            confusion[key] = confusion.get(key, 0) + 1

            if detected_id == sig.identifier and sig.name in result.description:
                passed += 1
            else:
                failed += 1

    samples = passed + failed
    return SignatureBenchmarkResult(
        name="signature_magic_bytes",
        samples=samples,
        passed=passed,
        failed=failed,
        confusion=confusion,
        metrics={"accuracy": float(_safe_div(passed, samples))},
    )
