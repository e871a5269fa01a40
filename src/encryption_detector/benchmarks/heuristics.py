"""Entropy-stage benchmark.

This benchmark evaluates `EncryptionDetector` on synthetic buffers that carry no
signature, so every verdict comes from the entropy stage. The labels are
synthetic ground-truth used for evaluation only. Compressed samples are labelled
as not encrypted on purpose: they measure the known false-positive rate of
entropy-based detection.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from encryption_detector.crypto_detection import EncryptionDetector
from encryption_detector.drivers import InMemoryImage
from encryption_detector.shared.config import DetectorConfig

from .synthetic import compressed_like, deterministic_random_bytes, repeat_byte, text_like, zeros


@dataclass(frozen=True, slots=True)
class LabeledSample:
    name: str
    encrypted: bool
    data: bytes


@dataclass(frozen=True, slots=True)
class HeuristicBenchmarkResult:
    name: str
    sample_size: int
    seeds: int
    threshold: float
    confusion: dict[str, int]
    metrics: dict[str, float]

    def to_dict(self) -> dict:
        return asdict(self)


def _samples(*, size: int, seed: int) -> list[LabeledSample]:
    return [
        LabeledSample(name="random", encrypted=True, data=deterministic_random_bytes(size, seed=seed)),
        LabeledSample(name="all_zeros", encrypted=False, data=zeros(size)),
        LabeledSample(name="repeated_0xAA", encrypted=False, data=repeat_byte(size, 0xAA)),
        LabeledSample(name="text", encrypted=False, data=text_like(size, seed=seed)),
        LabeledSample(name="compressed", encrypted=False, data=compressed_like(size, seed=seed)),
    ]


def _label(encrypted: bool) -> str:
    return "encrypted" if encrypted else "not_encrypted"


def _confusion_key(truth: bool, pred: bool) -> str:
    return f"{_label(truth)} -> {_label(pred)}"


def _safe_div(num: float, den: float) -> float:
    return 0.0 if den == 0.0 else num / den


def _compute_metrics(confusion: dict[str, int]) -> dict[str, float]:
    tp = confusion.get("encrypted -> encrypted", 0)
    fn = confusion.get("encrypted -> not_encrypted", 0)
    fp = confusion.get("not_encrypted -> encrypted", 0)
    tn = confusion.get("not_encrypted -> not_encrypted", 0)

    return {
        "encrypted_precision": float(_safe_div(tp, tp + fp)),
        "encrypted_recall": float(_safe_div(tp, tp + fn)),
        "fp_rate_non_encrypted": float(_safe_div(fp, fp + tn)),
    }


def run_heuristic_benchmark(
    *,
    sample_size: int = 64 * 1024,
    seeds: int = 10,
    seed_base: int = 1337,
    config: DetectorConfig | None = None,
) -> HeuristicBenchmarkResult:
    config = config or DetectorConfig(window_size=int(sample_size))
    # Empty table: the entropy stage alone decides.
    detector = EncryptionDetector(config=config, signatures=())
    confusion: dict[str, int] = {}

    for i in range(int(seeds)):
        seed = int(seed_base) + i
        for sample in _samples(size=int(sample_size), seed=seed):
            result = detector.detect(InMemoryImage(sample.data), 0)
            key = _confusion_key(sample.encrypted, result.is_encrypted)
            confusion[key] = confusion.get(key, 0) + 1

    return HeuristicBenchmarkResult(
        name="entropy_encryption",
        sample_size=int(sample_size),
        seeds=int(seeds),
        threshold=config.entropy_threshold,
        confusion=confusion,
        metrics=_compute_metrics(confusion),
    )
