"""Testy obliczania entropii Shannona."""

from __future__ import annotations

import math

import pytest

from encryption_detector.crypto_detection import EntropyAnalyzer, shannon_entropy
from tests.synthetic_data import deterministic_random_bytes, repeat_byte, zeros


def test_entropy_of_empty_buffer_is_zero() -> None:
    assert shannon_entropy(b"") == 0.0


def test_entropy_of_constant_buffer_is_zero() -> None:
    assert shannon_entropy(zeros(512)) == 0.0
    assert shannon_entropy(repeat_byte(4096, 0xAA)) == 0.0


def test_entropy_of_two_equiprobable_values_is_one_bit() -> None:
    assert shannon_entropy(b"\x00\xff" * 256) == pytest.approx(1.0)


def test_entropy_of_every_byte_value_once_is_eight_bits() -> None:
    assert shannon_entropy(bytes(range(256))) == pytest.approx(8.0)


def test_entropy_of_random_data_is_near_maximum() -> None:
    score = shannon_entropy(deterministic_random_bytes(64 * 1024, seed=7))
    assert 7.95 < score <= 8.0


def test_entropy_matches_formula_for_skewed_distribution() -> None:
    data = b"a" * 3 + b"b"
    expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
    assert shannon_entropy(data) == pytest.approx(expected)


def test_analyzer_threshold_is_strict() -> None:
    analyzer = EntropyAnalyzer(threshold=7.5)

    assert analyzer.is_encryption_like(7.51)
    assert not analyzer.is_encryption_like(7.5)
    assert not analyzer.is_encryption_like(0.0)


@pytest.mark.parametrize("threshold", [-0.1, 8.1])
def test_analyzer_rejects_out_of_range_threshold(threshold: float) -> None:
    with pytest.raises(ValueError):
        EntropyAnalyzer(threshold=threshold)
