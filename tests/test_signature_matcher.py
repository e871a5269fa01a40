"""Testy dopasowania próbek do tabeli sygnatur."""

from __future__ import annotations

from encryption_detector.crypto_detection import SignatureEntry, SignatureMatcher, load_default_signatures
from tests.synthetic_data import deterministic_random_bytes, inject_signature, zeros


def _entry(identifier: str, offset: int, pattern: bytes) -> SignatureEntry:
    return SignatureEntry(identifier=identifier, name=identifier.upper(), offset=offset, pattern=pattern)


def test_match_requires_exact_bytes_at_offset() -> None:
    matcher = SignatureMatcher([_entry("magic", 4, b"MAGIC")])

    assert matcher.match(inject_signature(zeros(64), offset=4, signature=b"MAGIC")).identifier == "magic"
    assert matcher.match(inject_signature(zeros(64), offset=5, signature=b"MAGIC")) is None
    assert matcher.match(inject_signature(zeros(64), offset=4, signature=b"MAGIc")) is None


def test_sample_shorter_than_pattern_end_cannot_match() -> None:
    matcher = SignatureMatcher([_entry("magic", 4, b"MAGIC")])

    assert matcher.match(b"\x00\x00\x00\x00MAGI") is None
    assert matcher.match(b"\x00\x00\x00\x00MAGIC").identifier == "magic"


def test_first_match_in_table_order_wins() -> None:
    specific = _entry("specific", 0, b"ABCD")
    general = _entry("general", 0, b"AB")
    data = b"ABCD" + zeros(60)

    assert SignatureMatcher([specific, general]).match(data) is specific
    assert SignatureMatcher([general, specific]).match(data) is general


def test_empty_table_never_matches() -> None:
    assert SignatureMatcher([]).match(deterministic_random_bytes(512, seed=3)) is None


def test_matcher_is_deterministic() -> None:
    matcher = SignatureMatcher()
    data = inject_signature(zeros(512), offset=3, signature=b"-FVE-FS-")

    assert matcher.match(data) is matcher.match(data)


def test_every_default_signature_matches_its_own_pattern() -> None:
    signatures = load_default_signatures()
    matcher = SignatureMatcher(signatures)

    for signature in signatures:
        data = inject_signature(zeros(signature.end + 16), offset=signature.offset, signature=signature.pattern)
        assert matcher.match(data) is signature


def test_default_matcher_ignores_plain_data() -> None:
    assert SignatureMatcher().match(zeros(64 * 1024)) is None
