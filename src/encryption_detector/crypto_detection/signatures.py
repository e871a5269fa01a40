"""Dopasowanie próbki do tabeli sygnatur kontenerów szyfrujących."""

from __future__ import annotations

from typing import Iterable

from .signature_loader import SignatureEntry, SignatureTable, load_default_signatures


class SignatureMatcher:
    """Testuje próbkę względem tabeli w jej kolejności; wygrywa pierwsze dopasowanie."""

    def __init__(
        self,
        signatures: SignatureTable | Iterable[SignatureEntry] | None = None,
    ) -> None:
        if signatures is None:
            signatures = load_default_signatures()
        elif not isinstance(signatures, SignatureTable):
            signatures = SignatureTable(signatures)
        self._signatures = signatures

    @property
    def signatures(self) -> SignatureTable:
        return self._signatures

    def match(self, data: bytes) -> SignatureEntry | None:
        for signature in self._signatures:
            if signature.matches(data):
                return signature
        return None


__all__ = ["SignatureMatcher"]
