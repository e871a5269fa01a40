"""Ładowanie i interpretacja konfiguracyjnych sygnatur kontenerów szyfrujących."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Iterable, Iterator, Sequence, overload

_DATA_PACKAGE = "encryption_detector.data"
_DEFAULT_FILE = "encryption_signatures.json"


class SignatureConfigError(ValueError):
    """Niepoprawna definicja sygnatury w pliku konfiguracyjnym."""


@dataclass(frozen=True, slots=True)
class VersionExtractor:
    """Definicja sposobu odczytu wersji z nagłówka."""

    type: str
    offset: int
    length: int | None = None

    def extract(self, data: bytes) -> str | None:
        if self.type in ("uint16-le", "uint16-be"):
            length = self.length or 2
            if self.offset + length > len(data):
                return None
            byteorder = "little" if self.type == "uint16-le" else "big"
            value = int.from_bytes(data[self.offset : self.offset + length], byteorder=byteorder)
            return str(value) if value else None
        if self.type == "ascii":
            length = self.length
            if length is None:
                raise SignatureConfigError("Ekstraktor ASCII wymaga podania długości")
            if self.offset + length > len(data):
                return None
            raw = data[self.offset : self.offset + length]
            text = raw.decode("ascii", errors="ignore").strip("\x00")
            return text or None
        raise SignatureConfigError(f"Nieobsługiwany typ ekstraktora: {self.type}")


@dataclass(frozen=True, slots=True)
class SignatureEntry:
    """Magiczny wzorzec kontenera szyfrującego w oknie próbki."""

    identifier: str
    name: str
    offset: int
    pattern: bytes
    details: str | None = None
    version: VersionExtractor | None = None

    @property
    def end(self) -> int:
        return self.offset + len(self.pattern)

    def matches(self, data: bytes) -> bool:
        if self.end > len(data):
            return False
        return data[self.offset : self.end] == self.pattern

    def extract_version(self, data: bytes) -> str | None:
        if self.version is None:
            return None
        return self.version.extract(data)


class SignatureTable(Sequence[SignatureEntry]):
    """Niezmienna, uporządkowana tabela sygnatur (kolejność = priorytet)."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[SignatureEntry]) -> None:
        self._entries: tuple[SignatureEntry, ...] = tuple(entries)
        seen: set[str] = set()
        for entry in self._entries:
            if entry.identifier in seen:
                raise SignatureConfigError(f"Zduplikowany identyfikator sygnatury: {entry.identifier}")
            seen.add(entry.identifier)

    @overload
    def __getitem__(self, index: int) -> SignatureEntry: ...

    @overload
    def __getitem__(self, index: slice) -> "SignatureTable": ...

    def __getitem__(self, index):  # type: ignore[no-untyped-def]
        if isinstance(index, slice):
            return SignatureTable(self._entries[index])
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SignatureEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SignatureTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"SignatureTable({[entry.identifier for entry in self._entries]!r})"

    def subset(self, identifiers: Iterable[str]) -> "SignatureTable":
        """Zwraca tabelę ograniczoną do wskazanych identyfikatorów (z zachowaniem kolejności)."""

        ids = set(identifiers)
        return SignatureTable(entry for entry in self._entries if entry.identifier in ids)

    @property
    def max_end(self) -> int:
        """Minimalny rozmiar okna, w którym każda sygnatura może zostać dopasowana."""

        return max((entry.end for entry in self._entries), default=0)


def _pattern_to_bytes(pattern: str, encoding: str | None) -> bytes:
    if encoding is None or encoding.lower() == "ascii":
        return pattern.encode("ascii")
    if encoding.lower() == "utf-8":
        return pattern.encode("utf-8")
    if encoding.lower() == "hex":
        return bytes.fromhex(pattern)
    raise SignatureConfigError(f"Nieobsługiwane kodowanie wzorca: {encoding}")


def _load_raw_config(path: Path | None = None) -> Iterable[dict]:
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as handle:
            return json.load(handle)
    with resources.files(_DATA_PACKAGE).joinpath(_DEFAULT_FILE).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _parse_version(raw: dict | None) -> VersionExtractor | None:
    if raw is None:
        return None
    if raw["type"] not in ("uint16-le", "uint16-be", "ascii"):
        raise SignatureConfigError(f"Nieobsługiwany typ ekstraktora: {raw['type']}")
    return VersionExtractor(
        type=raw["type"],
        offset=raw["offset"],
        length=raw.get("length"),
    )


def _parse_signature(raw: dict) -> SignatureEntry:
    try:
        identifier = raw["id"]
        pattern = _pattern_to_bytes(raw["pattern"], raw.get("encoding"))
        offset = int(raw.get("offset", 0))
        entry = SignatureEntry(
            identifier=identifier,
            name=raw["name"],
            offset=offset,
            pattern=pattern,
            details=raw.get("details"),
            version=_parse_version(raw.get("version")),
        )
    except KeyError as exc:
        raise SignatureConfigError(f"Brak wymaganego pola sygnatury: {exc.args[0]}") from exc
    except (TypeError, ValueError) as exc:
        if isinstance(exc, SignatureConfigError):
            raise
        raise SignatureConfigError(f"Niepoprawna sygnatura {raw.get('id')!r}: {exc}") from exc

    if entry.offset < 0:
        raise SignatureConfigError(f"Ujemny offset sygnatury {identifier}: {entry.offset}")
    if not entry.pattern:
        raise SignatureConfigError(f"Pusty wzorzec sygnatury {identifier}")
    return entry


def load_signatures(path: Path | None = None) -> SignatureTable:
    """Wczytuje sygnatury z domyślnego zasobu lub wskazanego pliku."""

    raw_config = _load_raw_config(path)
    return SignatureTable(_parse_signature(entry) for entry in raw_config)


@lru_cache(maxsize=1)
def load_default_signatures() -> SignatureTable:
    """Wczytuje i cache'uje sygnatury z zasobu pakietu."""

    return load_signatures()


__all__ = [
    "SignatureConfigError",
    "SignatureEntry",
    "SignatureTable",
    "VersionExtractor",
    "load_default_signatures",
    "load_signatures",
]
