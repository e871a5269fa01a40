"""Sterownik wykorzystujący pytsk3 do pracy z obrazami dysków."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List, Sequence

import pytsk3
from structlog import get_logger

from encryption_detector.core.models import Volume
from .base import DriverCapabilities, DriverError


class _SplitImageInfo(pytsk3.Img_Info):
    """Obraz podzielony na segmenty (np. image.001, image.002) widziany jako ciągły."""

    def __init__(self, paths: Sequence[Path]) -> None:
        self._handles: List[BinaryIO] = []
        self._extents: List[tuple[int, int]] = []
        position = 0
        try:
            for path in paths:
                handle = open(path, "rb")
                self._handles.append(handle)
                size = handle.seek(0, 2)
                self._extents.append((position, size))
                position += size
        except OSError:
            self.close()
            raise
        self._size = position
        super().__init__(url="", type=pytsk3.TSK_IMG_TYPE_EXTERNAL)

    def close(self) -> None:
        for handle in self._handles:
            handle.close()
        self._handles = []

    def read(self, offset: int, size: int) -> bytes:
        chunks: List[bytes] = []
        remaining = size
        for handle, (start, length) in zip(self._handles, self._extents):
            if remaining <= 0:
                break
            end = start + length
            if offset >= end or offset + remaining <= start:
                continue
            local = max(offset - start, 0)
            to_read = min(length - local, remaining)
            handle.seek(local)
            chunk = handle.read(to_read)
            chunks.append(chunk)
            offset += len(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def get_size(self) -> int:
        return self._size


class TskImageDriver:
    """Sterownik bazujący na The Sleuth Kit (pytsk3) dla obrazów dysków."""

    name = "tsk-image"
    capabilities = DriverCapabilities(
        supports_volume_systems=True,
        supports_filesystem_probe=True,
        supported_formats=("raw", "img", "dd", "001"),
    )

    def __init__(self, image_paths: Iterable[Path]) -> None:
        self._logger = get_logger(__name__)
        self._image_paths: List[Path] = [Path(path) for path in image_paths]
        if not self._image_paths:
            raise DriverError("TskImageDriver wymaga co najmniej jednej ścieżki obrazu")
        self._img: pytsk3.Img_Info | None = None
        self._size = 0

    def __enter__(self) -> "TskImageDriver":
        self.open()
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()

    @property
    def size(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Implementacja ImageDriver
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Otwiera obraz (tylko do odczytu)."""

        self._logger.info("opening-image", paths=[str(path) for path in self._image_paths])
        try:
            if len(self._image_paths) == 1:
                self._img = pytsk3.Img_Info(str(self._image_paths[0]))
            else:
                self._img = _SplitImageInfo(self._image_paths)
            self._size = int(self._img.get_size())
        except (OSError, RuntimeError, IOError) as exc:
            self.close()
            raise DriverError(f"Nie udało się otworzyć obrazu dysku: {self._image_paths[0]}") from exc

    def close(self) -> None:
        if isinstance(self._img, _SplitImageInfo):
            self._img.close()
        self._img = None
        self._size = 0

    def list_volumes(self) -> Iterator[Volume]:
        img = self._require_image()
        try:
            volume_info = pytsk3.Volume_Info(img)
        except (IOError, RuntimeError):
            # Brak tablicy partycji: cały obraz traktujemy jako jeden wolumen.
            self._logger.debug("no-volume-system", size=self._size)
            yield Volume(identifier="image", offset=0, size=self._size, description="whole image")
            return

        block_size = volume_info.info.block_size
        for partition in volume_info:
            if partition.len <= 0 or not partition.flags & pytsk3.TSK_VS_PART_FLAG_ALLOC:
                continue

            yield Volume(
                identifier=f"partition-{partition.addr}",
                offset=partition.start * block_size,
                size=partition.len * block_size,
                description=_decode_desc(partition.desc),
            )

    def has_filesystem(self, volume: Volume) -> bool:
        img = self._require_image()
        try:
            pytsk3.FS_Info(img, offset=volume.offset)
        except (IOError, RuntimeError):
            return False
        return True

    def read(self, offset: int, size: int) -> bytes:
        img = self._require_image()
        if offset >= self._size or size <= 0:
            return b""
        size = min(size, self._size - offset)
        try:
            return img.read(offset, size)
        except (IOError, RuntimeError) as exc:
            raise DriverError(f"Nie udało się odczytać danych z obrazu (offset={offset})") from exc

    def _require_image(self) -> pytsk3.Img_Info:
        if self._img is None:
            raise DriverError("Obraz nie został otwarty")
        return self._img


def _decode_desc(raw: bytes | str) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


__all__ = ["TskImageDriver"]
