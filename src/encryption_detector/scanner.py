"""Przegląd wolumenów obrazu i detekcja szyfrowania tam, gdzie nie rozpoznano FS."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

import structlog
from structlog.stdlib import BoundLogger

from encryption_detector.core.models import ScanRecord, Volume
from encryption_detector.crypto_detection import EncryptionDetector, detect_encryption
from encryption_detector.drivers import ImageDriver


@dataclass
class VolumeScanner:
    """Uruchamia detektor dla wolumenów bez rozpoznanego systemu plików.

    Przy `force=True` detekcja obejmuje również wolumeny z rozpoznanym FS.
    """

    driver: ImageDriver
    detector: EncryptionDetector = field(default_factory=EncryptionDetector)
    force: bool = False
    logger: BoundLogger = field(default_factory=lambda: structlog.get_logger(__name__))

    def scan(self, volumes: Iterable[Volume] | None = None) -> Iterator[ScanRecord]:
        for volume in self.driver.list_volumes() if volumes is None else volumes:
            yield self.scan_volume(volume)

    def scan_volume(self, volume: Volume) -> ScanRecord:
        recognized = self.driver.has_filesystem(volume)
        if recognized and not self.force:
            self.logger.info("volume-skipped", volume=volume.identifier, reason="filesystem-recognized")
            return ScanRecord(volume=volume, filesystem_recognized=True)

        result = detect_encryption(self.driver, volume.offset, detector=self.detector)
        self.logger.info(
            "volume-checked",
            volume=volume.identifier,
            offset=volume.offset,
            encrypted=result.is_encrypted,
            method=result.method.value,
        )
        return ScanRecord(volume=volume, filesystem_recognized=recognized, result=result)

    def scan_offsets(self, offsets: Iterable[int]) -> Iterator[ScanRecord]:
        """Sprawdza dowolne offsety bez sondowania systemu plików."""

        for offset in offsets:
            volume = Volume(identifier=f"offset-{offset}", offset=offset, size=0)
            result = detect_encryption(self.driver, offset, detector=self.detector)
            yield ScanRecord(volume=volume, filesystem_recognized=False, result=result)


__all__ = ["VolumeScanner"]
