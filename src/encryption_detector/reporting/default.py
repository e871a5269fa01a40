"""Domyślna implementacja eksportu raportów (CSV/JSON)."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Dict, Iterator, Sequence

from encryption_detector.core.models import DetectionResult, ScanRecord
from .exporter import ExportFormat, ReportExporter

_CSV_FIELDS = [
    "volume_id",
    "offset",
    "size",
    "volume_description",
    "filesystem_recognized",
    "checked",
    "is_encrypted",
    "method",
    "signature",
    "entropy",
    "description",
]


class DefaultReportExporter(ReportExporter):
    """Eksporter zapisujący wyniki skanowania do plików CSV lub JSON."""

    def export(self, records: Sequence[ScanRecord], destination: Path, fmt: ExportFormat) -> Path:
        destination.parent.mkdir(parents=True, exist_ok=True)

        if fmt is ExportFormat.JSON:
            payload = self.build_json_payload(records)
            destination.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        elif fmt is ExportFormat.CSV:
            self._write_csv(records, destination)
        else:  # pragma: no cover - obsługa przyszłych formatów
            raise ValueError(f"Nieobsługiwany format eksportu: {fmt}")

        return destination

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def build_json_payload(self, records: Sequence[ScanRecord]) -> Dict[str, object]:
        return {
            "totals": {
                "volumes": len(records),
                "checked": sum(1 for record in records if not record.skipped),
                "encrypted": sum(1 for record in records if record.result and record.result.is_encrypted),
            },
            "volumes": [self._record_to_dict(record) for record in records],
        }

    def _record_to_dict(self, record: ScanRecord) -> Dict[str, object]:
        return {
            "identifier": record.volume.identifier,
            "offset": record.volume.offset,
            "size": record.volume.size,
            "description": record.volume.description,
            "filesystem_recognized": record.filesystem_recognized,
            "encryption": self._result_to_dict(record.result) if record.result else None,
        }

    @staticmethod
    def _result_to_dict(result: DetectionResult) -> Dict[str, object]:
        return {
            "is_encrypted": result.is_encrypted,
            "description": result.description,
            "method": result.method.value,
            "signature": result.signature,
            "entropy": round(result.entropy, 4) if result.entropy is not None else None,
            "bytes_read": result.bytes_read,
        }

    # ------------------------------------------------------------------
    # CSV
    # ------------------------------------------------------------------

    def _write_csv(self, records: Sequence[ScanRecord], destination: Path) -> None:
        with destination.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=_CSV_FIELDS)
            writer.writeheader()
            for row in self._iter_csv_rows(records):
                writer.writerow(row)

    def _iter_csv_rows(self, records: Sequence[ScanRecord]) -> Iterator[Dict[str, object]]:
        for record in records:
            row: Dict[str, object] = {
                "volume_id": record.volume.identifier,
                "offset": record.volume.offset,
                "size": record.volume.size,
                "volume_description": record.volume.description,
                "filesystem_recognized": record.filesystem_recognized,
                "checked": not record.skipped,
            }
            result = record.result
            if result is not None:
                row.update(
                    {
                        "is_encrypted": result.is_encrypted,
                        "method": result.method.value,
                        "signature": result.signature,
                        "entropy": f"{result.entropy:.4f}" if result.entropy is not None else None,
                        "description": result.description,
                    }
                )
            yield row


__all__ = ["DefaultReportExporter"]
