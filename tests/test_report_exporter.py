"""Testy eksportu raportów."""

from __future__ import annotations

import csv
import json

from encryption_detector.core.models import DetectionMethod, DetectionResult, ScanRecord, Volume
from encryption_detector.reporting import DefaultReportExporter, ExportFormat


def _records() -> list[ScanRecord]:
    return [
        ScanRecord(
            volume=Volume(identifier="partition-2", offset=1048576, size=4096, description="Linux (0x83)"),
            filesystem_recognized=False,
            result=DetectionResult(
                is_encrypted=True,
                description="LUKS header detected (version 2)",
                method=DetectionMethod.SIGNATURE,
                signature="luks",
                bytes_read=4096,
            ),
        ),
        ScanRecord(
            volume=Volume(identifier="partition-3", offset=2097152, size=4096),
            filesystem_recognized=False,
            result=DetectionResult(
                is_encrypted=False,
                description="entropy 3.21 does not exceed threshold 7.50",
                entropy=3.2123456,
                bytes_read=4096,
            ),
        ),
        ScanRecord(volume=Volume(identifier="partition-1", offset=512, size=4096), filesystem_recognized=True),
    ]


def test_export_json(tmp_path) -> None:
    destination = tmp_path / "out" / "report.json"

    DefaultReportExporter().export(_records(), destination, ExportFormat.JSON)

    payload = json.loads(destination.read_text(encoding="utf-8"))
    assert payload["totals"] == {"volumes": 3, "checked": 2, "encrypted": 1}
    first = payload["volumes"][0]
    assert first["identifier"] == "partition-2"
    assert first["encryption"]["method"] == "signature"
    assert first["encryption"]["signature"] == "luks"
    assert payload["volumes"][1]["encryption"]["entropy"] == 3.2123
    assert payload["volumes"][2]["encryption"] is None


def test_export_csv(tmp_path) -> None:
    destination = tmp_path / "report.csv"

    DefaultReportExporter().export(_records(), destination, ExportFormat.CSV)

    with destination.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 3
    assert rows[0]["is_encrypted"] == "True"
    assert rows[0]["description"] == "LUKS header detected (version 2)"
    assert rows[1]["entropy"] == "3.2123"
    assert rows[2]["checked"] == "False"
    assert rows[2]["method"] == ""
