"""Testy interfejsu CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

from encryption_detector.cli import _build_parser, _run_scan
from encryption_detector.core.models import Volume
from encryption_detector.drivers import DriverError
from tests.synthetic_data import deterministic_random_bytes, inject_signature, zeros


class FakeDriver:
    """Sterownik w pamięci udający TskImageDriver."""

    def __init__(self, data: bytes, volumes: list[Volume] | None = None, *, fail_open: bool = False) -> None:
        self.data = data
        self.volumes = volumes or [Volume(identifier="image", offset=0, size=len(data))]
        self.fail_open = fail_open
        self.closed = False

    def open(self) -> None:
        if self.fail_open:
            raise DriverError("cannot open")

    def close(self) -> None:
        self.closed = True

    def read(self, offset: int, size: int) -> bytes:
        return self.data[offset : offset + size]

    def list_volumes(self):
        return iter(self.volumes)

    def has_filesystem(self, volume: Volume) -> bool:
        return False


def _image_file(tmp_path: Path) -> Path:
    path = tmp_path / "disk.dd"
    path.write_bytes(b"\x00" * 512)
    return path


def test_parser_defaults() -> None:
    args = _build_parser().parse_args(["disk.dd"])

    assert args.images == [Path("disk.dd")]
    assert args.offsets is None
    assert args.format == "json"
    assert args.output is None
    assert not args.force


def test_parser_accepts_repeated_offsets_and_tuning() -> None:
    args = _build_parser().parse_args(
        ["disk.001", "disk.002", "--offset", "0", "--offset", "1048576", "--threshold", "7.9", "--window-size", "4096"]
    )

    assert args.images == [Path("disk.001"), Path("disk.002")]
    assert args.offsets == [0, 1048576]
    assert args.threshold == 7.9
    assert args.window_size == 4096


def test_run_scan_requires_image() -> None:
    assert _run_scan(_build_parser().parse_args([])) == 1


def test_run_scan_nonexistent_image(tmp_path) -> None:
    args = _build_parser().parse_args([str(tmp_path / "missing.dd")])
    assert _run_scan(args) == 1


def test_run_scan_writes_json_report_for_all_volumes(tmp_path) -> None:
    data = inject_signature(zeros(8192), offset=3, signature=b"-FVE-FS-") + deterministic_random_bytes(8192, seed=3)
    volumes = [
        Volume(identifier="partition-2", offset=0, size=8192),
        Volume(identifier="partition-3", offset=8192, size=8192),
    ]
    driver = FakeDriver(data, volumes)
    output = tmp_path / "report.json"
    args = _build_parser().parse_args([str(_image_file(tmp_path)), "--window-size", "8192", "--output", str(output)])

    with patch("encryption_detector.cli.TskImageDriver", return_value=driver):
        assert _run_scan(args) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["totals"]["encrypted"] == 2
    assert payload["volumes"][0]["encryption"]["description"] == "BitLocker header detected"
    assert payload["volumes"][1]["encryption"]["method"] == "entropy"
    assert driver.closed


def test_run_scan_checks_explicit_offsets_only(tmp_path) -> None:
    driver = FakeDriver(zeros(4096))
    output = tmp_path / "report.csv"
    args = _build_parser().parse_args(
        [str(_image_file(tmp_path)), "--offset", "0", "--offset", "8192", "--format", "csv", "--output", str(output)]
    )

    with patch("encryption_detector.cli.TskImageDriver", return_value=driver):
        assert _run_scan(args) == 0

    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("offset-0,0,")
    assert "unable to read sample at offset 8192" in lines[2]


def test_run_scan_uses_custom_signature_file(tmp_path) -> None:
    signatures = tmp_path / "sigs.json"
    signatures.write_text(json.dumps([{"id": "acme", "name": "ACME Vault", "pattern": "ACME"}]), encoding="utf-8")
    driver = FakeDriver(b"ACME" + zeros(4092))
    output = tmp_path / "report.json"
    args = _build_parser().parse_args(
        [str(_image_file(tmp_path)), "--signatures", str(signatures), "--output", str(output)]
    )

    with patch("encryption_detector.cli.TskImageDriver", return_value=driver):
        assert _run_scan(args) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["volumes"][0]["encryption"]["description"] == "ACME Vault header detected"


def test_run_scan_rejects_invalid_signature_file(tmp_path) -> None:
    signatures = tmp_path / "sigs.json"
    signatures.write_text(json.dumps([{"id": "bad", "name": "Bad", "pattern": "XY", "encoding": "hex"}]), encoding="utf-8")
    args = _build_parser().parse_args([str(_image_file(tmp_path)), "--signatures", str(signatures)])

    with patch("encryption_detector.cli.TskImageDriver") as driver_cls:
        assert _run_scan(args) == 1

    driver_cls.assert_not_called()


def test_run_scan_reports_open_failure(tmp_path) -> None:
    driver = FakeDriver(b"", fail_open=True)
    args = _build_parser().parse_args([str(_image_file(tmp_path))])

    with patch("encryption_detector.cli.TskImageDriver", return_value=driver):
        assert _run_scan(args) == 1

    assert driver.closed
