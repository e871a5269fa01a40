"""Interfejs wiersza poleceń do sprawdzania szyfrowania regionów obrazu."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import replace
from pathlib import Path

import structlog

from encryption_detector.crypto_detection import EncryptionDetector, SignatureConfigError, load_signatures
from encryption_detector.drivers import DriverError, TskImageDriver
from encryption_detector.reporting import DefaultReportExporter, ExportFormat
from encryption_detector.scanner import VolumeScanner
from encryption_detector.shared import DetectorConfig, configure_logging, write_error_report


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="encryption-detector",
        description="Sprawdza, czy regiony obrazu dysku są zaszyfrowane (sygnatury + entropia).",
    )
    parser.add_argument(
        "images",
        type=Path,
        nargs="*",
        help="Ścieżka do obrazu dysku (kilka ścieżek = kolejne segmenty obrazu dzielonego)",
    )
    parser.add_argument(
        "--offset",
        type=int,
        action="append",
        dest="offsets",
        help="Offset w bajtach do sprawdzenia (można podać wielokrotnie)",
    )
    parser.add_argument(
        "--all-volumes",
        action="store_true",
        help="Sprawdza wszystkie wolumeny z tablicy partycji (domyślnie, gdy brak --offset)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Sprawdza również wolumeny z rozpoznanym systemem plików",
    )
    parser.add_argument(
        "--window-size",
        type=int,
        help="Rozmiar próbki w bajtach (domyślnie: 65536)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Próg entropii w bitach/bajt (domyślnie: 7.5)",
    )
    parser.add_argument(
        "--signatures",
        type=Path,
        help="Plik JSON z własną tabelą sygnatur",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Ścieżka do pliku wynikowego (domyślnie: JSON na standardowe wyjście)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Format raportu (domyślnie: json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Wyświetla szczegółowe logi",
    )
    return parser


def _build_detector(args: Namespace) -> EncryptionDetector:
    config = DetectorConfig.from_env()
    overrides = {}
    if args.window_size is not None:
        overrides["window_size"] = args.window_size
    if args.threshold is not None:
        overrides["entropy_threshold"] = args.threshold
    if overrides:
        config = replace(config, **overrides)

    signatures = load_signatures(args.signatures) if args.signatures else None
    return EncryptionDetector(config=config, signatures=signatures)


def _run_scan(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    if not args.images:
        logger.error("image-not-provided")
        return 1
    missing = [path for path in args.images if not path.exists()]
    if missing:
        logger.error("image-not-found", path=str(missing[0]))
        return 1
    if TskImageDriver is None:
        logger.error("pytsk3-unavailable")
        return 1

    try:
        detector = _build_detector(args)
    except (ValueError, OSError) as exc:
        # SignatureConfigError dziedziczy po ValueError.
        logger.error(
            "invalid-configuration",
            error=str(exc),
            signatures=isinstance(exc, SignatureConfigError),
        )
        return 1

    driver = TskImageDriver(args.images)
    try:
        driver.open()
        scanner = VolumeScanner(driver=driver, detector=detector, force=args.force)
        if args.offsets and not args.all_volumes:
            records = list(scanner.scan_offsets(args.offsets))
        else:
            records = list(scanner.scan())
            if args.offsets:
                records.extend(scanner.scan_offsets(args.offsets))

        exporter = DefaultReportExporter()
        fmt = ExportFormat.JSON if args.format == "json" else ExportFormat.CSV
        if args.output is not None:
            output_path = exporter.export(records, args.output, fmt)
            logger.info("report-written", report=str(output_path))
        else:
            print(json.dumps(exporter.build_json_payload(records), indent=2, ensure_ascii=False))

        logger.info(
            "scan-complete",
            volumes=len(records),
            encrypted=sum(1 for record in records if record.result and record.result.is_encrypted),
        )
        return 0

    except DriverError as exc:
        logger.error("image-open-failed", error=str(exc))
        return 1
    except Exception as exc:  # pragma: no cover - obsługa błędów środowiskowych
        logger.exception("scan-failed", error=str(exc))
        report = write_error_report(exc, where="cli", context={"images": [str(p) for p in args.images]})
        logger.error("error-report-written", path=str(report.path))
        return 1
    finally:
        driver.close()


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=10 if args.verbose else 20)
    return _run_scan(args)


if __name__ == "__main__":
    sys.exit(main())
