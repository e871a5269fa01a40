"""Generowanie raportów z wyników skanowania."""

from .default import DefaultReportExporter
from .exporter import ExportFormat, ReportExporter

__all__ = ["ReportExporter", "ExportFormat", "DefaultReportExporter"]
