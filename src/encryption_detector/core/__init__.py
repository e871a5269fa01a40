"""Modele domenowe detektora szyfrowania."""

from . import models
from .models import DESCRIPTION_MAX_LENGTH, DetectionMethod, DetectionResult, ScanRecord, Volume

__all__ = [
	"models",
	"DESCRIPTION_MAX_LENGTH",
	"DetectionMethod",
	"DetectionResult",
	"ScanRecord",
	"Volume",
]
