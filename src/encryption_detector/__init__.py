"""EncryptionDetector package initialisation."""

from encryption_detector.core.models import DetectionMethod, DetectionResult
from encryption_detector.crypto_detection.detector import EncryptionDetector, detect_encryption

__all__ = [
    "core",
    "drivers",
    "crypto_detection",
    "reporting",
    "shared",
    "DetectionMethod",
    "DetectionResult",
    "EncryptionDetector",
    "detect_encryption",
]
