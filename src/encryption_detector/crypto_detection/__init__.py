"""Moduły odpowiedzialne za wykrywanie szyfrowania."""

from .detector import EncryptionDetector, detect_encryption
from .entropy import EntropyAnalyzer, shannon_entropy
from .sample import Sample, read_sample
from .signature_loader import (
	SignatureConfigError,
	SignatureEntry,
	SignatureTable,
	VersionExtractor,
	load_default_signatures,
	load_signatures,
)
from .signatures import SignatureMatcher

__all__ = [
	"EncryptionDetector",
	"detect_encryption",
	"EntropyAnalyzer",
	"shannon_entropy",
	"Sample",
	"read_sample",
	"SignatureConfigError",
	"SignatureEntry",
	"SignatureTable",
	"VersionExtractor",
	"SignatureMatcher",
	"load_signatures",
	"load_default_signatures",
]
