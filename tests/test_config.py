import pytest

from encryption_detector.shared.config import DEFAULT_ENTROPY_THRESHOLD, DEFAULT_WINDOW_SIZE, DetectorConfig

_ENV_KEYS = (
    "ENCRYPTION_DETECTOR_WINDOW_SIZE",
    "ENCRYPTION_DETECTOR_ENTROPY_THRESHOLD",
    "ENCRYPTION_DETECTOR_DESCRIPTION_MAX_LENGTH",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    cfg = DetectorConfig()
    assert cfg.window_size == DEFAULT_WINDOW_SIZE == 65536
    assert cfg.entropy_threshold == DEFAULT_ENTROPY_THRESHOLD == 7.5
    assert cfg.description_max_length == 1024


def test_from_env_without_variables_returns_defaults():
    assert DetectorConfig.from_env() == DetectorConfig()


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("ENCRYPTION_DETECTOR_WINDOW_SIZE", "4096")
    monkeypatch.setenv("ENCRYPTION_DETECTOR_ENTROPY_THRESHOLD", "7.9")
    monkeypatch.setenv("ENCRYPTION_DETECTOR_DESCRIPTION_MAX_LENGTH", " ")

    cfg = DetectorConfig.from_env()
    assert cfg.window_size == 4096
    assert cfg.entropy_threshold == 7.9
    assert cfg.description_max_length == 1024


def test_from_env_rejects_malformed_value(monkeypatch):
    monkeypatch.setenv("ENCRYPTION_DETECTOR_WINDOW_SIZE", "big")

    with pytest.raises(ValueError, match="ENCRYPTION_DETECTOR_WINDOW_SIZE"):
        DetectorConfig.from_env()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"window_size": 0},
        {"entropy_threshold": 8.5},
        {"entropy_threshold": -1.0},
        {"description_max_length": 0},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        DetectorConfig(**kwargs)
