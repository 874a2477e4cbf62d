import pytest

from config import Config


def test_defaults(monkeypatch):
    for name in ("DEBUG_LOGGING", "LEG_CONFIDENCE", "TEAM_MATCH_THRESHOLD", "STRIP_NOISE_LINES"):
        monkeypatch.delenv(name, raising=False)
    config = Config.from_env()
    assert config == Config()
    assert config.leg_confidence == 0.6
    assert config.team_match_threshold == 80.0
    assert config.debug_logging is False
    assert config.strip_noise_lines is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DEBUG_LOGGING", "TRUE")
    monkeypatch.setenv("LEG_CONFIDENCE", "0.75")
    monkeypatch.setenv("TEAM_MATCH_THRESHOLD", "90")
    monkeypatch.setenv("STRIP_NOISE_LINES", "true")
    config = Config.from_env()
    assert config.debug_logging is True
    assert config.leg_confidence == 0.75
    assert config.team_match_threshold == 90.0
    assert config.strip_noise_lines is True


def test_bad_number_raises(monkeypatch):
    monkeypatch.setenv("LEG_CONFIDENCE", "high")
    with pytest.raises(ValueError):
        Config.from_env()
