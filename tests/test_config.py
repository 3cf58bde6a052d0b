import logging

import pydantic
import pytest

from soundsignals.config import Settings, configure_logging, load_settings


def test_defaults_without_env():
	s = load_settings({})
	assert s == Settings()
	assert s.sample_rate == 44100
	assert s.log_level == "INFO"


def test_env_overrides():
	s = load_settings({"SOUNDSIGNALS_SAMPLE_RATE": "48000", "SOUNDSIGNALS_LOG_LEVEL": "debug", "SOUNDSIGNALS_PREVIEW_MS": "5"})
	assert s.sample_rate == 48000
	assert s.log_level == "debug"
	assert s.preview_ms == 5.0


def test_plain_log_level_fallback():
	assert load_settings({"LOG_LEVEL": "WARNING"}).log_level == "WARNING"
	assert load_settings({"LOG_LEVEL": "WARNING", "SOUNDSIGNALS_LOG_LEVEL": "ERROR"}).log_level == "ERROR"


def test_out_of_range_sample_rate_rejected():
	with pytest.raises(pydantic.ValidationError):
		load_settings({"SOUNDSIGNALS_SAMPLE_RATE": "100"})


def test_configure_logging_sets_level(monkeypatch):
	calls = {}
	monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
	configure_logging(Settings(log_level="debug"))
	assert calls["level"] == "DEBUG"
