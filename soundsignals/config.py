from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field


ENV_PREFIX = "SOUNDSIGNALS_"


class Settings(BaseModel):
	sample_rate: int = Field(default=44100, ge=8000, le=192000)
	log_level: str = Field(default="INFO")
	preview_ms: float = Field(default=20.0, ge=1.0, le=1000.0)


def _raw_from_env(environ: Mapping[str, str]) -> Dict[str, Any]:
	raw: Dict[str, Any] = {}
	for name in Settings.model_fields:
		value = environ.get(ENV_PREFIX + name.upper())
		if value is not None and value != "":
			raw[name] = value
	# Plain LOG_LEVEL is honoured when the prefixed variable is absent
	if "log_level" not in raw and environ.get("LOG_LEVEL"):
		raw["log_level"] = environ["LOG_LEVEL"]
	return raw


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
	env = os.environ if environ is None else environ
	return Settings.model_validate(_raw_from_env(env))


def configure_logging(settings: Optional[Settings] = None) -> None:
	s = settings or load_settings()
	logging.basicConfig(
		level=s.log_level.upper(),
		format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
	)
