from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .errors import ConfigurationError, SynthesisError, ValidationError
from .generators import Samples, waveform
from .modulation import modulate
from .models import CARRIER_FREQUENCY, DURATION_SECONDS, MAX_FREQUENCY, SampleBuffer, SynthesisRequest
from .overtones import synthesize_overtones


_LOG = logging.getLogger("soundsignals.synthesis")


def _check_frequency(field: str, value: float) -> None:
	if not math.isfinite(value):
		raise ValidationError(field, "must be a finite number")
	if value <= 0.0:
		raise ValidationError(field, "must be greater than 0 Hz")
	if value > MAX_FREQUENCY:
		raise ValidationError(field, f"must be at most {MAX_FREQUENCY:g} Hz")


def _check_duty_cycle(field: str, value: float) -> None:
	if not math.isfinite(value) or not 0.0 < value <= 1.0:
		raise ValidationError(field, "must be in (0, 1]")


def validate(request: SynthesisRequest) -> None:
	"""Reject a request before any sample is computed.

	Only the fields read by `request.strategy` are checked, so e.g. a stale
	overtone list does not block a plain render.
	"""
	if isinstance(request.sample_rate, bool) or request.sample_rate <= 0:
		raise ValidationError("sample_rate", "must be a positive integer")
	if request.duration_seconds != DURATION_SECONDS:
		raise ValidationError("duration_seconds", f"is fixed at {DURATION_SECONDS}")

	if request.strategy == "plain" or request.strategy == "overtone":
		_check_frequency("frequency", request.frequency)
		_check_duty_cycle("duty_cycle", request.duty_cycle)
		if request.strategy == "overtone":
			for idx, gain in enumerate(request.overtones.gains):
				if not math.isfinite(gain) or not 0.0 <= gain <= 100.0:
					raise ValidationError(f"overtones.gains[{idx}]", "must be in [0, 100]")
	elif request.strategy == "modulated":
		mod = request.modulation
		if mod.waveform == "noise":
			raise ConfigurationError("noise cannot be used as a modulating waveform")
		if mod.carrier_frequency != CARRIER_FREQUENCY:
			raise ValidationError("modulation.carrier_frequency", f"is fixed at {CARRIER_FREQUENCY:g} Hz")
		_check_frequency("modulation.frequency", mod.frequency)
		_check_duty_cycle("modulation.duty_cycle", mod.duty_cycle)
		if not math.isfinite(mod.depth) or not 0.0 <= mod.depth <= 1.0:
			raise ValidationError("modulation.depth", "must be in [0, 1]")
	else:
		raise ConfigurationError(f"unknown strategy {request.strategy!r}")


def _render(request: SynthesisRequest, t: Samples, rng: Optional[np.random.Generator]) -> Samples:
	if request.strategy == "plain":
		return waveform(request.waveform, t, request.sample_rate, request.frequency, request.duty_cycle, rng)
	if request.strategy == "overtone":
		return synthesize_overtones(
			request.waveform,
			t,
			request.sample_rate,
			request.frequency,
			request.duty_cycle,
			request.overtones.gains,
			rng,
		)
	mod = request.modulation
	return modulate(
		mod.mode,
		t,
		request.sample_rate,
		mod.waveform,
		mod.frequency,
		mod.depth,
		mod.duty_cycle,
		mod.carrier_frequency,
	)


def synthesize(request: SynthesisRequest, rng: Optional[np.random.Generator] = None) -> SampleBuffer:
	"""Render one second of audio for `request` as a fresh float32 array.

	Raises ValidationError or ConfigurationError without computing anything
	when the request is out of range. Samples outside [-1, 1] produced by
	overtone stacking are returned unchanged.
	"""
	try:
		validate(request)
	except SynthesisError as exc:
		_LOG.warning("Rejected %s synthesis request: %s", request.strategy, exc)
		raise

	n = request.sample_rate * request.duration_seconds
	t = np.arange(n, dtype=np.float64)
	x = _render(request, t, rng).astype(np.float32)
	_LOG.debug(
		"Synthesized %d samples (%s, %s) at %d Hz",
		n,
		request.strategy,
		request.modulation.mode if request.strategy == "modulated" else request.waveform,
		request.sample_rate,
	)
	return x
