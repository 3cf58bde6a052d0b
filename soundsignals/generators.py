from __future__ import annotations

from typing import Callable, Dict, Optional, Union

import numpy as np
import numpy.typing as npt

from .errors import ConfigurationError
from .models import WaveformKind


Samples = npt.NDArray[np.float64]
TimeIndex = Union[int, npt.NDArray[np.float64]]
WaveFn = Callable[[Samples, int, float, float, Optional[np.random.Generator]], Samples]


def phase(t: TimeIndex, sample_rate: int, frequency: float) -> Samples:
	"""Angle in radians of a sine at `frequency` after `t` samples."""
	return np.asarray(2.0 * np.pi * frequency * np.asarray(t, dtype=np.float64) / sample_rate)


def _cycle_fraction(t: Samples, sample_rate: int, frequency: float) -> Samples:
	period = sample_rate / frequency
	return np.mod(t, period) / period


def _sine(t: Samples, sample_rate: int, frequency: float, duty_cycle: float, rng: Optional[np.random.Generator]) -> Samples:
	return np.sin(phase(t, sample_rate, frequency))


def _square(t: Samples, sample_rate: int, frequency: float, duty_cycle: float, rng: Optional[np.random.Generator]) -> Samples:
	period = sample_rate / frequency
	return np.where(np.mod(t, period) < period * duty_cycle, 1.0, -1.0)


def _triangle(t: Samples, sample_rate: int, frequency: float, duty_cycle: float, rng: Optional[np.random.Generator]) -> Samples:
	# -1 at the start of each cycle, 1 at half period
	v = _cycle_fraction(t, sample_rate, frequency) * 4.0 - 1.0
	return np.where(v <= 1.0, v, 2.0 - v)


def _sawtooth(t: Samples, sample_rate: int, frequency: float, duty_cycle: float, rng: Optional[np.random.Generator]) -> Samples:
	return _cycle_fraction(t, sample_rate, frequency) * 2.0 - 1.0


def _noise(t: Samples, sample_rate: int, frequency: float, duty_cycle: float, rng: Optional[np.random.Generator]) -> Samples:
	generator = rng if rng is not None else np.random.default_rng()
	return generator.uniform(-1.0, 1.0, size=np.shape(t))


WAVEFORMS: Dict[str, WaveFn] = {
	"sine": _sine,
	"square": _square,
	"triangle": _triangle,
	"sawtooth": _sawtooth,
	"noise": _noise,
}


def waveform(
	kind: WaveformKind,
	t: TimeIndex,
	sample_rate: int,
	frequency: float,
	duty_cycle: float = 0.5,
	rng: Optional[np.random.Generator] = None,
) -> Samples:
	"""Evaluate a base waveform at every index in `t`.

	Args:
		kind: One of {"sine","square","triangle","sawtooth","noise"}
		t: Sample index or array of sample indices
		sample_rate: Samples per second
		frequency: Frequency in Hz
		duty_cycle: High fraction of each period, only read by "square"
		rng: Source for "noise"; a fresh generator is created when omitted
	"""
	fn = WAVEFORMS.get(kind)
	if fn is None:
		raise ConfigurationError(f"unknown waveform {kind!r}")
	return np.asarray(fn(np.asarray(t, dtype=np.float64), sample_rate, frequency, duty_cycle, rng), dtype=np.float64)


def generate(
	kind: WaveformKind,
	time_index: int,
	sample_rate: int,
	frequency: float,
	duty_cycle: float = 0.5,
	rng: Optional[np.random.Generator] = None,
) -> float:
	return float(waveform(kind, time_index, sample_rate, frequency, duty_cycle, rng))
