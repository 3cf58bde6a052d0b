from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .generators import Samples, TimeIndex, waveform
from .models import OvertoneSpec, WaveformKind


DEFAULT_OVERTONE_GAIN = 100.0


def synthesize_overtones(
	kind: WaveformKind,
	t: TimeIndex,
	sample_rate: int,
	fundamental_frequency: float,
	duty_cycle: float,
	gains: Sequence[float],
	rng: Optional[np.random.Generator] = None,
) -> Samples:
	"""Sum harmonics 1..N of `fundamental_frequency`, each scaled by gain/100/N.

	The 1/N factor is the only normalization applied. An empty gain list gives
	silence.
	"""
	t = np.asarray(t, dtype=np.float64)
	out = np.zeros(np.shape(t), dtype=np.float64)
	total = len(gains)
	for j, gain in enumerate(gains):
		harmonic = waveform(kind, t, sample_rate, fundamental_frequency * (j + 1), duty_cycle, rng)
		out += harmonic * ((gain / 100.0) / total)
	return out


def add_overtone(spec: OvertoneSpec, gain: float = DEFAULT_OVERTONE_GAIN) -> OvertoneSpec:
	return OvertoneSpec(gains=[*spec.gains, gain])


def remove_overtone(spec: OvertoneSpec) -> OvertoneSpec:
	return OvertoneSpec(gains=list(spec.gains[:-1]))


def set_overtone_gain(spec: OvertoneSpec, index: int, gain: float) -> OvertoneSpec:
	if not 0 <= index < len(spec.gains):
		raise IndexError(f"no overtone at index {index}")
	gains = list(spec.gains)
	gains[index] = gain
	return OvertoneSpec(gains=gains)
