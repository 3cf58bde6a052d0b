from __future__ import annotations

import numpy as np

from .errors import ConfigurationError
from .generators import Samples, TimeIndex, phase, waveform
from .models import CARRIER_FREQUENCY, ModulationMode, WaveformKind


# depth=1 swings the carrier between 0.5 and 1.5 rather than silencing it
DEPTH_SCALE = 0.5


def modulate(
	mode: ModulationMode,
	t: TimeIndex,
	sample_rate: int,
	modulating_waveform: WaveformKind,
	modulating_frequency: float,
	depth: float,
	duty_cycle: float = 0.5,
	carrier_frequency: float = CARRIER_FREQUENCY,
) -> Samples:
	"""Combine a sine carrier with a modulating waveform.

	"amplitude" scales the carrier by 1 + m * depth * 0.5. "frequency" adds
	m * depth * carrier_frequency * 0.5 straight onto the carrier phase; the
	offset is not integrated over time, so this is phase modulation standing
	in for FM.
	"""
	if modulating_waveform == "noise":
		raise ConfigurationError("noise cannot be used as a modulating waveform")
	m = waveform(modulating_waveform, t, sample_rate, modulating_frequency, duty_cycle)
	carrier_phase = phase(t, sample_rate, carrier_frequency)
	if mode == "amplitude":
		return np.sin(carrier_phase) * (1.0 + m * depth * DEPTH_SCALE)
	if mode == "frequency":
		theta = m * depth * carrier_frequency * DEPTH_SCALE
		return np.sin(carrier_phase + theta)
	raise ConfigurationError(f"unknown modulation mode {mode!r}")
