from __future__ import annotations

from typing import List, Literal, Tuple

import numpy as np
import numpy.typing as npt
from pydantic import BaseModel, ConfigDict, Field


WaveformKind = Literal["sine", "square", "triangle", "sawtooth", "noise"]
ModulationMode = Literal["amplitude", "frequency"]
Strategy = Literal["plain", "overtone", "modulated"]

SampleBuffer = npt.NDArray[np.float32]

WAVEFORM_KINDS: Tuple[WaveformKind, ...] = ("sine", "square", "triangle", "sawtooth", "noise")

CARRIER_FREQUENCY = 440.0
DURATION_SECONDS = 1
MAX_FREQUENCY = 10000.0


class OvertoneSpec(BaseModel):
	model_config = ConfigDict(frozen=True)

	# gains[0] is the fundamental, gains[i] is harmonic i + 1 (percent)
	gains: List[float] = Field(default_factory=list)


class ModulationSpec(BaseModel):
	model_config = ConfigDict(frozen=True)

	mode: ModulationMode = Field(default="amplitude")
	waveform: WaveformKind = Field(default="sine")
	frequency: float = Field(default=2.0)
	depth: float = Field(default=0.5)
	duty_cycle: float = Field(default=0.5)
	carrier_frequency: float = Field(default=CARRIER_FREQUENCY)


class SynthesisRequest(BaseModel):
	"""Everything needed to render one buffer for a single play action.

	Ranges are not enforced here; `synthesis.synthesize` checks the fields the
	selected strategy actually reads and reports them as `ValidationError`.
	"""

	model_config = ConfigDict(frozen=True)

	sample_rate: int
	strategy: Strategy = Field(default="plain")
	waveform: WaveformKind = Field(default="sine")
	frequency: float = Field(default=440.0)
	duty_cycle: float = Field(default=0.5)
	duration_seconds: int = Field(default=DURATION_SECONDS)
	overtones: OvertoneSpec = Field(default_factory=OvertoneSpec)
	modulation: ModulationSpec = Field(default_factory=ModulationSpec)
