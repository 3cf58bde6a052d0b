import io

import numpy as np
import numpy.typing as npt
import soundfile as sf

from .models import SampleBuffer


def wav_bytes(x: SampleBuffer, sample_rate: int) -> bytes:
	"""Encode a buffer as 32-bit float WAV so samples beyond [-1, 1] survive."""
	buf = io.BytesIO()
	sf.write(buf, x, sample_rate, format="WAV", subtype="FLOAT")
	return buf.getvalue()


def preview_window(x: SampleBuffer, sample_rate: int, ms: float) -> npt.NDArray[np.float32]:
	n = max(1, int(sample_rate * ms / 1000.0))
	return x[:n].copy()
