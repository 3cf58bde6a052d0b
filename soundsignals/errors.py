class SynthesisError(Exception):
	pass


class ValidationError(SynthesisError):
	"""A request parameter is outside the range the engine accepts."""

	def __init__(self, field: str, reason: str) -> None:
		super().__init__(f"{field}: {reason}")
		self.field = field
		self.reason = reason


class ConfigurationError(SynthesisError):
	"""An invalid waveform/mode combination, e.g. noise used as a modulator."""
