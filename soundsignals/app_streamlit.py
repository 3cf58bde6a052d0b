import logging
from typing import Any, Optional

import altair as alt
import numpy as np
import pandas as pd
import streamlit as st

from soundsignals.audio import preview_window, wav_bytes
from soundsignals.config import Settings, configure_logging, load_settings
from soundsignals.errors import SynthesisError
from soundsignals.models import MAX_FREQUENCY, ModulationSpec, OvertoneSpec, SampleBuffer, Strategy, SynthesisRequest
from soundsignals.overtones import add_overtone, remove_overtone, set_overtone_gain
from soundsignals.synthesis import synthesize


st.set_page_config(page_title="Sound Signals Generator", page_icon=None, layout="centered")

_LOG = logging.getLogger("soundsignals.app")

VARIANTS = {"Monophonic": "plain", "Polyphonic": "overtone", "Modulated": "modulated"}
WAVE_LABELS = {"Sine": "sine", "Sawtooth": "sawtooth", "Triangle": "triangle", "Square": "square", "Noise": "noise"}
MOD_LABELS = {"Amplitude": "amplitude", "Frequency": "frequency"}


def get_state() -> Any:
	if "settings" not in st.session_state:
		st.session_state.settings = load_settings()
		configure_logging(st.session_state.settings)
	if "overtones" not in st.session_state:
		st.session_state.overtones = OvertoneSpec()
	# None while idle, WAV bytes of the looping buffer while playing
	if "playing" not in st.session_state:
		st.session_state.playing = None
	if "preview" not in st.session_state:
		st.session_state.preview = None
	if "play_version" not in st.session_state:
		st.session_state.play_version = 0
	return st.session_state


def _frequency_input(label: str, default: float, key: str) -> float:
	return float(st.number_input(label, min_value=0.0, max_value=MAX_FREQUENCY, value=default, key=key))


def _duty_slider(key: str) -> float:
	return st.slider("Duty Cycle", min_value=0, max_value=100, value=50, key=key) / 100.0


def overtone_controls(state: Any) -> OvertoneSpec:
	st.markdown("**Overtone Volumes**")
	spec: OvertoneSpec = state.overtones
	for idx, gain in enumerate(spec.gains):
		value = st.slider(f"Overtone {idx + 1}", min_value=0, max_value=100, value=int(gain), key=f"overtone-{idx}")
		if value != gain:
			spec = set_overtone_gain(spec, idx, float(value))
	cols = st.columns(2)
	with cols[0]:
		if st.button("Add", use_container_width=True):
			spec = add_overtone(spec)
	with cols[1]:
		if st.button("Remove", use_container_width=True):
			spec = remove_overtone(spec)
	if spec != state.overtones:
		state.overtones = spec
		st.rerun()
	return spec


def build_request(state: Any, strategy: Strategy) -> SynthesisRequest:
	s: Settings = state.settings
	if strategy == "modulated":
		mode = MOD_LABELS[st.radio("Modulation", list(MOD_LABELS), horizontal=True)]
		mod_labels = [label for label in WAVE_LABELS if label != "Noise"]
		kind = WAVE_LABELS[st.radio("Modulating Wave Type", mod_labels)]
		freq = _frequency_input("Modulating Wave Frequency (Hz)", 2.0, "mod-freq")
		depth = st.slider("Modulating Wave Amplitude (%)", min_value=0, max_value=100, value=50) / 100.0
		duty = _duty_slider("mod-duty") if kind == "square" else 0.5
		modulation = ModulationSpec(mode=mode, waveform=kind, frequency=freq, depth=depth, duty_cycle=duty)
		return SynthesisRequest(sample_rate=s.sample_rate, strategy=strategy, modulation=modulation)

	kind = WAVE_LABELS[st.radio("Wave Type", list(WAVE_LABELS))]
	duty = _duty_slider(f"{strategy}-duty") if kind == "square" else 0.5
	freq = _frequency_input("Frequency (Hz)", 440.0, f"{strategy}-freq")
	overtones = overtone_controls(state) if strategy == "overtone" else OvertoneSpec()
	return SynthesisRequest(
		sample_rate=s.sample_rate,
		strategy=strategy,
		waveform=kind,
		frequency=freq,
		duty_cycle=duty,
		overtones=overtones,
	)


def play(state: Any, request: SynthesisRequest) -> Optional[SampleBuffer]:
	# Restart: whatever was looping is dropped before the new buffer starts
	stop(state)
	try:
		x = synthesize(request)
	except SynthesisError as exc:
		_LOG.info("Refusing to play: %s", exc)
		st.error(f"Cannot play: {exc}")
		return None
	state.playing = wav_bytes(x, request.sample_rate)
	state.preview = preview_window(x, request.sample_rate, state.settings.preview_ms)
	state.play_version += 1
	_LOG.info("Playing %s buffer (%d samples)", request.strategy, len(x))
	return x


def stop(state: Any) -> None:
	if state.playing is not None:
		_LOG.info("Stopped playback")
	state.playing = None
	state.preview = None


def preview_chart(x: SampleBuffer, sample_rate: int) -> alt.Chart:
	df = pd.DataFrame({"ms": np.arange(len(x)) * 1000.0 / sample_rate, "amplitude": x})
	return alt.Chart(df).mark_line().encode(
		x=alt.X("ms:Q", title="Time (ms)"),
		y=alt.Y("amplitude:Q", scale=alt.Scale(domain=[-1.5, 1.5])),
	).properties(height=200)


def main() -> None:
	state = get_state()

	st.title("Sound Signals Generator")
	variant = st.radio("Variant", list(VARIANTS), horizontal=True, label_visibility="collapsed")
	strategy: Strategy = VARIANTS[variant]  # type: ignore[assignment]

	request = build_request(state, strategy)

	if state.playing is None:
		if st.button("Play", use_container_width=True):
			if play(state, request) is not None:
				st.rerun()
	else:
		if st.button("Stop", use_container_width=True):
			stop(state)
			st.rerun()

	# Parameter edits while playing do not touch the looping buffer
	player = st.empty()
	if state.playing is not None:
		player.audio(state.playing, format="audio/wav", autoplay=True, loop=True)
		if state.preview is not None:
			st.altair_chart(preview_chart(state.preview, state.settings.sample_rate), use_container_width=True)


if __name__ == "__main__":
	main()
