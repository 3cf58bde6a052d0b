import numpy as np
import pytest

from soundsignals.generators import waveform
from soundsignals.models import OvertoneSpec
from soundsignals.overtones import add_overtone, remove_overtone, set_overtone_gain, synthesize_overtones


@pytest.mark.parametrize("kind", ["sine", "square", "triangle", "sawtooth"])
def test_single_full_harmonic_matches_plain(kind):
	t = np.arange(2000)
	plain = waveform(kind, t, 44100, 220.0, 0.3)
	stacked = synthesize_overtones(kind, t, 44100, 220.0, 0.3, [100.0])
	np.testing.assert_array_equal(stacked, plain)


def test_no_overtones_is_silence():
	x = synthesize_overtones("sine", np.arange(100), 44100, 440.0, 0.5, [])
	assert np.all(x == 0.0)


def test_sine_stack_at_full_gain_bounded():
	x = synthesize_overtones("sine", np.arange(44100), 44100, 110.0, 0.5, [100.0] * 8)
	assert np.max(np.abs(x)) <= 1.0 + 1e-9


def test_gains_scale_each_harmonic_by_count():
	t = np.arange(500)
	x = synthesize_overtones("sine", t, 44100, 100.0, 0.5, [50.0, 0.0])
	expected = waveform("sine", t, 44100, 100.0) * 0.25
	np.testing.assert_allclose(x, expected)


def test_second_harmonic_doubles_frequency():
	t = np.arange(1000)
	x = synthesize_overtones("sawtooth", t, 44100, 100.0, 0.5, [0.0, 100.0])
	np.testing.assert_allclose(x, waveform("sawtooth", t, 44100, 200.0) / 2)


def test_add_remove_update_return_new_specs():
	spec = OvertoneSpec()
	one = add_overtone(spec)
	two = add_overtone(one, 40.0)
	assert spec.gains == []
	assert two.gains == [100.0, 40.0]
	changed = set_overtone_gain(two, 0, 10.0)
	assert changed.gains == [10.0, 40.0]
	assert two.gains == [100.0, 40.0]
	assert remove_overtone(changed).gains == [10.0]
	assert remove_overtone(OvertoneSpec()).gains == []


def test_set_gain_out_of_range_index():
	with pytest.raises(IndexError):
		set_overtone_gain(OvertoneSpec(gains=[100.0]), 1, 50.0)
