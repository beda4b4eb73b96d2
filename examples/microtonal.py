import logging

import n_et

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Compare how closely different octave divisions approximate a just perfect fifth (3:2).
JUST_FIFTH = 3 / 2

for notes_per_octave in (5, 7, 12, 19, 24, 31, 53):

	et = n_et.EqualTemperament(notes_per_octave=notes_per_octave)

	steps = et.quantize(et.frequency_ratio_to_semitones(JUST_FIFTH))
	tempered = et.semitones_to_frequency_ratio(steps)

	# Error in 12-ET cents, so every division is measured on the same scale.
	error = n_et.TwelveToneET().frequency_ratio_to_semitones(tempered / JUST_FIFTH) * 100

	logger.info(f"{notes_per_octave:>3}-ET  fifth = {steps:>2} steps  ratio {tempered:.5f}  error {error:+6.2f} cents")

# 19-ET anchored at A4 = 440 Hz: one octave spans MIDI 69 to 88.
et19 = n_et.EqualTemperament(notes_per_octave=19)

for midi_number in range(69, 69 + 19 + 1):
	logger.info(f"19-ET step {midi_number - 69:>2}: {et19.midi_to_frequency(midi_number):8.3f} Hz")
