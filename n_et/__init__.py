"""
n-et - exact pitch arithmetic for arbitrary equal temperaments.

Convert between MIDI note numbers, frequencies in Hz and Scientific Pitch
Notation names under any equal-tempered tuning: standard 12-ET at A4 = 440 Hz,
baroque pitch at 415 Hz, 19-ET, 24-ET quarter tones, or any positive number of
divisions per octave. Built for tuners, synthesizers and other tools that want
deterministic math rather than lookup tables.

- **EqualTemperament** - MIDI number ↔ frequency, frequency ↔ nearest note plus
  detune, and step ↔ frequency ratio conversions for any octave division.
- **TwelveToneET** - 12-ET with octave numbers, pitch classes and SPN names
  (``"A4"``, ``"C#-2"``, ``"E♭5"``).

Minimal example:

    ```python
    import n_et

    et12 = n_et.TwelveToneET()

    et12.midi_to_frequency(69)         # 440.0
    et12.spn_to_midi("Db4")            # 61
    et12.midi_to_spn(61)               # "C#4"
    et12.frequency_to_spn(445.0)       # ("A4", 0.1955...)

    et19 = n_et.EqualTemperament(notes_per_octave=19)
    et19.midi_to_frequency(69 + 19)    # 880.0
    ```

Every tuning is an immutable value and every operation is a pure function of
its arguments, so instances can be shared freely between threads.

Package-level exports: ``EqualTemperament``, ``TwelveToneET``,
``InvalidNoteError``, ``normalize_pitch_class`` and the constants from
``n_et.constants``.
"""

import n_et.constants
import n_et.equal_temperament
import n_et.twelve_tone


EqualTemperament = n_et.equal_temperament.EqualTemperament
TwelveToneET = n_et.twelve_tone.TwelveToneET
InvalidNoteError = n_et.twelve_tone.InvalidNoteError
normalize_pitch_class = n_et.twelve_tone.normalize_pitch_class

FREQUENCY_REFERENCE_DEFAULT = n_et.constants.FREQUENCY_REFERENCE_DEFAULT
MIDI_NUMBER_REFERENCE_DEFAULT = n_et.constants.MIDI_NUMBER_REFERENCE_DEFAULT
NOTES_PER_OCTAVE_DEFAULT = n_et.constants.NOTES_PER_OCTAVE_DEFAULT
PITCH_CLASS_TABLE = n_et.constants.PITCH_CLASS_TABLE
PITCH_CLASS_TRANSLATION_TABLE = n_et.constants.PITCH_CLASS_TRANSLATION_TABLE
