"""Tuning defaults and 12-tone pitch class tables.

Module-level constants:
- `FREQUENCY_REFERENCE_DEFAULT`: Frequency of the reference note in Hz (A4 = 440 Hz)
- `MIDI_NUMBER_REFERENCE_DEFAULT`: MIDI number of the reference note (A4 = 69)
- `NOTES_PER_OCTAVE_DEFAULT`: Equal divisions of the octave (12)
- `PITCH_CLASS_TABLE`: 12-ET chromatic note names using sharps, indexed 0-11 from C
- `PITCH_CLASS_TRANSLATION_TABLE`: Flat spellings mapped to their sharp equivalents
- `ACCIDENTAL_GLYPHS`: Unicode accidentals mapped to their ASCII spelling

All tables are read-only and shared by every tuning instance.
"""

import types
import typing


FREQUENCY_REFERENCE_DEFAULT: float = 440.0
MIDI_NUMBER_REFERENCE_DEFAULT: int = 69
NOTES_PER_OCTAVE_DEFAULT: int = 12

PITCH_CLASS_TABLE: typing.Tuple[str, ...] = (
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
)

PITCH_CLASS_TRANSLATION_TABLE: typing.Mapping[str, str] = types.MappingProxyType({
	"Db": "C#",
	"Eb": "D#",
	"Gb": "F#",
	"Ab": "G#",
	"Bb": "A#",
})

ACCIDENTAL_GLYPHS: typing.Mapping[str, str] = types.MappingProxyType({
	"♯": "#",
	"♭": "b",
})
