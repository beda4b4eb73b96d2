"""Twelve-tone equal temperament with Scientific Pitch Notation names.

``TwelveToneET`` wraps a 12-division ``EqualTemperament`` anchored at A4 = MIDI 69
and adds a naming layer: octave numbers, pitch classes and SPN strings such as
``"A4"``, ``"C#-2"`` or ``"E♭5"``. Convention: **C4 = 60** (Middle C), so the
octave number changes between B and C.

Names are always produced with sharps. Flats and the Unicode glyphs ♯/♭ are
accepted on input and normalized to the sharp spelling:

	```python
	et12 = TwelveToneET()
	et12.midi_to_spn(69)         # "A4"
	et12.spn_to_midi("Db4")      # 61, same as "C#4"
	et12.frequency_to_spn(445)   # ("A4", 0.1955...)
	```

Fractional MIDI numbers are quantized before the octave and pitch class are
taken, so a name always agrees with ``midi_to_frequency`` for the same input.
"""

import dataclasses
import logging
import re
import typing

import n_et.constants
import n_et.equal_temperament


logger = logging.getLogger(__name__)

_SPN_PATTERN = re.compile(r"(?P<pitch_class>\D*?)(?P<octave>-?\d+)")


class InvalidNoteError (ValueError):

	"""Raised when a note name cannot be parsed as Scientific Pitch Notation."""


def normalize_pitch_class (pitch_class: str) -> str:

	"""Return the sharp spelling of a pitch class name.

	Unicode accidentals are replaced with ``#`` and ``b`` and the five flat
	spellings are translated to sharps. Anything else, including names that
	are already sharp or not pitch classes at all, passes through unchanged.

	Example:
		```python
		normalize_pitch_class("Bb")   # → "A#"
		normalize_pitch_class("E♭")   # → "D#"
		normalize_pitch_class("F♯")   # → "F#"
		normalize_pitch_class("G")    # → "G"
		```
	"""

	for glyph, ascii_spelling in n_et.constants.ACCIDENTAL_GLYPHS.items():
		pitch_class = pitch_class.replace(glyph, ascii_spelling)

	return n_et.constants.PITCH_CLASS_TRANSLATION_TABLE.get(pitch_class, pitch_class)


def pitch_class_index (pitch_class: str) -> int:

	"""Return the position (0–11) of a pitch class name in ``PITCH_CLASS_TABLE``.

	Raises:
		InvalidNoteError: If the name is not a pitch class after normalization.
	"""

	normalized = normalize_pitch_class(pitch_class)

	if normalized not in n_et.constants.PITCH_CLASS_TABLE:
		raise InvalidNoteError(
			f"Unknown pitch class: {pitch_class!r}. Expected e.g. 'C', 'F#', 'Bb', 'E♭'."
		)

	return n_et.constants.PITCH_CLASS_TABLE.index(normalized)


@dataclasses.dataclass(frozen=True)
class TwelveToneET:

	"""
	A 12-ET tuning with note naming.

	Frequency arithmetic is delegated to the wrapped ``EqualTemperament``;
	only the reference frequency is configurable.

	Parameters:
		reference_frequency: Frequency of A4 in Hz (default 440).
	"""

	reference_frequency: float = n_et.constants.FREQUENCY_REFERENCE_DEFAULT
	tuning: n_et.equal_temperament.EqualTemperament = dataclasses.field(init=False, repr=False, compare=False)

	def __post_init__ (self) -> None:

		tuning = n_et.equal_temperament.EqualTemperament(
			reference_frequency = self.reference_frequency,
			reference_midi_number = n_et.constants.MIDI_NUMBER_REFERENCE_DEFAULT,
			notes_per_octave = n_et.constants.NOTES_PER_OCTAVE_DEFAULT
		)

		# Frozen dataclass: bypass __setattr__ for the derived field.
		object.__setattr__(self, "tuning", tuning)


	@property
	def reference_midi_number (self) -> int:
		return n_et.constants.MIDI_NUMBER_REFERENCE_DEFAULT

	@property
	def notes_per_octave (self) -> int:
		return n_et.constants.NOTES_PER_OCTAVE_DEFAULT


	# ── Frequency arithmetic (delegated) ─────────────────────────────────

	def quantize (self, midi_number: float) -> int:
		return self.tuning.quantize(midi_number)

	def midi_to_frequency (self, midi_number: float) -> float:
		return self.tuning.midi_to_frequency(midi_number)

	def midi_to_frequency_detuned (self, midi_number: float, detune: float) -> float:
		return self.tuning.midi_to_frequency_detuned(midi_number, detune)

	def frequency_to_midi (self, frequency: float) -> int:
		return self.tuning.frequency_to_midi(frequency)

	def frequency_to_midi_detuned (self, frequency: float) -> typing.Tuple[int, float]:
		return self.tuning.frequency_to_midi_detuned(frequency)

	def semitones_to_frequency_ratio (self, semitones: float) -> float:
		return self.tuning.semitones_to_frequency_ratio(semitones)

	def frequency_ratio_to_semitones (self, frequency_ratio: float) -> float:
		return self.tuning.frequency_ratio_to_semitones(frequency_ratio)


	# ── Naming ───────────────────────────────────────────────────────────

	def midi_to_octave (self, midi_number: float) -> int:

		"""Return the SPN octave of a MIDI number (60 → 4, 59 → 3, 0 → -1).

		The input is quantized first, so 59.6 belongs to octave 4.
		"""

		return self.quantize(midi_number) // self.notes_per_octave - 1


	def midi_to_pitch_class (self, midi_number: float) -> str:

		"""Return the sharp pitch class name of a MIDI number (61 → ``"C#"``)."""

		table_index = n_et.equal_temperament.positive_modulo(self.quantize(midi_number), self.notes_per_octave)

		return n_et.constants.PITCH_CLASS_TABLE[table_index]


	def midi_to_spn (self, midi_number: float) -> str:

		"""Return the Scientific Pitch Notation name of a MIDI number.

		Example:
			```python
			TwelveToneET().midi_to_spn(69)    # → "A4"
			TwelveToneET().midi_to_spn(-11)   # → "C#-2"
			```
		"""

		return f"{self.midi_to_pitch_class(midi_number)}{self.midi_to_octave(midi_number)}"


	def normalize_pitch_class (self, pitch_class: str) -> str:

		"""Return the sharp spelling of ``pitch_class`` (see ``normalize_pitch_class``)."""

		return normalize_pitch_class(pitch_class)


	def spn_to_midi (self, spn: str) -> int:

		"""Parse a Scientific Pitch Notation name into a MIDI number.

		The octave is the trailing, optionally negative, integer; everything
		before it is the pitch class. Flats and ♯/♭ glyphs are accepted.

		Parameters:
			spn: Note name such as ``"C4"``, ``"Db-1"`` or ``"F♯10"``.

		Returns:
			MIDI number, ``(octave + 1) * 12 + pitch class index``.

		Raises:
			InvalidNoteError: If there is no octave number or the pitch class
				is not recognised.

		Example:
			```python
			et12 = TwelveToneET()
			et12.spn_to_midi("C4")     # → 60
			et12.spn_to_midi("C#-2")   # → -11
			et12.spn_to_midi("Eb12")   # → 159
			```
		"""

		match = _SPN_PATTERN.fullmatch(spn)

		if match is None:
			logger.debug(f"Rejected note name {spn!r}: no octave number")
			raise InvalidNoteError(f"Invalid note name: {spn!r}. Expected a pitch class followed by an octave, e.g. 'C4', 'Db-1'.")

		try:
			index = pitch_class_index(match.group("pitch_class"))
		except InvalidNoteError:
			logger.debug(f"Rejected note name {spn!r}: unknown pitch class")
			raise

		octave = int(match.group("octave"))

		return (octave + 1) * self.notes_per_octave + index


	def spn_to_frequency (self, spn: str) -> float:

		"""Return the frequency in Hz of a Scientific Pitch Notation name."""

		return self.midi_to_frequency(self.spn_to_midi(spn))


	def frequency_to_spn (self, frequency: float) -> typing.Tuple[str, float]:

		"""Name the note nearest to ``frequency`` and how far off it is.

		Returns:
			A ``(spn, detune)`` tuple, detune in semitones within ``[-0.5, 0.5]``.
			Multiply by 100 for cents.

		Raises:
			ValueError: If ``frequency`` is not strictly positive.
		"""

		midi_number, detune = self.frequency_to_midi_detuned(frequency)

		return self.midi_to_spn(midi_number), detune
