"""Generalized equal temperament.

An equal temperament divides every octave (frequency doubling) into
``notes_per_octave`` logarithmically equal steps, anchored so that
``reference_midi_number`` sounds at ``reference_frequency``:

    frequency = reference_frequency * 2 ** ((midi_number - reference_midi_number) / notes_per_octave)

Every conversion in this module is that transform, its inverse, or the same
transform applied to an interval instead of an absolute note.

Example:
	```python
	et = EqualTemperament()                       # 12-ET, A4 = 440 Hz
	et.midi_to_frequency(81)                      # 880.0
	et.frequency_to_midi(261.63)                  # 60
	et.frequency_to_midi_detuned(445.0)           # (69, 0.195...)

	et19 = EqualTemperament(notes_per_octave=19)  # 19 divisions per octave
	et19.semitones_to_frequency_ratio(19)         # 2.0
	```
"""

import dataclasses
import math
import typing

import n_et.constants


def positive_modulo (n: int, m: int) -> int:

	"""Return the remainder of ``n / m`` with the sign of ``m``.

	For a positive modulus the result always lies in ``[0, m)``, so negative
	note numbers still index the pitch class table from C upwards.
	"""

	return ((n % m) + m) % m


def _exp2 (exponent: float) -> float:

	"""Return ``2 ** exponent``, saturating to infinity instead of raising."""

	try:
		return 2.0 ** exponent
	except OverflowError:
		return math.inf


@dataclasses.dataclass(frozen=True)
class EqualTemperament:

	"""
	An equal-tempered tuning defined by a reference note and octave division.

	Instances are immutable. To retune, construct a new instance (or use
	``with_reference_frequency``), so a tuning can be shared between callers
	and threads without copying.

	Parameters:
		reference_frequency: Frequency in Hz assigned to the reference note.
			Must be positive.
		reference_midi_number: Note number that sounds at ``reference_frequency``.
		notes_per_octave: Number of equal steps per octave. Must be positive
			but need not be an integer.

	Raises:
		ValueError: If ``reference_frequency`` or ``notes_per_octave`` is not positive.
	"""

	reference_frequency: float = n_et.constants.FREQUENCY_REFERENCE_DEFAULT
	reference_midi_number: float = n_et.constants.MIDI_NUMBER_REFERENCE_DEFAULT
	notes_per_octave: float = n_et.constants.NOTES_PER_OCTAVE_DEFAULT

	def __post_init__ (self) -> None:
		if not self.reference_frequency > 0:
			raise ValueError(f"reference_frequency must be positive, got {self.reference_frequency!r}")
		if not self.notes_per_octave > 0:
			raise ValueError(f"notes_per_octave must be positive, got {self.notes_per_octave!r}")


	def with_reference_frequency (self, reference_frequency: float) -> "EqualTemperament":

		"""Return a copy of this tuning with a different reference frequency."""

		return dataclasses.replace(self, reference_frequency=reference_frequency)


	@staticmethod
	def quantize (midi_number: float) -> int:

		"""Round a MIDI number to the nearest integer.

		Ties round up towards positive infinity, so ``60.5`` becomes ``61``
		and ``-2.5`` becomes ``-2``. Python's built-in ``round()`` is not used
		because it rounds ties to even.

		Raises:
			ValueError: If ``midi_number`` is infinite or NaN.

		Example:
			```python
			EqualTemperament.quantize(60.4)   # → 60
			EqualTemperament.quantize(60.5)   # → 61
			EqualTemperament.quantize(-0.5)   # → 0
			```
		"""

		if not math.isfinite(midi_number):
			raise ValueError(f"midi_number must be finite, got {midi_number!r}")

		floored = math.floor(midi_number)

		# The fractional part of a float is exact, so this avoids the
		# floor(x + 0.5) error just below one half.
		if midi_number - floored >= 0.5:
			return floored + 1

		return floored


	def midi_to_frequency (self, midi_number: float) -> float:

		"""Return the frequency in Hz of the note nearest to ``midi_number``.

		The input is quantized first; use ``midi_to_frequency_detuned`` for
		fractional pitches. Very large note numbers return ``math.inf``.
		"""

		steps_from_reference = self.quantize(midi_number) - self.reference_midi_number

		return self.reference_frequency * _exp2(steps_from_reference / self.notes_per_octave)


	def midi_to_frequency_detuned (self, midi_number: float, detune: float) -> float:

		"""Return the frequency of a quantized note shifted by ``detune`` steps.

		Parameters:
			midi_number: Note number, quantized before conversion.
			detune: Offset in steps of this tuning (semitones in 12-ET). May be
				fractional or negative; zero leaves the note unchanged.
		"""

		return self.midi_to_frequency(midi_number) * self.semitones_to_frequency_ratio(detune)


	def frequency_to_midi (self, frequency: float) -> int:

		"""Return the note number nearest to ``frequency``.

		Raises:
			ValueError: If ``frequency`` is not strictly positive and finite.
		"""

		if not 0 < frequency < math.inf:
			raise ValueError(f"frequency must be positive and finite, got {frequency!r}")

		midi_number = self.notes_per_octave * math.log2(frequency / self.reference_frequency) + self.reference_midi_number

		return self.quantize(midi_number)


	def frequency_to_midi_detuned (self, frequency: float) -> typing.Tuple[int, float]:

		"""Split ``frequency`` into its nearest note and the remaining detune.

		This is the inverse of ``midi_to_frequency_detuned``: feeding the
		returned pair back in reproduces ``frequency`` within float precision.
		The detune lies in ``[-0.5, 0.5]`` steps.

		Returns:
			A ``(midi_number, detune)`` tuple.

		Raises:
			ValueError: If ``frequency`` is not strictly positive and finite, or so extreme
				that its nearest note lies beyond float range.

		Example:
			```python
			EqualTemperament().frequency_to_midi_detuned(445.0)   # → (69, 0.1955...)
			```
		"""

		midi_number = self.frequency_to_midi(frequency)
		quantized_frequency = self.midi_to_frequency(midi_number)

		if not 0 < quantized_frequency < math.inf:
			raise ValueError(f"frequency {frequency!r} is out of range: nearest note {midi_number} is beyond float range")

		detune = self.frequency_ratio_to_semitones(frequency / quantized_frequency)

		return midi_number, detune


	def semitones_to_frequency_ratio (self, semitones: float) -> float:

		"""Return the frequency ratio spanned by ``semitones`` steps of this tuning."""

		return _exp2(semitones / self.notes_per_octave)


	def frequency_ratio_to_semitones (self, frequency_ratio: float) -> float:

		"""Return the number of steps of this tuning spanned by ``frequency_ratio``.

		Raises:
			ValueError: If ``frequency_ratio`` is not strictly positive and finite.
		"""

		if not 0 < frequency_ratio < math.inf:
			raise ValueError(f"frequency_ratio must be positive and finite, got {frequency_ratio!r}")

		return self.notes_per_octave * math.log2(frequency_ratio)
