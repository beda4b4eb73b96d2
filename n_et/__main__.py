"""Convert note names and frequencies from the command line.

Usage::

    python -m n_et A4 C#-2 Eb5
    python -m n_et 445 261.63
    python -m n_et --reference-frequency 415 A4
    python -m n_et --config tuning.yaml 440

A note name prints its MIDI number and frequency. A frequency prints the
nearest note, its MIDI number and the detune in cents.

The optional YAML config file supplies defaults::

    tuning:
      reference_frequency: 442
"""

import argparse
import logging
import math
import os
import sys
import typing

import yaml

import n_et.constants
import n_et.twelve_tone


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def _parse_frequency (text: str) -> typing.Optional[float]:

	"""Return ``text`` as a float, or None if it is not a number."""

	try:
		return float(text)
	except ValueError:
		return None


def describe (et12: n_et.twelve_tone.TwelveToneET, value: str) -> str:

	"""Return a one-line conversion of a note name or frequency.

	Raises:
		ValueError: If ``value`` is neither a valid note name nor a positive frequency.
	"""

	frequency = _parse_frequency(value)

	if frequency is None:
		midi_number = et12.spn_to_midi(value)
		spn = et12.midi_to_spn(midi_number)
		return f"{spn:<6} midi {midi_number:>4}  {et12.midi_to_frequency(midi_number):.3f} Hz"

	if not math.isfinite(frequency):
		raise ValueError(f"frequency must be finite, got {frequency!r}")

	midi_number, detune = et12.frequency_to_midi_detuned(frequency)
	spn = et12.midi_to_spn(midi_number)
	return f"{frequency:.3f} Hz  {spn:<6} midi {midi_number:>4}  {detune * 100:+.1f} cents"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the n-et command line.
	"""

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("values",                nargs="+",                 help="Note names (e.g. A4, Db-1) or frequencies in Hz")
	parser.add_argument("--reference-frequency", type=float, default=None,  help="Frequency of A4 in Hz (default: 440, or the config value)")
	parser.add_argument("--config",              type=str,   default=None,  help="YAML config file with tuning defaults")
	parser.add_argument("--verbose",             action="store_true",       help="Enable debug logging")
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = load_config(args.config) if args.config is not None else {}

	reference_frequency = args.reference_frequency
	if reference_frequency is None:
		reference_frequency = config.get('tuning', {}).get('reference_frequency', n_et.constants.FREQUENCY_REFERENCE_DEFAULT)

	try:
		et12 = n_et.twelve_tone.TwelveToneET(reference_frequency=float(reference_frequency))
	except ValueError as exc:
		logger.error(f"Invalid tuning: {exc}")
		return 1

	status = 0

	for value in args.values:
		try:
			print(describe(et12, value))
		except ValueError as exc:
			logger.error(f"Cannot convert {value!r}: {exc}")
			status = 1

	return status


if __name__ == "__main__":
	sys.exit(main())
