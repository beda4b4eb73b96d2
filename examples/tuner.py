import logging

import n_et

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Readings a pitch detector might report for an open-string guitar, slightly out of tune.
READINGS = [82.0, 110.9, 146.2, 196.5, 245.1, 330.8]

et12 = n_et.TwelveToneET(reference_frequency=440)

for frequency in READINGS:

	spn, detune = et12.frequency_to_spn(frequency)
	target = et12.spn_to_frequency(spn)

	# Cents are hundredths of a 12-ET semitone.
	cents = detune * 100

	if abs(cents) < 5:
		verdict = "in tune"
	elif cents > 0:
		verdict = "tune down"
	else:
		verdict = "tune up"

	logger.info(f"{frequency:7.2f} Hz  {spn:<4} (target {target:7.2f} Hz)  {cents:+6.1f} cents  {verdict}")
