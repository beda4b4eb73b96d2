import logging
import pathlib

import pytest

import n_et.__main__
import n_et.twelve_tone


def test_describe_note_name () -> None:

	"""A note name is converted to its MIDI number and frequency."""

	line = n_et.__main__.describe(n_et.twelve_tone.TwelveToneET(), "C4")

	assert line.startswith("C4 ")
	assert "midi   60" in line
	assert "261.626 Hz" in line


def test_describe_flat_name_prints_sharp () -> None:

	"""Flat input is echoed back in its canonical sharp spelling."""

	line = n_et.__main__.describe(n_et.twelve_tone.TwelveToneET(), "Db4")

	assert line.startswith("C#4 ")


def test_describe_frequency () -> None:

	"""A frequency is converted to the nearest note and a detune in cents."""

	line = n_et.__main__.describe(n_et.twelve_tone.TwelveToneET(), "445")

	assert "445.000 Hz" in line
	assert "A4" in line
	assert "midi   69" in line
	assert "+19.6 cents" in line


@pytest.mark.parametrize("value", ["H4", "0", "-440", "inf", "nan"])
def test_describe_rejects_invalid (value: str) -> None:

	"""Unknown names and unusable frequencies raise ValueError."""

	with pytest.raises(ValueError):
		n_et.__main__.describe(n_et.twelve_tone.TwelveToneET(), value)


def test_main_prints_conversions (capsys: pytest.CaptureFixture) -> None:

	"""Each argument produces one line of output."""

	status = n_et.__main__.main(["A4", "880"])
	lines = capsys.readouterr().out.splitlines()

	assert status == 0
	assert len(lines) == 2
	assert "440.000 Hz" in lines[0]
	assert "A5" in lines[1]
	assert "+0.0 cents" in lines[1]


def test_main_reference_frequency_option (capsys: pytest.CaptureFixture) -> None:

	"""--reference-frequency retunes A4."""

	status = n_et.__main__.main(["--reference-frequency", "415", "A4"])

	assert status == 0
	assert "415.000 Hz" in capsys.readouterr().out


def test_main_reads_config (tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	"""The YAML config supplies the reference frequency."""

	config_path = tmp_path / "tuning.yaml"
	config_path.write_text("tuning:\n  reference_frequency: 442\n")

	status = n_et.__main__.main(["--config", str(config_path), "A4"])

	assert status == 0
	assert "442.000 Hz" in capsys.readouterr().out


def test_option_overrides_config (tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	"""A command line reference frequency wins over the config file."""

	config_path = tmp_path / "tuning.yaml"
	config_path.write_text("tuning:\n  reference_frequency: 442\n")

	n_et.__main__.main(["--config", str(config_path), "--reference-frequency", "432", "A4"])

	assert "432.000 Hz" in capsys.readouterr().out


def test_empty_config_uses_defaults (tmp_path: pathlib.Path, capsys: pytest.CaptureFixture) -> None:

	"""An empty YAML file behaves like no config."""

	config_path = tmp_path / "empty.yaml"
	config_path.write_text("")

	assert n_et.__main__.load_config(str(config_path)) == {}
	assert n_et.__main__.main(["--config", str(config_path), "A4"]) == 0
	assert "440.000 Hz" in capsys.readouterr().out


def test_missing_config_warns (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture) -> None:

	"""A missing config file logs a warning and falls back to defaults."""

	missing = tmp_path / "missing.yaml"

	with caplog.at_level(logging.WARNING, logger="n_et.__main__"):
		status = n_et.__main__.main(["--config", str(missing), "A4"])

	assert status == 0
	assert "440.000 Hz" in capsys.readouterr().out
	assert any("not found" in record.getMessage() for record in caplog.records)


def test_main_reports_invalid_values (caplog: pytest.LogCaptureFixture, capsys: pytest.CaptureFixture) -> None:

	"""Bad arguments are logged, good ones still convert, and the exit status is 1."""

	with caplog.at_level(logging.ERROR, logger="n_et.__main__"):
		status = n_et.__main__.main(["H4", "A4"])

	assert status == 1
	assert "440.000 Hz" in capsys.readouterr().out
	assert any("H4" in record.getMessage() for record in caplog.records)


def test_main_rejects_invalid_tuning (caplog: pytest.LogCaptureFixture) -> None:

	"""A non-positive reference frequency is reported, not raised."""

	with caplog.at_level(logging.ERROR, logger="n_et.__main__"):
		status = n_et.__main__.main(["--reference-frequency", "0", "A4"])

	assert status == 1
	assert any("Invalid tuning" in record.getMessage() for record in caplog.records)
