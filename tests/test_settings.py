import pathlib

import pytest

import fermata.exercises
import fermata.settings


def test_missing_file_gives_defaults (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file logs a warning and uses the defaults."""

	settings = fermata.settings.load_settings(str(tmp_path / "missing.yaml"))

	assert settings == fermata.settings.PracticeSettings()
	assert "not found" in caplog.text


def test_load_settings_from_yaml (tmp_path: pathlib.Path) -> None:

	"""Keys in the file override the defaults."""

	path = tmp_path / "config.yaml"
	path.write_text(
		"mode: chord_progressions\n"
		"key: Bb\n"
		"hand_selection: right\n"
		"progression: \"ii - V - I\"\n"
		"input_device: Dummy MIDI\n"
	)

	settings = fermata.settings.load_settings(str(path))

	assert settings.mode == "chord_progressions"
	assert settings.key == "Bb"
	assert settings.quality == "major"
	assert settings.progression == "ii - V - I"
	assert settings.input_device == "Dummy MIDI"

	exercise = settings.build_exercise()

	assert exercise.metadata["progression"] == "ii - V - I"
	assert len(exercise.steps) == 3


def test_empty_file_gives_defaults (tmp_path: pathlib.Path) -> None:

	"""An empty YAML document is the same as no settings."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert fermata.settings.load_settings(str(path)) == fermata.settings.PracticeSettings()


def test_unknown_keys_are_rejected (tmp_path: pathlib.Path) -> None:

	"""Misspelt setting names fail instead of being ignored."""

	path = tmp_path / "config.yaml"
	path.write_text("hand: left\n")

	with pytest.raises(ValueError, match="hand"):
		fermata.settings.load_settings(str(path))


def test_non_mapping_is_rejected (tmp_path: pathlib.Path) -> None:

	"""The file must hold a mapping."""

	path = tmp_path / "config.yaml"
	path.write_text("- scales\n- arpeggios\n")

	with pytest.raises(ValueError):
		fermata.settings.load_settings(str(path))


def test_invalid_selection_surfaces_on_build () -> None:

	"""Settings are checked when the exercise is built."""

	settings = fermata.settings.PracticeSettings(mode="scales", quality="augmented")

	with pytest.raises(fermata.exercises.InvalidSelectionError):
		settings.build_exercise()


def test_default_settings_build () -> None:

	"""The defaults describe a playable exercise: C major scale, both hands."""

	exercise = fermata.settings.PracticeSettings().build_exercise()

	assert exercise.metadata["exercise_type"] == "scales"
	assert exercise.steps[0].notes == frozenset([48, 60])
