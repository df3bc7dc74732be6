"""Practice settings loaded from a YAML file.

Every key is optional; anything left out takes its default. Example
``config.yaml``::

	mode: chords_by_key
	key: Bb
	quality: major
	include_inversions: true
	hand_selection: right
	start_octave: 4
	input_device: "My Keyboard"
"""

import dataclasses
import logging
import os
import typing

import yaml

import fermata.constants.practice
import fermata.exercise
import fermata.exercises


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class PracticeSettings:

	"""
	The user's current practice selection.

	``progression`` only applies to ``"chord_progressions"`` and
	``arpeggio_octaves`` only to ``"arpeggios"``. ``input_device`` names the
	mido input port to listen on.
	"""

	mode: str = fermata.constants.practice.DEFAULT_MODE
	key: str = fermata.constants.practice.DEFAULT_KEY
	quality: str = fermata.constants.practice.DEFAULT_QUALITY
	include_inversions: bool = True
	hand_selection: str = fermata.constants.practice.DEFAULT_HAND_SELECTION
	start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE
	progression: typing.Optional[str] = None
	arpeggio_octaves: int = fermata.constants.practice.DEFAULT_ARPEGGIO_OCTAVES
	input_device: typing.Optional[str] = None


	def build_exercise (self) -> fermata.exercise.Exercise:

		"""Generate the exercise these settings describe.

		Raises:
			fermata.exercises.InvalidSelectionError: If the settings name something unknown.
		"""

		return fermata.exercises.generate_exercise(
			mode = self.mode,
			key = self.key,
			quality = self.quality,
			include_inversions = self.include_inversions,
			hand = self.hand_selection,
			start_octave = self.start_octave,
			progression = self.progression,
			arpeggio_octaves = self.arpeggio_octaves
		)


def settings_from_dict (data: typing.Dict[str, typing.Any]) -> PracticeSettings:

	"""Build settings from a mapping, rejecting keys that are not settings.

	Raises:
		ValueError: If ``data`` contains an unknown key.
	"""

	known = {field.name for field in dataclasses.fields(PracticeSettings)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown settings: {unknown}. Available: {sorted(known)}")

	return PracticeSettings(**data)


def load_settings (config_path: str = 'config.yaml') -> PracticeSettings:

	"""
	Load practice settings from a YAML file, or the defaults if it does not exist.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return PracticeSettings()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return PracticeSettings()

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return settings_from_dict(data)
