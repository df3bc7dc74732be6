"""
Exercise strategies: one builder per practice mode.
"""

import abc
import typing

import fermata.chords
import fermata.exercise
import fermata.hands
import fermata.notes


class InvalidSelectionError (ValueError):

	"""An exercise was requested for a key, quality, mode, hand, or octave that does not exist."""


class PracticeStrategy (abc.ABC):

	"""Abstract base for practice mode exercise builders."""

	@abc.abstractmethod
	def build (self) -> fermata.exercise.Exercise:

		"""Generate the exercise for this strategy's selection."""

		...


def validate_key (key: typing.Union[str, int]) -> int:

	"""Validate a key name or pitch class and return the pitch class.

	Raises InvalidSelectionError if the key is not recognised.
	"""

	try:
		return fermata.notes.resolve_pitch_class(key)

	except ValueError as exc:
		raise InvalidSelectionError(str(exc)) from exc


def validate_choice (value: str, choices: typing.Iterable[str], label: str) -> str:

	"""
	Return ``value`` if it is one of ``choices``, else raise InvalidSelectionError.
	"""

	available = list(choices)

	if value not in available:
		raise InvalidSelectionError(f"Unknown {label} {value!r}. Available: {sorted(available)}")

	return value


def validate_hand (hand: str) -> str:

	"""
	Return ``hand`` if it is a known hand selection, else raise InvalidSelectionError.
	"""

	return validate_choice(hand, fermata.hands.HAND_SELECTIONS, "hand selection")


def key_display_name (key: typing.Union[str, int]) -> str:

	"""Return the name a key was given as, or the sharp name of a pitch class."""

	if isinstance(key, str):
		return key

	return fermata.notes.pitch_class_name(key)


def melodic_steps (
	sequence_at: typing.Callable[[int], typing.List[int]],
	start_octave: int,
	hand: str
) -> typing.Tuple[fermata.exercise.Step, ...]:

	"""Build single-note (or paired, for both hands) steps from a melodic line.

	Raises InvalidSelectionError if the left hand would play below octave 0 or
	any note lands outside 0-127.
	"""

	try:
		note_lists = fermata.hands.melodic_steps(sequence_at, start_octave, hand)

	except ValueError as exc:
		raise InvalidSelectionError(str(exc)) from exc

	for notes in note_lists:
		for note in notes:
			if not fermata.notes.in_range(note):
				raise InvalidSelectionError(f"Octave {start_octave} puts note {note} outside the MIDI range 0-127")

	metadata = [
		{"hand": hand, "degree": i + 1, "note_names": [fermata.notes.note_name(note) for note in notes]}
		for i, notes in enumerate(note_lists)
	]

	return fermata.exercise.make_steps(note_lists, metadata)


def chord_steps (
	chords: typing.Sequence[fermata.chords.Chord],
	voicings: typing.Sequence[typing.Sequence[int]],
	hand: str
) -> typing.Tuple[fermata.exercise.Step, ...]:

	"""Split chord voicings between the hands and turn them into steps.

	``voicings[i]`` is the ascending voicing of ``chords[i]``. Chords that leave
	the selected hand nothing to play are skipped.
	"""

	note_lists = [fermata.hands.split_chord(voicing, hand) for voicing in voicings]

	metadata = [
		{
			"chord_name": chord.name,
			"root_note": chord.root_name,
			"chord_type": chord.quality,
			"inversion": chord.inversion,
			"hand": hand,
		}
		for chord in chords
	]

	return fermata.exercise.make_steps(note_lists, metadata)
