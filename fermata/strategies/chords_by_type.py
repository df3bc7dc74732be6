import typing

import fermata.chords
import fermata.constants.practice
import fermata.exercise
import fermata.strategies


class ChordsByTypeStrategy (fermata.strategies.PracticeStrategy):

	"""One chord quality moved through all twelve roots.

	The walk starts on ``key`` and climbs chromatically, so the hand shape stays
	the same while its position on the keyboard changes (chord planing). With
	inversions, each root is followed by its 1st and 2nd inversions.
	"""

	def __init__ (
		self,
		chord_type: str,
		include_inversions: bool = True,
		hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
		start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE,
		key: typing.Union[str, int] = fermata.constants.practice.DEFAULT_KEY
	) -> None:

		"""Validate the selection. Raises InvalidSelectionError if anything is unknown."""

		self.chord_type = fermata.strategies.validate_choice(chord_type, fermata.chords.CHORD_INTERVALS, "chord type")
		self.include_inversions = include_inversions
		self.hand = fermata.strategies.validate_hand(hand)
		self.start_octave = start_octave
		self.key_pc = fermata.strategies.validate_key(key)
		self.key_name = fermata.strategies.key_display_name(key)

	def build (self) -> fermata.exercise.Exercise:

		"""Generate one step per chord for the selected hand(s)."""

		chords = fermata.chords.chord_type_sequence(self.chord_type, self.include_inversions, self.key_pc)
		voicings = [chord.midi_notes(self.start_octave) for chord in chords]

		return fermata.exercise.Exercise(
			steps = fermata.strategies.chord_steps(chords, voicings, self.hand),
			metadata = {
				"exercise_type": fermata.exercise.MODE_CHORDS_BY_TYPE,
				"key": self.key_name,
				"chord_type": self.chord_type,
				"name": fermata.chords.CHORD_TYPE_NAMES[self.chord_type],
				"include_inversions": self.include_inversions,
				"hand_selection": self.hand,
			}
		)
