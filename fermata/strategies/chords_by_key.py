import typing

import fermata.chords
import fermata.constants.practice
import fermata.exercise
import fermata.scales
import fermata.strategies


class ChordsByKeyStrategy (fermata.strategies.PracticeStrategy):

	"""Every diatonic triad of a key, in scale-degree order.

	With inversions each triad is worked root → 1st → 2nd → 1st (28 steps);
	without, only the seven root position triads are played. All chords are
	voiced from the start octave.
	"""

	def __init__ (
		self,
		key: typing.Union[str, int],
		scale_type: str,
		include_inversions: bool = True,
		hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
		start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE
	) -> None:

		"""Validate the selection. Raises InvalidSelectionError if anything is unknown."""

		self.key_pc = fermata.strategies.validate_key(key)
		self.key_name = fermata.strategies.key_display_name(key)
		self.scale_type = fermata.strategies.validate_choice(scale_type, fermata.scales.SCALE_STEPS, "scale type")
		self.include_inversions = include_inversions
		self.hand = fermata.strategies.validate_hand(hand)
		self.start_octave = start_octave

	def chords (self) -> typing.List[fermata.chords.Chord]:

		"""Return the chords this exercise walks through."""

		if self.include_inversions:
			return fermata.chords.smooth_key_triad_progression(self.key_pc, self.scale_type)

		return fermata.chords.diatonic_triads(self.key_pc, self.scale_type)

	def build (self) -> fermata.exercise.Exercise:

		"""Generate one step per chord for the selected hand(s)."""

		chords = self.chords()
		voicings = [chord.midi_notes(self.start_octave) for chord in chords]

		return fermata.exercise.Exercise(
			steps = fermata.strategies.chord_steps(chords, voicings, self.hand),
			metadata = {
				"exercise_type": fermata.exercise.MODE_CHORDS_BY_KEY,
				"key": self.key_name,
				"scale_type": self.scale_type,
				"include_inversions": self.include_inversions,
				"hand_selection": self.hand,
			}
		)
