import typing

import fermata.constants.practice
import fermata.exercise
import fermata.scales
import fermata.strategies


class ScalesStrategy (fermata.strategies.PracticeStrategy):

	"""A scale played up and back down, one note (or one note per hand) per step.

	With both hands each step pairs the left hand's note with the right hand's
	note an octave above it, so the two hands move in parallel.
	"""

	def __init__ (
		self,
		key: typing.Union[str, int],
		scale_type: str,
		hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
		start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE
	) -> None:

		"""Validate the selection. Raises InvalidSelectionError if anything is unknown."""

		self.key_pc = fermata.strategies.validate_key(key)
		self.key_name = fermata.strategies.key_display_name(key)
		self.scale_type = fermata.strategies.validate_choice(scale_type, fermata.scales.SCALE_STEPS, "scale type")
		self.hand = fermata.strategies.validate_hand(hand)
		self.start_octave = start_octave

	def build (self) -> fermata.exercise.Exercise:

		"""Generate the full up/down scale for the selected hand(s)."""

		scale = fermata.scales.get_scale(self.key_pc, self.scale_type)
		steps = fermata.strategies.melodic_steps(scale.full_sequence, self.start_octave, self.hand)

		return fermata.exercise.Exercise(
			steps = steps,
			metadata = {
				"exercise_type": fermata.exercise.MODE_SCALES,
				"key": self.key_name,
				"scale_type": self.scale_type,
				"name": scale.name,
				"hand_selection": self.hand,
			}
		)
