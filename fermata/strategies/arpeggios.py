import typing

import fermata.arpeggios
import fermata.constants.practice
import fermata.exercise
import fermata.strategies


class ArpeggiosStrategy (fermata.strategies.PracticeStrategy):

	"""An arpeggio over one or two octaves, up and back down."""

	def __init__ (
		self,
		key: typing.Union[str, int],
		quality: str,
		octaves: int = fermata.constants.practice.DEFAULT_ARPEGGIO_OCTAVES,
		hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
		start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE
	) -> None:

		"""Validate the selection. Raises InvalidSelectionError if anything is unknown."""

		self.key_pc = fermata.strategies.validate_key(key)
		self.key_name = fermata.strategies.key_display_name(key)
		self.quality = fermata.strategies.validate_choice(quality, fermata.arpeggios.ARPEGGIO_INTERVALS, "arpeggio quality")

		if octaves not in fermata.arpeggios.OCTAVE_SPANS:
			raise fermata.strategies.InvalidSelectionError(f"Arpeggios span 1 or 2 octaves, got {octaves}")

		self.octaves = octaves
		self.hand = fermata.strategies.validate_hand(hand)
		self.start_octave = start_octave

	def build (self) -> fermata.exercise.Exercise:

		"""Generate the full up/down arpeggio for the selected hand(s)."""

		arpeggio = fermata.arpeggios.get_arpeggio(self.key_pc, self.quality, self.octaves)
		steps = fermata.strategies.melodic_steps(arpeggio.full_sequence, self.start_octave, self.hand)

		return fermata.exercise.Exercise(
			steps = steps,
			metadata = {
				"exercise_type": fermata.exercise.MODE_ARPEGGIOS,
				"key": self.key_name,
				"arpeggio_type": self.quality,
				"octaves": self.octaves,
				"name": arpeggio.name,
				"hand_selection": self.hand,
			}
		)
