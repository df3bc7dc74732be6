import typing

import fermata.chords
import fermata.constants.practice
import fermata.exercise
import fermata.hands
import fermata.progressions
import fermata.scales
import fermata.strategies


class ChordProgressionsStrategy (fermata.strategies.PracticeStrategy):

	"""Chord progression practice in a key.

	Plays a progression from :mod:`fermata.progressions` in the key, defaulting
	to ``"I - V"`` when none is named. The name ``"smooth"`` selects the
	inversion workout over every diatonic triad instead, voiced so that no
	chord drops more than a fifth below the previous one (see
	:func:`fermata.chords.progressive_voicings`).
	"""

	def __init__ (
		self,
		key: typing.Union[str, int],
		scale_type: str = "major",
		hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
		start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE,
		progression: typing.Optional[str] = None
	) -> None:

		"""Validate the selection. Raises InvalidSelectionError if anything is unknown."""

		self.key_pc = fermata.strategies.validate_key(key)
		self.key_name = fermata.strategies.key_display_name(key)
		self.scale_type = fermata.strategies.validate_choice(scale_type, fermata.scales.SCALE_STEPS, "scale type")
		self.hand = fermata.strategies.validate_hand(hand)
		self.start_octave = start_octave
		self.progression: typing.Optional[fermata.progressions.ChordProgression] = None

		if progression is None:
			progression = fermata.constants.practice.DEFAULT_PROGRESSION

		choices = fermata.progressions.progression_names() + [fermata.progressions.SMOOTH_WORKOUT]
		fermata.strategies.validate_choice(progression, choices, "progression")

		if progression != fermata.progressions.SMOOTH_WORKOUT:
			self.progression = fermata.progressions.get_progression(progression)

	def _named_steps (self, progression: fermata.progressions.ChordProgression) -> typing.Tuple[fermata.exercise.Step, ...]:

		voicings = progression.voicings(self.key_pc, self.start_octave)
		note_lists = [fermata.hands.split_chord(voicing, self.hand) for voicing in voicings]

		metadata = [
			{"chord_name": numeral, "numeral": numeral, "hand": self.hand}
			for numeral in progression.numerals
		]

		return fermata.exercise.make_steps(note_lists, metadata)

	def build (self) -> fermata.exercise.Exercise:

		"""Generate one step per chord for the selected hand(s)."""

		metadata: typing.Dict[str, typing.Any] = {
			"exercise_type": fermata.exercise.MODE_CHORD_PROGRESSIONS,
			"key": self.key_name,
			"scale_type": self.scale_type,
			"hand_selection": self.hand,
		}

		if self.progression is not None:

			metadata["progression"] = self.progression.name
			metadata["difficulty"] = self.progression.difficulty

			return fermata.exercise.Exercise(steps=self._named_steps(self.progression), metadata=metadata)

		chords = fermata.chords.smooth_key_triad_progression(self.key_pc, self.scale_type)
		voicings = fermata.chords.progressive_voicings(chords, self.start_octave)

		metadata["progression"] = fermata.progressions.SMOOTH_WORKOUT

		return fermata.exercise.Exercise(
			steps = fermata.strategies.chord_steps(chords, voicings, self.hand),
			metadata = metadata
		)
