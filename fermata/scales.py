"""Scale definitions and scale note sequences.

A scale is a root pitch class plus a fixed pattern of seven semitone steps that
sums to an octave. Walking the steps from the root gives the seven scale degrees
and, as an eighth element, the root again one octave up.

Module-level constants:
- `SCALE_STEPS`: Maps scale type names to their seven semitone steps
- `SCALE_NAMES`: Maps scale type names to display names

Example:
	```python
	scale = get_scale("D", "dorian")
	scale.name                # "D Dorian"
	scale.midi_notes(4)       # [62, 64, 65, 67, 69, 71, 72, 74]
	scale.full_sequence(4)    # up and back down, top note played once
	```
"""

import dataclasses
import typing

import fermata.hands
import fermata.notes


SCALE_STEPS: typing.Dict[str, typing.List[int]] = {
	"major": [2, 2, 1, 2, 2, 2, 1],
	"minor": [2, 1, 2, 2, 1, 2, 2],
	"dorian": [2, 1, 2, 2, 2, 1, 2],
	"phrygian": [1, 2, 2, 2, 1, 2, 2],
	"lydian": [2, 2, 2, 1, 2, 2, 1],
	"mixolydian": [2, 2, 1, 2, 2, 1, 2],
	"aeolian": [2, 1, 2, 2, 1, 2, 2],
	"locrian": [1, 2, 2, 1, 2, 2, 2],
}

SCALE_NAMES: typing.Dict[str, str] = {
	"major": "Major (Ionian)",
	"minor": "Natural Minor",
	"dorian": "Dorian",
	"phrygian": "Phrygian",
	"lydian": "Lydian",
	"mixolydian": "Mixolydian",
	"aeolian": "Aeolian",
	"locrian": "Locrian",
}


@dataclasses.dataclass(frozen=True)
class Scale:

	"""
	A scale rooted on a pitch class.

	Attributes:
		root_pc: Root pitch class (0-11).
		scale_type: Key into ``SCALE_STEPS`` (e.g. ``"major"``).
		steps: The seven semitone steps between consecutive degrees.
		name: Display name, e.g. ``"C Major (Ionian)"``.
	"""

	root_pc: int
	scale_type: str
	steps: typing.Tuple[int, ...]
	name: str


	def notes (self) -> typing.List[int]:

		"""Return the eight pitch classes of the scale, root to root.

		The last element repeats the root (the octave).

		Example:
			```python
			get_scale("C", "major").notes()  # [0, 2, 4, 5, 7, 9, 11, 0]
			```
		"""

		current = self.root_pc
		pitch_classes = [current]

		for step in self.steps:
			current = (current + step) % 12
			pitch_classes.append(current)

		return pitch_classes


	def degrees (self) -> typing.List[int]:

		"""
		Return the seven distinct scale-degree pitch classes (no octave repeat).
		"""

		return self.notes()[:7]


	def midi_notes (self, start_octave: int) -> typing.List[int]:

		"""Return the ascending scale as note numbers, root to octave.

		The working octave moves up whenever a pitch class is lower than the one
		before it, so every note is strictly higher than the previous one.

		Parameters:
			start_octave: Octave of the root (4 = the octave starting at Middle C).
		"""

		octave = start_octave
		previous_pc: typing.Optional[int] = None
		result: typing.List[int] = []

		for pc in self.notes():

			if previous_pc is not None and pc < previous_pc:
				octave += 1

			result.append(fermata.notes.note_number(pc, octave))
			previous_pc = pc

		return result


	def full_sequence (self, start_octave: int) -> typing.List[int]:

		"""Return the scale up and back down, with the top note played once.

		The result is a palindrome of 15 notes.

		Example:
			```python
			get_scale("C", "major").full_sequence(4)
			# [60, 62, 64, 65, 67, 69, 71, 72, 71, 69, 67, 65, 64, 62, 60]
			```
		"""

		ascending = self.midi_notes(start_octave)
		descending = list(reversed(ascending))[1:]

		return ascending + descending


	def hand_sequence (self, start_octave: int, hand: str) -> typing.List[typing.List[int]]:

		"""
		Return the full up/down sequence laid out per step for a hand selection.

		See :func:`fermata.hands.melodic_steps`.
		"""

		return fermata.hands.melodic_steps(self.full_sequence, start_octave, hand)


def get_scale (key: typing.Union[str, int], scale_type: str) -> Scale:

	"""Create a scale for a key and scale type.

	Parameters:
		key: Key name (``"C"``, ``"F#"``, ``"Bb"``) or root pitch class (0-11).
		scale_type: One of the keys of ``SCALE_STEPS``.

	Raises:
		ValueError: If the key or scale type is unknown.
	"""

	if scale_type not in SCALE_STEPS:
		raise ValueError(f"Unknown scale type {scale_type!r}. Available: {sorted(SCALE_STEPS)}")

	root_pc = fermata.notes.resolve_pitch_class(key)

	return Scale(
		root_pc = root_pc,
		scale_type = scale_type,
		steps = tuple(SCALE_STEPS[scale_type]),
		name = f"{fermata.notes.pitch_class_name(root_pc)} {SCALE_NAMES[scale_type]}"
	)
