"""Arpeggio definitions and arpeggio note sequences.

An arpeggio is a chord played one note at a time. Each quality lists its chord
tones as semitones from the root, ending on the octave (12) so the run lands back
on the root.

Module-level constants:
- `ARPEGGIO_INTERVALS`: Maps arpeggio quality names to interval lists
- `ARPEGGIO_TYPE_NAMES`: Maps arpeggio quality names to display names
"""

import dataclasses
import typing

import fermata.hands
import fermata.notes


ARPEGGIO_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 4, 7, 12],
	"minor": [0, 3, 7, 12],
	"diminished": [0, 3, 6, 12],
	"augmented": [0, 4, 8, 12],
	"dominant_7th": [0, 4, 7, 10, 12],
	"minor_7th": [0, 3, 7, 10, 12],
	"major_7th": [0, 4, 7, 11, 12],
}

ARPEGGIO_TYPE_NAMES: typing.Dict[str, str] = {
	"major": "Major",
	"minor": "Minor",
	"diminished": "Diminished",
	"augmented": "Augmented",
	"dominant_7th": "Dominant 7th",
	"minor_7th": "Minor 7th",
	"major_7th": "Major 7th",
}

COMMON_QUALITIES: typing.List[str] = ["major", "minor", "diminished", "augmented"]
SEVENTH_QUALITIES: typing.List[str] = ["dominant_7th", "minor_7th", "major_7th"]

OCTAVE_SPANS: typing.Tuple[int, ...] = (1, 2)


@dataclasses.dataclass(frozen=True)
class Arpeggio:

	"""
	An arpeggio over one or two octaves.

	Attributes:
		root_pc: Root pitch class (0-11).
		quality: Key into ``ARPEGGIO_INTERVALS``.
		octaves: 1 or 2.
		intervals: Chord tones in semitones from the root, ending on 12.
		name: Display name, e.g. ``"C Major (1 Octave)"``.
	"""

	root_pc: int
	quality: str
	octaves: int
	intervals: typing.Tuple[int, ...]
	name: str


	def notes (self) -> typing.List[int]:

		"""
		Return the pitch classes of one ascending run, root to root.
		"""

		return [(self.root_pc + interval) % 12 for interval in self.intervals]


	def midi_notes (self, start_octave: int) -> typing.List[int]:

		"""Return one ascending octave of the arpeggio as note numbers.

		The working octave moves up whenever a pitch class is lower than the one
		before it.

		Example:
			```python
			get_arpeggio("A", "major").midi_notes(4)  # [69, 73, 76, 81]
			```
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

		"""Return the arpeggio up and back down, the top note played once.

		Two-octave arpeggios repeat the chord tones an octave higher before the
		descent.

		Example:
			```python
			get_arpeggio("C", "major", 1).full_sequence(4)
			# [60, 64, 67, 72, 67, 64, 60]
			get_arpeggio("C", "major", 2).full_sequence(4)
			# [60, 64, 67, 72, 76, 79, 84, 79, 76, 72, 67, 64, 60]
			```
		"""

		ascending = self.midi_notes(start_octave)

		if self.octaves == 2:
			ascending = ascending + [note + 12 for note in ascending[1:]]

		descending = list(reversed(ascending))[1:]

		return ascending + descending


	def hand_sequence (self, start_octave: int, hand: str) -> typing.List[typing.List[int]]:

		"""
		Return the full up/down sequence laid out per step for a hand selection.

		See :func:`fermata.hands.melodic_steps`.
		"""

		return fermata.hands.melodic_steps(self.full_sequence, start_octave, hand)


def get_arpeggio (root: typing.Union[str, int], quality: str, octaves: int = 1) -> Arpeggio:

	"""Create an arpeggio for a root, quality, and octave span.

	Raises:
		ValueError: If the root, quality, or octave span is unknown.
	"""

	if quality not in ARPEGGIO_INTERVALS:
		raise ValueError(f"Unknown arpeggio quality {quality!r}. Available: {sorted(ARPEGGIO_INTERVALS)}")

	if octaves not in OCTAVE_SPANS:
		raise ValueError(f"Arpeggios span 1 or 2 octaves, got {octaves}")

	root_pc = fermata.notes.resolve_pitch_class(root)
	octave_name = "1 Octave" if octaves == 1 else "2 Octaves"

	return Arpeggio(
		root_pc = root_pc,
		quality = quality,
		octaves = octaves,
		intervals = tuple(ARPEGGIO_INTERVALS[quality]),
		name = f"{fermata.notes.pitch_class_name(root_pc)} {ARPEGGIO_TYPE_NAMES[quality]} ({octave_name})"
	)


def common_arpeggios (root: typing.Union[str, int], octaves: int = 1) -> typing.List[Arpeggio]:

	"""
	Return major, minor, diminished, and augmented arpeggios on a root.
	"""

	return [get_arpeggio(root, quality, octaves) for quality in COMMON_QUALITIES]


def extended_arpeggios (root: typing.Union[str, int], octaves: int = 1) -> typing.List[Arpeggio]:

	"""
	Return the common arpeggios followed by the three seventh-chord arpeggios.
	"""

	return common_arpeggios(root, octaves) + [get_arpeggio(root, quality, octaves) for quality in SEVENTH_QUALITIES]
