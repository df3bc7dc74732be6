"""Chord inversions and ascending voicings.

A triad is stored as its pitch classes in inversion order. Placing it on the
keyboard (voicing it) means choosing an octave for every member so the notes
climb from bottom to top without wrapping back down.

Example:
	```python
	from fermata.voicings import invert, voice_chord

	first_inv = invert([0, 4, 7], "first")           # [4, 7, 0] - E G C
	voice_chord(first_inv, 0, "first", octave=4)     # [64, 67, 72]
	```
"""

import logging
import typing

import fermata.constants.midi
import fermata.constants.practice
import fermata.notes


logger = logging.getLogger(__name__)


INVERSIONS: typing.Tuple[str, ...] = ("root", "first", "second")

# Index order into the root-position triad for each inversion.
INVERSION_ORDER: typing.Dict[str, typing.Tuple[int, int, int]] = {
	"root": (0, 1, 2),
	"first": (1, 2, 0),
	"second": (2, 0, 1),
}


def invert (pitch_classes: typing.Sequence[int], inversion: str) -> typing.List[int]:

	"""Rotate a root-position triad into an inversion.

	Parameters:
		pitch_classes: Root-position triad, e.g. ``[0, 4, 7]`` for C major.
		inversion: ``"root"``, ``"first"``, or ``"second"``.

	Returns:
		The pitch classes in the order they are stacked from the bass up.

	Example:
		```python
		invert([0, 4, 7], "root")    # [0, 4, 7]  - C E G
		invert([0, 4, 7], "first")   # [4, 7, 0]  - E G C
		invert([0, 4, 7], "second")  # [7, 0, 4]  - G C E
		```
	"""

	if inversion not in INVERSION_ORDER:
		raise ValueError(f"Unknown inversion {inversion!r}. Available: {list(INVERSIONS)}")

	if len(pitch_classes) != 3:
		raise ValueError(f"Inversions are defined for triads, got {len(pitch_classes)} notes")

	return [pitch_classes[i] for i in INVERSION_ORDER[inversion]]


def voice_chord (
	pitch_classes: typing.Sequence[int],
	root_pc: int,
	inversion: str,
	octave: int
) -> typing.List[int]:

	"""Place chord members on the keyboard in strictly ascending order.

	Each member starts at ``octave``. A member that would sit at or below the
	previous note is moved up an octave at a time (at most
	``MAX_OCTAVE_BUMPS`` times) until it is above it. A member that cannot be
	placed above the previous note without passing 127 is dropped rather than
	wrapped, so a chord near the top of the range may come back with fewer
	notes.

	For inversions, if the bass note would start below the root at the same
	octave the whole chord moves up an octave first, so inversions of a chord
	climb rather than fall.

	Parameters:
		pitch_classes: Chord members in inversion order (see :func:`invert`).
		root_pc: Pitch class of the chord root (not necessarily the bass).
		inversion: ``"root"``, ``"first"``, or ``"second"``.
		octave: Starting octave for the bass note.

	Returns:
		Strictly ascending note numbers, all within 0-127.
	"""

	if not pitch_classes:
		return []

	base_octave = octave

	if inversion != "root":
		bass = fermata.notes.note_number(pitch_classes[0], octave)
		root = fermata.notes.note_number(root_pc, octave)

		if bass < root:
			base_octave += 1

	result: typing.List[int] = []

	for pc in pitch_classes:

		note_octave = base_octave
		candidate = fermata.notes.note_number(pc, note_octave)

		if result:
			previous = result[-1]
			bumps = 0

			while (
				candidate <= previous
				and candidate < fermata.constants.midi.NOTE_MAX
				and bumps < fermata.constants.practice.MAX_OCTAVE_BUMPS
			):
				note_octave += 1
				candidate = fermata.notes.note_number(pc, note_octave)
				bumps += 1

			if candidate <= previous:
				logger.debug(f"Dropping {fermata.notes.pitch_class_name(pc)}: cannot be placed above {previous}")
				continue

		if not fermata.notes.in_range(candidate):
			logger.debug(f"Dropping {fermata.notes.pitch_class_name(pc)}: note {candidate} is out of MIDI range")
			continue

		result.append(candidate)

	return result


def chord_span (notes: typing.Sequence[int]) -> int:

	"""
	Return the distance in semitones from the lowest to the highest note.
	"""

	if not notes:
		return 0

	return max(notes) - min(notes)


def validate_voicing (notes: typing.Sequence[int]) -> bool:

	"""Check that a voicing is well formed.

	A valid voicing has at least two notes, is strictly ascending, spans no
	more than ``MAX_CHORD_SPAN`` semitones, and stays within 0-127.
	"""

	if len(notes) < 2:
		return False

	for lower, upper in zip(notes, notes[1:]):
		if upper <= lower:
			return False

	if chord_span(notes) > fermata.constants.practice.MAX_CHORD_SPAN:
		return False

	return all(fermata.notes.in_range(note) for note in notes)
