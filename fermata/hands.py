"""Hand selection: splitting exercise notes between the left and right hands.

Chords are split by register. The left hand takes the bass (lowest) note of the
voicing, one octave down; the right hand keeps the remaining upper notes where
they are. ``"both"`` is always the union of the two::

	split_chord([60, 64, 67], "left")   # → [48]
	split_chord([60, 64, 67], "right")  # → [64, 67]
	split_chord([60, 64, 67], "both")   # → [48, 64, 67]

Single-note lines (scales, arpeggios) are not subset. The hand only decides the
octave: the right hand plays at the start octave, the left hand one octave lower,
and both hands play the two lines in parallel as paired steps.
"""

import typing

import fermata.constants.midi


HAND_LEFT = "left"
HAND_RIGHT = "right"
HAND_BOTH = "both"

HAND_SELECTIONS: typing.Tuple[str, ...] = (HAND_LEFT, HAND_RIGHT, HAND_BOTH)


def validate_hand (hand: str) -> str:

	"""
	Return ``hand`` unchanged, or raise ``ValueError`` if it is not a known selection.
	"""

	if hand not in HAND_SELECTIONS:
		raise ValueError(f"Unknown hand selection {hand!r}. Available: {list(HAND_SELECTIONS)}")

	return hand


def left_hand_notes (voicing: typing.Sequence[int]) -> typing.List[int]:

	"""
	Return the bass note of an ascending voicing, moved down one octave.

	Returns an empty list for an empty voicing or when the octave shift would
	fall below note 0.
	"""

	if not voicing:
		return []

	bass = voicing[0] - fermata.constants.midi.SEMITONES_PER_OCTAVE

	if bass < fermata.constants.midi.NOTE_MIN:
		return []

	return [bass]


def right_hand_notes (voicing: typing.Sequence[int]) -> typing.List[int]:

	"""
	Return the upper notes of an ascending voicing (everything above the bass).
	"""

	return list(voicing[1:])


def split_chord (voicing: typing.Sequence[int], hand: str) -> typing.List[int]:

	"""Return the notes of a chord voicing that the selected hand(s) should play.

	Parameters:
		voicing: Ascending note numbers, as produced by ``Chord.midi_notes()``.
		hand: ``"left"``, ``"right"``, or ``"both"``.

	Returns:
		Ascending note numbers. For ``"both"`` this is exactly the left-hand
		notes followed by the right-hand notes.
	"""

	validate_hand(hand)

	if hand == HAND_LEFT:
		return left_hand_notes(voicing)

	if hand == HAND_RIGHT:
		return right_hand_notes(voicing)

	return left_hand_notes(voicing) + right_hand_notes(voicing)


def melodic_steps (
	sequence_at: typing.Callable[[int], typing.List[int]],
	start_octave: int,
	hand: str
) -> typing.List[typing.List[int]]:

	"""Lay out a single-note line for the selected hand(s).

	Parameters:
		sequence_at: Returns the full note sequence starting at a given octave
			(e.g. ``scale.full_sequence``).
		start_octave: Octave for the right hand. The left hand plays one lower.
		hand: ``"left"``, ``"right"``, or ``"both"``.

	Returns:
		One list of notes per step: ``[n]`` for a single hand, ``[left, right]``
		for both hands.

	Raises:
		ValueError: If the left hand is involved and ``start_octave`` is below 1.
	"""

	validate_hand(hand)

	if hand == HAND_RIGHT:
		return [[note] for note in sequence_at(start_octave)]

	if start_octave < 1:
		raise ValueError(
			f"start_octave must be >= 1 when the left hand plays (it plays at start_octave - 1), got {start_octave}"
		)

	left = sequence_at(start_octave - 1)

	if hand == HAND_LEFT:
		return [[note] for note in left]

	right = sequence_at(start_octave)

	return [[left_note, right_note] for left_note, right_note in zip(left, right)]
