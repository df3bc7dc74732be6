import pytest

import fermata.scales


def test_c_major_pitch_classes () -> None:

	"""C major walks the white keys and repeats the root."""

	scale = fermata.scales.get_scale("C", "major")

	assert scale.notes() == [0, 2, 4, 5, 7, 9, 11, 0]
	assert scale.degrees() == [0, 2, 4, 5, 7, 9, 11]
	assert scale.name == "C Major (Ionian)"


def test_midi_notes_wrap_into_next_octave () -> None:

	"""The octave moves up where the pitch classes wrap past B."""

	assert fermata.scales.get_scale("C", "major").midi_notes(4) == [60, 62, 64, 65, 67, 69, 71, 72]
	assert fermata.scales.get_scale("A", "minor").midi_notes(4) == [69, 71, 72, 74, 76, 77, 79, 81]
	assert fermata.scales.get_scale("D", "dorian").midi_notes(4) == [62, 64, 65, 67, 69, 71, 72, 74]


def test_every_scale_ascends_strictly () -> None:

	"""Every scale in every key climbs note by note and spans exactly one octave."""

	for scale_type in fermata.scales.SCALE_STEPS:
		for key in range(12):

			notes = fermata.scales.get_scale(key, scale_type).midi_notes(3)

			assert all(b > a for a, b in zip(notes, notes[1:])), (scale_type, key)
			assert notes[-1] - notes[0] == 12


def test_full_sequence_is_palindrome () -> None:

	"""Up and back down reads the same both ways, with the top note played once."""

	for scale_type in fermata.scales.SCALE_STEPS:

		full = fermata.scales.get_scale("F#", scale_type).full_sequence(4)
		n = len(full)

		assert n == 15
		assert all(full[i] == full[n - 1 - i] for i in range(n))

		peak = max(full)
		assert full.count(peak) == 1
		assert full[7] == peak


def test_c_major_full_sequence () -> None:

	"""The exact up/down sequence for C major."""

	assert fermata.scales.get_scale("C", "major").full_sequence(4) == [
		60, 62, 64, 65, 67, 69, 71, 72, 71, 69, 67, 65, 64, 62, 60
	]


def test_aeolian_matches_natural_minor () -> None:

	"""Aeolian and natural minor share their steps but keep their own names."""

	aeolian = fermata.scales.get_scale("E", "aeolian")
	minor = fermata.scales.get_scale("E", "minor")

	assert aeolian.notes() == minor.notes()
	assert minor.name == "E Natural Minor"
	assert aeolian.name == "E Aeolian"


def test_hand_sequences () -> None:

	"""Right hand plays at the start octave, left an octave down, both in pairs."""

	scale = fermata.scales.get_scale("C", "major")

	right = scale.hand_sequence(4, "right")
	left = scale.hand_sequence(4, "left")
	both = scale.hand_sequence(4, "both")

	assert right[:3] == [[60], [62], [64]]
	assert left[:3] == [[48], [50], [52]]
	assert both[:3] == [[48, 60], [50, 62], [52, 64]]
	assert len(right) == len(left) == len(both) == 15


def test_left_hand_needs_room_below () -> None:

	"""The left hand cannot play below octave 0."""

	scale = fermata.scales.get_scale("C", "major")

	with pytest.raises(ValueError):
		scale.hand_sequence(0, "left")

	assert scale.hand_sequence(0, "right")[0] == [12]


def test_unknown_scale_type_raises () -> None:

	"""Unknown scale types raise ValueError listing the choices."""

	with pytest.raises(ValueError, match="dorian"):
		fermata.scales.get_scale("C", "bebop")
