import pytest

import fermata.chords
import fermata.voicings


def test_root_position_identity () -> None:

	"""Root position leaves the triad in order."""

	assert fermata.voicings.invert([0, 4, 7], "root") == [0, 4, 7]


def test_inversions_rotate () -> None:

	"""First inversion starts on the third, second inversion on the fifth."""

	assert fermata.voicings.invert([0, 4, 7], "first") == [4, 7, 0]
	assert fermata.voicings.invert([0, 4, 7], "second") == [7, 0, 4]


def test_invert_rejects_unknown_inversion () -> None:

	"""Only root, first and second inversions exist for triads."""

	with pytest.raises(ValueError):
		fermata.voicings.invert([0, 4, 7], "third")

	with pytest.raises(ValueError):
		fermata.voicings.invert([0, 4, 7, 10], "first")


def test_first_inversion_bumps_the_root () -> None:

	"""C major first inversion at octave 4 is E4 G4 C5."""

	assert fermata.voicings.voice_chord([4, 7, 0], 0, "first", 4) == [64, 67, 72]
	assert fermata.voicings.voice_chord([7, 0, 4], 0, "second", 4) == [67, 72, 76]


def test_inversion_below_root_moves_up () -> None:

	"""A minor inversions start above A4 rather than dropping below it."""

	assert fermata.voicings.voice_chord([0, 4, 9], 9, "first", 4) == [72, 76, 81]
	assert fermata.voicings.voice_chord([4, 9, 0], 9, "second", 4) == [76, 81, 84]


def test_notes_above_127_are_dropped () -> None:

	"""Members that cannot fit under 127 are dropped, never wrapped down."""

	# G9 is 127; B and D cannot be placed above it.
	assert fermata.voicings.voice_chord([7, 11, 2], 7, "root", 9) == [127]


def test_every_voicing_ascends_within_range () -> None:

	"""Every chord, inversion and octave voices strictly upwards within 0-127."""

	for quality in fermata.chords.CHORD_INTERVALS:
		for root in range(12):
			for inversion in fermata.voicings.INVERSIONS:

				chord = fermata.chords.get_chord(root, quality, inversion)

				for octave in range(-1, 10):

					notes = chord.midi_notes(octave)

					assert all(b > a for a, b in zip(notes, notes[1:])), (chord.name, octave, notes)
					assert all(0 <= note <= 127 for note in notes)

					if len(notes) == 3:
						assert fermata.voicings.chord_span(notes) <= 24
						assert fermata.voicings.validate_voicing(notes)


def test_validate_voicing () -> None:

	"""Voicings must have two or more ascending notes within two octaves."""

	assert fermata.voicings.validate_voicing([60, 64, 67])
	assert not fermata.voicings.validate_voicing([60])
	assert not fermata.voicings.validate_voicing([67, 64, 60])
	assert not fermata.voicings.validate_voicing([60, 60, 67])
	assert not fermata.voicings.validate_voicing([40, 64, 67])
	assert not fermata.voicings.validate_voicing([120, 124, 128])


def test_chord_span () -> None:

	"""Span is the distance from lowest to highest note."""

	assert fermata.voicings.chord_span([64, 67, 72]) == 8
	assert fermata.voicings.chord_span([]) == 0
