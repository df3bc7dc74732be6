import pytest

import fermata.notes


def test_middle_c () -> None:

	"""C4 is note 60."""

	assert fermata.notes.note_number(0, 4) == 60
	assert fermata.notes.note_number(9, 4) == 69


def test_round_trip_every_valid_note () -> None:

	"""Every (pitch class, octave) in range survives a round trip through note_to_info."""

	checked = 0

	for octave in range(-1, 10):
		for pitch_class in range(12):

			note = fermata.notes.note_number(pitch_class, octave)

			if note > 127:
				continue

			info = fermata.notes.note_to_info(note)

			assert (info.pitch_class, info.octave) == (pitch_class, octave)
			assert info.note == note
			checked += 1

	assert checked == 128


def test_note_to_info_display_name () -> None:

	"""Display names use sharps and include the octave."""

	info = fermata.notes.note_to_info(61)

	assert info.pitch_class == 1
	assert info.octave == 4
	assert info.display_name == "C#4"


def test_range_extremes () -> None:

	"""Note 0 is C-1 and note 127 is G9."""

	assert fermata.notes.note_name(0) == "C-1"
	assert fermata.notes.note_name(127) == "G9"


def test_out_of_range_raises () -> None:

	"""Notes outside 0-127 raise OutOfRangeError, which is a ValueError."""

	for note in (-1, 128, 200):
		with pytest.raises(fermata.notes.OutOfRangeError):
			fermata.notes.note_to_info(note)

	assert issubclass(fermata.notes.OutOfRangeError, ValueError)


def test_note_number_is_not_clamped () -> None:

	"""Extreme octaves give numbers outside the MIDI range rather than clamping."""

	assert fermata.notes.note_number(0, 10) == 132
	assert fermata.notes.note_number(0, -2) == -12
	assert not fermata.notes.in_range(132)


def test_key_names_accept_flats () -> None:

	"""Key names may be given with sharps or flats."""

	assert fermata.notes.key_name_to_pc("Bb") == 10
	assert fermata.notes.key_name_to_pc("A#") == 10
	assert fermata.notes.key_name_to_pc("Gb") == fermata.notes.key_name_to_pc("F#")


def test_unknown_key_name_raises () -> None:

	"""An unrecognised key name raises ValueError naming the key."""

	with pytest.raises(ValueError, match="H"):
		fermata.notes.key_name_to_pc("H")


def test_resolve_pitch_class () -> None:

	"""Names and pitch classes both resolve; pitch classes must be 0-11."""

	assert fermata.notes.resolve_pitch_class("E") == 4
	assert fermata.notes.resolve_pitch_class(4) == 4

	with pytest.raises(ValueError):
		fermata.notes.resolve_pitch_class(12)
