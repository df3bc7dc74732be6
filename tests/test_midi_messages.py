import mido
import pytest

import fermata.midi_messages


def test_note_on_bytes () -> None:

	"""Note on is [0x90 | channel, note, velocity]."""

	assert fermata.midi_messages.note_on(60, 100) == [0x90, 60, 100]
	assert fermata.midi_messages.note_on(60, 100, channel=15) == [0x9F, 60, 100]


def test_note_off_bytes () -> None:

	"""Note off is [0x80 | channel, note, 0]."""

	assert fermata.midi_messages.note_off(60) == [0x80, 60, 0]
	assert fermata.midi_messages.note_off(72, channel=1) == [0x81, 72, 0]


def test_all_notes_off_covers_every_channel () -> None:

	"""All notes off sends CC 123 with value 0 on all sixteen channels."""

	messages = fermata.midi_messages.all_notes_off()

	assert len(messages) == 16
	assert messages[0] == [0xB0, 123, 0]
	assert messages[15] == [0xBF, 123, 0]


def test_message_objects () -> None:

	"""The mido message builders are usable directly with a mido output port."""

	message = fermata.midi_messages.note_on_message(64, 80, channel=3)

	assert isinstance(message, mido.Message)
	assert message.type == "note_on"
	assert message.channel == 3
	assert all(m.control == 123 for m in fermata.midi_messages.all_notes_off_messages())


def test_out_of_range_values_raise () -> None:

	"""mido rejects notes, velocities and channels outside their ranges."""

	with pytest.raises(ValueError):
		fermata.midi_messages.note_on(128)

	with pytest.raises(ValueError):
		fermata.midi_messages.note_on(60, 128)

	with pytest.raises(ValueError):
		fermata.midi_messages.note_off(60, channel=16)
