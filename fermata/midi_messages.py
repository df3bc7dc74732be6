"""Build outgoing MIDI messages for virtual keyboard playback.

These are the byte shapes a MIDI transport sends when the on-screen keyboard is
played, and the shapes :func:`fermata.midi_parser.parse` reads back. Channels
here are 0-15 (mido's convention); the parser reports them as 1-16.

Each builder constructs a ``mido.Message`` so mido validates the ranges, then
returns its raw bytes.
"""

import typing

import mido

import fermata.constants.midi


def note_on_message (note: int, velocity: int = 100, channel: int = 0) -> mido.Message:

	"""
	Return a note on message. Raises ``ValueError`` for out-of-range values.
	"""

	return mido.Message("note_on", channel=channel, note=note, velocity=velocity)


def note_off_message (note: int, channel: int = 0) -> mido.Message:

	"""
	Return a note off message with release velocity 0.
	"""

	return mido.Message("note_off", channel=channel, note=note, velocity=0)


def note_on (note: int, velocity: int = 100, channel: int = 0) -> typing.List[int]:

	"""Return ``[0x90 | channel, note, velocity]``.

	Example:
		```python
		note_on(60, 100)  # [144, 60, 100]
		```
	"""

	return note_on_message(note, velocity, channel).bytes()


def note_off (note: int, channel: int = 0) -> typing.List[int]:

	"""Return ``[0x80 | channel, note, 0]``."""

	return note_off_message(note, channel).bytes()


def all_notes_off_messages () -> typing.List[mido.Message]:

	"""
	Return an All Notes Off control change (CC 123, value 0) for each of the 16 channels.
	"""

	return [
		mido.Message("control_change", channel=channel, control=fermata.constants.midi.CC_ALL_NOTES_OFF, value=0)
		for channel in range(fermata.constants.midi.CHANNEL_COUNT)
	]


def all_notes_off () -> typing.List[typing.List[int]]:

	"""Return ``[0xB0 | channel, 123, 0]`` for channels 0-15, in channel order."""

	return [message.bytes() for message in all_notes_off_messages()]
