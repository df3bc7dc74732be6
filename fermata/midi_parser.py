"""Parse raw MIDI bytes into performance events.

The parser is the boundary between a live MIDI stream and the practice session.
It never raises: anything malformed is logged at debug level and dropped, so a
glitch on the wire cannot interrupt practice.

Accepted shapes:

- Three or more bytes: channel voice messages. Note on with velocity 0 is
  reported as note off.
- Two bytes: program change only.
- Timing clock (0xF8) and active sensing (0xFE) are ignored outright.

Channels are reported 1-16.

Example:
	```python
	event = parse(bytes([0x90, 60, 100]))
	event.kind     # "note_on"
	event.display  # "Note ON: 60 (Ch: 1, Vel: 100)"
	```
"""

import dataclasses
import logging
import typing

import mido

import fermata.constants.midi


logger = logging.getLogger(__name__)


EVENT_NOTE_ON = "note_on"
EVENT_NOTE_OFF = "note_off"
EVENT_CONTROL_CHANGE = "control_change"
EVENT_PROGRAM_CHANGE = "program_change"
EVENT_PITCH_BEND = "pitch_bend"
EVENT_OTHER = "other"

_IGNORED_STATUSES = (
	fermata.constants.midi.STATUS_TIMING_CLOCK,
	fermata.constants.midi.STATUS_ACTIVE_SENSING,
)


@dataclasses.dataclass(frozen=True)
class PerformanceEvent:

	"""
	One parsed MIDI message.

	Attributes:
		status: The raw status byte, channel nibble included.
		channel: MIDI channel, 1-16.
		data1: First data byte (note, controller, or program number).
		data2: Second data byte (velocity or value), 0 when absent.
		kind: One of the ``EVENT_*`` names.
		display: A short human readable description.
		value: Normalised pitch bend in -1.0 to 1.0 (pitch bend events only).
	"""

	status: int
	channel: int
	data1: int
	data2: int
	kind: str
	display: str
	value: typing.Optional[float] = None


	@property
	def note (self) -> int:

		"""Alias for ``data1`` on note events."""

		return self.data1


	@property
	def velocity (self) -> int:

		"""Alias for ``data2`` on note events."""

		return self.data2


def pitch_bend_value (data1: int, data2: int) -> float:

	"""Convert the two 7-bit pitch bend bytes (LSB, MSB) to a value in -1.0 to 1.0.

	Example:
		```python
		pitch_bend_value(0, 0)       # -1.0
		pitch_bend_value(127, 127)   # 1.0
		```
	"""

	raw = data1 + (data2 << 7)

	return (raw / fermata.constants.midi.PITCH_BEND_RAW_MAX) * 2.0 - 1.0


def _hex_dump (status: int, data: typing.Sequence[int]) -> str:

	bytes_text = " ".join(f"0x{byte:02X}" for byte in data)

	return f"MIDI: Status 0x{status:02X} Data: {bytes_text}"


def _parse_three_byte (data: typing.Sequence[int]) -> PerformanceEvent:

	status = data[0]
	message_type = status & fermata.constants.midi.STATUS_MASK
	channel = (status & fermata.constants.midi.CHANNEL_MASK) + 1
	data1 = data[1]
	data2 = data[2]

	if message_type == fermata.constants.midi.STATUS_NOTE_ON and data2 > 0:
		return PerformanceEvent(status, channel, data1, data2, EVENT_NOTE_ON, f"Note ON: {data1} (Ch: {channel}, Vel: {data2})")

	# Note on with velocity 0 is a note off.
	if message_type in (fermata.constants.midi.STATUS_NOTE_ON, fermata.constants.midi.STATUS_NOTE_OFF):
		return PerformanceEvent(status, channel, data1, data2, EVENT_NOTE_OFF, f"Note OFF: {data1} (Ch: {channel})")

	if message_type == fermata.constants.midi.STATUS_CONTROL_CHANGE:
		return PerformanceEvent(status, channel, data1, data2, EVENT_CONTROL_CHANGE, f"CC: Controller {data1} = {data2} (Ch: {channel})")

	if message_type == fermata.constants.midi.STATUS_PROGRAM_CHANGE:
		return PerformanceEvent(status, channel, data1, data2, EVENT_PROGRAM_CHANGE, f"Program Change: {data1} (Ch: {channel})")

	if message_type == fermata.constants.midi.STATUS_PITCH_BEND:
		value = pitch_bend_value(data1, data2)
		return PerformanceEvent(status, channel, data1, data2, EVENT_PITCH_BEND, f"Pitch Bend: {value:.2f} (Ch: {channel})", value)

	return PerformanceEvent(status, channel, data1, data2, EVENT_OTHER, _hex_dump(status, data))


def parse (data: typing.Sequence[int]) -> typing.Optional[PerformanceEvent]:

	"""Parse one raw MIDI message.

	Parameters:
		data: The message bytes (``bytes``, ``bytearray`` or a list of ints).

	Returns:
		The parsed event, or ``None`` if the message is malformed, ignored,
		or of a shape this parser does not report.
	"""

	if len(data) == 0:
		logger.debug("Dropping empty MIDI message")
		return None

	if len(data) > fermata.constants.midi.MAX_MESSAGE_LENGTH:
		logger.debug(f"Dropping {len(data)} byte MIDI message (limit {fermata.constants.midi.MAX_MESSAGE_LENGTH})")
		return None

	status = data[0]

	if not 0 <= status <= fermata.constants.midi.STATUS_MAX:
		logger.debug(f"Dropping MIDI message with a status outside 0-{fermata.constants.midi.STATUS_MAX}: {list(data)}")
		return None

	if any(not 0 <= byte <= fermata.constants.midi.DATA_MAX for byte in data[1:]):
		logger.debug(f"Dropping MIDI message with a data byte outside 0-{fermata.constants.midi.DATA_MAX}: {list(data)}")
		return None

	if status in _IGNORED_STATUSES:
		return None

	if len(data) >= 3:
		return _parse_three_byte(data)

	if len(data) == 2 and status & fermata.constants.midi.STATUS_MASK == fermata.constants.midi.STATUS_PROGRAM_CHANGE:
		channel = (status & fermata.constants.midi.CHANNEL_MASK) + 1
		return PerformanceEvent(status, channel, data[1], 0, EVENT_PROGRAM_CHANGE, f"Program Change: {data[1]} (Ch: {channel})")

	logger.debug(f"Dropping unsupported {len(data)} byte MIDI message: {list(data)}")
	return None


def parse_message (message: mido.Message) -> typing.Optional[PerformanceEvent]:

	"""
	Parse a ``mido.Message`` (as delivered by a mido input port) via its raw bytes.
	"""

	return parse(message.bytes())


def parse_stream (chunks: typing.Iterable[typing.Sequence[int]]) -> typing.Iterator[PerformanceEvent]:

	"""Parse a sequence of raw messages, yielding only the ones that produce events.

	Example:
		```python
		events = list(parse_stream([b"\\xf8", b"\\x90\\x3c\\x64", b"\\x80\\x3c\\x00"]))
		[e.kind for e in events]  # ["note_on", "note_off"]
		```
	"""

	for chunk in chunks:

		event = parse(chunk)

		if event is not None:
			yield event
