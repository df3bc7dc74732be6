"""MIDI protocol constants.

Values defined by the MIDI 1.0 standard. Convention: **C4 = 60** (Middle C),
so ``note = (octave + 1) * 12 + pitch_class``.

Status bytes are the high nibble of a channel message; the low nibble carries the
channel (0-15 on the wire, reported 1-16 by the parser).
"""

# Note and data byte ranges (7-bit).
NOTE_MIN = 0
NOTE_MAX = 127
DATA_MAX = 127
STATUS_MAX = 0xFF
SEMITONES_PER_OCTAVE = 12

# Channel message status nibbles.
STATUS_NOTE_OFF = 0x80
STATUS_NOTE_ON = 0x90
STATUS_CONTROL_CHANGE = 0xB0
STATUS_PROGRAM_CHANGE = 0xC0
STATUS_PITCH_BEND = 0xE0

STATUS_MASK = 0xF0
CHANNEL_MASK = 0x0F
CHANNEL_COUNT = 16

# System real-time messages that carry no performance information.
STATUS_TIMING_CLOCK = 0xF8
STATUS_ACTIVE_SENSING = 0xFE

# Controller numbers.
CC_ALL_NOTES_OFF = 123

# Pitch bend is a 14-bit value: 0 = full down, 8192 = centre, 16383 = full up.
PITCH_BEND_RAW_MAX = 0x3FFF

# Longest byte sequence the parser will consider.
MAX_MESSAGE_LENGTH = 256
