"""Pitch classes, note numbers, and note display names.

Pitch classes are integers 0-11 (0 = C, 1 = C#, ... 11 = B). Note numbers follow
the MIDI convention where Middle C (C4) is 60::

	note_number = (octave + 1) * 12 + pitch_class

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g. `"C"`, `"F#"`, `"Bb"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to sharp-only display names

Conversion from pitch class and octave never fails, but the result can fall outside
0-127 for extreme octaves. Conversion from a note number back to a pitch class and
octave raises :class:`OutOfRangeError` for anything outside 0-127.
"""

import dataclasses
import typing

import fermata.constants.midi


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


class OutOfRangeError (ValueError):

	"""A note number fell outside the MIDI range 0-127."""


@dataclasses.dataclass(frozen=True)
class NoteInfo:

	"""
	A note number broken down into pitch class and octave.

	Attributes:
		pitch_class: 0-11 (0 = C).
		octave: Octave number, where C4 = 60.
		note: The MIDI note number (0-127).
		display_name: Sharp-only name with octave, e.g. ``"C#4"``.
	"""

	pitch_class: int
	octave: int
	note: int
	display_name: str


def key_name_to_pc (key_name: str) -> int:

	"""Validate a key name and return its pitch class (0-11).

	Parameters:
		key_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Returns:
		Pitch class integer (0-11).

	Raises:
		ValueError: If the key name is not recognised.

	Example:
		```python
		key_name_to_pc("C")   # → 0
		key_name_to_pc("F#")  # → 6
		key_name_to_pc("Bb")  # → 10
		```
	"""

	if key_name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown key name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[key_name]


def resolve_pitch_class (key: typing.Union[str, int]) -> int:

	"""
	Accept a key name or a pitch class and return the pitch class.
	"""

	if isinstance(key, str):
		return key_name_to_pc(key)

	if not 0 <= key <= 11:
		raise ValueError(f"Pitch class must be between 0 and 11, got {key}")

	return key


def pitch_class_name (pitch_class: int) -> str:

	"""
	Return the sharp-only name of a pitch class, e.g. ``1 → "C#"``.
	"""

	return PC_TO_NOTE_NAME[pitch_class % 12]


def note_number (pitch_class: int, octave: int) -> int:

	"""Return the note number for a pitch class in an octave.

	No range check is made: octave 10 or octave -2 produce values outside 0-127,
	and it is up to the caller to decide what to do with them.

	Example:
		```python
		note_number(0, 4)   # → 60 (C4, Middle C)
		note_number(9, 4)   # → 69 (A4)
		note_number(0, -1)  # → 0
		```
	"""

	return (octave + 1) * fermata.constants.midi.SEMITONES_PER_OCTAVE + pitch_class


def display_name (pitch_class: int, octave: int) -> str:

	"""
	Return a display name such as ``"F#3"``.
	"""

	return f"{pitch_class_name(pitch_class)}{octave}"


def note_to_info (note: int) -> NoteInfo:

	"""Break a note number into pitch class, octave, and display name.

	Parameters:
		note: MIDI note number.

	Returns:
		A :class:`NoteInfo` for the note.

	Raises:
		OutOfRangeError: If ``note`` is outside 0-127.

	Example:
		```python
		info = note_to_info(61)
		info.pitch_class   # → 1
		info.octave        # → 4
		info.display_name  # → "C#4"
		```
	"""

	if note < fermata.constants.midi.NOTE_MIN or note > fermata.constants.midi.NOTE_MAX:
		raise OutOfRangeError(f"MIDI note must be between 0 and 127, got {note}")

	octave = note // 12 - 1
	pitch_class = note % 12

	return NoteInfo(
		pitch_class = pitch_class,
		octave = octave,
		note = note,
		display_name = display_name(pitch_class, octave)
	)


def note_name (note: int) -> str:

	"""
	Return the display name of a note number, e.g. ``60 → "C4"``.
	"""

	return note_to_info(note).display_name


def in_range (note: int) -> bool:

	"""
	Return True if the note number is a valid MIDI note.
	"""

	return fermata.constants.midi.NOTE_MIN <= note <= fermata.constants.midi.NOTE_MAX
