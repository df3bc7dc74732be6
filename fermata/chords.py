"""Triads, diatonic chord qualities, and chord progressions.

This module provides chord quality definitions, the `Chord` class, and the
builders that turn a key into practice progressions.

Module-level constants:
- `CHORD_INTERVALS`: Maps chord quality names to interval lists (semitones from root)
- `CHORD_SUFFIX`: Maps chord quality names to name suffixes (e.g. `"m"`, `"°"`)
- `CHORD_TYPE_NAMES`: Maps chord quality names to long display names
- `INVERSION_NAMES`: Maps inversion names to the suffix shown in chord names

Chord qualities: `"major"`, `"minor"`, `"diminished"`, `"augmented"`

Progressions:
- `key_triad_progression()`: root, 1st and 2nd inversion of every diatonic triad
- `smooth_key_triad_progression()`: root → 1st → 2nd → 1st for every diatonic
  triad, a natural hand movement for learning inversions
- `progressive_voicings()`: voices a progression chord-by-chord, lifting a
  chord an octave when it would otherwise leap down more than a fifth
"""

import dataclasses
import logging
import typing

import fermata.constants.midi
import fermata.constants.practice
import fermata.hands
import fermata.notes
import fermata.scales
import fermata.voicings


logger = logging.getLogger(__name__)


CHORD_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 4, 7],
	"minor": [0, 3, 7],
	"diminished": [0, 3, 6],
	"augmented": [0, 4, 8],
}

CHORD_SUFFIX: typing.Dict[str, str] = {
	"major": "",
	"minor": "m",
	"diminished": "°",
	"augmented": "+",
}

CHORD_TYPE_NAMES: typing.Dict[str, str] = {
	"major": "Major",
	"minor": "Minor",
	"diminished": "Diminished",
	"augmented": "Augmented",
}

INVERSION_NAMES: typing.Dict[str, str] = {
	"root": "",
	"first": "1st inv",
	"second": "2nd inv",
}

# (root → third, third → fifth) in semitones, for naming diatonic triads.
_THIRDS_TO_QUALITY: typing.Dict[typing.Tuple[int, int], str] = {
	(4, 3): "major",
	(3, 4): "minor",
	(3, 3): "diminished",
	(4, 4): "augmented",
}


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	A triad in a specific inversion.

	Attributes:
		pitch_classes: Chord members in inversion order, bass first.
		quality: Key into ``CHORD_INTERVALS``.
		inversion: ``"root"``, ``"first"``, or ``"second"``.
		name: Display name, e.g. ``"Am (1st inv)"``.
		root_pc: Pitch class of the chord root.
	"""

	pitch_classes: typing.Tuple[int, ...]
	quality: str
	inversion: str
	name: str
	root_pc: int


	def midi_notes (self, octave: int) -> typing.List[int]:

		"""Return the chord as strictly ascending note numbers.

		See :func:`fermata.voicings.voice_chord` for the voicing rules.

		Example:
			```python
			get_chord("C", "major", "first").midi_notes(4)  # [64, 67, 72] - E4 G4 C5
			```
		"""

		return fermata.voicings.voice_chord(self.pitch_classes, self.root_pc, self.inversion, octave)


	def midi_notes_for_hand (self, octave: int, hand: str) -> typing.List[int]:

		"""
		Return the notes of this chord that the selected hand(s) play.

		See :func:`fermata.hands.split_chord`.
		"""

		return fermata.hands.split_chord(self.midi_notes(octave), hand)


	@property
	def root_name (self) -> str:

		"""
		Return the sharp-only name of the chord root, e.g. ``"F#"``.
		"""

		return fermata.notes.pitch_class_name(self.root_pc)


def chord_name (root_pc: int, quality: str, inversion: str) -> str:

	"""
	Return a chord display name such as ``"C"``, ``"Dm (1st inv)"``, or ``"B° (2nd inv)"``.
	"""

	base = f"{fermata.notes.pitch_class_name(root_pc)}{CHORD_SUFFIX[quality]}"
	inversion_name = INVERSION_NAMES[inversion]

	if not inversion_name:
		return base

	return f"{base} ({inversion_name})"


def get_chord (root: typing.Union[str, int], quality: str, inversion: str = "root") -> Chord:

	"""Build a triad from a root, quality, and inversion.

	Parameters:
		root: Root note name (``"C"``, ``"F#"``, ``"Bb"``) or pitch class (0-11).
		quality: One of the keys of ``CHORD_INTERVALS``.
		inversion: ``"root"``, ``"first"``, or ``"second"``.

	Raises:
		ValueError: If the root, quality, or inversion is unknown.

	Example:
		```python
		chord = get_chord("A", "minor", "second")
		chord.pitch_classes  # (4, 9, 0) - E A C
		chord.name           # "Am (2nd inv)"
		```
	"""

	if quality not in CHORD_INTERVALS:
		raise ValueError(f"Unknown chord quality {quality!r}. Available: {sorted(CHORD_INTERVALS)}")

	root_pc = fermata.notes.resolve_pitch_class(root)
	root_position = [(root_pc + interval) % 12 for interval in CHORD_INTERVALS[quality]]

	return Chord(
		pitch_classes = tuple(fermata.voicings.invert(root_position, inversion)),
		quality = quality,
		inversion = inversion,
		name = chord_name(root_pc, quality, inversion),
		root_pc = root_pc
	)


def _interval_between (lower_pc: int, upper_pc: int) -> int:

	"""Return the upward distance in semitones from one pitch class to another (0-11)."""

	return (upper_pc - lower_pc) % 12


def chords_in_key (key: typing.Union[str, int], scale_type: str) -> typing.List[str]:

	"""Return the triad quality built on each of the seven scale degrees.

	Each degree is stacked in thirds using the scale itself (degree, degree + 2,
	degree + 4, wrapping around the seven degrees) and the two stacked thirds
	are matched against the four triad qualities. A pair that matches none of
	them falls back to ``"major"`` and logs a warning.

	Example:
		```python
		chords_in_key("C", "major")
		# ["major", "minor", "minor", "major", "major", "minor", "diminished"]
		```
	"""

	degrees = fermata.scales.get_scale(key, scale_type).degrees()
	qualities: typing.List[str] = []

	for i in range(7):

		root = degrees[i]
		third = degrees[(i + 2) % 7]
		fifth = degrees[(i + 4) % 7]

		thirds = (_interval_between(root, third), _interval_between(third, fifth))

		quality = _THIRDS_TO_QUALITY.get(thirds)

		if quality is None:
			logger.warning(f"No triad quality for stacked thirds {thirds} on degree {i + 1}; using major")
			quality = "major"

		qualities.append(quality)

	return qualities


def diatonic_triads (key: typing.Union[str, int], scale_type: str) -> typing.List[Chord]:

	"""
	Return the root-position triad on each scale degree (I through vii).
	"""

	degrees = fermata.scales.get_scale(key, scale_type).degrees()
	qualities = chords_in_key(key, scale_type)

	return [get_chord(root_pc, quality) for root_pc, quality in zip(degrees, qualities)]


def key_triad_progression (key: typing.Union[str, int], scale_type: str) -> typing.List[Chord]:

	"""
	Return root, 1st and 2nd inversion of each diatonic triad in turn (21 chords).
	"""

	progression: typing.List[Chord] = []

	for triad in diatonic_triads(key, scale_type):
		for inversion in fermata.voicings.INVERSIONS:
			progression.append(get_chord(triad.root_pc, triad.quality, inversion))

	return progression


def smooth_key_triad_progression (key: typing.Union[str, int], scale_type: str) -> typing.List[Chord]:

	"""Return the inversion workout for every diatonic triad (28 chords).

	Each triad is played root → 1st → 2nd → 1st before moving to the next scale
	degree, so the hand climbs through the inversions and comes back one step
	before shifting.
	"""

	progression: typing.List[Chord] = []

	for triad in diatonic_triads(key, scale_type):
		for inversion in ("root", "first", "second", "first"):
			progression.append(get_chord(triad.root_pc, triad.quality, inversion))

	return progression


def progression_midi_sequence (key: typing.Union[str, int], scale_type: str, start_octave: int) -> typing.List[int]:

	"""
	Return every note of :func:`key_triad_progression`, all voiced at one octave.
	"""

	sequence: typing.List[int] = []

	for chord in key_triad_progression(key, scale_type):
		sequence.extend(chord.midi_notes(start_octave))

	return sequence


def progressive_voicings (chords: typing.Sequence[Chord], start_octave: int) -> typing.List[typing.List[int]]:

	"""Voice a progression so it never leaps down by more than a fifth.

	Chords are voiced one after another at a working octave. When a chord's
	lowest note would land more than ``MAX_DOWNWARD_LEAP`` semitones below the
	previous chord's highest note, it is voiced one octave higher instead and
	the working octave stays raised for the chords that follow. The higher
	voicing is only used if it keeps every note within 0-127; otherwise the
	chord stays where it was.

	The climb is bounded: once the working octave is too high to hold a whole
	chord, it drops back (never below ``start_octave``) until the chord fits.

	Parameters:
		chords: The progression, in playing order.
		start_octave: Working octave for the first chord.

	Returns:
		One ascending voicing per chord.
	"""

	octave = start_octave
	previous_highest: typing.Optional[int] = None
	result: typing.List[typing.List[int]] = []

	for chord in chords:

		size = len(chord.pitch_classes)
		voicing = chord.midi_notes(octave)

		while len(voicing) < size and octave > start_octave:
			octave -= 1
			voicing = chord.midi_notes(octave)
			logger.debug(f"Dropping back to octave {octave} so {chord.name} keeps all its notes")

		if previous_highest is not None and voicing:

			if previous_highest - voicing[0] > fermata.constants.practice.MAX_DOWNWARD_LEAP:

				higher = chord.midi_notes(octave + 1)

				if len(higher) == size and higher[-1] <= fermata.constants.midi.NOTE_MAX:
					octave += 1
					voicing = higher

				else:
					logger.debug(f"Keeping {chord.name} at octave {octave}: one octave up leaves the MIDI range")

		result.append(voicing)

		if voicing:
			previous_highest = voicing[-1]

	return result


def smooth_progression_midi_sequence (key: typing.Union[str, int], scale_type: str, start_octave: int) -> typing.List[int]:

	"""
	Return every note of the smooth progression with progressive octave placement.
	"""

	voicings = progressive_voicings(smooth_key_triad_progression(key, scale_type), start_octave)

	return [note for voicing in voicings for note in voicing]


def chord_type_sequence (
	quality: str,
	include_inversions: bool = True,
	start_key: typing.Union[str, int] = "C"
) -> typing.List[Chord]:

	"""Return one chord quality planed through all 12 chromatic roots.

	Parameters:
		quality: One of the keys of ``CHORD_INTERVALS``.
		include_inversions: Follow each root position chord with its 1st and
			2nd inversions.
		start_key: First root of the chromatic walk (default C).

	Example:
		```python
		chords = chord_type_sequence("minor", include_inversions=False)
		[c.name for c in chords[:3]]  # ["Cm", "C#m", "Dm"]
		```
	"""

	start_pc = fermata.notes.resolve_pitch_class(start_key)
	inversions = fermata.voicings.INVERSIONS if include_inversions else ("root",)

	chords: typing.List[Chord] = []

	for offset in range(12):
		root_pc = (start_pc + offset) % 12

		for inversion in inversions:
			chords.append(get_chord(root_pc, quality, inversion))

	return chords
