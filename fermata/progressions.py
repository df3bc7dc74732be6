"""Named chord progressions for progression practice.

Each progression stores its chords as semitone offsets from the key root rather
than as scale degrees, so borrowed chords such as ♭VII sit alongside the
diatonic ones. Rendering a progression in a key adds the offsets to the key's
root note at the requested octave.

Example:
	```python
	progression = get_progression("I - V")
	progression.voicings("D", 4)  # [[62, 66, 69], [69, 73, 76]]
	```
"""

import dataclasses
import logging
import typing

import fermata.notes


logger = logging.getLogger(__name__)


DIFFICULTY_BEGINNER = "beginner"
DIFFICULTY_INTERMEDIATE = "intermediate"
DIFFICULTY_ADVANCED = "advanced"

DIFFICULTIES: typing.Tuple[str, ...] = (DIFFICULTY_BEGINNER, DIFFICULTY_INTERMEDIATE, DIFFICULTY_ADVANCED)

DIFFICULTY_NAMES: typing.Dict[str, str] = {
	DIFFICULTY_BEGINNER: "Beginner",
	DIFFICULTY_INTERMEDIATE: "Intermediate",
	DIFFICULTY_ADVANCED: "Advanced",
}

# Not a library entry: selects the smooth inversion workout over every diatonic
# triad (see fermata.chords.smooth_key_triad_progression).
SMOOTH_WORKOUT = "smooth"

# Triads as offsets from the key root.
_I = (0, 4, 7)
_II = (2, 5, 9)
_IV = (5, 9, 12)
_V = (7, 11, 14)
_VI = (9, 12, 16)
_FLAT_VII = (10, 14, 17)


@dataclasses.dataclass(frozen=True)
class ChordProgression:

	"""
	A named progression of triads.

	Attributes:
		name: Roman numeral name, e.g. ``"I - V - vi - IV"``.
		numerals: One roman numeral per chord.
		chords: One tuple of semitone offsets from the key root per chord.
		difficulty: ``"beginner"``, ``"intermediate"``, or ``"advanced"``.
		description: A short note on what the progression teaches.
	"""

	name: str
	numerals: typing.Tuple[str, ...]
	chords: typing.Tuple[typing.Tuple[int, ...], ...]
	difficulty: str
	description: str = ""


	def voicings (self, key: typing.Union[str, int], octave: int) -> typing.List[typing.List[int]]:

		"""Render every chord of the progression in a key.

		Notes that would land outside 0-127 are left out of their chord.

		Parameters:
			key: Key name or root pitch class.
			octave: Octave of the key root (4 puts C major's I chord on Middle C).
		"""

		root_note = fermata.notes.note_number(fermata.notes.resolve_pitch_class(key), octave)
		rendered: typing.List[typing.List[int]] = []

		for numeral, offsets in zip(self.numerals, self.chords):

			notes = [root_note + offset for offset in offsets]
			in_range = [note for note in notes if fermata.notes.in_range(note)]

			if len(in_range) < len(notes):
				logger.debug(f"{numeral} in {self.name}: dropped {len(notes) - len(in_range)} notes outside the MIDI range")

			rendered.append(in_range)

		return rendered


	@property
	def difficulty_name (self) -> str:

		return DIFFICULTY_NAMES[self.difficulty]


PROGRESSIONS: typing.List[ChordProgression] = [

	ChordProgression(
		name = "I - V",
		numerals = ("I", "V"),
		chords = (_I, _V),
		difficulty = DIFFICULTY_BEGINNER,
		description = "Tonic to dominant, the basic move from home to tension."
	),

	ChordProgression(
		name = "I - vi",
		numerals = ("I", "vi"),
		chords = (_I, _VI),
		difficulty = DIFFICULTY_BEGINNER,
		description = "Tonic to relative minor, two chords sharing two notes."
	),

	ChordProgression(
		name = "vi - IV",
		numerals = ("vi", "IV"),
		chords = (_VI, _IV),
		difficulty = DIFFICULTY_BEGINNER,
		description = "Relative minor lifting to the subdominant."
	),

	ChordProgression(
		name = "I - V - vi - IV",
		numerals = ("I", "V", "vi", "IV"),
		chords = (_I, _V, _VI, _IV),
		difficulty = DIFFICULTY_INTERMEDIATE,
		description = "The four-chord pop progression."
	),

	ChordProgression(
		name = "vi - IV - I - V",
		numerals = ("vi", "IV", "I", "V"),
		chords = (_VI, _IV, _I, _V),
		difficulty = DIFFICULTY_INTERMEDIATE,
		description = "The pop progression started from the relative minor, ending on the dominant."
	),

	ChordProgression(
		name = "I - vi - IV - V",
		numerals = ("I", "vi", "IV", "V"),
		chords = (_I, _VI, _IV, _V),
		difficulty = DIFFICULTY_INTERMEDIATE,
		description = "The doo-wop circle, closing on a dominant that leads back home."
	),

	ChordProgression(
		name = "ii - V - I",
		numerals = ("ii", "V", "I"),
		chords = (_II, _V, _I),
		difficulty = DIFFICULTY_ADVANCED,
		description = "The jazz cadence: subdominant minor through dominant to tonic."
	),

	ChordProgression(
		name = "I - ♭VII - IV",
		numerals = ("I", "♭VII", "IV"),
		chords = (_I, _FLAT_VII, _IV),
		difficulty = DIFFICULTY_ADVANCED,
		description = "Rock progression with the borrowed flat seven chord."
	),
]


def progression_names () -> typing.List[str]:

	"""
	Return the names of every progression in the library, in library order.
	"""

	return [progression.name for progression in PROGRESSIONS]


def get_progression (name: str) -> ChordProgression:

	"""Look up a progression by its roman numeral name.

	Raises:
		ValueError: If no progression has that name.
	"""

	for progression in PROGRESSIONS:
		if progression.name == name:
			return progression

	raise ValueError(f"Unknown progression {name!r}. Available: {progression_names()}")


def progressions_for_difficulty (difficulty: str) -> typing.List[ChordProgression]:

	"""Return the progressions at one difficulty level.

	Raises:
		ValueError: If the difficulty is not one of ``DIFFICULTIES``.
	"""

	if difficulty not in DIFFICULTIES:
		raise ValueError(f"Unknown difficulty {difficulty!r}. Available: {list(DIFFICULTIES)}")

	return [progression for progression in PROGRESSIONS if progression.difficulty == difficulty]
