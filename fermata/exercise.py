"""The exercise model: an ordered list of steps to play.

A step is the set of notes that must be held together to move on. Order within
a step does not matter, which is why notes are a frozenset. An exercise is never
edited in place; a settings change builds a new one.
"""

import dataclasses
import typing


MODE_SCALES = "scales"
MODE_CHORDS_BY_KEY = "chords_by_key"
MODE_CHORDS_BY_TYPE = "chords_by_type"
MODE_CHORD_PROGRESSIONS = "chord_progressions"
MODE_ARPEGGIOS = "arpeggios"

MODES: typing.Tuple[str, ...] = (
	MODE_SCALES,
	MODE_CHORDS_BY_KEY,
	MODE_CHORDS_BY_TYPE,
	MODE_CHORD_PROGRESSIONS,
	MODE_ARPEGGIOS,
)


@dataclasses.dataclass(frozen=True)
class Step:

	"""
	One unit of an exercise.

	Attributes:
		notes: Note numbers that must sound together. Never empty.
		metadata: Display information, e.g. ``{"position": 0, "chord_name": "C"}``.
	"""

	notes: typing.FrozenSet[int]
	metadata: typing.Dict[str, typing.Any] = dataclasses.field(default_factory=dict, compare=False)


	def __post_init__ (self) -> None:

		if not self.notes:
			raise ValueError("A step must contain at least one note")


	def sorted_notes (self) -> typing.List[int]:

		"""Return the notes lowest first."""

		return sorted(self.notes)


@dataclasses.dataclass(frozen=True)
class Exercise:

	"""
	An ordered sequence of steps plus a description of how it was built.

	Attributes:
		steps: The steps, in playing order.
		metadata: ``exercise_type``, ``key``, ``hand_selection`` and the
			mode-specific selection names.
	"""

	steps: typing.Tuple[Step, ...]
	metadata: typing.Dict[str, typing.Any] = dataclasses.field(default_factory=dict, compare=False)


	def __len__ (self) -> int:

		return len(self.steps)


	@property
	def exercise_type (self) -> typing.Optional[str]:

		return self.metadata.get("exercise_type")


	def notes_at (self, index: int) -> typing.FrozenSet[int]:

		"""Return the notes of step ``index``, or an empty set past the end."""

		if 0 <= index < len(self.steps):
			return self.steps[index].notes

		return frozenset()


def make_steps (
	note_lists: typing.Iterable[typing.Sequence[int]],
	metadata: typing.Optional[typing.Iterable[typing.Dict[str, typing.Any]]] = None
) -> typing.Tuple[Step, ...]:

	"""Turn per-step note lists into steps, skipping any that are empty.

	Each step's metadata gets a ``position`` (its index in the final exercise)
	merged into the matching entry of ``metadata``, when given.
	"""

	metadata_list = list(metadata) if metadata is not None else None
	steps: typing.List[Step] = []

	for i, notes in enumerate(note_lists):

		if not notes:
			continue

		step_metadata: typing.Dict[str, typing.Any] = {}

		if metadata_list is not None:
			step_metadata.update(metadata_list[i])

		step_metadata["position"] = len(steps)
		steps.append(Step(notes=frozenset(notes), metadata=step_metadata))

	return tuple(steps)
