"""The practice session state machine.

A session walks through an exercise one step at a time. The player holds down
notes; when the held notes are exactly the current step's notes the session
moves on. Matching is strict: a partial chord does not count, and neither does
the right chord with an extra note held.

States::

	inactive --start--> active --last step matched--> completed
	    ^                  |                              |
	    +------reset-------+------------reset-------------+

The transitions are pure functions over an immutable :class:`SessionState`.
:class:`PracticeSession` owns the current state, applies transitions, and emits
two events through its :class:`~fermata.event_emitter.EventEmitter`:

- ``"highlighted_notes_changed"`` with the notes to play next (an empty set
  when the session is not active)
- ``"exercise_completed"`` once each time the last step is matched

A session is single-writer: feed it from one thread or one asyncio task (see
:class:`fermata.live_input.LiveInput`).

Example:
	```python
	session = PracticeSession(exercise)
	session.events.on("exercise_completed", lambda: print("Done!"))
	session.start()
	session.note_on(60)
	```
"""

import dataclasses
import logging
import typing

import fermata.event_emitter
import fermata.exercise
import fermata.midi_parser


logger = logging.getLogger(__name__)


STATUS_INACTIVE = "inactive"
STATUS_ACTIVE = "active"
STATUS_COMPLETED = "completed"

EVENT_HIGHLIGHTED_NOTES_CHANGED = "highlighted_notes_changed"
EVENT_EXERCISE_COMPLETED = "exercise_completed"

SESSION_EVENTS: typing.Tuple[str, ...] = (EVENT_HIGHLIGHTED_NOTES_CHANGED, EVENT_EXERCISE_COMPLETED)


@dataclasses.dataclass(frozen=True)
class SessionState:

	"""
	Where a session is in its exercise.

	Attributes:
		status: ``"inactive"``, ``"active"``, or ``"completed"``.
		step_index: Index of the step being played (equal to the step count once completed).
		held_notes: Notes currently held towards the current step.
	"""

	status: str = STATUS_INACTIVE
	step_index: int = 0
	held_notes: typing.FrozenSet[int] = frozenset()


@dataclasses.dataclass(frozen=True)
class Transition:

	"""
	The result of applying one input to a session state.

	Attributes:
		state: The new state.
		advanced: A step was matched.
		completed: This transition moved the session from active to completed.
		highlight_changed: The notes to highlight may have changed.
	"""

	state: SessionState
	advanced: bool = False
	completed: bool = False
	highlight_changed: bool = False


def highlighted_notes (state: SessionState, exercise: fermata.exercise.Exercise) -> typing.FrozenSet[int]:

	"""Return the notes the player should play next: the current step while active, else nothing."""

	if state.status != STATUS_ACTIVE:
		return frozenset()

	return exercise.notes_at(state.step_index)


def start (state: SessionState, exercise: fermata.exercise.Exercise) -> Transition:

	"""Begin the exercise from the first step.

	Only an inactive session starts; an active or completed one is left as it
	is. An exercise with no steps completes immediately.
	"""

	if state.status != STATUS_INACTIVE:
		return Transition(state)

	if not exercise.steps:
		return Transition(SessionState(status=STATUS_COMPLETED), completed=True, highlight_changed=True)

	return Transition(SessionState(status=STATUS_ACTIVE), highlight_changed=True)


def note_on (state: SessionState, exercise: fermata.exercise.Exercise, note: int) -> Transition:

	"""Hold a note down.

	When the held notes equal the current step's notes the step is matched:
	the index advances and the held notes are cleared. Matching the last step
	completes the session. Does nothing unless the session is active.
	"""

	if state.status != STATUS_ACTIVE:
		return Transition(state)

	held = state.held_notes | {note}

	if held != exercise.notes_at(state.step_index):
		return Transition(dataclasses.replace(state, held_notes=held))

	next_index = state.step_index + 1

	if next_index >= len(exercise.steps):
		return Transition(
			SessionState(status=STATUS_COMPLETED, step_index=next_index),
			advanced = True,
			completed = True,
			highlight_changed = True
		)

	return Transition(
		SessionState(status=STATUS_ACTIVE, step_index=next_index),
		advanced = True,
		highlight_changed = True
	)


def note_off (state: SessionState, note: int) -> Transition:

	"""Release a note. A step that has already been matched stays matched."""

	if note not in state.held_notes:
		return Transition(state)

	return Transition(dataclasses.replace(state, held_notes=state.held_notes - {note}))


def reset (state: SessionState) -> Transition:

	"""Return to inactive at the first step with nothing held, from any state."""

	return Transition(SessionState(), highlight_changed=True)


class PracticeSession:

	"""
	Owns a session state and an exercise, and reports progress through events.

	Register listeners on ``session.events`` or pass them to the constructor.
	"""

	def __init__ (
		self,
		exercise: fermata.exercise.Exercise,
		on_highlighted_notes_changed: typing.Optional[typing.Callable[[typing.FrozenSet[int]], typing.Any]] = None,
		on_exercise_completed: typing.Optional[typing.Callable[[], typing.Any]] = None
	) -> None:

		"""
		Create an inactive session for an exercise.
		"""

		self._exercise = exercise
		self._state = SessionState()

		self.events = fermata.event_emitter.EventEmitter(SESSION_EVENTS)

		if on_highlighted_notes_changed is not None:
			self.events.on(EVENT_HIGHLIGHTED_NOTES_CHANGED, on_highlighted_notes_changed)

		if on_exercise_completed is not None:
			self.events.on(EVENT_EXERCISE_COMPLETED, on_exercise_completed)


	@property
	def exercise (self) -> fermata.exercise.Exercise:

		return self._exercise

	@property
	def state (self) -> SessionState:

		return self._state

	@property
	def status (self) -> str:

		return self._state.status

	@property
	def step_index (self) -> int:

		return self._state.step_index

	@property
	def held_notes (self) -> typing.FrozenSet[int]:

		return self._state.held_notes

	@property
	def is_active (self) -> bool:

		return self._state.status == STATUS_ACTIVE

	@property
	def is_completed (self) -> bool:

		return self._state.status == STATUS_COMPLETED

	@property
	def highlighted_notes (self) -> typing.FrozenSet[int]:

		return highlighted_notes(self._state, self._exercise)


	def _apply (self, transition: Transition) -> Transition:

		"""Store the new state and emit whatever events the transition calls for."""

		self._state = transition.state

		if transition.advanced:
			logger.debug(f"Matched step {transition.state.step_index} of {len(self._exercise.steps)}")

		if transition.highlight_changed:
			self.events.emit_sync(EVENT_HIGHLIGHTED_NOTES_CHANGED, self.highlighted_notes)

		if transition.completed:
			logger.info(f"Exercise completed ({len(self._exercise.steps)} steps)")
			self.events.emit_sync(EVENT_EXERCISE_COMPLETED)

		return transition


	def start (self) -> Transition:

		"""Start practising from the first step (inactive sessions only)."""

		transition = self._apply(start(self._state, self._exercise))

		if transition.highlight_changed:
			logger.info(f"Practice started: {self._exercise.metadata.get('exercise_type')} with {len(self._exercise.steps)} steps")

		return transition

	def note_on (self, note: int) -> Transition:

		"""Report a key pressed."""

		return self._apply(note_on(self._state, self._exercise, note))

	def note_off (self, note: int) -> Transition:

		"""Report a key released."""

		return self._apply(note_off(self._state, note))

	def reset (self) -> Transition:

		"""Stop practising and go back to the first step."""

		logger.info("Practice reset")

		return self._apply(reset(self._state))


	def set_exercise (self, exercise: fermata.exercise.Exercise) -> Transition:

		"""
		Replace the exercise (after a settings change) and reset to inactive.
		"""

		self._exercise = exercise

		return self.reset()


	def handle_event (self, event: fermata.midi_parser.PerformanceEvent) -> typing.Optional[Transition]:

		"""Feed a parsed MIDI event to the session.

		Note on and note off events are applied; every other kind is ignored
		and returns None.
		"""

		if event.kind == fermata.midi_parser.EVENT_NOTE_ON:
			return self.note_on(event.note)

		if event.kind == fermata.midi_parser.EVENT_NOTE_OFF:
			return self.note_off(event.note)

		return None
