import pytest

import fermata.midi_parser
import fermata.practice_session

import conftest


def _recording_session (*note_sets: list) -> tuple:

	"""Return a session plus the lists its callbacks record into."""

	highlighted: list = []
	completions: list = []

	session = fermata.practice_session.PracticeSession(
		conftest.make_exercise(*note_sets),
		on_highlighted_notes_changed = highlighted.append,
		on_exercise_completed = lambda: completions.append(True)
	)

	return session, highlighted, completions


def test_exact_set_scenario () -> None:

	"""A single note, then a two-note chord that only counts when both notes are held."""

	session, highlighted, completions = _recording_session([60], [64, 67])

	session.start()

	assert session.is_active
	assert highlighted == [frozenset([60])]

	session.note_on(60)

	assert session.step_index == 1
	assert highlighted[-1] == frozenset([64, 67])

	session.note_on(64)

	assert session.step_index == 1
	assert session.held_notes == frozenset([64])

	session.note_on(67)

	assert session.is_completed
	assert session.status == "completed"
	assert completions == [True]
	assert highlighted[-1] == frozenset()


def test_extra_notes_block_the_step () -> None:

	"""Holding a wrong note alongside the right ones does not advance."""

	session, _, _ = _recording_session([60], [62])

	session.start()
	session.note_on(61)
	session.note_on(60)

	assert session.step_index == 0

	session.note_off(61)
	session.note_off(60)
	session.note_on(60)

	assert session.step_index == 1


def test_note_off_never_undoes_a_step () -> None:

	"""Releasing a note after a step was matched keeps the progress."""

	session, _, _ = _recording_session([60, 64], [65])

	session.start()
	session.note_on(60)
	session.note_on(64)
	session.note_off(60)
	session.note_off(64)

	assert session.step_index == 1
	assert session.held_notes == frozenset()


def test_notes_ignored_while_inactive () -> None:

	"""An inactive session does not track notes."""

	session, highlighted, _ = _recording_session([60])

	session.note_on(60)

	assert session.status == "inactive"
	assert session.step_index == 0
	assert session.held_notes == frozenset()
	assert highlighted == []


def test_completion_fires_once () -> None:

	"""Further notes after completion change nothing and fire nothing."""

	session, _, completions = _recording_session([60])

	session.start()
	session.note_on(60)
	session.note_on(60)
	session.start()

	assert session.is_completed
	assert completions == [True]


def test_reset_from_any_state () -> None:

	"""Reset returns to inactive at the first step with nothing highlighted."""

	session, highlighted, completions = _recording_session([60], [62])

	session.start()
	session.note_on(60)
	session.note_on(50)
	session.reset()

	assert session.status == "inactive"
	assert session.step_index == 0
	assert session.held_notes == frozenset()
	assert highlighted[-1] == frozenset()

	# A completed session can be reset and played again.
	session.start()
	session.note_on(60)
	session.note_on(62)
	session.reset()
	session.start()
	session.note_on(60)
	session.note_on(62)

	assert completions == [True, True]


def test_set_exercise_resets () -> None:

	"""Replacing the exercise stops the session."""

	session, _, _ = _recording_session([60], [62])

	session.start()
	session.note_on(60)
	session.set_exercise(conftest.make_exercise([70]))

	assert session.status == "inactive"
	assert session.step_index == 0
	assert session.exercise.steps[0].notes == frozenset([70])


def test_empty_exercise_completes_on_start () -> None:

	"""An exercise with no steps is complete as soon as it starts."""

	session, _, completions = _recording_session()

	session.start()

	assert session.is_completed
	assert completions == [True]


def test_handle_parsed_events () -> None:

	"""Parsed note on and note off events drive the session; other kinds are ignored."""

	session, _, completions = _recording_session([60, 64])

	session.start()

	for data in ([0x90, 60, 100], [0xB0, 64, 127], [0x90, 64, 90]):
		event = fermata.midi_parser.parse(data)
		assert event is not None
		session.handle_event(event)

	assert completions == [True]

	session.reset()
	session.start()

	for data in ([0x90, 60, 100], [0x90, 60, 0], [0x90, 64, 90]):
		session.handle_event(fermata.midi_parser.parse(data))

	assert session.step_index == 0
	assert session.held_notes == frozenset([64])


def test_pure_transitions () -> None:

	"""Transition functions return new states and leave their input untouched."""

	exercise = conftest.make_exercise([60], [62])
	initial = fermata.practice_session.SessionState()

	started = fermata.practice_session.start(initial, exercise)

	assert initial.status == "inactive"
	assert started.state.status == "active"
	assert started.highlight_changed

	held = fermata.practice_session.note_on(started.state, exercise, 61)

	assert not held.advanced
	assert held.state.held_notes == frozenset([61])

	released = fermata.practice_session.note_off(held.state, 61)
	matched = fermata.practice_session.note_on(released.state, exercise, 60)

	assert matched.advanced
	assert not matched.completed
	assert matched.state.step_index == 1

	done = fermata.practice_session.note_on(matched.state, exercise, 62)

	assert done.completed
	assert fermata.practice_session.highlighted_notes(done.state, exercise) == frozenset()
	assert fermata.practice_session.reset(done.state).state == initial


def test_unknown_session_event_name () -> None:

	"""Listening for an event the session never emits is an error."""

	session, _, _ = _recording_session([60])

	with pytest.raises(ValueError):
		session.events.on("exercise_finished", lambda: None)


def test_generated_exercise_end_to_end () -> None:

	"""Playing every step of a generated chord exercise completes it."""

	import fermata.exercises

	exercise = fermata.exercises.generate_exercise("chords_by_key", "F", "major", include_inversions=True, hand="both")
	completions: list = []

	session = fermata.practice_session.PracticeSession(exercise, on_exercise_completed=lambda: completions.append(True))
	session.start()

	for step in exercise.steps:

		for note in step.sorted_notes():
			session.note_on(note)

		for note in step.sorted_notes():
			session.note_off(note)

	assert session.is_completed
	assert completions == [True]
