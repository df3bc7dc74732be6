
import pytest
import fermata.event_emitter


def test_on_and_emit_sync () -> None:

	"""Registered sync callbacks are called on emit_sync."""

	emitter = fermata.event_emitter.EventEmitter()
	received: list[frozenset] = []

	emitter.on("highlighted_notes_changed", received.append)
	emitter.emit_sync("highlighted_notes_changed", frozenset([60]))

	assert received == [frozenset([60])]


def test_off_only_removes_target_callback () -> None:

	"""off() leaves other callbacks for the same event intact."""

	emitter = fermata.event_emitter.EventEmitter()
	a: list[int] = []
	b: list[int] = []

	emitter.on("tick", a.append)
	emitter.on("tick", b.append)
	emitter.off("tick", a.append)
	emitter.emit_sync("tick", 7)

	assert a == []
	assert b == [7]
	assert emitter.listener_count("tick") == 1


def test_off_raises_for_unregistered_callback () -> None:

	"""off() raises ValueError when the callback was never registered."""

	emitter = fermata.event_emitter.EventEmitter()

	with pytest.raises(ValueError, match="tick"):
		emitter.off("tick", lambda: None)


def test_restricted_event_names () -> None:

	"""An emitter created with event names rejects any other name."""

	emitter = fermata.event_emitter.EventEmitter(["exercise_completed"])

	with pytest.raises(ValueError, match="exercise_complete"):
		emitter.on("exercise_complete", lambda: None)

	with pytest.raises(ValueError):
		emitter.emit_sync("exercise_complete")


def test_listener_may_unregister_itself () -> None:

	"""A callback can remove itself while the event is being emitted."""

	emitter = fermata.event_emitter.EventEmitter()
	calls: list[int] = []

	def once () -> None:
		calls.append(1)
		emitter.off("done", once)

	emitter.on("done", once)
	emitter.emit_sync("done")
	emitter.emit_sync("done")

	assert calls == [1]


def test_async_callback_rejected_by_emit_sync () -> None:

	"""emit_sync cannot await, so async listeners are an error there."""

	emitter = fermata.event_emitter.EventEmitter()

	async def listener () -> None:
		return None

	emitter.on("done", listener)

	with pytest.raises(ValueError):
		emitter.emit_sync("done")

