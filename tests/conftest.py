import typing

import mido
import pytest

import fermata.exercise


class FakeMidiIn:

	"""Minimal MIDI input stub for tests."""

	def __init__ (self, name: str, callback: typing.Optional[typing.Callable] = None) -> None:

		"""Store the port name and the callback for injecting test messages."""

		self.name = name
		self.callback = callback
		self.closed = False

	def close (self) -> None:

		"""Record that the port was closed."""

		self.closed = True

	def inject (self, message: mido.Message) -> None:

		"""Simulate receiving a MIDI message by calling the stored callback."""

		if self.callback is not None:
			self.callback(message)


# Module-level reference so tests can access the most recently created FakeMidiIn.
_current_fake_input: typing.Optional[FakeMidiIn] = None


def current_fake_input () -> typing.Optional[FakeMidiIn]:

	"""Return the most recently opened fake input port."""

	return _current_fake_input


def _fake_get_input_names () -> list[str]:

	"""Return a fixed list of MIDI input names for tests."""

	return ["Dummy MIDI"]


def _fake_open_input (name: str, callback: typing.Optional[typing.Callable] = None) -> FakeMidiIn:

	"""Return a fake MIDI input regardless of the name."""

	global _current_fake_input
	fake = FakeMidiIn(name, callback=callback)
	_current_fake_input = fake
	return fake


@pytest.fixture
def patch_midi (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Patch mido to use a fake MIDI input for tests that open a port."""

	global _current_fake_input
	_current_fake_input = None

	monkeypatch.setattr(mido, "get_input_names", _fake_get_input_names)
	monkeypatch.setattr(mido, "open_input", _fake_open_input)


def make_exercise (*note_sets: typing.Iterable[int]) -> fermata.exercise.Exercise:

	"""Build an exercise with one step per note set."""

	steps = tuple(fermata.exercise.Step(notes=frozenset(notes)) for notes in note_sets)

	return fermata.exercise.Exercise(steps=steps, metadata={"exercise_type": "test"})
