import asyncio
import logging
import sys
import typing

import fermata.live_input
import fermata.notes
import fermata.practice_session
import fermata.settings


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _describe (notes: typing.FrozenSet[int]) -> str:

	return " ".join(fermata.notes.note_name(note) for note in sorted(notes))


async def practice (settings: fermata.settings.PracticeSettings) -> None:

	"""
	Run one practice session against the configured MIDI input until it completes.
	"""

	exercise = settings.build_exercise()
	completed = asyncio.Event()

	def show_next (notes: typing.FrozenSet[int]) -> None:

		if notes:
			logger.info(f"Play: {_describe(notes)}")

	session = fermata.practice_session.PracticeSession(
		exercise,
		on_highlighted_notes_changed = show_next,
		on_exercise_completed = completed.set
	)

	live = fermata.live_input.LiveInput(session, input_device_name=settings.input_device)

	await live.start()

	if live.midi_in is None:
		logger.warning("No MIDI input open. Set input_device in the config file.")

	session.start()

	try:
		await completed.wait()

	finally:
		await live.stop()


def main () -> None:

	"""
	Main entry point: ``python -m fermata [config.yaml]``.
	"""

	logger.info("Fermata starting...")

	config_path = sys.argv[1] if len(sys.argv) > 1 else 'config.yaml'
	settings = fermata.settings.load_settings(config_path)

	try:
		asyncio.run(practice(settings))

	except KeyboardInterrupt:
		logger.info("Stopped.")


if __name__ == "__main__":
	main()
