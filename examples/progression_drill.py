"""
Fermata: Progression Drill

Works through every named chord progression of one difficulty level, in
one key, with both hands. Each progression is a separate exercise; when
one is complete the next begins.

How it works
────────────
Each exercise is a list of steps. A step is the exact set of keys to hold
down: the bass note in the left hand and the upper chord tones in the
right. The session only moves on when the held keys match the step
exactly, so a stray extra note holds you on the current chord until it
is released.

How to run
──────────
1. Set MIDI_DEVICE below to your keyboard's input name (the log lists
   the available inputs; the first one is used if the name is not found).
2. Run: python examples/progression_drill.py
3. Press Ctrl+C to stop.

Tweakable parameters
────────────────────
- KEY: Any of the twelve keys, sharps or flats ("F#" and "Gb" both work).
- DIFFICULTY: "beginner", "intermediate" or "advanced".
- HAND: "left", "right" or "both".
"""

import asyncio
import logging

import fermata.exercises
import fermata.live_input
import fermata.notes
import fermata.practice_session
import fermata.progressions


MIDI_DEVICE = "Digital Piano"
KEY = "G"
DIFFICULTY = "intermediate"
HAND = "both"


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def drill () -> None:

	completed = asyncio.Event()

	def show (notes: frozenset) -> None:
		if notes:
			logger.info("Play: " + " ".join(fermata.notes.note_name(n) for n in sorted(notes)))

	session = fermata.practice_session.PracticeSession(
		fermata.exercises.generate_exercise("chord_progressions", KEY, "major", hand=HAND),
		on_highlighted_notes_changed = show,
		on_exercise_completed = completed.set
	)

	live = fermata.live_input.LiveInput(session, input_device_name=MIDI_DEVICE)
	await live.start()

	try:

		for progression in fermata.progressions.progressions_for_difficulty(DIFFICULTY):

			logger.info(f"{progression.name}: {progression.description}")

			session.set_exercise(
				fermata.exercises.generate_exercise("chord_progressions", KEY, "major", hand=HAND, progression=progression.name)
			)

			completed.clear()
			session.start()
			await completed.wait()

		logger.info("Drill complete.")

	finally:
		await live.stop()


if __name__ == "__main__":
	asyncio.run(drill())
