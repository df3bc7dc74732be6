"""Build an exercise from a practice mode and its selections.

This is the single entry point used when settings change: pick the strategy for
the mode, hand it the selection, and return the exercise it builds.

The meaning of ``quality`` depends on the mode:

- ``"scales"``, ``"chords_by_key"``, ``"chord_progressions"``: a scale type
  (``"major"``, ``"dorian"``, ...)
- ``"chords_by_type"``: a chord quality (``"major"``, ``"minor"``, ``"diminished"``,
  ``"augmented"``)
- ``"arpeggios"``: an arpeggio quality (``"major"``, ``"dominant_7th"``, ...)

Example:
	```python
	exercise = generate_exercise("chords_by_key", "C", "major", include_inversions=True, hand="right", start_octave=4)
	len(exercise.steps)  # 28
	```
"""

import logging
import typing

import fermata.constants.practice
import fermata.exercise
import fermata.strategies
import fermata.strategies.arpeggios
import fermata.strategies.chord_progressions
import fermata.strategies.chords_by_key
import fermata.strategies.chords_by_type
import fermata.strategies.scales


logger = logging.getLogger(__name__)


InvalidSelectionError = fermata.strategies.InvalidSelectionError


def _resolve_strategy (
	mode: str,
	key: typing.Union[str, int],
	quality: str,
	include_inversions: bool,
	hand: str,
	start_octave: int,
	progression: typing.Optional[str],
	arpeggio_octaves: int
) -> fermata.strategies.PracticeStrategy:

	"""Create the strategy instance for a mode name."""

	if mode == fermata.exercise.MODE_SCALES:

		return fermata.strategies.scales.ScalesStrategy(
			key = key,
			scale_type = quality,
			hand = hand,
			start_octave = start_octave
		)

	if mode == fermata.exercise.MODE_CHORDS_BY_KEY:

		return fermata.strategies.chords_by_key.ChordsByKeyStrategy(
			key = key,
			scale_type = quality,
			include_inversions = include_inversions,
			hand = hand,
			start_octave = start_octave
		)

	if mode == fermata.exercise.MODE_CHORDS_BY_TYPE:

		return fermata.strategies.chords_by_type.ChordsByTypeStrategy(
			chord_type = quality,
			include_inversions = include_inversions,
			hand = hand,
			start_octave = start_octave,
			key = key
		)

	if mode == fermata.exercise.MODE_CHORD_PROGRESSIONS:

		return fermata.strategies.chord_progressions.ChordProgressionsStrategy(
			key = key,
			scale_type = quality,
			hand = hand,
			start_octave = start_octave,
			progression = progression
		)

	if mode == fermata.exercise.MODE_ARPEGGIOS:

		return fermata.strategies.arpeggios.ArpeggiosStrategy(
			key = key,
			quality = quality,
			octaves = arpeggio_octaves,
			hand = hand,
			start_octave = start_octave
		)

	raise InvalidSelectionError(
		f"Unknown practice mode {mode!r}. Available: {list(fermata.exercise.MODES)}"
	)


def generate_exercise (
	mode: str,
	key: typing.Union[str, int] = fermata.constants.practice.DEFAULT_KEY,
	quality: str = fermata.constants.practice.DEFAULT_QUALITY,
	include_inversions: bool = True,
	hand: str = fermata.constants.practice.DEFAULT_HAND_SELECTION,
	start_octave: int = fermata.constants.practice.DEFAULT_START_OCTAVE,
	progression: typing.Optional[str] = None,
	arpeggio_octaves: int = fermata.constants.practice.DEFAULT_ARPEGGIO_OCTAVES
) -> fermata.exercise.Exercise:

	"""Generate the exercise for a practice mode.

	Parameters:
		mode: One of ``fermata.exercise.MODES``.
		key: Key name (``"C"``, ``"F#"``, ``"Bb"``) or pitch class.
		quality: Scale type, chord quality, or arpeggio quality, by mode.
		include_inversions: Chord modes only: also practise 1st and 2nd inversions.
		hand: ``"left"``, ``"right"``, or ``"both"``.
		start_octave: Octave for the right hand. The left hand plays one lower.
		progression: ``"chord_progressions"`` only: a name from
			:mod:`fermata.progressions`, ``"smooth"`` for the smooth diatonic
			workout, or None for ``"I - V"``.
		arpeggio_octaves: ``"arpeggios"`` only: 1 or 2.

	Raises:
		InvalidSelectionError: If any selection is unknown for the mode.
	"""

	strategy = _resolve_strategy(mode, key, quality, include_inversions, hand, start_octave, progression, arpeggio_octaves)
	exercise = strategy.build()

	logger.debug(f"Generated {mode} exercise with {len(exercise.steps)} steps: {exercise.metadata}")

	return exercise
