"""
Fermata - the music theory and practice engine behind a piano practice app.

Fermata does two jobs:

- **Exercise generation.** Scales in eight modes, triads in every inversion,
  diatonic chord workouts, chord planing through all twelve keys, named chord
  progressions, and one or two octave arpeggios. Every note is placed on the
  keyboard deterministically: chords climb strictly upwards, never wrap past
  note 127, and progressions avoid leaps of more than a fifth downwards.
  Exercises can be split between the hands (left plays the bass an octave
  down, right plays the upper notes, both plays the two together).
- **Live practice.** A session walks through an exercise step by step as
  notes arrive from a MIDI keyboard. A step is matched only when exactly its
  notes are held. Raw MIDI bytes are parsed at the boundary, and malformed
  messages are dropped rather than interrupting practice.

Minimal example:

    ```python
    import fermata

    exercise = fermata.generate_exercise("scales", key="G", quality="major", hand="right")
    session = fermata.PracticeSession(exercise)
    session.events.on("exercise_completed", lambda: print("Well played!"))
    session.start()

    for step in exercise.steps:
        for note in step.notes:
            session.note_on(note)
    ```

Run ``python -m fermata config.yaml`` to practise against a MIDI keyboard.

Package-level exports: ``generate_exercise``, ``get_chord``, ``get_scale``,
``get_arpeggio``, ``PracticeSession``, ``LiveInput``, ``InvalidSelectionError``.
"""

import fermata.arpeggios
import fermata.chords
import fermata.exercises
import fermata.live_input
import fermata.practice_session
import fermata.scales


generate_exercise = fermata.exercises.generate_exercise
InvalidSelectionError = fermata.exercises.InvalidSelectionError
get_chord = fermata.chords.get_chord
get_scale = fermata.scales.get_scale
get_arpeggio = fermata.arpeggios.get_arpeggio
PracticeSession = fermata.practice_session.PracticeSession
LiveInput = fermata.live_input.LiveInput
