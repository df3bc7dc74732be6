"""Defaults and limits for exercise generation and practice sessions."""

# Octave 4 puts the right hand around Middle C; the left hand sits one octave below.
DEFAULT_START_OCTAVE = 4

# Bound on the octave-bump loop used when voicing a chord.
MAX_OCTAVE_BUMPS = 10

# Widest span (in semitones) of a well-formed chord voicing.
MAX_CHORD_SPAN = 24

# Largest downward leap (a perfect fifth) allowed between consecutive chords
# before the progressive voicing moves the next chord up an octave.
MAX_DOWNWARD_LEAP = 7

DEFAULT_KEY = "C"
DEFAULT_MODE = "scales"
DEFAULT_QUALITY = "major"
DEFAULT_HAND_SELECTION = "both"
DEFAULT_ARPEGGIO_OCTAVES = 1

# Named progression played when chord progression practice has none selected.
DEFAULT_PROGRESSION = "I - V"
