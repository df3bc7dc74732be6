"""Constants for Fermata.

This package contains two sets of constants:

- ``fermata.constants.midi`` - MIDI 1.0 protocol values (note range, status bytes, pitch bend)
- ``fermata.constants.practice`` - Defaults and limits for exercise generation and practice sessions
"""
