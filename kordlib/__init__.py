"""Music theory building blocks: pitches, octaves, notes, chord modifiers and note samples."""

__version__ = "0.1.0"