"""Compute the total playback duration of a YouTube playlist."""

__version__ = "0.1.0"
