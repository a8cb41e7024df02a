"""Gesture controllers that turn keyboard, MIDI and touchpad input into note events."""

__version__ = "1.0.0"