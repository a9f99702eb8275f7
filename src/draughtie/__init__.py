"""Draughtie: an 8x8 draughts rules engine with a headless turn controller."""

__version__ = "0.1.0"
