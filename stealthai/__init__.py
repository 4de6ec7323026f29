"""Game AI framework with blackboards, options and reasoners, plus a stealth-game guard simulation."""

__version__ = "0.1.0"