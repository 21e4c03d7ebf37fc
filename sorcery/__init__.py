"""A two-player terminal card game of minions, spells and rituals."""

__version__ = "0.1.0"