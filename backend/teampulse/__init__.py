"""Teampulse: synthetic team usage leaderboard generator."""

__version__ = "0.1.0"
__author__ = "Teampulse Team"

__all__ = ["__version__", "__author__"]
