"""Tickwatch: a countdown timer and a lap/split stopwatch."""

__version__ = "0.1.0"
