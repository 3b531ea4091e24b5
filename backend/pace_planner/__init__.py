"""Pace Planner - running pace strategies and kilometer splits."""

__version__ = "0.1.0"
