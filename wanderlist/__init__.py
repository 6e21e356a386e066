"""Wanderlist - travel destination browser with a personal want-to-go list."""
__version__ = "1.0.0"
