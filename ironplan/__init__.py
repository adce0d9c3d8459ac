"""Ironplan - Ironman triathlon training planner backend."""

__version__ = "0.1.0"
