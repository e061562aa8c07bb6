"""Heuristic tourist route planner."""
