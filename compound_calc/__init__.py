"""Compound-interest planner backend."""
