"""Scenario and goal planning built on top of the solver."""
