"""Monty Hall - stay versus switch, settled by simulation."""
