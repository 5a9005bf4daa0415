"""Core game pieces: doors, the host and a single trial."""
