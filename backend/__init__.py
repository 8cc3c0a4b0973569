"""People API backend."""
