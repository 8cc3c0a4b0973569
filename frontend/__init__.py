"""People cards client application."""
