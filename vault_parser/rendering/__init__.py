"""Report rendering of extracted records."""
