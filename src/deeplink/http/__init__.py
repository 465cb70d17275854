"""URL and query-string helpers used by the matcher."""
