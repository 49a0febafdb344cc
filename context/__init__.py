"""Session-owned state for the query service."""
