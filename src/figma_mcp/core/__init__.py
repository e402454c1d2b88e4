"""Core utilities: logging and error types."""
