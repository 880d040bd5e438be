"""Core record, token and error types for nodeboard."""
