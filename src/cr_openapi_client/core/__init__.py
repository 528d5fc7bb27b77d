"""Core client machinery."""
