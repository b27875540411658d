"""CLI command implementations for buildfs."""
