"""Domain models for Pomo CLI."""
