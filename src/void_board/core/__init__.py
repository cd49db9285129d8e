"""Core configuration, errors and logging helpers."""
