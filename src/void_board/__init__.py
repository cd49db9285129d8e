"""VOID whisper board: anonymous posts, random matching and light points."""

__version__ = "1.0.0"
