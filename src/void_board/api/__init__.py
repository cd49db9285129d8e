"""HTTP API for the VOID board."""
