# src/void_board/services/__init__.py
"""Business logic services for the VOID board."""
