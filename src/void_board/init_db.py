"""Create every table for the configured database."""

from void_board.core.logging import configure_logging
from void_board.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    configure_logging()
    init_db()
    print("Database initialized.")
