"""Populate the board with sample whispers.

Seed whispers are curated, so they are written straight to the content
store without the phrase filter. Rooms are still coerced exactly like user
input would be.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Sequence

from sqlalchemy.orm import Session

from void_board.core.logging import configure_logging
from void_board.db.session import SessionLocal, create_tables
from void_board.models.post import coerce_room
from void_board.repositories import SqlContentStore, SqlIdentityStore
from void_board.repositories.base import ContentStore
from void_board.services.identity import IdentityService, generate_key

logger = logging.getLogger(__name__)

SEED_WHISPERS: tuple[dict[str, str], ...] = (
    {"mood": "lost", "room": "life", "text": "I feel like everyone around me is moving forward, getting married, getting promoted, and I'm just frozen in time."},
    {"mood": "heartbroken", "room": "love", "text": "It's been six months and I still check my phone hoping to see your name. I know I shouldn't."},
    {"mood": "anxious", "room": "work", "text": "I have a presentation tomorrow and I feel like I can't breathe. Imposter syndrome is eating me alive."},
    {"mood": "numb", "room": "general", "text": "I don't feel sad, I just feel... nothing. Colors aren't bright anymore."},
    {"mood": "angry", "room": "family", "text": "I try so hard to make my parents proud but it's never enough. I'm tired of running a race I can't win."},
    {"mood": "sad", "room": "life", "text": "I miss my dog. The house is too quiet without the sound of his paws on the floor."},
    {"mood": "confused", "room": "love", "text": "I don't know if I should stay or go. I love him, but I'm not happy."},
    {"mood": "anxious", "room": "general", "text": "The news scares me. I feel like the world is ending and I'm the only one panicking."},
    # "career" is not a room; it lands in the default room.
    {"mood": "lost", "room": "career", "text": "I studied for 4 years for this degree and now I hate the job. What do I do now?"},
    {"mood": "sad", "room": "general", "text": "Sometimes I just want a hug, but I don't know who to ask."},
)

FILLER_MOODS = ("sad", "lost", "numb")
FILLER_ROOMS = ("general", "life")


def _add_whisper(content: ContentStore, author_key: str, mood: str, text: str, room: str) -> None:
    content.add_post(mood=mood, text=text, room=coerce_room(room), author_key=author_key)


def seed(db: Session, *, extras: int = 30, rng: random.Random | None = None) -> int:
    """Insert the sample whispers plus ``extras`` filler ones; return the count."""
    rng = rng or random.Random()
    content = SqlContentStore(db)
    author = IdentityService(SqlIdentityStore(db)).resolve(generate_key())

    created = 0
    for sample in SEED_WHISPERS:
        _add_whisper(content, author.key, sample["mood"], sample["text"], sample["room"])
        created += 1
    for index in range(extras):
        _add_whisper(
            content,
            author.key,
            rng.choice(FILLER_MOODS),
            f"This is anonymous whisper #{index}. I just need someone to listen.",
            rng.choice(FILLER_ROOMS),
        )
        created += 1
    db.commit()
    return created


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the VOID board with sample whispers.")
    parser.add_argument(
        "--extras",
        type=int,
        default=30,
        help="Number of generated filler whispers (default: 30)",
    )
    args = parser.parse_args(argv)

    configure_logging()
    create_tables()
    with SessionLocal() as db:
        created = seed(db, extras=args.extras)
    logger.info("Database populated with %d whispers", created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
