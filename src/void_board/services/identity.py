"""Identity resolution and the light-point reward policy."""

from __future__ import annotations

import logging
import re
import secrets
from enum import Enum

from void_board.core.errors import ValidationFailure
from void_board.core.logging import redact_key
from void_board.models import Identity
from void_board.repositories.base import IdentityStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "VOID"
KEY_PATTERN = re.compile(r"^VOID-[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}$")
_KEY_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


class RewardAction(str, Enum):
    """Actions that earn light points."""

    POST = "post"
    REPLY = "reply"


REWARDS: dict[RewardAction, int] = {
    RewardAction.POST: 1,
    RewardAction.REPLY: 5,
}


def reward_for(action: RewardAction) -> int:
    """Return the point delta earned by ``action``."""
    return REWARDS[action]


def is_well_formed_key(key: str | None) -> bool:
    """Return whether ``key`` looks like ``VOID-XXXX-XXXX-XXXX``."""
    return bool(key) and KEY_PATTERN.fullmatch(key) is not None


def generate_key() -> str:
    """Return a fresh random access key in the accepted format."""
    groups = (
        "".join(secrets.choice(_KEY_ALPHABET) for _ in range(4))
        for _ in range(3)
    )
    return "-".join((KEY_PREFIX, *groups))


class IdentityService:
    """Resolves access keys to identities and hands out rewards."""

    def __init__(self, store: IdentityStore) -> None:
        self.store = store

    def resolve(self, key: str | None) -> Identity:
        """Return the identity for ``key``, creating it on first sight.

        Malformed keys are rejected before any lookup. Banned identities
        resolve normally; degrading their responses is the caller's job.

        Raises:
            ValidationFailure: If the key is missing or malformed.
        """
        if not key:
            raise ValidationFailure("Missing Void Key")
        if not is_well_formed_key(key):
            raise ValidationFailure("Invalid Key Format. Access Denied.")

        identity, created = self.store.get_or_create(key)
        if created:
            logger.info("New Void traveler: %s", redact_key(key))
        return identity

    def reward(self, key: str, action: RewardAction) -> None:
        """Credit the points earned by ``action``."""
        self.store.add_points(key, reward_for(action))
