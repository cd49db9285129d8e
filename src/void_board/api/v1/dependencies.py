"""Shared API dependencies for authentication and store wiring."""

import logging
import random
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from void_board.core.errors import ShadowBanned, ValidationFailure
from void_board.core.logging import redact_key
from void_board.core.settings import settings
from void_board.db.session import get_db
from void_board.models import Identity
from void_board.repositories import SqlContentStore, SqlIdentityStore
from void_board.repositories.base import ContentStore, IdentityStore
from void_board.services.admin import AdminService, check_admin_key
from void_board.services.identity import IdentityService
from void_board.services.matching import MatchingService
from void_board.services.whispers import WhisperService

logger = logging.getLogger(__name__)

_match_rng = random.Random()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_identity_store(db: SessionDep) -> IdentityStore:
    """Return the identity store bound to the request session."""
    return SqlIdentityStore(db)


def get_content_store(db: SessionDep) -> ContentStore:
    """Return the content store bound to the request session."""
    return SqlContentStore(db)


def get_match_rng() -> random.Random:
    """Return the random source used for pool sampling."""
    return _match_rng


IdentityStoreDep = Annotated[IdentityStore, Depends(get_identity_store)]
ContentStoreDep = Annotated[ContentStore, Depends(get_content_store)]


def get_whisper_service(
    content: ContentStoreDep,
    identities: IdentityStoreDep,
) -> WhisperService:
    return WhisperService(content, identities)


def get_matching_service(
    content: ContentStoreDep,
    rng: Annotated[random.Random, Depends(get_match_rng)],
) -> MatchingService:
    return MatchingService(content, rng=rng)


def get_admin_service(
    content: ContentStoreDep,
    identities: IdentityStoreDep,
) -> AdminService:
    return AdminService(content, identities)


def get_current_identity(
    db: SessionDep,
    identities: IdentityStoreDep,
    x_void_key: Annotated[str | None, Header()] = None,
) -> Identity:
    """Resolve the caller from the ``x-void-key`` header.

    Unknown but well-formed keys are registered on the spot. Banned
    identities never reach the endpoint: they get a shadow response.

    Raises:
        HTTPException: If the key is missing or malformed.
        ShadowBanned: If the identity is banned.
    """
    try:
        identity = IdentityService(identities).resolve(x_void_key)
    except ValidationFailure as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=err.detail,
        ) from err
    db.commit()

    if identity.banned:
        logger.info("Shadow response for banned key %s", redact_key(identity.key))
        raise ShadowBanned()
    return identity


def require_admin(key: Annotated[str | None, Query()] = None) -> None:
    """Refuse the request unless ``?key=`` carries the admin key."""
    check_admin_key(key, settings.admin_key)


CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]
WhisperServiceDep = Annotated[WhisperService, Depends(get_whisper_service)]
MatchingServiceDep = Annotated[MatchingService, Depends(get_matching_service)]
AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
