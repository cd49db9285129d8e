"""Error kinds raised by the service layer.

The API layer maps each kind onto a response; services only signal which
kind of failure occurred and never build transport-specific payloads.
"""

from __future__ import annotations


class VoidError(RuntimeError):
    """Base exception for all service-level failures."""

    default_detail = "Request failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationFailure(VoidError):
    """Input rejected before any state change (missing fields, bad key, denied text)."""

    default_detail = "Invalid request"


class NotFound(VoidError):
    """A referenced post, reply or identity does not exist."""

    default_detail = "Not found"


class AccessDenied(VoidError):
    """Caller lacks the capability for the operation.

    The detail is always generic so that nothing about internal state leaks.
    """

    default_detail = "Forbidden"


class ShadowBanned(VoidError):
    """Raised for banned identities; answered with a fake success."""

    default_detail = "Shadow banned"
