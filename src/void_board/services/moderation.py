"""Moderation policy: text admissibility and report-driven hiding."""

from __future__ import annotations

from typing import Protocol, TypeVar

REPORT_HIDE_THRESHOLD = 3
HIDDEN_STATUS = "hidden"
DELETED_STATUS = "deleted"

# Plain substring matching, case-insensitive. "die" also catches words such
# as "diet"; that over-blocking is accepted.
PROHIBITED_PHRASES: tuple[str, ...] = (
    "suicide",
    "kill myself",
    "die",
    "murder",
    "hate you",
)


class Reportable(Protocol):
    report_count: int
    status: str


ReportableT = TypeVar("ReportableT", bound=Reportable)


def is_text_admissible(text: str) -> bool:
    """Return ``False`` when ``text`` contains any prohibited phrase."""
    lowered = text.lower()
    return not any(phrase in lowered for phrase in PROHIBITED_PHRASES)


def should_hide(report_count: int) -> bool:
    """Return whether a report count has reached the hide threshold."""
    return report_count >= REPORT_HIDE_THRESHOLD


def apply_report(entity: ReportableT) -> ReportableT:
    """Count one report against ``entity`` and hide it at the threshold.

    Reports past the threshold keep counting but change nothing visible.
    Deleted content stays deleted.
    """
    entity.report_count += 1
    if should_hide(entity.report_count) and entity.status != DELETED_STATUS:
        entity.status = HIDDEN_STATUS
    return entity
