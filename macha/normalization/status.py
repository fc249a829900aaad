"""Campaign status classification.

Notion status labels are free text and vary by workspace locale, so each
logical state is a set of accepted labels rather than an enum value.
Unknown labels belong to neither state.
"""

from typing import Literal, Optional

ACTIVE_STATUSES = frozenset({"active", "paused", "진행중", "일시정지", "진행"})
COMPLETED_STATUSES = frozenset({"completed", "완료", "종료"})

StatusGroup = Literal["active", "completed"]


def _normalize(status: Optional[str]) -> str:
    return (status or "").strip().lower()


def is_active(status: Optional[str]) -> bool:
    """True for running or paused campaigns."""
    return _normalize(status) in ACTIVE_STATUSES


def is_completed(status: Optional[str]) -> bool:
    """True for finished campaigns."""
    return _normalize(status) in COMPLETED_STATUSES


def classify_status(status: Optional[str]) -> Optional[StatusGroup]:
    """Map a raw status label to its group, or ``None`` if unrecognized."""
    if is_active(status):
        return "active"
    if is_completed(status):
        return "completed"
    return None
