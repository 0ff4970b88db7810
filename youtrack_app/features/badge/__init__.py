"""Inline single-issue badge."""

from youtrack_app.features.badge.context import BadgeRenderer, BadgeResult, tooltip
from youtrack_app.features.badge.lookup import IssueLookup, LookupResult, LookupStatus

__all__ = [
    "BadgeRenderer",
    "BadgeResult",
    "IssueLookup",
    "LookupResult",
    "LookupStatus",
    "tooltip",
]
