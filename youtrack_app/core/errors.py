"""Error taxonomy shared by the client, collections, and renderers."""

from __future__ import annotations


class TrackerError(RuntimeError):
    """Base class for failures surfaced by the YouTrack layer."""


class RemoteUnavailable(TrackerError):
    """Network, timeout, HTTP, or decoding failure talking to the tracker."""


class NotFound(TrackerError):
    """The requested project, issue, or collection item does not exist."""

    def __init__(self, what: str, item_id: str):
        super().__init__(f"{what} not found: {item_id}")
        self.what = what
        self.item_id = item_id


class MissingParameter(TrackerError):
    """A required macro parameter was not supplied."""
