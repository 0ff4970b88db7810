"""Central configuration, constants, and report/badge defaults."""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# YouTrack Connection Settings
# =============================================================================
YOUTRACK_DEFAULT_SERVER = "https://youtrack.example.com/rest"
REST_PREFIX = "/rest"
TIMEZONE = "UTC"
REQUEST_TIMEOUT_SECONDS: float = 30.0

# =============================================================================
# Report Macro Parameters
# =============================================================================
ALL_PROJECTS = "all projects"
PAGINATION_PARAM = "ytpage"

DEFAULT_PAGE_SIZE: int = 25
DEFAULT_CURRENT_PAGE: int = 1
DEFAULT_TOTAL_PAGES: int = 10  # size of the page-link strip, not the result count

# Comma-separated ``code[:title]`` list used when the caller gives no fields
DEFAULT_REPORT_FIELDS = "summary:Summary,State,Priority,Type,Assignee"

# Reserved field codes that expand into the issue's comment thread
COMMENTS_CODE = "comments"
COMMENTS_VERBOSE_CODE = "comments-verbose"

# Index (0-based) of the last comment rendered before the "more" marker
COMMENT_CAP_INDEX: int = 10
COMMENT_DATE_FORMAT = "%Y-%m-%d %H:%M"

# =============================================================================
# Display Strings
# =============================================================================
UNKNOWN = "unknown"
UNASSIGNED = "Unassigned"
NO_COMMENTS = "No one commented yet."

# =============================================================================
# Badge Macro Parameters
# =============================================================================
BADGE_STYLE_DETAILED = "detailed"


@dataclass(slots=True)
class ReportSettings:
    """Connection and rendering settings passed explicitly to client and engine."""

    remote_host: str = YOUTRACK_DEFAULT_SERVER
    auth_token: str | None = None
    link_base: str | None = None
    timezone: str = TIMEZONE
    timeout: float = REQUEST_TIMEOUT_SECONDS
    default_fields: str = DEFAULT_REPORT_FIELDS

    @property
    def rest_url(self) -> str:
        host = self.remote_host.rstrip("/")
        if not host.endswith(REST_PREFIX):
            host = host + REST_PREFIX
        return host

    @property
    def resolved_link_base(self) -> str:
        """Browser-facing base URL: explicit link base, else host without the REST prefix."""
        base = self.link_base or self.remote_host
        base = base.rstrip("/")
        return base.replace(REST_PREFIX, "")


@dataclass(slots=True)
class AppSettings:
    max_table_rows: int = 1000
    download_encoding: str = "utf-8"


SETTINGS = AppSettings()
