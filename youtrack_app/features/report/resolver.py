"""Resolve one report cell for an issue: plain fields or an expanded comment thread."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import pytz
from markupsafe import Markup, escape

from youtrack_app.core.config import (
    COMMENT_CAP_INDEX,
    COMMENT_DATE_FORMAT,
    NO_COMMENTS,
    TIMEZONE,
    UNKNOWN,
)
from youtrack_app.core.models import Comment, Issue, IssueSnapshot
from youtrack_app.core.settings_store import checked_timezone
from youtrack_app.visual.templates import (
    REPORT_COMMENT_BODY,
    REPORT_COMMENT_HEAD,
    REPORT_COMMENT_MORE,
    Renderer,
)

from .fields import FieldDescriptor

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\r\n]")
_TAGS = re.compile(r"<[^>]*>")


def sanitize_comment_text(text: str | None) -> str:
    """Drop line breaks and HTML-like tags (best effort, lossy)."""
    if not text:
        return ""
    return _TAGS.sub("", _LINE_BREAKS.sub("", text))


def format_comment_date(created: int | None, tz: pytz.BaseTzInfo) -> str:
    """Format epoch millis in ``tz``; a missing timestamp means now."""
    if created is None:
        moment = datetime.now(tz)
    else:
        moment = datetime.fromtimestamp(created / 1000.0, tz)
    return moment.strftime(COMMENT_DATE_FORMAT)


class FieldResolver:
    def __init__(
        self,
        renderer: Renderer,
        *,
        timezone: str = TIMEZONE,
        base_context: Mapping[str, Any] | None = None,
    ):
        self.renderer = renderer
        self._tz = pytz.timezone(checked_timezone(timezone))
        self.base_context = {"linkBase": "", **(base_context or {})}

    def resolve(self, issue: Issue, snapshot: IssueSnapshot, descriptor: FieldDescriptor) -> Markup:
        if descriptor.is_comments:
            return self.render_comments(issue, verbose=descriptor.is_verbose)
        field = snapshot.get_field(descriptor.code)
        if field is None:
            return escape(UNKNOWN)
        return escape(field.string_value() or UNKNOWN)

    def comment_context(self, comment: Comment) -> dict[str, Any]:
        return {
            **self.base_context,
            "issueId": comment.issue_id or UNKNOWN,
            "commentAuthor": comment.author or UNKNOWN,
            "commentAuthorFullName": comment.author_full_name or comment.author or UNKNOWN,
            "commentBody": sanitize_comment_text(comment.text),
            "commentDate": format_comment_date(comment.created, self._tz),
            "commentId": comment.id or "",
        }

    def render_comments(self, issue: Issue, *, verbose: bool = False) -> Markup:
        """Render root comments; after index ``COMMENT_CAP_INDEX`` append the "more" marker and stop.

        Only root comments are visited; replies are ignored. Comments are read
        from the live issue's own collection (one fetch), not from the snapshot.
        """
        if issue.comments is None:
            return escape(NO_COMMENTS)
        parts: list[Markup] = []
        for index, comment in enumerate(issue.comments.list()):
            context = self.comment_context(comment)
            if verbose:
                parts.append(self.renderer.render(REPORT_COMMENT_HEAD, context))
            parts.append(self.renderer.render(REPORT_COMMENT_BODY, context))
            if index == COMMENT_CAP_INDEX:
                parts.append(self.renderer.render(REPORT_COMMENT_MORE, context))
                logger.debug("Truncated comments of %s at %d", issue.id, index + 1)
                break
        return Markup("").join(parts)
