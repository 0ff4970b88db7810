"""Badge render context: issue summary, strike-through state, and tooltip."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

from youtrack_app.core.config import BADGE_STYLE_DETAILED, UNASSIGNED, ReportSettings
from youtrack_app.core.errors import MissingParameter
from youtrack_app.core.models import IssueSnapshot
from youtrack_app.visual.templates import BADGE_DETAILED, BADGE_LINK, Renderer, TemplateRenderer

from .lookup import IssueLookup, LookupStatus


@dataclass(slots=True)
class BadgeResult:
    template: str
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def error(self) -> str | None:
        return self.context.get("error")


def tooltip(snap: IssueSnapshot) -> str:
    assignee = snap.assignee.display_name if snap.assignee is not None else UNASSIGNED
    return (
        f"Reporter: {snap.reporter}, Priority: {snap.priority}, State: {snap.state}, "
        f"Assignee: {assignee}, Votes: {snap.votes}, Type: {snap.type}"
    )


class BadgeRenderer:
    def __init__(
        self,
        lookup: IssueLookup,
        settings: ReportSettings | None = None,
        renderer: Renderer | None = None,
    ):
        self.lookup = lookup
        self.settings = settings or ReportSettings()
        self.renderer = renderer or TemplateRenderer()

    def build(self, issue_id: str | None, style: str | None = None) -> BadgeResult:
        template = BADGE_DETAILED if style == BADGE_STYLE_DETAILED else BADGE_LINK
        context: dict[str, Any] = {"error": None}
        try:
            result = self.lookup.lookup(issue_id)
        except MissingParameter as exc:
            context["error"] = str(exc)
            return BadgeResult(template, context)

        shown = str(result.issue_id) if result.issue_id.number is not None else issue_id.strip()
        if result.status is LookupStatus.PROJECT_NOT_FOUND:
            context["error"] = f"Project not found: {result.issue_id.project_id}"
        elif result.status is LookupStatus.ISSUE_NOT_FOUND:
            context["error"] = f"Issue not found: {shown}"
        else:
            snap = result.issue.create_snapshot()
            context.update(
                issue=shown,
                summary=snap.summary,
                base=self.settings.resolved_link_base,
                style="line-through" if snap.resolved else "normal",
                title=tooltip(snap),
            )
        return BadgeResult(template, context)

    def render(self, issue_id: str | None, style: str | None = None) -> Markup:
        badge = self.build(issue_id, style)
        return self.renderer.render(badge.template, badge.context)
