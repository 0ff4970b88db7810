"""Jinja2 templates for report, comment, pagination, and badge fragments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from jinja2 import DictLoader, Environment, StrictUndefined
from markupsafe import Markup

REPORT_BODY = "report_body"
REPORT_ISSUE_LINK = "report_issue_link"
REPORT_COMMENT_HEAD = "report_comment_head"
REPORT_COMMENT_BODY = "report_comment_body"
REPORT_COMMENT_MORE = "report_comment_more"
PAGINATION_SINGLE = "pagination_single"
BADGE_LINK = "badge_link"
BADGE_DETAILED = "badge_detailed"

TEMPLATES: dict[str, str] = {
    REPORT_BODY: """\
<div class="yt yt-report">
  <h3 class="yt yt-report-title">{{ title }}</h3>
  {% if hasIssues %}
  <table class="yt yt-report-table">
    <thead><tr>{{ header }}</tr></thead>
    <tbody>{{ rows }}</tbody>
  </table>
  {% else %}
  <p class="yt yt-report-empty">No issues found.</p>
  {% endif %}
  {% if pagination %}<div class="yt yt-pagination">{{ pagination }}</div>{% endif %}
</div>""",
    REPORT_ISSUE_LINK: (
        '<a class="yt yt-issue-link" href="{{ linkBase }}/issue/{{ issueId }}">{{ issueId }}</a>'
    ),
    REPORT_COMMENT_HEAD: (
        '<div class="yt yt-comment-head">'
        '<a href="{{ linkBase }}/issue/{{ issueId }}#comment={{ commentId }}">{{ commentAuthor }}</a>'
        " {{ commentDate }}</div>"
    ),
    REPORT_COMMENT_BODY: '<div class="yt yt-comment-body">{{ commentBody }}</div>',
    REPORT_COMMENT_MORE: (
        '<div class="yt yt-comment-more">'
        '<a href="{{ linkBase }}/issue/{{ issueId }}">Show more...</a></div>'
    ),
    PAGINATION_SINGLE: (
        '<a class="yt yt-page" style="{{ style }}" href="{{ url }}?{{ param }}={{ num }}">{{ num }}</a> '
    ),
    BADGE_LINK: """\
{% if error %}<span class="yt yt-error">{{ error }}</span>{% else %}\
<a class="yt yt-badge" style="text-decoration:{{ style }};" title="{{ title }}" \
href="{{ base }}/issue/{{ issue }}">{{ issue }}</a>{% endif %}""",
    BADGE_DETAILED: """\
{% if error %}<span class="yt yt-error">{{ error }}</span>{% else %}\
<a class="yt yt-badge" style="text-decoration:{{ style }};" title="{{ title }}" \
href="{{ base }}/issue/{{ issue }}">{{ issue }}</a> <span class="yt yt-summary">{{ summary }}</span>{% endif %}""",
}


class Renderer(Protocol):
    def render(self, name: str, context: Mapping[str, Any]) -> Markup: ...


class TemplateRenderer:
    """Default renderer: autoescaping Jinja2 environment over ``TEMPLATES``."""

    def __init__(self, templates: Mapping[str, str] | None = None):
        self.env = Environment(
            loader=DictLoader(dict(templates or TEMPLATES)),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render(self, name: str, context: Mapping[str, Any]) -> Markup:
        return Markup(self.env.get_template(name).render(**context))
