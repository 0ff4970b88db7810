"""ReportEngine: query a page of issues and assemble the report render context."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

from youtrack_app.core.collections import RemoteCollection
from youtrack_app.core.config import (
    ALL_PROJECTS,
    DEFAULT_CURRENT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REPORT_FIELDS,
    DEFAULT_TOTAL_PAGES,
    PAGINATION_PARAM,
    ReportSettings,
)
from youtrack_app.core.errors import TrackerError
from youtrack_app.core.models import Issue
from youtrack_app.visual.templates import REPORT_BODY, REPORT_ISSUE_LINK, Renderer, TemplateRenderer

from .fields import FieldDescriptor, parse_field_spec
from .pagination import Paginator, int_value_of
from .resolver import FieldResolver

logger = logging.getLogger(__name__)

ISSUE_COLUMN = "Issue"


@dataclass(slots=True)
class ReportRequest:
    """Typed report parameters with the macro defaults applied."""

    project: str = ALL_PROJECTS
    query: str | None = None
    fields: str = DEFAULT_REPORT_FIELDS
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = DEFAULT_CURRENT_PAGE
    num_pages: int = DEFAULT_TOTAL_PAGES

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        request_params: Mapping[str, Any] | None = None,
        *,
        default_fields: str = DEFAULT_REPORT_FIELDS,
    ) -> ReportRequest:
        """``params`` are the macro parameters; the page index comes from ``request_params``."""
        project = (params.get("project") or "").strip() or ALL_PROJECTS
        current_page = DEFAULT_CURRENT_PAGE
        if request_params is not None:
            current_page = int_value_of(request_params.get(PAGINATION_PARAM), DEFAULT_CURRENT_PAGE)
        return cls(
            project=project,
            query=params.get("query"),
            fields=(params.get("fields") or "").strip() or default_fields,
            page_size=int_value_of(params.get("pageSize"), DEFAULT_PAGE_SIZE),
            current_page=current_page,
            num_pages=int_value_of(params.get("totalPages"), DEFAULT_TOTAL_PAGES),
        )


@dataclass(slots=True)
class ReportResult:
    header: Markup = field(default_factory=Markup)
    rows: Markup = field(default_factory=Markup)
    pagination: Markup = field(default_factory=Markup)
    has_issues: bool = False
    title: str | None = None
    link_base: str = ""
    columns: list[str] = field(default_factory=list)
    cells: list[list[Markup]] = field(default_factory=list)

    @classmethod
    def empty(cls) -> ReportResult:
        return cls()

    def context(self) -> dict[str, Any]:
        return {
            "header": self.header,
            "rows": self.rows,
            "pagination": self.pagination,
            "hasIssues": self.has_issues,
            "title": self.title,
            "linkBase": self.link_base,
        }


def build_filter(project: str | None, query: str) -> str:
    """Prefix ``query`` with a project clause unless every project is requested."""
    if not project or project.lower() == ALL_PROJECTS.lower():
        return query
    return f"project: {project} {query}"


class ReportEngine:
    def __init__(
        self,
        issues: RemoteCollection[Any, Issue],
        settings: ReportSettings | None = None,
        renderer: Renderer | None = None,
    ):
        self.issues = issues
        self.settings = settings or ReportSettings()
        self.renderer = renderer or TemplateRenderer()

    def generate(
        self,
        project: str | None,
        query: str | None,
        fields: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        current_page: int = DEFAULT_CURRENT_PAGE,
        num_pages: int = DEFAULT_TOTAL_PAGES,
        page_url: str | None = None,
    ) -> ReportResult:
        if not query:
            return ReportResult.empty()
        project = project or ALL_PROJECTS
        link_base = self.settings.resolved_link_base
        base_context = {"linkBase": link_base}
        descriptors = parse_field_spec(fields or self.settings.default_fields)
        paginator = Paginator(page_size=page_size, current_page=current_page, num_pages=num_pages)

        filter_text = build_filter(project, query)
        try:
            fetched = self.issues.query(filter_text, paginator.start, page_size)
        except TrackerError:
            logger.exception("Report query failed: %r", filter_text)
            raise
        # Snapshot every row before any cell is rendered
        rows_data = [(issue, issue.create_snapshot()) for issue in fetched]

        resolver = FieldResolver(self.renderer, timezone=self.settings.timezone, base_context=base_context)
        cells: list[list[Markup]] = []
        row_markup: list[Markup] = []
        for issue, snap in rows_data:
            link = self.renderer.render(REPORT_ISSUE_LINK, {**base_context, "issueId": issue.id})
            row_cells = [link] + [resolver.resolve(issue, snap, d) for d in descriptors]
            cells.append(row_cells)
            row_markup.append(
                Markup('<tr class="yt yt-report-row">{}</tr>').format(
                    Markup("").join(Markup("<td>{}</td>").format(c) for c in row_cells)
                )
            )

        return ReportResult(
            header=self.render_header(descriptors),
            rows=Markup("").join(row_markup),
            pagination=paginator.render_strip(self.renderer, page_url, base_context),
            has_issues=bool(fetched),
            title=f"{query} from {project}",
            link_base=link_base,
            columns=[ISSUE_COLUMN] + [d.title for d in descriptors],
            cells=cells,
        )

    def generate_request(self, request: ReportRequest, page_url: str | None = None) -> ReportResult:
        return self.generate(
            request.project,
            request.query,
            request.fields,
            page_size=request.page_size,
            current_page=request.current_page,
            num_pages=request.num_pages,
            page_url=page_url,
        )

    def render(self, request: ReportRequest, page_url: str | None = None) -> Markup:
        """Full report markup; no query renders nothing."""
        if not request.query:
            return Markup("")
        result = self.generate_request(request, page_url)
        return self.renderer.render(REPORT_BODY, result.context())

    @staticmethod
    def render_header(descriptors: list[FieldDescriptor]) -> Markup:
        titles = [ISSUE_COLUMN] + [d.title for d in descriptors]
        return Markup("").join(Markup("<th>{}</th>").format(t) for t in titles)
