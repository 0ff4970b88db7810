"""Issue report page: paginated YouTrack query rendered as an HTML table."""

from __future__ import annotations

import streamlit as st

from youtrack_app.app import register_page
from youtrack_app.core.config import (
    ALL_PROJECTS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TOTAL_PAGES,
    SETTINGS,
    ReportSettings,
)
from youtrack_app.core.errors import TrackerError
from youtrack_app.core.youtrack_client import YouTrack
from youtrack_app.features.report import ReportEngine, ReportRequest
from youtrack_app.visual.tables import render_report_table
from youtrack_app.visual.templates import REPORT_BODY


def current_page_url() -> str | None:
    """URL of this page without its query string, when Streamlit exposes it."""
    url = getattr(st.context, "url", None)
    if not url:
        return None
    return str(url).split("?", 1)[0]


@register_page("Issue Report")
def report_page():
    st.title("Issue Report")
    tracker: YouTrack | None = st.session_state.get("youtrack")
    if tracker is None:
        st.warning("Initialize connection on Setup page first.")
        return
    settings: ReportSettings = st.session_state.get("youtrack_settings") or ReportSettings()

    with st.form("report_params"):
        project = st.text_input("Project", value=ALL_PROJECTS)
        query = st.text_input("Query", help="Forwarded to YouTrack as-is.")
        fields = st.text_input("Fields", value=settings.default_fields, help="Comma-separated code[:title]")
        col_a, col_b = st.columns(2)
        page_size = col_a.number_input("Page size", min_value=1, value=DEFAULT_PAGE_SIZE)
        total_pages = col_b.number_input("Page links", min_value=1, value=DEFAULT_TOTAL_PAGES)
        st.form_submit_button("Run report", type="primary")

    params = {
        "project": project,
        "query": query or None,
        "fields": fields,
        "pageSize": page_size,
        "totalPages": total_pages,
    }
    request = ReportRequest.from_params(params, st.query_params, default_fields=settings.default_fields)
    if not request.query:
        st.info("Enter a query to build the report.")
        return

    engine = ReportEngine(tracker.issues, settings)
    try:
        result = engine.generate_request(request, page_url=current_page_url())
    except TrackerError as exc:
        st.error(f"Report failed: {exc}")
        return

    st.markdown(engine.renderer.render(REPORT_BODY, result.context()), unsafe_allow_html=True)
    if result.has_issues:
        frame = render_report_table(result, limit=SETTINGS.max_table_rows)
        st.download_button(
            "Download CSV",
            frame.to_csv(index=False).encode(SETTINGS.download_encoding),
            file_name="youtrack_report.csv",
            mime="text/csv",
        )
