"""Issue badge page: inline link for one issue, short or detailed."""

from __future__ import annotations

import streamlit as st

from youtrack_app.app import register_page
from youtrack_app.core.config import BADGE_STYLE_DETAILED, ReportSettings
from youtrack_app.core.errors import TrackerError
from youtrack_app.core.youtrack_client import YouTrack
from youtrack_app.features.badge import BadgeRenderer, IssueLookup


@register_page("Issue Badge")
def badge_page():
    st.title("Issue Badge")
    tracker: YouTrack | None = st.session_state.get("youtrack")
    if tracker is None:
        st.warning("Initialize connection on Setup page first.")
        return
    settings: ReportSettings = st.session_state.get("youtrack_settings") or ReportSettings()

    issue_id = st.text_input("Issue id", placeholder="DEMO-42")
    detailed = st.toggle("Detailed", value=False)
    if not st.button("Show badge", type="primary"):
        return

    badges = BadgeRenderer(IssueLookup(tracker.projects), settings)
    try:
        markup = badges.render(issue_id, BADGE_STYLE_DETAILED if detailed else None)
    except TrackerError as exc:
        st.error(f"Badge failed: {exc}")
        return
    st.markdown(markup, unsafe_allow_html=True)
