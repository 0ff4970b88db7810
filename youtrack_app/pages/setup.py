"""Connection setup page: collect YouTrack settings and initialize the tracker root."""

from __future__ import annotations

import streamlit as st

from youtrack_app.app import SETUP_PAGE, register_page
from youtrack_app.core.config import TIMEZONE
from youtrack_app.core.settings_store import settings_from_mapping
from youtrack_app.core.youtrack_client import YouTrack


@register_page(SETUP_PAGE)
def setup_page():
    st.title("YouTrack Connection Setup")
    st.caption("Enter connection settings (use secrets manager in production).")

    # Pre-fill from secrets if available (user can override)
    secrets = st.secrets.get("youtrack", {})

    host = st.text_input(
        "YouTrack REST URL",
        value=st.session_state.get("youtrack_host") or secrets.get("host") or "",
    )
    token = st.text_input("Permanent token", type="password", value=secrets.get("token") or "")
    link_base = st.text_input(
        "Link base (optional)",
        value=secrets.get("link_base") or "",
        help="Browser URL for issue links; defaults to the REST URL without /rest.",
    )
    timezone = st.text_input("Comment timezone", value=secrets.get("timezone") or TIMEZONE)
    timeout = st.number_input("Request timeout (seconds)", min_value=1, max_value=300, value=30)
    init_btn = st.button("Initialize Connection", type="primary")

    if init_btn:
        if not (host and token):
            st.error("Host and token are required.")
            return
        settings = settings_from_mapping(
            {"host": host, "token": token, "link_base": link_base, "timezone": timezone, "timeout": timeout}
        )
        st.session_state["youtrack_host"] = host
        st.session_state["youtrack_settings"] = settings
        st.session_state["youtrack"] = YouTrack.connect(settings)
        st.success("Connection initialized.")

    if "youtrack" in st.session_state:
        st.info("YouTrack connection ready.")
