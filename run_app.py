"""Convenience launcher for the Streamlit app.

Usage:
  streamlit run run_app.py

Automatically imports every module in ``youtrack_app/pages`` so each page
decorated with ``@register_page`` registers itself without manual edits here.
"""

from importlib import import_module
from pathlib import Path

import streamlit as st

from youtrack_app.app import main

st.set_page_config(layout="wide")


def _auto_init_tracker():
    """Initialize the YouTrack root from Streamlit secrets or youtrack.yaml if available."""
    if "youtrack" in st.session_state:
        return

    from youtrack_app.core.settings_store import load_settings, settings_from_mapping
    from youtrack_app.core.youtrack_client import YouTrack

    secrets = st.secrets.get("youtrack", {})
    settings = settings_from_mapping(secrets) if secrets else load_settings(Path(__file__).parent)

    if settings.auth_token:
        st.session_state["youtrack_settings"] = settings
        st.session_state["youtrack"] = YouTrack.connect(settings)
        st.sidebar.success(f"Connected to {settings.resolved_link_base}")
    else:
        st.sidebar.warning("YouTrack settings not found. Please use the Setup page.")


_auto_init_tracker()

PAGES_DIR = Path(__file__).parent / "youtrack_app" / "pages"
for py in sorted(PAGES_DIR.glob("[!_]*.py")):
    mod_name = f"youtrack_app.pages.{py.stem}"
    try:
        import_module(mod_name)
    except ImportError as e:  # pragma: no cover
        print(f"Failed importing page {mod_name}: {e}")

if __name__ == "__main__":
    main()
