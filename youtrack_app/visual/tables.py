"""Reusable table helpers for Streamlit rendering of report results."""

from __future__ import annotations

import pandas as pd
import streamlit as st
from markupsafe import Markup

from youtrack_app.features.report.engine import ISSUE_COLUMN, ReportResult

LINK_COLUMN = "Link"


def report_frame(result: ReportResult) -> pd.DataFrame:
    """Plain-text projection of a rendered report: one column per header title."""
    if not result.cells:
        return pd.DataFrame(columns=result.columns)
    rows = [[Markup(cell).striptags() for cell in row] for row in result.cells]
    return pd.DataFrame(rows, columns=result.columns)


def add_issue_link(df: pd.DataFrame, link_base: str, key_col: str = ISSUE_COLUMN, label: str = LINK_COLUMN):
    if df.empty or key_col not in df.columns:
        return df, {}
    out = df.copy()
    base = link_base.rstrip("/")
    out[label] = out[key_col].astype(str).apply(lambda k: f"{base}/issue/{k}" if k and k != "nan" else "")
    cfg = {
        label: st.column_config.LinkColumn(
            label,
            display_text=r"issue/(.*)$",
            help="Open in YouTrack",
            width="medium",
        )
    }
    return out, cfg


def render_report_table(result: ReportResult, limit: int = 1000):
    frame, cfg = add_issue_link(report_frame(result), result.link_base)
    st.dataframe(frame.head(limit), hide_index=True, column_config=cfg)
    return frame
