"""Tabular issue report: field parsing, cell resolution, pagination, and assembly."""

from youtrack_app.features.report.engine import ReportEngine, ReportRequest, ReportResult, build_filter
from youtrack_app.features.report.fields import FieldDescriptor, parse_field_spec
from youtrack_app.features.report.pagination import PageLink, Paginator, int_value_of, start_index
from youtrack_app.features.report.resolver import FieldResolver, sanitize_comment_text

__all__ = [
    "FieldDescriptor",
    "FieldResolver",
    "PageLink",
    "Paginator",
    "ReportEngine",
    "ReportRequest",
    "ReportResult",
    "build_filter",
    "int_value_of",
    "parse_field_spec",
    "sanitize_comment_text",
    "start_index",
]
