"""Mapping raw YouTrack REST JSON into domain model instances."""

from __future__ import annotations

from typing import Any

from .models import (
    AttachmentField,
    AttachmentValue,
    Comment,
    Issue,
    IssueField,
    MultiValueField,
    Project,
    TextField,
    User,
)

ATTACHMENTS_FIELD = "attachments"


def _as_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _value_text(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("fullName") or value.get("value") or value.get("name")
    if value is None:
        return None
    return str(value)


def map_field(raw: dict[str, Any]) -> IssueField:
    name = raw.get("name") or ""
    value = raw.get("value")
    if name == ATTACHMENTS_FIELD or (
        isinstance(value, list) and value and isinstance(value[0], dict) and "url" in value[0]
    ):
        items = value if isinstance(value, list) else [value]
        return AttachmentField(
            name=name,
            values=tuple(
                AttachmentValue(id=a.get("id"), url=a.get("url"), name=a.get("value"))
                for a in items
                if isinstance(a, dict)
            ),
        )
    if isinstance(value, list):
        texts = tuple(t for t in (_value_text(v) for v in value) if t)
        if len(texts) == 1:
            return TextField(name=name, value=texts[0])
        return MultiValueField(name=name, values=texts)
    return TextField(name=name, value=_value_text(value))


def map_fields(raw_fields: list[dict[str, Any]] | None) -> dict[str, IssueField]:
    out: dict[str, IssueField] = {}
    for raw in raw_fields or []:
        if not isinstance(raw, dict) or not raw.get("name"):
            continue
        out[raw["name"]] = map_field(raw)
    return out


def _user_from_field(raw_fields: list[dict[str, Any]] | None, name: str) -> User | None:
    for raw in raw_fields or []:
        if not isinstance(raw, dict) or raw.get("name") != name:
            continue
        value = raw.get("value")
        if isinstance(value, list):
            value = value[0] if value else None
        if isinstance(value, dict) and value.get("value"):
            return User(login=value["value"], full_name=value.get("fullName"))
        if isinstance(value, str) and value:
            return User(login=value)
    return None


def map_comment(raw: dict[str, Any]) -> Comment:
    return Comment(
        id=raw.get("id"),
        issue_id=raw.get("issueId"),
        author=raw.get("author"),
        author_full_name=raw.get("authorFullName"),
        text=raw.get("text"),
        created=_as_int(raw.get("created")),
        deleted=_as_bool(raw.get("deleted")),
        shown_for_issue_author=_as_bool(raw.get("shownForIssueAuthor")),
        replies=[map_comment(r) for r in raw.get("replies") or [] if isinstance(r, dict)],
    )


def map_issue(raw: dict[str, Any]) -> Issue:
    """Build an ``Issue`` from a legacy ``/rest/issue`` payload.

    The comments collection is left unset; the REST client binds one to the
    returned issue because only the client knows how to fetch it.
    """
    raw_fields = raw.get("field") or []
    fields = map_fields(raw_fields)

    def text(code: str) -> str | None:
        f = fields.get(code)
        return f.string_value() if f is not None else None

    return Issue(
        id=raw.get("id"),
        summary=text("summary"),
        reporter=text("reporterFullName") or text("reporterName"),
        assignee=_user_from_field(raw_fields, "Assignee"),
        priority=text("Priority"),
        state=text("State"),
        resolved=bool(text("resolved")),
        votes=_as_int(text("votes")) or 0,
        type=text("Type"),
        fields=fields,
    )


def map_project(raw: dict[str, Any]) -> Project:
    return Project(
        id=raw.get("shortName") or raw.get("id"),
        name=raw.get("name"),
    )
