"""Domain data models for YouTrack projects, issues, fields, and comments."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .collections import RemoteCollection


@dataclass(slots=True, frozen=True)
class IssueId:
    project_id: str
    number: int | None

    @classmethod
    def parse(cls, text: str) -> IssueId:
        """Split ``"PROJECT-NUMBER"`` on the last dash; a bad number yields ``None``."""
        cleaned = (text or "").strip()
        project_id, sep, tail = cleaned.rpartition("-")
        if not sep:
            return cls(project_id=cleaned, number=None)
        try:
            number = int(tail)
        except ValueError:
            number = None
        return cls(project_id=project_id, number=number)

    def __str__(self) -> str:
        if self.number is None:
            return self.project_id
        return f"{self.project_id}-{self.number}"


@dataclass(slots=True, frozen=True)
class User:
    login: str
    full_name: str | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.login


# -----------------------------------------------------------------------------
# Issue fields: tagged union, each variant exposes ``string_value()``
# -----------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class TextField:
    kind: ClassVar[str] = "text"
    name: str
    value: str | None = None

    def string_value(self) -> str | None:
        return self.value


@dataclass(slots=True, frozen=True)
class MultiValueField:
    kind: ClassVar[str] = "multi"
    name: str
    values: tuple[str, ...] = ()

    def string_value(self) -> str | None:
        if not self.values:
            return None
        return ", ".join(self.values)


@dataclass(slots=True, frozen=True)
class AttachmentValue:
    id: str | None
    url: str | None
    name: str | None = None


@dataclass(slots=True, frozen=True)
class AttachmentField:
    kind: ClassVar[str] = "attachment"
    name: str
    values: tuple[AttachmentValue, ...] = ()

    def string_value(self) -> str | None:
        names = [v.name or v.url or v.id for v in self.values]
        names = [n for n in names if n]
        if not names:
            return None
        return ", ".join(names)


IssueField = TextField | MultiValueField | AttachmentField


@dataclass(slots=True)
class Comment:
    id: str | None
    issue_id: str | None
    author: str | None
    text: str | None
    created: int | None = None  # epoch millis
    author_full_name: str | None = None
    deleted: bool = False
    shown_for_issue_author: bool = False
    replies: list[Comment] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class IssueSnapshot:
    """Read-only copy of an issue taken at one instant."""

    id: str
    summary: str | None
    reporter: str | None
    assignee: User | None
    priority: str | None
    state: str | None
    resolved: bool
    votes: int
    type: str | None
    fields: Mapping[str, IssueField]

    def get_field(self, code: str) -> IssueField | None:
        return self.fields.get(code)


@dataclass(slots=True)
class Issue:
    id: str
    summary: str | None = None
    reporter: str | None = None
    assignee: User | None = None
    priority: str | None = None
    state: str | None = None
    resolved: bool = False
    votes: int = 0
    type: str | None = None
    fields: dict[str, IssueField] = field(default_factory=dict)
    comments: RemoteCollection[Issue, Comment] | None = None

    def create_snapshot(self) -> IssueSnapshot:
        return IssueSnapshot(
            id=self.id,
            summary=self.summary,
            reporter=self.reporter,
            assignee=self.assignee,
            priority=self.priority,
            state=self.state,
            resolved=bool(self.resolved),
            votes=int(self.votes or 0),
            type=self.type,
            fields=MappingProxyType(copy.deepcopy(self.fields)),
        )


def snapshot(issue: Issue) -> IssueSnapshot:
    return issue.create_snapshot()


@dataclass(slots=True)
class Project:
    id: str
    name: str | None = None
    issues: RemoteCollection[Project, Issue] | None = None
