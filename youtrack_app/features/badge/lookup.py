"""Resolve a single issue by id for the inline badge, independent of the report path."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from youtrack_app.core.collections import RemoteCollection
from youtrack_app.core.errors import MissingParameter, NotFound
from youtrack_app.core.models import Issue, IssueId, Project

logger = logging.getLogger(__name__)


class LookupStatus(Enum):
    FOUND = "found"
    PROJECT_NOT_FOUND = "project-not-found"
    ISSUE_NOT_FOUND = "issue-not-found"


@dataclass(slots=True)
class LookupResult:
    status: LookupStatus
    issue_id: IssueId
    project: Project | None = None
    issue: Issue | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class IssueLookup:
    def __init__(self, projects: RemoteCollection[Any, Project]):
        self.projects = projects

    def lookup(self, issue_id: str | None) -> LookupResult:
        """Fetch the project, then the issue; at most two remote calls.

        ``NotFound`` never escapes; ``RemoteUnavailable`` does.
        """
        if not issue_id or not issue_id.strip():
            raise MissingParameter("Missing id parameter")
        parsed = IssueId.parse(issue_id)
        try:
            project = self.projects.get(parsed.project_id)
        except NotFound:
            logger.debug("Project %s not found", parsed.project_id)
            return LookupResult(LookupStatus.PROJECT_NOT_FOUND, parsed)
        if parsed.number is None or project.issues is None:
            return LookupResult(LookupStatus.ISSUE_NOT_FOUND, parsed, project=project)
        try:
            issue = project.issues.get(str(parsed))
        except NotFound:
            logger.debug("Issue %s not found in %s", parsed, project.id)
            return LookupResult(LookupStatus.ISSUE_NOT_FOUND, parsed, project=project)
        return LookupResult(LookupStatus.FOUND, parsed, project=project, issue=issue)
