"""YouTrack API client wrapper (legacy /rest JSON endpoints) and collection root."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests

from .collections import CommandCollection, RemoteCollection
from .config import ReportSettings
from .errors import NotFound, RemoteUnavailable
from .mappers import map_comment, map_issue, map_project
from .models import Issue, Project

logger = logging.getLogger(__name__)

# Upper bound for a full listing of the root issue collection
MAX_LIST_RESULTS = 10000


class YouTrackAPI:
    def __init__(self, settings: ReportSettings, session: requests.Session | None = None):
        self.settings = settings
        self.base_url = settings.rest_url
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if settings.auth_token:
            self.session.headers["Authorization"] = f"Bearer {settings.auth_token}"

    def _get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        what: str = "Resource",
        item_id: str | None = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.settings.timeout)
        except requests.Timeout as exc:
            raise RemoteUnavailable(f"Timed out after {self.settings.timeout}s: {url}") from exc
        except requests.RequestException as exc:
            raise RemoteUnavailable(f"Request to {url} failed: {exc}") from exc
        if resp.status_code == 404:
            raise NotFound(what, item_id or path)
        if resp.status_code >= 400:
            raise RemoteUnavailable(f"YouTrack request failed {resp.status_code}: {resp.text[:200]}")
        try:
            return resp.json()
        except ValueError as exc:
            raise RemoteUnavailable(f"Undecodable response from {url}") from exc

    # ------------------ Raw Fetch Methods ------------------
    def fetch_projects(self) -> list[dict[str, Any]]:
        data = self._get("project/all", what="Projects")
        return data if isinstance(data, list) else []

    def fetch_project(self, project_id: str) -> dict[str, Any]:
        return self._get(f"admin/project/{quote(project_id, safe='')}", what="Project", item_id=project_id)

    def query_issues(self, filter_text: str, start: int, max_results: int) -> list[dict[str, Any]]:
        data = self._get(
            "issue",
            {"filter": filter_text, "after": start, "max": max_results},
            what="Issues",
        )
        if isinstance(data, dict):
            return data.get("issue") or []
        return data or []

    def fetch_project_issues(
        self, project_id: str, filter_text: str = "", start: int = 0, max_results: int | None = None
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {"filter": filter_text, "after": start}
        if max_results is not None:
            params["max"] = max_results
        data = self._get(
            f"issue/byproject/{quote(project_id, safe='')}", params, what="Project", item_id=project_id
        )
        return data if isinstance(data, list) else []

    def fetch_issue(self, issue_id: str) -> dict[str, Any]:
        return self._get(f"issue/{quote(issue_id, safe='')}", what="Issue", item_id=issue_id)

    def fetch_comments(self, issue_id: str) -> list[dict[str, Any]]:
        data = self._get(f"issue/{quote(issue_id, safe='')}/comment", what="Issue", item_id=issue_id)
        return data if isinstance(data, list) else []


class YouTrack:
    """Root of the remote object graph: ``projects`` and ``issues`` collections."""

    def __init__(self, api: YouTrackAPI):
        self.api = api
        self.projects: RemoteCollection[YouTrack, Project] = CommandCollection(
            self,
            "Project",
            list_command=lambda: [self._bind_project(map_project(r)) for r in api.fetch_projects()],
            item_command=lambda project_id: self._bind_project(map_project(api.fetch_project(project_id))),
        )
        self.issues: RemoteCollection[YouTrack, Issue] = CommandCollection(
            self,
            "Issue",
            list_command=lambda: self._issues(api.query_issues("", 0, MAX_LIST_RESULTS)),
            query_command=lambda f, start, size: self._issues(api.query_issues(f, start, size)),
            item_command=lambda issue_id: self._bind_issue(map_issue(api.fetch_issue(issue_id))),
        )

    @classmethod
    def connect(cls, settings: ReportSettings) -> YouTrack:
        return cls(YouTrackAPI(settings))

    def _issues(self, raw_issues: list[dict[str, Any]]) -> list[Issue]:
        return [self._bind_issue(map_issue(r)) for r in raw_issues if isinstance(r, dict)]

    def _bind_issue(self, issue: Issue) -> Issue:
        api = self.api
        issue.comments = CommandCollection(
            issue,
            "Comment",
            list_command=lambda: [map_comment(r) for r in api.fetch_comments(issue.id)],
        )
        return issue

    def _bind_project(self, project: Project) -> Project:
        api = self.api
        project_id = project.id

        def item(issue_id: str) -> Issue:
            issue = self._bind_issue(map_issue(api.fetch_issue(issue_id)))
            if not issue.id or not issue.id.startswith(f"{project_id}-"):
                raise NotFound("Issue", issue_id)
            return issue

        project.issues = CommandCollection(
            project,
            "Issue",
            list_command=lambda: self._issues(api.fetch_project_issues(project_id)),
            query_command=lambda f, start, size: self._issues(
                api.fetch_project_issues(project_id, f, start, size)
            ),
            item_command=item,
        )
        return project
