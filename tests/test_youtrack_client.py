import pytest
import requests

from youtrack_app.core.config import ReportSettings
from youtrack_app.core.errors import NotFound, RemoteUnavailable
from youtrack_app.core.youtrack_client import YouTrack, YouTrackAPI
from youtrack_app.features.badge import IssueLookup, LookupStatus

ISSUE_RAW = {
    "id": "DEMO-1",
    "field": [
        {"name": "summary", "value": "Login fails"},
        {"name": "reporterName", "value": "alice"},
        {"name": "votes", "value": "2"},
        {"name": "State", "value": ["Open"]},
        {"name": "Priority", "value": ["Major"]},
        {"name": "Type", "value": ["Bug"]},
        {"name": "Assignee", "value": [{"value": "bob", "fullName": "Bob Builder"}]},
    ],
}
COMMENTS_RAW = [
    {"id": "c1", "issueId": "DEMO-1", "author": "alice", "text": "first", "created": 1700000000000},
    {"id": "c2", "issueId": "DEMO-1", "author": "bob", "text": "second", "deleted": "false"},
]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Routes ``get`` calls by URL suffix; records every request."""

    def __init__(self, routes):
        self.routes = routes
        self.headers = {}
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(404, text="not found")


def _api(routes):
    settings = ReportSettings(remote_host="https://yt.example.com", auth_token="perm:abc", timeout=5)
    return YouTrackAPI(settings, session=FakeSession(routes))


def test_session_headers_and_timeout():
    api = _api({"/rest/issue/DEMO-1": FakeResponse(payload=ISSUE_RAW)})
    api.fetch_issue("DEMO-1")
    assert api.session.headers["Authorization"] == "Bearer perm:abc"
    assert api.session.requests[0] == ("https://yt.example.com/rest/issue/DEMO-1", None, 5)


def test_query_passes_window_params():
    api = _api({"/rest/issue": FakeResponse(payload={"issue": [ISSUE_RAW]})})
    issues = YouTrack(api).issues.query("project: DEMO #open", 26, 25)
    assert [i.id for i in issues] == ["DEMO-1"]
    _, params, _ = api.session.requests[0]
    assert params == {"filter": "project: DEMO #open", "after": 26, "max": 25}


def test_issue_mapping_and_comment_collection():
    api = _api(
        {
            "/rest/issue/DEMO-1": FakeResponse(payload=ISSUE_RAW),
            "/rest/issue/DEMO-1/comment": FakeResponse(payload=COMMENTS_RAW),
        }
    )
    issue = YouTrack(api).issues.get("DEMO-1")
    assert issue.summary == "Login fails"
    assert issue.state == "Open"
    assert issue.votes == 2
    assert issue.assignee.display_name == "Bob Builder"
    assert issue.fields["Assignee"].string_value() == "Bob Builder"
    comments = issue.comments.list()
    assert [c.id for c in comments] == ["c1", "c2"]
    assert comments[0].created == 1700000000000
    assert comments[1].created is None
    assert issue.comments.parent is issue


def test_not_found_and_failures():
    api = _api(
        {
            "/rest/issue/BAD-1": FakeResponse(500, text="boom"),
            "/rest/issue/SLOW-1": requests.Timeout("slow"),
            "/rest/issue/GARBLED-1": FakeResponse(payload=ValueError("bad json")),
            "/rest/issue/DOWN-1": requests.ConnectionError("refused"),
        }
    )
    with pytest.raises(NotFound):
        api.fetch_issue("MISSING-1")
    for issue_id in ("BAD-1", "SLOW-1", "GARBLED-1", "DOWN-1"):
        with pytest.raises(RemoteUnavailable):
            api.fetch_issue(issue_id)


def test_lookup_through_rest_client():
    api = _api(
        {
            "/rest/admin/project/DEMO": FakeResponse(payload={"id": "DEMO", "name": "Demo"}),
            "/rest/issue/DEMO-1": FakeResponse(payload=ISSUE_RAW),
        }
    )
    lookup = IssueLookup(YouTrack(api).projects)
    assert lookup.lookup("DEMO-1").status is LookupStatus.FOUND
    assert lookup.lookup("DEMO-2").status is LookupStatus.ISSUE_NOT_FOUND
    assert lookup.lookup("OTHER-1").status is LookupStatus.PROJECT_NOT_FOUND
    urls = [url for url, _, _ in api.session.requests]
    assert not any(url.endswith("/rest/issue/OTHER-1") for url in urls)


def test_project_issue_must_belong_to_project():
    api = _api(
        {
            "/rest/admin/project/DEMO": FakeResponse(payload={"id": "DEMO"}),
            "/rest/issue/DEMOX-1": FakeResponse(payload={**ISSUE_RAW, "id": "DEMOX-1"}),
        }
    )
    project = YouTrack(api).projects.get("DEMO")
    with pytest.raises(NotFound):
        project.issues.get("DEMOX-1")
