import pytest
from fakes import ListCollection

from youtrack_app.core.collections import CommandCollection
from youtrack_app.core.errors import NotFound
from youtrack_app.core.models import Issue


def _issues(n):
    return [Issue(id=f"DEMO-{i}") for i in range(1, n + 1)]


def test_query_returns_one_window_and_remembers_items():
    coll = ListCollection("root", "Issue", _issues(30))
    page = coll.query("state: open", 25, 25)
    assert [i.id for i in page] == ["DEMO-26", "DEMO-27", "DEMO-28", "DEMO-29", "DEMO-30"]
    assert coll.calls == [("query", "state: open", 25, 25)]
    assert {i.id for i in coll.fetched()} == {i.id for i in page}


def test_repeated_queries_are_independent_round_trips():
    coll = ListCollection("root", "Issue", _issues(5))
    coll.query("", 0, 2)
    coll.query("", 0, 2)
    assert len(coll.calls) == 2


def test_get_scans_list_and_raises_not_found():
    coll = ListCollection("root", "Issue", _issues(3))
    assert coll.get("DEMO-2").id == "DEMO-2"
    with pytest.raises(NotFound) as exc:
        coll.get("DEMO-9")
    assert exc.value.item_id == "DEMO-9"


def test_command_collection_uses_item_command():
    seen = []

    def item(issue_id):
        seen.append(issue_id)
        return Issue(id=issue_id)

    coll = CommandCollection("root", "Issue", list_command=lambda: [], item_command=item)
    assert coll.get("DEMO-5").id == "DEMO-5"
    assert seen == ["DEMO-5"]
    assert coll.parent == "root"


def test_command_collection_without_query_slices_list():
    coll = CommandCollection("root", "Issue", list_command=lambda: _issues(10))
    assert [i.id for i in coll.query("", 2, 3)] == ["DEMO-3", "DEMO-4", "DEMO-5"]


def test_query_truncates_oversized_pages():
    coll = CommandCollection(
        "root", "Issue", list_command=lambda: [], query_command=lambda f, s, n: _issues(n + 5)
    )
    assert len(coll.query("", 0, 4)) == 4
