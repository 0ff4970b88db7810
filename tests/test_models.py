import pytest

from youtrack_app.core.models import (
    AttachmentField,
    AttachmentValue,
    Issue,
    IssueId,
    MultiValueField,
    TextField,
    User,
    snapshot,
)


def _issue():
    return Issue(
        id="DEMO-7",
        summary="Crash on save",
        reporter="alice",
        assignee=User("bob", "Bob Builder"),
        priority="Major",
        state="Open",
        votes=3,
        type="Bug",
        fields={"State": TextField("State", "Open"), "Fix versions": MultiValueField("Fix versions", ("1.0", "1.1"))},
    )


def test_snapshot_copies_values_at_call_time():
    issue = _issue()
    snap = snapshot(issue)
    assert snap.id == "DEMO-7"
    assert snap.summary == "Crash on save"
    assert snap.get_field("State").string_value() == "Open"
    assert snap.assignee.display_name == "Bob Builder"


def test_snapshot_unaffected_by_later_mutation():
    issue = _issue()
    snap = issue.create_snapshot()
    issue.summary = "Changed"
    issue.state = "Fixed"
    issue.resolved = True
    issue.fields["State"] = TextField("State", "Fixed")
    issue.fields["Priority"] = TextField("Priority", "Critical")
    assert snap.summary == "Crash on save"
    assert snap.state == "Open"
    assert snap.resolved is False
    assert snap.get_field("State").string_value() == "Open"
    assert snap.get_field("Priority") is None


def test_snapshot_is_read_only():
    snap = _issue().create_snapshot()
    with pytest.raises(AttributeError):
        snap.summary = "x"
    with pytest.raises(TypeError):
        snap.fields["State"] = TextField("State", "Fixed")


def test_issue_id_parse():
    parsed = IssueId.parse("MY-PROJ-42")
    assert parsed.project_id == "MY-PROJ"
    assert parsed.number == 42
    assert str(parsed) == "MY-PROJ-42"
    assert IssueId.parse("DEMO").number is None
    assert IssueId.parse("DEMO-x").project_id == "DEMO"


def test_field_variants_string_value():
    assert TextField("summary", None).string_value() is None
    assert MultiValueField("Fix versions", ("1.0", "2.0")).string_value() == "1.0, 2.0"
    assert MultiValueField("Fix versions").string_value() is None
    attachments = AttachmentField(
        "attachments",
        (AttachmentValue("1", "https://yt/a.png", "a.png"), AttachmentValue("2", "https://yt/b.log")),
    )
    assert attachments.kind == "attachment"
    assert attachments.string_value() == "a.png, https://yt/b.log"
