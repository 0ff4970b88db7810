from youtrack_app.app import PAGES
from youtrack_app.pages import badge, report, setup  # noqa: F401  (registers pages)


def test_pages_registered():
    assert {"Issue Report", "Issue Badge", "Setup / Connection"} <= set(PAGES)


def test_current_page_url_strips_query(monkeypatch):
    class Ctx:
        url = "http://localhost:8501/report?ytpage=3"

    monkeypatch.setattr(report.st, "context", Ctx())
    assert report.current_page_url() == "http://localhost:8501/report"
    monkeypatch.setattr(report.st, "context", object())
    assert report.current_page_url() is None
