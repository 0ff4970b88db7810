from youtrack_app.core.config import DEFAULT_REPORT_FIELDS, TIMEZONE, ReportSettings
from youtrack_app.core.settings_store import load_settings, settings_from_mapping


def test_missing_file_falls_back_to_defaults(tmp_path):
    settings = load_settings(tmp_path)
    assert settings == ReportSettings()


def test_yaml_section_loaded(tmp_path):
    (tmp_path / "youtrack.yaml").write_text(
        "youtrack:\n"
        "  host: https://tracker.example.org/rest\n"
        "  token: perm:xyz\n"
        "  timezone: Europe/Berlin\n"
        "  timeout: 12\n"
    )
    settings = load_settings(tmp_path)
    assert settings.auth_token == "perm:xyz"
    assert settings.timezone == "Europe/Berlin"
    assert settings.timeout == 12.0
    assert settings.rest_url == "https://tracker.example.org/rest"
    assert settings.resolved_link_base == "https://tracker.example.org"
    assert settings.default_fields == DEFAULT_REPORT_FIELDS


def test_unreadable_yaml_is_ignored(tmp_path):
    path = tmp_path / "youtrack.yaml"
    path.write_text("youtrack: [unclosed\n")
    assert load_settings(path) == ReportSettings()


def test_link_base_override():
    settings = settings_from_mapping({"host": "https://yt.example.com", "link_base": "https://web.example.com/"})
    assert settings.rest_url == "https://yt.example.com/rest"
    assert settings.resolved_link_base == "https://web.example.com"
    assert settings_from_mapping({"timeout": "soon"}).timeout == ReportSettings().timeout


def test_unknown_timezone_replaced_by_default():
    assert settings_from_mapping({"timezone": "Europe/Berln"}).timezone == TIMEZONE
    assert settings_from_mapping({"timezone": "Europe/Berlin"}).timezone == "Europe/Berlin"
