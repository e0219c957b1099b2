import logging

from notes_suite import config


def test_defaults_when_properties_file_is_missing(tmp_path):
    settings = config.load_settings(tmp_path / "missing.properties", environ={})
    assert settings.base_url == "https://practice.expandtesting.com/notes/api"
    assert settings.log_level == "BASIC"


def test_properties_file_overrides_defaults(tmp_path):
    props = tmp_path / "local.properties"
    props.write_text("baseUrl=http://localhost:3000/notes/api/\nlog.level=headers\n", encoding="utf-8")

    settings = config.load_settings(props, environ={})
    assert settings.base_url == "http://localhost:3000/notes/api"
    assert settings.log_level == "HEADERS"


def test_environment_wins_over_properties_file(tmp_path):
    props = tmp_path / "local.properties"
    props.write_text("baseUrl=http://from-file/api\nlog.level=BODY\n", encoding="utf-8")
    environ = {"NOTES_BASE_URL": "http://from-env/api", "NOTES_LOG_LEVEL": "NONE"}

    settings = config.load_settings(props, environ=environ)
    assert settings.base_url == "http://from-env/api"
    assert settings.log_level == "NONE"


def test_config_file_location_can_come_from_environment(tmp_path):
    props = tmp_path / "ci.properties"
    props.write_text("log.level=ALL\n", encoding="utf-8")

    settings = config.load_settings(environ={"NOTES_CONFIG_FILE": str(props)})
    assert settings.log_level == "ALL"
    assert settings.base_url == config.DEFAULT_BASE_URL


def test_unknown_log_level_falls_back_to_basic(tmp_path, caplog):
    props = tmp_path / "local.properties"
    props.write_text("log.level=VERBOSE\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="notes_suite.config"):
        settings = config.load_settings(props, environ={})
    assert settings.log_level == "BASIC"
    assert "VERBOSE" in caplog.text


def test_settings_are_resolved_once_per_process(monkeypatch):
    config.get_settings.cache_clear()
    monkeypatch.setenv("NOTES_BASE_URL", "http://first/api")
    try:
        first = config.get_settings()
        monkeypatch.setenv("NOTES_BASE_URL", "http://second/api")
        assert config.get_settings() is first
        assert config.base_url() == "http://first/api"
    finally:
        config.get_settings.cache_clear()


def test_latin1_properties_file_is_read(tmp_path):
    props = tmp_path / "local.properties"
    props.write_bytes("# Caf\xe9 staging\nlog.level=ALL\n".encode("latin-1"))

    settings = config.load_settings(props, environ={})
    assert settings.log_level == "ALL"
    assert settings.base_url == config.DEFAULT_BASE_URL


def test_properties_file_without_known_keys_warns(tmp_path, caplog):
    props = tmp_path / "local.properties"
    props.write_text("baseUrl: http://colon-style/api\nlog.level ALL\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="notes_suite.config"):
        settings = config.load_settings(props, environ={})
    assert settings == config.Settings()
    assert "only key=value lines are read" in caplog.text


def test_missing_properties_file_does_not_warn(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="notes_suite.config"):
        config.load_settings(tmp_path / "missing.properties", environ={})
    assert caplog.records == []
