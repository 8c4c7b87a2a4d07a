import pytest

from directives.composer import compose
from directives.entities import BackendIntegration, Configuration
from directives.settings import load_default_configuration, merge_configuration


def _write(tmp_path, text):
    path = tmp_path / "directives.jsonc"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_no_env_gives_empty_configuration():
    assert load_default_configuration() == Configuration()


def test_loads_commented_json_file(tmp_path, monkeypatch):
    path = _write(
        tmp_path,
        """
        {
          // project root inside the sandbox
          "workingDirectory": "/srv/app",
          "allowedMarkupVocabulary": ["b", "em"],
          "backendIntegration": {"isConnected": true}
        }
        """,
    )
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", path)
    config = load_default_configuration()
    assert config.working_directory == "/srv/app"
    assert config.allowed_markup_vocabulary == ("b", "em")
    assert config.backend_integration == BackendIntegration(is_connected=True)


def test_env_working_directory_overrides_file(tmp_path, monkeypatch):
    path = _write(tmp_path, '{"workingDirectory": "/from/file"}')
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", path)
    monkeypatch.setenv("DIRECTIVES_WORKING_DIRECTORY", "/from/env")
    assert load_default_configuration().working_directory == "/from/env"


def test_missing_file_fails_fast(tmp_path, monkeypatch):
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", str(tmp_path / "absent.jsonc"))
    with pytest.raises(FileNotFoundError):
        load_default_configuration()


def test_non_object_file_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", _write(tmp_path, '["b"]'))
    with pytest.raises(ValueError):
        load_default_configuration()


def test_merge_prefers_explicit_overrides():
    defaults = Configuration(
        working_directory="/default",
        allowed_markup_vocabulary=["b"],
        backend_integration=BackendIntegration(),
    )
    merged = merge_configuration(defaults, Configuration(working_directory="/override"))
    assert merged.working_directory == "/override"
    assert merged.allowed_markup_vocabulary == ("b",)
    assert merged.backend_integration == BackendIntegration()


def test_merge_with_empty_overrides_keeps_defaults():
    defaults = Configuration(working_directory="/default")
    assert merge_configuration(defaults, Configuration()).working_directory == "/default"


def test_empty_overrides_fall_back_to_configured_defaults():
    defaults = Configuration(working_directory="/srv/app", allowed_markup_vocabulary=["b"])
    overrides = Configuration.model_validate({"workingDirectory": "", "allowedMarkupVocabulary": []})
    merged = merge_configuration(defaults, overrides)
    assert merged.working_directory == "/srv/app"
    assert merged.allowed_markup_vocabulary == ("b",)
    assert "`/srv/app`" in compose(merged).text


def test_explicit_null_backend_overrides_default():
    defaults = Configuration(backend_integration=BackendIntegration())
    overrides = Configuration.model_validate({"backendIntegration": None})
    assert merge_configuration(defaults, overrides).backend_integration is None


def test_unknown_file_key_rejected(tmp_path, monkeypatch):
    monkeypatch.setenv("DIRECTIVES_CONFIG_PATH", _write(tmp_path, '{"backend": {}}'))
    with pytest.raises(ValueError):
        load_default_configuration()
