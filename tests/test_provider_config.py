from gemini_connect.llm.provider_config import ProviderConfig, load_key, load_provider_config


def test_missing_environment_yields_empty_config():
    assert load_provider_config() == ProviderConfig(api_key=None, model_id=None)


def test_reads_environment_on_every_call(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "k1")
    monkeypatch.setenv("GEMINI_MODEL", "models/a")
    first = load_provider_config()

    monkeypatch.setenv("GEMINI_MODEL", "models/b")
    second = load_provider_config()

    assert first.model_id == "models/a"
    assert second.model_id == "models/b"
    assert second.api_key == "k1"


def test_whitespace_values_count_as_missing(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "   ")
    monkeypatch.setenv("GEMINI_MODEL", "\t")
    config = load_provider_config()
    assert config.api_key is None
    assert config.model_id is None


def test_key_file_used_when_env_key_absent(monkeypatch, tmp_path):
    key_file = tmp_path / "gemini.key"
    key_file.write_text("file-key\n")
    monkeypatch.setenv("GEMINI_KEY_FILE", str(key_file))
    assert load_provider_config().api_key == "file-key"


def test_env_key_wins_over_key_file(monkeypatch, tmp_path):
    key_file = tmp_path / "gemini.key"
    key_file.write_text("file-key")
    monkeypatch.setenv("GEMINI_KEY_FILE", str(key_file))
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    assert load_provider_config().api_key == "env-key"


def test_load_key_missing_path(tmp_path):
    assert load_key(None) is None
    assert load_key(str(tmp_path / "absent.key")) is None


def test_repr_hides_api_key():
    text = repr(ProviderConfig(api_key="super-secret", model_id="models/a"))
    assert "super-secret" not in text
    assert "models/a" in text
