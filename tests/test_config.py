import json
from pathlib import Path

import pytest

from bundler import config
from bundler.config import BundleConfig, BundlerSettings, SortMode
from bundler.errors import InvalidLanguage


def test_settings_defaults_when_file_missing(tmp_path):
    settings = BundlerSettings.load(tmp_path)
    assert settings.exclude_markers == ["bin", "debug", "obj"]
    assert settings.encoding == "utf-8"
    assert settings.response_file == "response.rsp"
    assert settings.config_path is None


def test_settings_loaded_from_json(tmp_path):
    (tmp_path / config.CONFIG_FILE).write_text(
        json.dumps({"exclude_markers": ["vendor"], "response_file": "opts.rsp", "extra": 1}),
        encoding="utf-8",
    )
    settings = BundlerSettings.load(tmp_path)
    assert settings.exclude_markers == ["bin", "debug", "obj", "vendor"]
    assert settings.response_file == "opts.rsp"
    assert settings.encoding == "utf-8"
    assert settings.config_path == tmp_path / config.CONFIG_FILE


def test_settings_fall_back_on_broken_json(tmp_path, caplog):
    (tmp_path / config.CONFIG_FILE).write_text("{not json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        settings = BundlerSettings.load(tmp_path)
    assert settings == BundlerSettings()
    assert "Failed to parse" in caplog.text


@pytest.mark.parametrize("env, expected", [("debug", "DEBUG"), ("bogus", "WARNING"), (None, "WARNING")])
def test_default_log_level(monkeypatch, env, expected):
    if env is None:
        monkeypatch.delenv(config.LOGLEVEL_ENV, raising=False)
    else:
        monkeypatch.setenv(config.LOGLEVEL_ENV, env)
    assert config.default_log_level() == expected


def test_bundle_config_from_args():
    cfg = BundleConfig.from_args(
        output=Path("out.txt"),
        language="csharp,python",
        note=True,
        sort="type",
        remove_empty_lines=True,
        author="Ann",
    )
    assert cfg.languages == {"csharp", "python"}
    assert cfg.extensions == {".cs", ".py"}
    assert cfg.sort is SortMode.BY_EXTENSION
    assert cfg.include_source_comment and cfg.remove_blank_lines
    assert cfg.author == "Ann"


def test_bundle_config_defaults():
    cfg = BundleConfig.from_args(output=None, language="js")
    assert cfg.output == config.DEFAULT_OUTPUT
    assert cfg.sort is SortMode.BY_NAME
    assert cfg.author is None
    assert not cfg.include_source_comment
    assert not cfg.remove_blank_lines


def test_bundle_config_rejects_bad_language():
    with pytest.raises(InvalidLanguage):
        BundleConfig.from_args(output=None, language="csharp,nope")


def test_bundle_config_is_immutable():
    cfg = BundleConfig.from_args(output=None, language="js")
    with pytest.raises(AttributeError):
        cfg.author = "someone"


@pytest.mark.parametrize("payload", ['{"exclude_markers": "vendor"}', '{"encoding": "utf-9"}'])
def test_settings_reject_bad_values(tmp_path, caplog, payload):
    (tmp_path / config.CONFIG_FILE).write_text(payload, encoding="utf-8")
    with caplog.at_level("WARNING"):
        settings = BundlerSettings.load(tmp_path)
    assert settings == BundlerSettings()
    assert "Failed to parse" in caplog.text


def test_settings_encoding_is_normalized(tmp_path):
    (tmp_path / config.CONFIG_FILE).write_text('{"encoding": "UTF8"}', encoding="utf-8")
    assert BundlerSettings.load(tmp_path).encoding == "utf-8"
