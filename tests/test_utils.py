# tests/test_utils.py
"""End-to-end tests for utils (load_settings, log) with cache/env handling."""

from __future__ import annotations

import io
import json

import pytest

from color_value.types import AlphaDecoding
from color_value.utils import load_config as LC
from color_value.utils import log as LOG


# ---------- Fixtures ----------
@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, settings env and cache between tests."""
    monkeypatch.delenv(LOG.ENV_VAR, raising=False)
    monkeypatch.delenv(LC.ENV_VAR, raising=False)
    LC.clear_settings_cache()
    LOG.reload_topics()
    yield
    LC.clear_settings_cache()
    LOG.reload_topics()


@pytest.fixture
def settings_file(tmp_path):
    def _write(payload) -> object:
        p = tmp_path / "color_settings.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        p.write_text(text, encoding="utf-8")
        return p

    return _write


# ---------- load_settings tests ----------
def test_defaults_when_nothing_configured():
    s = LC.load_settings()
    assert s is LC.DEFAULT_SETTINGS
    assert s.alpha_decoding is AlphaDecoding.NORMALIZED
    assert s.unset_token == "undefined"


def test_explicit_path_and_cache_identity(settings_file):
    p = settings_file({"alpha_decoding": "FLOAT32_BITS", "unset_token": "-"})
    s1 = LC.load_settings(p)
    assert s1.alpha_decoding is AlphaDecoding.FLOAT32_BITS
    assert s1.unset_token == "-"
    assert LC.load_settings(p) is s1

    LC.clear_settings_cache()
    assert LC.load_settings(p) is not s1


def test_env_var_override(settings_file, monkeypatch):
    p = settings_file({"unset_token": "null"})
    monkeypatch.setenv(LC.ENV_VAR, str(p))
    assert LC.load_settings().unset_token == "null"


def test_temp_settings_file_restores_env(settings_file, monkeypatch):
    import os

    p = settings_file({"unset_token": "?"})
    monkeypatch.setenv(LC.ENV_VAR, "/somewhere/else.json")
    with LC.temp_settings_file(p):
        assert LC.load_settings().unset_token == "?"
    assert os.environ[LC.ENV_VAR] == "/somewhere/else.json"


def test_unset_token_flows_into_color_formatting(settings_file):
    from color_value import ColorValue

    p = settings_file({"unset_token": "none"})
    with LC.temp_settings_file(p):
        assert ColorValue().to_rgb_string() == "rgb(none, none, none)"


def test_missing_file_raises(tmp_path):
    with pytest.raises(LC.ConfigFileNotFound):
        LC.load_settings(tmp_path / "nope.json")


@pytest.mark.parametrize(
    "payload,exc",
    [
        ("{not json", LC.ConfigParseError),
        ([1, 2, 3], LC.ConfigTypeError),
        ({"colour": "red"}, LC.ConfigTypeError),
        ({"unset_token": 0}, LC.ConfigTypeError),
        ({"alpha_decoding": "gamma"}, LC.ConfigParseError),
    ],
)
def test_bad_settings_raise_typed_errors(settings_file, payload, exc):
    with pytest.raises(exc):
        LC.load_settings(settings_file(payload))


def test_config_errors_subclass_builtin_exceptions():
    assert issubclass(LC.ConfigFileNotFound, FileNotFoundError)
    assert issubclass(LC.ConfigParseError, ValueError)
    assert issubclass(LC.ConfigTypeError, TypeError)


# ---------- log tests ----------
def test_debug_is_silent_without_topics():
    buf = io.StringIO()
    LOG.debug("hello", topic="parse", stream=buf)
    assert buf.getvalue() == ""


def test_debug_prints_enabled_topic_only(monkeypatch):
    monkeypatch.setenv(LOG.ENV_VAR, "parse, Config")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("kept", topic="PARSE", stream=buf)
    LOG.debug("dropped", topic="hex", stream=buf)
    LOG.debug("also kept", topic="config", level="info", stream=buf)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    assert "[parse][DEBUG] kept" in lines[0]
    assert "[config][INFO] also kept" in lines[1]


def test_debug_all_enables_everything(monkeypatch):
    monkeypatch.setenv(LOG.ENV_VAR, "all")
    LOG.reload_topics()
    assert LOG.is_enabled("hex") and LOG.is_enabled("anything")
