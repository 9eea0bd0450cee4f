"""Tests for app configuration loading."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError
import pytest

from gdtfkit.core.config import (
    AppConfig,
    ParserConfig,
    apply_logging_config,
    detect_format,
    load_app_config,
    load_config,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("gdtfkit.json", "json"), ("gdtfkit.yaml", "yaml"), ("GDTFKIT.YML", "yaml")],
)
def test_detect_format(name: str, expected: str) -> None:
    assert detect_format(name) == expected


def test_detect_format_rejects_unknown_suffix() -> None:
    with pytest.raises(ValueError, match="Unsupported config format"):
        detect_format("gdtfkit.toml")


def test_defaults_without_path() -> None:
    config = load_app_config()
    assert config == AppConfig()
    assert config.parser.description_member == "description.xml"
    assert config.logging.level == "WARNING"


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "gdtfkit.yaml"
    path.write_text("parser:\n  chunk_size: 4096\nlogging:\n  level: DEBUG\n  structured: true\n")

    config = load_app_config(path)

    assert config.parser == ParserConfig(chunk_size=4096)
    assert config.logging.level == "DEBUG"
    assert config.logging.structured is True


def test_load_json(tmp_path) -> None:
    path = tmp_path / "gdtfkit.json"
    path.write_text(json.dumps({"parser": {"description_member": "fixture.xml"}}))

    assert load_app_config(path).parser.description_member == "fixture.xml"


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == {}
    assert load_app_config(path) == AppConfig()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_app_config(tmp_path / "absent.yaml")


def test_invalid_json(tmp_path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_config(path)


def test_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("parser: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config(path)


def test_root_must_be_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


@pytest.mark.parametrize(
    "content",
    [
        {"parser": {"chunk_size": 0}},
        {"logging": {"level": "LOUD"}},
        {"parser": {"unknown": True}},
        {"unknown": {}},
    ],
)
def test_validation_errors(tmp_path, content: dict) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(content))
    with pytest.raises(ValidationError):
        load_app_config(path)


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        AppConfig().parser.chunk_size = 1  # type: ignore[misc]


def test_apply_logging_config(tmp_path) -> None:
    path = tmp_path / "gdtfkit.yaml"
    path.write_text("logging:\n  level: ERROR\n")

    apply_logging_config(load_app_config(path))

    assert logging.getLogger().level == logging.ERROR
    apply_logging_config(AppConfig())
