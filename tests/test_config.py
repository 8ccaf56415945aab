from __future__ import annotations

import logging
import textwrap
import pytest
from pathlib import Path

from strkit.config import (
    ConfigError,
    StrkitConfig,
    apply_overrides,
    build_config,
    load_config,
    normalize_config,
    validate_config,
)


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def _write_strkit_toml(base: Path, body: str) -> Path:
    path = base / ".strkit.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_loads_config_from_pyproject(tmp_path: Path):
    _write_pyproject(
        tmp_path,
        """
        [tool.strkit]
        filler = " [more]"
        case_sensitive = false
        allow_overlapping = true
        codec = "binary"
        strict_codec = true
        case_style = "snake"
        slug_fallback = "untitled"
        max_input_size = 1024
        """,
    )

    config = load_config(tmp_path)

    assert config == StrkitConfig(
        filler=" [more]",
        case_sensitive=False,
        allow_overlapping=True,
        codec="binary",
        strict_codec=True,
        case_style="snake",
        slug_fallback="untitled",
        max_input_size=1024,
    )


def test_loads_config_from_dotfile(tmp_path: Path):
    _write_strkit_toml(
        tmp_path,
        """
        [strkit]
        codec = "decimal"
        """,
    )

    assert load_config(tmp_path).codec == "decimal"


def test_loads_tool_table_from_dotfile(tmp_path: Path):
    _write_strkit_toml(
        tmp_path,
        """
        [tool.strkit]
        case_style = "kebab"
        """,
    )

    assert load_config(tmp_path).case_style == "kebab"


def test_pyproject_takes_precedence_over_dotfile(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool.strkit]\ncodec = "binary"\n')
    _write_strkit_toml(tmp_path, '[strkit]\ncodec = "decimal"\n')

    assert load_config(tmp_path).codec == "binary"


def test_searches_parent_directories(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool.strkit]\nfiller = "~"\n')
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert load_config(nested).filler == "~"


def test_pyproject_without_table_falls_through(tmp_path: Path):
    _write_pyproject(tmp_path, '[project]\nname = "demo"\n')

    assert load_config(tmp_path) == StrkitConfig()


def test_empty_table_returns_defaults(tmp_path: Path):
    _write_pyproject(tmp_path, "[tool.strkit]\n")

    assert load_config(tmp_path) == StrkitConfig()


def test_aliases_are_normalized_on_load(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool.strkit]\ncodec = "BIN"\ncase_style = "pascal"\n')

    config = load_config(tmp_path)

    assert config.codec == "binary"
    assert config.case_style == "studly"


def test_unknown_keys_raise(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool.strkit]\nunknown = 1\n')

    with pytest.raises(ConfigError, match="tool.strkit"):
        load_config(tmp_path)


def test_non_table_settings_raise(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool]\nstrkit = "oops"\n')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_is_skipped_with_warning(tmp_path: Path, caplog):
    _write_pyproject(tmp_path, "[tool.strkit\ncodec = \n")

    with caplog.at_level(logging.WARNING, logger="strkit.config"):
        config = load_config(tmp_path)

    assert config == StrkitConfig()
    assert "Skipping unreadable configuration file" in caplog.text


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"codec": "base64"}, "`codec` must be one of"),
        ({"case_style": "shout"}, "`case_style` must be one of"),
        ({"case_sensitive": "yes"}, "`case_sensitive` must be a boolean"),
        ({"strict_codec": 1}, "`strict_codec` must be a boolean"),
        ({"filler": 3}, "`filler` must be a string"),
        ({"slug_fallback": 0}, "`slug_fallback` must be a string"),
        ({"max_input_size": 0}, "`max_input_size` must be a positive integer"),
        ({"max_input_size": "big"}, "`max_input_size` must be an integer"),
        ({"max_input_size": True}, "`max_input_size` must be an integer"),
    ],
)
def test_validate_config_rejects_invalid_values(overrides: dict, message: str):
    with pytest.raises(ConfigError, match=message):
        validate_config(StrkitConfig(**overrides))


def test_validate_config_accepts_defaults_and_aliases():
    validate_config(StrkitConfig())
    validate_config(StrkitConfig(codec="dec", case_style="pascal"))


def test_normalize_config_lowercases_names():
    config = normalize_config(StrkitConfig(codec="HEX", case_style="Kebab"))

    assert config.codec == "hex"
    assert config.case_style == "kebab"


def test_apply_overrides_ignores_none():
    base = StrkitConfig()

    assert apply_overrides(base, codec=None, filler=None) is base
    assert apply_overrides(base, codec="binary").codec == "binary"


def test_apply_overrides_rejects_unknown_fields():
    with pytest.raises(TypeError):
        apply_overrides(StrkitConfig(), unknown="value")


def test_build_config_applies_overrides_and_validates(tmp_path: Path):
    _write_pyproject(tmp_path, '[tool.strkit]\ncodec = "binary"\n')

    config = build_config(tmp_path, codec="dec", filler=None)

    assert config.codec == "decimal"
    assert config.filler == "..."

    with pytest.raises(ConfigError):
        build_config(tmp_path, codec="rot13")
