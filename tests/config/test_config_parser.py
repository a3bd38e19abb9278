"""
Tests for tailwind.yaml parsing.
"""

import pytest

from tailwindkit.config.parser import (
    CONFIG_FILENAME,
    InitOptions,
    TailwindConfig,
    load_config,
    parse_config,
    parse_config_dict,
)
from tailwindkit.core.acquire import DEFAULT_RELEASE_URL
from tailwindkit.core.exceptions import ConfigInvalidError


class TestParseConfigDict:
    """Test validation of parsed YAML data."""

    def test_full_config(self):
        config = parse_config_dict(
            {
                "version": "4.1.0",
                "cache_dir": ".cache/tailwind",
                "config_path": "config",
                "input": "src/input.css",
                "output": "dist/output.css",
                "minify": True,
                "init": {"full": True, "postcss": True},
            }
        )

        assert config.version == "4.1.0"
        assert config.cache_dir == ".cache/tailwind"
        assert config.input == "src/input.css"
        assert config.minify is True
        assert config.init == InitOptions(full=True, postcss=True)
        assert config.release_url == DEFAULT_RELEASE_URL

    def test_defaults(self):
        config = parse_config_dict({})
        assert config == TailwindConfig()

    def test_root_must_be_mapping(self):
        with pytest.raises(ConfigInvalidError, match="mapping"):
            parse_config_dict(["4.1.0"])

    def test_invalid_version(self):
        with pytest.raises(ConfigInvalidError, match="Invalid Tailwind version format"):
            parse_config_dict({"version": "latest"})

    def test_float_version_is_reported(self):
        """YAML reads `version: 4.1` as a float."""
        with pytest.raises(ConfigInvalidError, match="'4.1'"):
            parse_config_dict({"version": 4.1})

    def test_non_string_path(self):
        with pytest.raises(ConfigInvalidError, match="'input' must be a string"):
            parse_config_dict({"input": 42})

    def test_minify_must_be_bool(self):
        with pytest.raises(ConfigInvalidError, match="minify"):
            parse_config_dict({"minify": "yes please"})

    def test_unknown_init_option(self):
        with pytest.raises(ConfigInvalidError, match="Unknown init option"):
            parse_config_dict({"init": {"jsx": True}})

    def test_init_option_must_be_bool(self):
        with pytest.raises(ConfigInvalidError, match="init.esm"):
            parse_config_dict({"init": {"esm": "true"}})


class TestParseConfig:
    def test_parse_file(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text('version: "4.1.0"\ninput: src/input.css\noutput: dist/out.css\n')

        config = parse_config(path)

        assert config.version == "4.1.0"
        assert config.output == "dist/out.css"

    def test_empty_file(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("")
        assert parse_config(path) == TailwindConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigInvalidError, match="not found"):
            parse_config(tmp_path / CONFIG_FILENAME)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text("version: [unclosed\n")

        with pytest.raises(ConfigInvalidError, match="Invalid YAML"):
            parse_config(path)


class TestLoadConfig:
    def test_default_file_is_optional(self, tmp_path):
        assert load_config(tmp_path) == TailwindConfig()

    def test_default_file(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text('version: "3.4.17"\n')
        assert load_config(tmp_path).version == "3.4.17"

    def test_explicit_file_must_exist(self, tmp_path):
        with pytest.raises(ConfigInvalidError):
            load_config(tmp_path, tmp_path / "custom.yaml")


class TestOverrides:
    def test_none_values_are_ignored(self):
        config = TailwindConfig(version="4.1.0", input="a.css")
        updated = config.with_overrides(version=None, input=None, output="b.css")

        assert updated.version == "4.1.0"
        assert updated.input == "a.css"
        assert updated.output == "b.css"

    def test_init_flags(self):
        config = TailwindConfig(init=InitOptions(full=True))
        updated = config.with_overrides(ts=True, esm=None)

        assert updated.init == InitOptions(full=True, ts=True)
        assert config.init == InitOptions(full=True)
