"""Unit tests for SymbolicConfiguration and the settings loader.

Tests cover: construction and immutability, key spelling tolerance,
rejection of malformed tables, JSON/YAML loading, the App section and
config path resolution.

Run with: uv run pytest tests/unit/test_symbolic_configuration.py -v
"""

__test__ = True

import json

import pytest

from schematicnav.config import app_config
from schematicnav.config.app_config import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_FILE,
    load_symbolic_configuration,
    resolve_config_path,
)
from schematicnav.domains.navigation.aggregates import SymbolicConfiguration
from schematicnav.domains.navigation.errors import ConfigurationError


# =============================================================================
# Aggregate
# =============================================================================


class TestSymbolicConfiguration:
    """Tests for the aggregate itself."""

    def test_lookups(self, site_config):
        assert site_config.has_page("Home")
        assert not site_config.has_page("home")
        assert site_config.has_element("LoginButton")
        assert not site_config.has_element("SignupButton")

    def test_names_preserve_order(self, site_config):
        assert site_config.page_names() == ["Home", "Login", "Blog"]
        assert site_config.element_names()[0] == "LoginButton"

    def test_tables_are_read_only(self, site_config):
        with pytest.raises(TypeError):
            site_config.pages["Evil"] = "https://evil.io"

    def test_source_dict_is_copied(self):
        pages = {"Home": "{base}/"}
        config = SymbolicConfiguration(base_url="https://a.io", pages=pages)
        pages["Other"] = "x"
        assert not config.has_page("Other")

    def test_rejects_non_string_selector(self):
        with pytest.raises(ConfigurationError, match="must be a string"):
            SymbolicConfiguration(base_url="https://a.io", elements={"Button": 3})

    def test_rejects_non_mapping_section(self):
        with pytest.raises(ConfigurationError, match="'pages' must be a mapping"):
            SymbolicConfiguration(base_url="https://a.io", pages=["Home"])


class TestFromDict:
    """Tests for SymbolicConfiguration.from_dict."""

    def test_pascal_case_keys(self):
        config = SymbolicConfiguration.from_dict(
            {"BaseUrl": "https://a.io", "Pages": {"Home": "{base}/"}, "Elements": {"Go": "#go"}}
        )
        assert config.base_url == "https://a.io"
        assert config.pages["Home"] == "{base}/"
        assert config.elements["Go"] == "#go"

    def test_camel_and_snake_case(self):
        assert SymbolicConfiguration.from_dict({"baseUrl": "a.io"}).base_url == "a.io"
        assert SymbolicConfiguration.from_dict({"base_url": "b.io"}).base_url == "b.io"

    def test_missing_sections_are_empty(self):
        config = SymbolicConfiguration.from_dict({"baseUrl": "https://a.io"})
        assert config.page_names() == []
        assert config.element_names() == []

    def test_base_url_is_stripped(self):
        assert SymbolicConfiguration.from_dict({"baseUrl": " https://a.io "}).base_url == "https://a.io"

    @pytest.mark.parametrize("data", [{}, {"baseUrl": ""}, {"baseUrl": "   "}, {"baseUrl": 5}])
    def test_missing_base_url(self, data):
        with pytest.raises(ConfigurationError, match="baseUrl"):
            SymbolicConfiguration.from_dict(data)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            SymbolicConfiguration.from_dict(["baseUrl"])


# =============================================================================
# Loader
# =============================================================================


class TestLoadSymbolicConfiguration:
    """Tests for load_symbolic_configuration."""

    def test_load_json_app_section(self, tmp_path):
        path = tmp_path / "appsettings.json"
        path.write_text(
            json.dumps(
                {
                    "App": {
                        "BaseUrl": "https://shop.io",
                        "Pages": {"Cart": "{base}/cart"},
                        "Elements": {"Checkout": "#checkout"},
                    },
                    "Logging": {"Level": "Debug"},
                }
            ),
            encoding="utf-8",
        )
        config = load_symbolic_configuration(path)
        assert config.base_url == "https://shop.io"
        assert config.pages == {"Cart": "{base}/cart"}
        assert config.elements == {"Checkout": "#checkout"}

    def test_load_yaml_top_level(self, tmp_path):
        path = tmp_path / "site.yaml"
        path.write_text(
            "baseUrl: https://a.io\n"
            "pages:\n"
            "  Home: \"{base}/home\"\n"
            "elements:\n"
            "  LoginButton: \"#login-btn\"\n",
            encoding="utf-8",
        )
        config = load_symbolic_configuration(path)
        assert config.pages["Home"] == "{base}/home"
        assert config.elements["LoginButton"] == "#login-btn"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_symbolic_configuration(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_symbolic_configuration(path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"baseUrl": "https://caf\xe9.io"}')
        with pytest.raises(ConfigurationError, match="Could not read"):
            load_symbolic_configuration(path)

    def test_unreadable_file(self, tmp_path, monkeypatch):
        path = tmp_path / "locked.json"
        path.write_text("{}", encoding="utf-8")

        def denied(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(app_config, "open", denied, raising=False)
        with pytest.raises(ConfigurationError, match="Could not read"):
            load_symbolic_configuration(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="baseUrl"):
            load_symbolic_configuration(path)


class TestResolveConfigPath:
    """Tests for resolve_config_path."""

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "env.json"))
        assert resolve_config_path(tmp_path / "explicit.json") == tmp_path / "explicit.json"

    def test_env_var(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "env.json"))
        assert resolve_config_path() == tmp_path / "env.json"

    def test_default_in_cwd(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        monkeypatch.chdir(tmp_path)
        assert resolve_config_path() == tmp_path / DEFAULT_CONFIG_FILE
