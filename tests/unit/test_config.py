"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from bumpscope.config.loader import (
    extract_bumpscope_config,
    find_pyproject_toml,
    load_config,
    load_pyproject_toml,
)
from bumpscope.config.models import BumpScopeConfig
from bumpscope.exceptions import ConfigNotFoundError, ConfigValidationError


class TestBumpScopeConfig:
    """Tests for BumpScopeConfig model."""

    def test_default_config(self):
        """Default configuration has sensible values."""
        config = BumpScopeConfig()

        assert config.tag_prefix == "v"
        assert config.fetch_all_tags is False
        assert config.custom_release_rules == ""
        assert config.scopes == []
        assert config.release_branches == ["master", "main"]
        assert config.pre_release_branches == []
        assert config.append_to_pre_release_tag is None

    def test_prefix_regex(self):
        """prefix_regex anchors the escaped prefix."""
        config = BumpScopeConfig(tag_prefix="pkg.v")

        assert config.prefix_regex.pattern == r"^pkg\.v"
        assert config.prefix_regex.sub("", "pkg.v1.0.0", count=1) == "1.0.0"
        assert config.prefix_regex.sub("", "pkgXv1.0.0", count=1) == "pkgXv1.0.0"

    def test_invalid_field_type(self):
        """Values of the wrong type are rejected."""
        with pytest.raises(ValidationError, match="fetch_all_tags"):
            BumpScopeConfig(fetch_all_tags="sometimes")

    def test_unknown_keys_rejected(self):
        """Typos in config keys are reported."""
        with pytest.raises(ValidationError):
            BumpScopeConfig.model_validate({"tag_prefx": "v"})


class TestLoadPyprojectToml:
    """Tests for load_pyproject_toml()."""

    def test_load_valid_toml(self, temp_project_with_pyproject: Path):
        """Load a valid pyproject.toml."""
        data = load_pyproject_toml(temp_project_with_pyproject / "pyproject.toml")

        assert data["project"]["name"] == "test-project"

    def test_load_nonexistent_raises(self, tmp_path: Path):
        """Loading nonexistent file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_pyproject_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path):
        """Broken TOML raises ConfigValidationError."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.bumpscope\n")

        with pytest.raises(ConfigValidationError):
            load_pyproject_toml(path)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml()."""

    def test_find_in_current_dir(self, temp_project_with_pyproject: Path):
        """Find pyproject.toml in current directory."""
        assert find_pyproject_toml(temp_project_with_pyproject).name == "pyproject.toml"

    def test_find_in_parent_dir(self, temp_project_with_pyproject: Path):
        """Find pyproject.toml in parent directory."""
        subdir = temp_project_with_pyproject / "src" / "package"
        subdir.mkdir(parents=True)

        found = find_pyproject_toml(subdir)

        assert found.parent == temp_project_with_pyproject.resolve()


class TestExtractBumpScopeConfig:
    """Tests for extract_bumpscope_config()."""

    def test_extract_existing_config(self):
        """Extract existing bumpscope config."""
        pyproject = {"tool": {"bumpscope": {"tag_prefix": "release-"}}}

        assert extract_bumpscope_config(pyproject) == {"tag_prefix": "release-"}

    def test_extract_missing_config(self):
        """Extract returns empty dict when config missing."""
        assert extract_bumpscope_config({"project": {"name": "test"}}) == {}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_with_config(self, temp_project_with_pyproject: Path):
        """Load configuration from pyproject.toml."""
        config = load_config(temp_project_with_pyproject)

        assert config.tag_prefix == "release-"
        assert config.custom_release_rules == "build:patch,chore:minor:Chores"
        assert config.scopes == ["api"]
        assert config.pre_release_branches == ["develop"]

    def test_load_from_file_path(self, temp_project_with_pyproject: Path):
        """A path to the file itself is accepted."""
        config = load_config(temp_project_with_pyproject / "pyproject.toml")

        assert config.tag_prefix == "release-"

    def test_load_defaults_when_no_section(self, tmp_path: Path):
        """Defaults are used without a [tool.bumpscope] section."""
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "test"\n')

        assert load_config(tmp_path) == BumpScopeConfig()

    def test_load_defaults_when_no_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """Defaults are used when no pyproject.toml is found."""

        def not_found(start: Path | None = None) -> Path:
            raise ConfigNotFoundError("none")

        monkeypatch.setattr("bumpscope.config.loader.find_pyproject_toml", not_found)

        assert load_config(tmp_path) == BumpScopeConfig()

    def test_invalid_values_raise(self, tmp_path: Path):
        """Invalid values raise ConfigValidationError."""
        (tmp_path / "pyproject.toml").write_text('[tool.bumpscope]\nfetch_all_tags = "sometimes"\n')

        with pytest.raises(ConfigValidationError, match="fetch_all_tags"):
            load_config(tmp_path)
