#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_cli_config.py
"""Unit tests for configuration file discovery, loading and merging."""

import argparse

import pytest

from bbml.cli.config import discover_config_file, find_config_in_parents, load_config_file, merge_configs


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_toml(self, tmp_path):
        path = tmp_path / ".bbml.toml"
        path.write_text('target-width = 50\nhtml-parser = "lxml"\n', encoding="utf-8")

        assert load_config_file(path) == {"target-width": 50, "html-parser": "lxml"}

    @pytest.mark.parametrize("name", [".bbml.yaml", ".bbml.yml"])
    def test_yaml(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("target_width: 50\nmax_depth: 20\n", encoding="utf-8")

        assert load_config_file(path) == {"target_width": 50, "max_depth": 20}

    def test_empty_yaml_is_empty_config(self, tmp_path):
        path = tmp_path / ".bbml.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / ".bbml.json"
        path.write_text('{"max_depth": 30}', encoding="utf-8")

        assert load_config_file(str(path)) == {"max_depth": 30}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.bbml]\ntarget-width = 60\n', encoding="utf-8")

        assert load_config_file(path) == {"target-width": 60}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")

        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not found"):
            load_config_file(tmp_path / "absent.toml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[bbml]\n", encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "name,content",
        [(".bbml.toml", "target-width = = 3"), (".bbml.json", "{not json"), (".bbml.yaml", "a: [unclosed")],
    )
    def test_invalid_content(self, tmp_path, name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError, match="Invalid"):
            load_config_file(path)

    def test_non_mapping_content(self, tmp_path):
        path = tmp_path / ".bbml.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError, match="must contain a mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Tests for find_config_in_parents and discover_config_file."""

    def test_finds_config_in_parent_directory(self, tmp_path):
        (tmp_path / ".bbml.yaml").write_text("max_depth: 5\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == (tmp_path / ".bbml.yaml").resolve()

    def test_prefers_toml_over_other_formats(self, tmp_path):
        (tmp_path / ".bbml.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".bbml.toml").write_text("", encoding="utf-8")

        assert find_config_in_parents(tmp_path).name == ".bbml.toml"

    def test_pyproject_only_counts_with_section(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text("[tool.bbml]\nmax-depth = 9\n", encoding="utf-8")

        assert find_config_in_parents(project) == (tmp_path / "pyproject.toml").resolve()

    def test_falls_back_to_home(self, isolated_cwd, tmp_path):
        home_config = tmp_path / "home" / ".bbml.json"
        home_config.write_text("{}", encoding="utf-8")

        assert discover_config_file(isolated_cwd) == home_config

    def test_nothing_found(self, isolated_cwd):
        assert discover_config_file(isolated_cwd) is None


@pytest.mark.unit
@pytest.mark.cli
class TestMergeConfigs:
    """Tests for merge_configs."""

    def test_override_wins_and_none_is_ignored(self):
        merged = merge_configs({"target-width": 50, "max_depth": 10}, {"target_width": 80, "max_depth": None})

        assert merged == {"target_width": 80, "max_depth": 10}

    def test_base_keys_are_normalised(self):
        assert merge_configs({"html-parser": "lxml"}, {}) == {"html_parser": "lxml"}
