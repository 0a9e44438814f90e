"""Tests for nuxt_hasura_cli.nuxt.project module."""

import json

import pytest

from nuxt_hasura_cli.nuxt.project import (
    detect_nuxt_version,
    ensure_project_initialized,
    feature_directory,
    find_nuxt_config,
    is_nuxt_project,
    uses_app_directory,
)
from nuxt_hasura_cli.utils.errors import ProjectNotInitializedError


def write_package_json(directory, **sections):
    (directory / "package.json").write_text(json.dumps({"name": "x", **sections}))


class TestProjectDetection:
    """Tests for recognising a Nuxt project."""

    def test_nuxt_directory_marks_project(self, tmp_path):
        (tmp_path / ".nuxt").mkdir()

        assert is_nuxt_project(tmp_path)

    def test_config_file_marks_project(self, tmp_path):
        (tmp_path / "nuxt.config.mjs").write_text("export default {}")

        assert is_nuxt_project(tmp_path)
        assert find_nuxt_config(tmp_path) == tmp_path / "nuxt.config.mjs"

    def test_empty_directory_is_not_a_project(self, tmp_path):
        assert not is_nuxt_project(tmp_path)
        assert find_nuxt_config(tmp_path) is None

    def test_ensure_raises_with_init_hint(self, tmp_path):
        with pytest.raises(ProjectNotInitializedError, match="create-nuxt-hasura-cli init"):
            ensure_project_initialized(tmp_path)

    def test_ensure_passes_for_project(self, nuxt_project):
        ensure_project_initialized(nuxt_project)


class TestNuxtVersion:
    """Tests for detect_nuxt_version and the app/ layout."""

    @pytest.mark.parametrize(
        ("version_range", "expected"),
        [("^3.13.0", 3), ("~4.0.1", 4), ("4", 4), (">=3.8 <4", 3)],
    )
    def test_reads_major_version(self, tmp_path, version_range, expected):
        write_package_json(tmp_path, dependencies={"nuxt": version_range})

        assert detect_nuxt_version(tmp_path) == expected

    def test_reads_dev_dependencies(self, tmp_path):
        write_package_json(tmp_path, devDependencies={"nuxt": "^4.1.0"})

        assert detect_nuxt_version(tmp_path) == 4

    def test_unknown_version(self, tmp_path):
        write_package_json(tmp_path, dependencies={"nuxt": "latest"})

        assert detect_nuxt_version(tmp_path) is None

    def test_no_package_json(self, tmp_path):
        assert detect_nuxt_version(tmp_path) is None

    def test_nuxt4_uses_app_directory(self, tmp_path):
        write_package_json(tmp_path, dependencies={"nuxt": "^4.0.0"})

        assert uses_app_directory(tmp_path)
        assert feature_directory("plugins", tmp_path) == "app/plugins"

    def test_nuxt3_uses_root(self, nuxt_project):
        assert not uses_app_directory(nuxt_project)
        assert feature_directory("apollo", nuxt_project) == "apollo"

    def test_unknown_version_falls_back_to_app_directory(self, tmp_path):
        write_package_json(tmp_path, dependencies={"nuxt": "latest"})
        (tmp_path / "app").mkdir()

        assert feature_directory("plugins", tmp_path) == "app/plugins"
