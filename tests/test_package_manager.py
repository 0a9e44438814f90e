"""Tests for nuxt_hasura_cli.integrations.package_manager module."""

import pytest

from nuxt_hasura_cli.integrations.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    PackageManager,
    detect_package_manager,
    get_add_command,
    get_install_command,
    get_local_executor,
    get_package_executor,
    get_run_script_command,
)


class TestCommandMapping:
    """Tests for the per-manager command prefixes."""

    @pytest.mark.parametrize(
        ("pm", "expected"),
        [
            (PackageManager.NPM, "npm install"),
            (PackageManager.YARN, "yarn add"),
            (PackageManager.PNPM, "pnpm add"),
            (PackageManager.BUN, "bun add"),
        ],
    )
    def test_add_command(self, pm, expected):
        """Each manager has its own add verb."""
        assert get_add_command(pm) == expected
        assert get_add_command(pm, dev=True) == f"{expected} -D"

    @pytest.mark.parametrize(
        ("pm", "expected"),
        [
            (PackageManager.NPM, "npx"),
            (PackageManager.YARN, "yarn dlx"),
            (PackageManager.PNPM, "pnpm dlx"),
            (PackageManager.BUN, "bunx"),
        ],
    )
    def test_package_executor(self, pm, expected):
        """One-off runners download the package."""
        assert get_package_executor(pm) == expected

    @pytest.mark.parametrize(
        ("pm", "expected"),
        [
            (PackageManager.NPM, "npx"),
            (PackageManager.YARN, "yarn"),
            (PackageManager.PNPM, "pnpm exec"),
            (PackageManager.BUN, "bunx"),
        ],
    )
    def test_local_executor(self, pm, expected):
        """Local runners use binaries from node_modules."""
        assert get_local_executor(pm) == expected

    def test_every_manager_is_mapped(self):
        """No manager is missing from any mapping."""
        for pm in PackageManager:
            assert get_add_command(pm)
            assert get_package_executor(pm)
            assert get_local_executor(pm)
            assert get_install_command(pm) == f"{pm.value} install"

    def test_run_script_command(self):
        """npm needs 'run'; the others take the script name directly."""
        assert get_run_script_command(PackageManager.NPM, "dev") == "npm run dev"
        assert get_run_script_command(PackageManager.PNPM, "dev") == "pnpm dev"
        assert get_run_script_command(PackageManager.BUN, "codegen") == "bun codegen"


class TestDetectPackageManager:
    """Tests for lockfile detection."""

    @pytest.mark.parametrize(
        ("lockfile", "expected"),
        [
            ("pnpm-lock.yaml", PackageManager.PNPM),
            ("yarn.lock", PackageManager.YARN),
            ("bun.lockb", PackageManager.BUN),
            ("bun.lock", PackageManager.BUN),
            ("package-lock.json", PackageManager.NPM),
        ],
    )
    def test_detects_from_lockfile(self, tmp_path, lockfile, expected):
        """Each lockfile identifies its manager."""
        (tmp_path / lockfile).write_text("")

        assert detect_package_manager(tmp_path) is expected

    def test_defaults_to_pnpm(self, tmp_path):
        """Without a lockfile the default manager is used."""
        assert detect_package_manager(tmp_path) is DEFAULT_PACKAGE_MANAGER
        assert DEFAULT_PACKAGE_MANAGER is PackageManager.PNPM

    def test_pnpm_wins_over_npm(self, tmp_path):
        """pnpm-lock.yaml takes priority over package-lock.json."""
        (tmp_path / "package-lock.json").write_text("{}")
        (tmp_path / "pnpm-lock.yaml").write_text("")

        assert detect_package_manager(tmp_path) is PackageManager.PNPM

    def test_yarn_wins_over_bun(self, tmp_path):
        """yarn.lock is checked before bun lockfiles."""
        (tmp_path / "bun.lockb").write_text("")
        (tmp_path / "yarn.lock").write_text("")

        assert detect_package_manager(tmp_path) is PackageManager.YARN

    def test_uses_current_directory_by_default(self, tmp_path, monkeypatch):
        """cwd defaults to the process working directory."""
        (tmp_path / "yarn.lock").write_text("")
        monkeypatch.chdir(tmp_path)

        assert detect_package_manager() is PackageManager.YARN
