"""Tests for nuxt_hasura_cli.commands.common module."""

from unittest.mock import patch

import pytest

from nuxt_hasura_cli.commands.common import (
    install_packages,
    report_failure,
    resolve_package_manager,
)
from nuxt_hasura_cli.integrations.package_manager import PackageManager
from nuxt_hasura_cli.integrations.process import OutputMode
from nuxt_hasura_cli.utils.errors import ExecutionError, FileWriteError, UserCancelledError


class TestResolvePackageManager:
    """Tests for resolve_package_manager."""

    def test_explicit_choice_wins(self, tmp_path, settings):
        settings.default_package_manager = "npm"
        (tmp_path / "yarn.lock").write_text("")

        assert resolve_package_manager(PackageManager.BUN, tmp_path, settings) is PackageManager.BUN

    def test_saved_default_beats_lockfile(self, tmp_path, settings):
        settings.default_package_manager = "npm"
        (tmp_path / "yarn.lock").write_text("")

        assert resolve_package_manager(None, tmp_path, settings) is PackageManager.NPM

    def test_falls_back_to_lockfile(self, tmp_path, settings):
        (tmp_path / "yarn.lock").write_text("")

        assert resolve_package_manager(None, tmp_path, settings) is PackageManager.YARN

    @patch("nuxt_hasura_cli.commands.common.print_warning")
    def test_unknown_saved_default_is_ignored(self, mock_warning, tmp_path, settings):
        settings.default_package_manager = "deno"

        assert resolve_package_manager(None, tmp_path, settings) is PackageManager.PNPM
        mock_warning.assert_called_once()


class TestInstallPackages:
    """Tests for install_packages."""

    def test_builds_add_command(self, tmp_path, mock_run_command):
        install_packages(["a", "b"], PackageManager.YARN, tmp_path, dev=True)

        command, options = mock_run_command.call_args.args
        assert command == "yarn add -D a b"
        assert options.cwd == tmp_path
        assert options.output is OutputMode.CAPTURE


class TestReportFailure:
    """Tests for report_failure."""

    @patch("nuxt_hasura_cli.commands.common.print_error")
    def test_reports_and_reraises(self, mock_error):
        with pytest.raises(FileWriteError):
            with report_failure("Widgets"):
                raise FileWriteError("disk full")

        mock_error.assert_called_once_with("Failed to set up Widgets: disk full")

    @patch("nuxt_hasura_cli.commands.common.print_error")
    def test_cancellation_is_silent(self, mock_error):
        with pytest.raises(UserCancelledError):
            with report_failure("Widgets"):
                raise UserCancelledError("bye")

        mock_error.assert_not_called()

    def test_captured_stderr_with_bracketed_paths_is_reported(self, capsys):
        """Tool stderr that looks like a closing markup tag still reaches the user."""
        with pytest.raises(ExecutionError):
            with report_failure("GraphQL Codegen"):
                raise ExecutionError("pnpm add -D x", 1, "npm error [/usr/lib/node_modules] EACCES")

        err = capsys.readouterr().err
        assert "Failed to set up GraphQL Codegen" in err
        assert "[/usr/lib/node_modules]" in err
