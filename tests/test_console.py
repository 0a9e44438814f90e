"""Tests for nuxt_hasura_cli.utils.console module."""

from unittest.mock import patch

from nuxt_hasura_cli.utils.console import (
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
    show_banner,
    show_version,
)


class TestPrintFunctions:
    """Tests for print helper functions."""

    @patch("nuxt_hasura_cli.utils.console.console_err")
    def test_print_error_goes_to_stderr(self, mock_console_err):
        print_error("Test error")

        mock_console_err.print.assert_called_once()
        assert "Test error" in mock_console_err.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_print_success(self, mock_console):
        print_success("Test success")

        assert "Test success" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_print_warning(self, mock_console):
        print_warning("Test warning")

        assert "Test warning" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_print_info(self, mock_console):
        print_info("Test info")

        assert "Test info" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_print_header(self, mock_console):
        print_header("Hasura")

        assert mock_console.print.call_count == 3
        assert "=== Hasura ===" in mock_console.print.call_args_list[1].args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_print_step(self, mock_console):
        print_step("Installing")

        assert "Installing" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.log_message")
    @patch("nuxt_hasura_cli.utils.console.console")
    def test_messages_are_logged(self, mock_console, mock_log):
        print_warning("careful")

        mock_log.assert_called_once_with("WARNING: careful")

    def test_markup_in_messages_is_printed_literally(self, capsys):
        """Bracketed text from tool output is not parsed as Rich markup."""
        print_error("npm error [/usr/lib/node_modules] EACCES")
        print_warning("[bold]not bold[/bold]")

        captured = capsys.readouterr()
        assert "[ERROR]" in captured.err
        assert "npm error [/usr/lib/node_modules] EACCES" in captured.err
        assert "[bold]not bold[/bold]" in captured.out


class TestBannerAndVersion:
    """Tests for banner and version output."""

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_show_banner_includes_version(self, mock_console):
        show_banner()

        assert "1.0.0" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.utils.console.console")
    def test_show_version(self, mock_console):
        show_version()

        first = mock_console.print.call_args_list[0].args[0]
        assert "create-nuxt-hasura-cli" in first
        assert "1.0.0" in first
