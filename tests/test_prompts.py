"""Tests for nuxt_hasura_cli.ui.prompts and nuxt_hasura_cli.ui.progress modules."""

from unittest.mock import patch

import pytest

from nuxt_hasura_cli.ui.progress import step_status
from nuxt_hasura_cli.ui.prompts import (
    custom_style,
    prompt_input,
    prompt_password,
    prompt_select,
)
from nuxt_hasura_cli.utils.errors import UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_qmark(self):
        """Style defines qmark."""
        assert any("qmark" in str(s) for s in custom_style.style_rules)


class TestPromptInput:
    """Tests for prompt_input function."""

    @patch("questionary.text")
    def test_returns_input(self, mock_text):
        mock_text.return_value.ask.return_value = "./schema.graphql"

        assert prompt_input("Schema path:") == "./schema.graphql"

    @patch("questionary.text")
    def test_passes_default_and_validator(self, mock_text):
        mock_text.return_value.ask.return_value = "x"

        def validator(value):
            return True

        prompt_input("Name:", default="demo", validate=validator)

        kwargs = mock_text.call_args.kwargs
        assert kwargs["default"] == "demo"
        assert kwargs["validate"] is validator

    @patch("questionary.text")
    def test_keyboard_interrupt_cancels(self, mock_text):
        mock_text.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_input("Name:")


class TestPromptPassword:
    """Tests for prompt_password function."""

    @patch("nuxt_hasura_cli.ui.prompts.log_message")
    @patch("questionary.password")
    def test_answer_is_not_logged(self, mock_password, mock_log):
        mock_password.return_value.ask.return_value = "hunter2"

        assert prompt_password("Secret:") == "hunter2"
        assert all("hunter2" not in c.args[0] for c in mock_log.call_args_list)

    @patch("questionary.password")
    def test_raises_on_cancel(self, mock_password):
        mock_password.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_password("Secret:")


class TestPromptSelect:
    """Tests for prompt_select function."""

    @patch("questionary.select")
    def test_returns_choice(self, mock_select):
        mock_select.return_value.ask.return_value = "pnpm"

        assert prompt_select("Package manager:", ["npm", "pnpm"]) == "pnpm"

    @patch("questionary.select")
    def test_raises_on_cancel(self, mock_select):
        mock_select.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_select("Package manager:", ["npm", "pnpm"])


class TestStepStatus:
    """Tests for step_status."""

    @patch("nuxt_hasura_cli.ui.progress.console")
    def test_success_line(self, mock_console):
        with step_status("Installing dependencies"):
            pass

        assert "Installing dependencies - Complete!" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.ui.progress.console")
    def test_custom_success_line(self, mock_console):
        with step_status("Generating", success="Types generated"):
            pass

        assert "Types generated" in mock_console.print.call_args.args[0]

    @patch("nuxt_hasura_cli.ui.progress.console")
    def test_failure_reraises(self, mock_console):
        with pytest.raises(RuntimeError):
            with step_status("Installing dependencies"):
                raise RuntimeError("boom")

        assert "Failed!" in mock_console.print.call_args.args[0]
