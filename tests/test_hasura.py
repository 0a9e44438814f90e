"""Tests for nuxt_hasura_cli.commands.hasura module."""

from unittest.mock import patch

import pytest
from rich.console import Console

from nuxt_hasura_cli.commands.hasura import setup_hasura
from nuxt_hasura_cli.nuxt.js_object import ConfigSource, RawExpression
from nuxt_hasura_cli.utils.console import custom_theme
from nuxt_hasura_cli.utils.errors import ProjectNotInitializedError

ENDPOINT = "https://hasura.example.com/v1/graphql"


@pytest.fixture
def mock_prompts():
    with (
        patch("nuxt_hasura_cli.commands.hasura.prompt_input", return_value=ENDPOINT) as mock_input,
        patch("nuxt_hasura_cli.commands.hasura.prompt_password", return_value="s3cret") as mock_password,
    ):
        yield mock_input, mock_password


class TestSetupHasura:
    """Tests for setup_hasura."""

    def test_requires_nuxt_project(self, tmp_path, settings, mock_prompts):
        with pytest.raises(ProjectNotInitializedError):
            setup_hasura(tmp_path, settings)

        mock_prompts[0].assert_not_called()

    def test_skip_project_check(self, tmp_path, settings, mock_prompts):
        """init skips the check for the project it just created."""
        setup_hasura(tmp_path, settings, skip_project_check=True)

        assert (tmp_path / ".env.example").exists()

    def test_env_example_has_placeholder_secret(self, nuxt_project, settings, mock_prompts):
        setup_hasura(nuxt_project, settings)

        content = (nuxt_project / ".env.example").read_text()
        assert f"NUXT_HASURA_GRAPHQL_ENDPOINT={ENDPOINT}\n" in content
        assert "NUXT_HASURA_GRAPHQL_ADMIN_SECRET=your-admin-secret-here\n" in content
        assert "s3cret" not in content

    def test_real_secret_goes_to_env(self, nuxt_project, settings, mock_prompts):
        setup_hasura(nuxt_project, settings)

        assert (nuxt_project / ".env").read_text() == (
            f"NUXT_HASURA_GRAPHQL_ENDPOINT={ENDPOINT}\nNUXT_HASURA_GRAPHQL_ADMIN_SECRET=s3cret\n"
        )

    def test_blank_secret_skips_env(self, nuxt_project, settings, mock_prompts):
        mock_prompts[1].return_value = ""

        setup_hasura(nuxt_project, settings)

        assert not (nuxt_project / ".env").exists()

    def test_registers_runtime_config(self, nuxt_project, settings, mock_prompts):
        setup_hasura(nuxt_project, settings)

        config = ConfigSource((nuxt_project / "nuxt.config.ts").read_text())
        assert config.get(("runtimeConfig", "public", "hasuraGraphqlEndpoint")) == RawExpression(
            "process.env.NUXT_HASURA_GRAPHQL_ENDPOINT"
        )
        assert config.get(("runtimeConfig", "hasuraGraphqlAdminSecret")) == RawExpression(
            "process.env.NUXT_HASURA_GRAPHQL_ADMIN_SECRET"
        )

    def test_endpoint_prompt_uses_saved_default(self, nuxt_project, settings, mock_prompts):
        settings.default_hasura_endpoint = "http://hasura:8080/v1/graphql"

        setup_hasura(nuxt_project, settings)

        assert mock_prompts[0].call_args.kwargs["default"] == "http://hasura:8080/v1/graphql"

    @patch("nuxt_hasura_cli.commands.hasura.console")
    def test_summary_masks_secret(self, mock_console, nuxt_project, settings, mock_prompts):
        setup_hasura(nuxt_project, settings)

        printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
        assert "Admin Secret: ******" in printed
        assert "s3cret" not in printed

    def test_summary_prints_bracketed_endpoint_literally(self, nuxt_project, settings, mock_prompts):
        mock_prompts[0].return_value = "http://localhost:8080/[/v1]/graphql"
        recorder = Console(theme=custom_theme, record=True, width=120)

        with patch("nuxt_hasura_cli.commands.hasura.console", recorder):
            setup_hasura(nuxt_project, settings)

        assert "Endpoint: http://localhost:8080/[/v1]/graphql" in recorder.export_text()
