"""Tests for nuxt_hasura_cli.commands.config module."""

import json
import os
from unittest.mock import MagicMock, patch

from nuxt_hasura_cli.commands.config import DETECT_CHOICE, configure_defaults
from nuxt_hasura_cli.config.manager import ConfigManager
from nuxt_hasura_cli.config.settings import CONFIG_FILENAME

PROMPT = "nuxt_hasura_cli.commands.config.prompt_input"
SELECT = "nuxt_hasura_cli.commands.config.prompt_select"


class TestConfigureDefaults:
    """Tests for configure_defaults."""

    @patch(SELECT, return_value="yarn")
    @patch(PROMPT, side_effect=["https://h.example.com/v1/graphql", "./api.graphql", "./gen"])
    def test_saves_answers(self, mock_prompt, mock_select, tmp_path):
        path = tmp_path / CONFIG_FILENAME

        with patch.dict(os.environ, {}, clear=True):
            configure_defaults(manager=ConfigManager(path))

        assert json.loads(path.read_text()) == {
            "defaultHasuraEndpoint": "https://h.example.com/v1/graphql",
            "defaultSchemaPath": "./api.graphql",
            "defaultCodegenOutputDir": "./gen",
            "defaultPackageManager": "yarn",
        }

    @patch(SELECT, return_value=DETECT_CHOICE)
    @patch(PROMPT, side_effect=["http://localhost:8080/v1/graphql", "./schema.graphql", "./types/graphql"])
    def test_detect_choice_saves_empty_manager(self, mock_prompt, mock_select, tmp_path):
        path = tmp_path / CONFIG_FILENAME

        with patch.dict(os.environ, {}, clear=True):
            configure_defaults(manager=ConfigManager(path))

        assert json.loads(path.read_text())["defaultPackageManager"] == ""

    @patch(SELECT, return_value="pnpm")
    @patch(PROMPT, side_effect=["http://localhost:8080/v1/graphql", "./old.graphql", "./types/graphql"])
    def test_prompts_show_current_values(self, mock_prompt, mock_select, tmp_path):
        path = tmp_path / CONFIG_FILENAME
        path.write_text(json.dumps({"defaultSchemaPath": "./old.graphql"}))

        with patch.dict(os.environ, {}, clear=True):
            configure_defaults(manager=ConfigManager(path))

        assert mock_prompt.call_args_list[1].kwargs["default"] == "./old.graphql"

    @patch(PROMPT)
    def test_show_does_not_prompt(self, mock_prompt):
        manager = MagicMock()

        configure_defaults(show=True, manager=manager)

        manager.show.assert_called_once()
        manager.save.assert_not_called()
        mock_prompt.assert_not_called()
