"""Shared pytest fixtures for create-nuxt-hasura-cli tests."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from nuxt_hasura_cli.config.settings import Settings

STARTER_NUXT_CONFIG = """// https://nuxt.com/docs/api/configuration/nuxt-config
export default defineNuxtConfig({
  compatibilityDate: '2024-11-01',
  devtools: { enabled: true }
})
"""


@pytest.fixture
def nuxt_project(tmp_path: Path) -> Path:
    """A freshly scaffolded Nuxt 3 project."""
    project = tmp_path / "my-app"
    project.mkdir()
    (project / ".nuxt").mkdir()
    (project / "nuxt.config.ts").write_text(STARTER_NUXT_CONFIG)
    (project / "package.json").write_text(
        json.dumps(
            {
                "name": "my-app",
                "private": True,
                "scripts": {"dev": "nuxt dev", "build": "nuxt build"},
                "dependencies": {"nuxt": "^3.13.0", "vue": "latest"},
            },
            indent=2,
        )
        + "\n"
    )
    return project


@pytest.fixture
def settings() -> Settings:
    """Built-in defaults, without reading any config file."""
    return Settings()


@pytest.fixture
def mock_run_command():
    """Replace every run_command used by the setup commands with one mock."""
    mock = MagicMock(return_value=None)
    with (
        patch("nuxt_hasura_cli.commands.common.run_command", mock),
        patch("nuxt_hasura_cli.commands.codegen.run_command", mock),
        patch("nuxt_hasura_cli.commands.init.run_command", mock),
    ):
        yield mock


def executed_commands(mock: MagicMock) -> list[str]:
    """Command strings passed to a mocked run_command, in call order."""
    return [c.args[0] for c in mock.call_args_list]
