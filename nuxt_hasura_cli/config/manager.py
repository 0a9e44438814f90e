"""Configuration manager for create-nuxt-hasura-cli.

This module provides the ConfigManager class for loading, saving, and
showing the CLI defaults, with this precedence:

    1. Environment Variables (highest priority)
    2. Local Config (.create-nuxt-hasura-cli.json in the current directory)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from nuxt_hasura_cli.config.settings import CONFIG_FILENAME, Settings
from nuxt_hasura_cli.utils.console import console, print_header, print_info
from nuxt_hasura_cli.utils.errors import FileWriteError
from nuxt_hasura_cli.utils.logging import log_message

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves CLI defaults.

    Attributes:
        settings: Current settings instance
        config_path: Path to the JSON config file
    """

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_path: Optional custom config file path.
                         Defaults to .create-nuxt-hasura-cli.json in the current directory.
        """
        self.config_path = config_path or Path.cwd() / CONFIG_FILENAME
        self.settings = Settings()
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load settings from the config file and environment.

        Each call starts from clean defaults. An unreadable file is reported
        and ignored rather than aborting the command.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._config_sources = {}

        if self.config_path.exists():
            log_message(f"Loading configuration from {self.config_path}")
            self._load_file(self.config_path)

        self._load_environment()

        log_message(f"Configuration loaded successfully ({len(self._config_sources)} keys)")
        return self.settings

    def _load_file(self, path: Path) -> None:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable config file {path}: {e}")
            log_message(f"Ignoring unreadable config file {path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {path}: expected a JSON object")
            return

        for key, value in data.items():
            attr = self.settings.get_attribute_for_key(key)
            if attr is None or not isinstance(value, str):
                continue  # Unknown key or wrong type, ignore
            setattr(self.settings, attr, value)
            self._config_sources[key] = f"file ({path})"

    def _load_environment(self) -> None:
        """Override settings with NUXT_HASURA_CLI_* environment variables."""
        for key in Settings.get_config_keys():
            attr = self.settings.get_attribute_for_key(key)
            if attr is None:
                continue
            env_value = os.environ.get(Settings.env_var_for_attribute(attr))
            if env_value is not None:
                setattr(self.settings, attr, env_value)
                self._config_sources[key] = "environment"

    def get_config_source(self, key: str) -> str:
        """Where the effective value of a key came from."""
        return self._config_sources.get(key, "default")

    def save(self, values: dict[str, str]) -> Path:
        """Write config keys to the JSON file and reload.

        Keys not in ``values`` keep their current stored value.

        Args:
            values: JSON config keys (e.g. "defaultSchemaPath") to values

        Returns:
            Path of the written file

        Raises:
            ValueError: If a key is not a known config key
            FileWriteError: If the file cannot be written
        """
        known = Settings.get_config_keys()
        for key in values:
            if key not in known:
                raise ValueError(f"Invalid config key: {key}")

        stored: dict[str, str] = {}
        if self.config_path.exists():
            try:
                existing = json.loads(self.config_path.read_text(encoding="utf-8"))
                if isinstance(existing, dict):
                    stored = existing
            except (OSError, json.JSONDecodeError):
                log_message(f"Replacing unreadable config file {self.config_path}")
        stored.update(values)

        self._atomic_write(json.dumps(stored, indent=2) + "\n")
        log_message(f"Configuration saved to {self.config_path}: {', '.join(values)}")

        self.load()
        return self.config_path

    def _atomic_write(self, content: str) -> None:
        """Write content via a temp file in the same directory and rename it into place."""
        target_path = self.config_path
        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(dir=target_path.parent, prefix=".create-nuxt-hasura-cli-")
        except OSError as e:
            raise FileWriteError(f"Failed to write {target_path}: {e}", path=str(target_path)) from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            Path(temp_path).replace(target_path)
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise FileWriteError(f"Failed to write {target_path}: {e}", path=str(target_path)) from e

    def show(self) -> None:
        """Print the effective settings and where each one came from."""
        print_header("Current Configuration")
        suffix = "" if self.config_path.exists() else " (not found, using defaults)"
        print_info(f"Config file: {self.config_path}{suffix}")

        s = self.settings
        rows = (
            ("Hasura Endpoint", "defaultHasuraEndpoint", s.default_hasura_endpoint),
            ("Schema Path", "defaultSchemaPath", s.default_schema_path),
            ("Codegen Output Dir", "defaultCodegenOutputDir", s.default_codegen_output_dir),
            (
                "Package Manager",
                "defaultPackageManager",
                s.default_package_manager or "(detect from lockfile)",
            ),
        )

        table = Table(box=None, header_style="bold", padding=(0, 2))
        table.add_column("Setting")
        table.add_column("Value")
        table.add_column("Source", style="dim")
        for label, key, value in rows:
            table.add_row(label, escape(value), escape(self.get_config_source(key)))

        console.print()
        console.print(table)
        console.print()


__all__ = [
    "ConfigManager",
]
