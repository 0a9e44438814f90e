"""Nuxt project helpers.

This package contains:
- js_object: Structural editor for JavaScript config modules
- config: nuxt.config edits (modules, runtimeConfig, apollo clients)
- project: Project detection, Nuxt version and directory layout
"""

from nuxt_hasura_cli.nuxt.config import (
    ConfigUpdateStatus,
    add_apollo_config,
    add_nuxt_module,
    add_runtime_config,
    update_nuxt_config,
)
from nuxt_hasura_cli.nuxt.js_object import ConfigSource, RawExpression
from nuxt_hasura_cli.nuxt.project import (
    NUXT_CONFIG_FILENAMES,
    detect_nuxt_version,
    ensure_project_initialized,
    feature_directory,
    find_nuxt_config,
    is_nuxt_project,
)

__all__ = [
    "ConfigSource",
    "RawExpression",
    "ConfigUpdateStatus",
    "update_nuxt_config",
    "add_nuxt_module",
    "add_apollo_config",
    "add_runtime_config",
    "NUXT_CONFIG_FILENAMES",
    "find_nuxt_config",
    "is_nuxt_project",
    "ensure_project_initialized",
    "detect_nuxt_version",
    "feature_directory",
]
