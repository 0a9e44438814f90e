"""Nuxt project inspection: initialisation check, version and layout."""

import re
from pathlib import Path

from nuxt_hasura_cli import SCRIPT_NAME
from nuxt_hasura_cli.integrations.files import read_package_json
from nuxt_hasura_cli.utils.errors import NuxtHasuraError, ProjectNotInitializedError
from nuxt_hasura_cli.utils.logging import log_message

# Tried in order; the first existing file is the project's config
NUXT_CONFIG_FILENAMES = ("nuxt.config.ts", "nuxt.config.js", "nuxt.config.mjs")

_MAJOR_VERSION = re.compile(r"(\d+)")


def find_nuxt_config(project_dir: Path | str | None = None) -> Path | None:
    """Return the first nuxt.config file present in the project root."""
    root = Path(project_dir or Path.cwd())
    for filename in NUXT_CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def is_nuxt_project(project_dir: Path | str | None = None) -> bool:
    root = Path(project_dir or Path.cwd())
    return (root / ".nuxt").is_dir() or find_nuxt_config(root) is not None


def ensure_project_initialized(project_dir: Path | str | None = None) -> None:
    """Raise unless the directory holds a Nuxt project.

    Raises:
        ProjectNotInitializedError: If neither .nuxt/ nor a nuxt.config exists
    """
    root = Path(project_dir or Path.cwd())
    if not is_nuxt_project(root):
        raise ProjectNotInitializedError(
            f"No Nuxt project detected in {root}. "
            f"Please run `{SCRIPT_NAME} init <project-name>` first."
        )


def detect_nuxt_version(project_dir: Path | str | None = None) -> int | None:
    """Return the major Nuxt version declared in package.json.

    Looks at dependencies then devDependencies. Returns None when there is
    no package.json, no nuxt dependency, or the range has no number in it
    (e.g. "latest").
    """
    try:
        package_json = read_package_json(project_dir)
    except NuxtHasuraError:
        return None

    for section in ("dependencies", "devDependencies"):
        deps = package_json.get(section) or {}
        version_range = deps.get("nuxt")
        if isinstance(version_range, str):
            match = _MAJOR_VERSION.search(version_range)
            if match:
                version = int(match.group(1))
                log_message(f"Detected Nuxt major version {version} ({version_range})")
                return version
    return None


def uses_app_directory(project_dir: Path | str | None = None) -> bool:
    """Whether sources live under app/ (Nuxt 4 layout).

    Falls back to the presence of an app/ directory when the version is unknown.
    """
    root = Path(project_dir or Path.cwd())
    version = detect_nuxt_version(root)
    if version is not None:
        return version >= 4
    return (root / "app").is_dir()


def feature_directory(feature: str, project_dir: Path | str | None = None) -> str:
    """Relative directory for generated sources, e.g. "app/plugins" or "plugins"."""
    return f"app/{feature}" if uses_app_directory(project_dir) else feature


__all__ = [
    "NUXT_CONFIG_FILENAMES",
    "find_nuxt_config",
    "is_nuxt_project",
    "ensure_project_initialized",
    "detect_nuxt_version",
    "uses_app_directory",
    "feature_directory",
]
