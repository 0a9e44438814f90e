"""File writing helpers for generated files and package.json.

Writes are plain overwrites. Generated files are small and can be
regenerated by re-running the command, so no atomic replace is attempted.
"""

import json
from pathlib import Path

from nuxt_hasura_cli.utils.errors import (
    FileWriteError,
    PackageJsonError,
    ProjectNotInitializedError,
)
from nuxt_hasura_cli.utils.logging import log_message


def write_file(path: Path | str, content: str) -> None:
    """Write UTF-8 text to a file, replacing any existing content.

    Parent directories are not created; call ensure_directory_exists() first.

    Args:
        path: Destination file
        content: Text to write

    Raises:
        FileWriteError: If the file cannot be written
    """
    target = Path(path)
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Failed to write {target}: {e}", path=str(target)) from e
    log_message(f"Wrote {target} ({len(content)} chars)")


def ensure_directory_exists(path: Path | str) -> Path:
    """Create a directory and any missing parents.

    Raises:
        FileWriteError: If the directory cannot be created
    """
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileWriteError(f"Failed to create directory {directory}: {e}", path=str(directory)) from e
    return directory


def read_package_json(project_dir: Path | str | None = None) -> dict:
    """Load package.json from a project directory.

    Raises:
        ProjectNotInitializedError: If package.json does not exist
        PackageJsonError: If it is not a JSON object
    """
    package_json_path = Path(project_dir or Path.cwd()) / "package.json"
    if not package_json_path.is_file():
        raise ProjectNotInitializedError(f"No package.json file found in {package_json_path.parent}")

    try:
        data = json.loads(package_json_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise PackageJsonError(f"Cannot read {package_json_path}: {e}") from e

    if not isinstance(data, dict):
        raise PackageJsonError(f"{package_json_path} does not contain a JSON object")
    return data


def add_scripts_to_package_json(
    scripts: dict[str, str],
    project_dir: Path | str | None = None,
) -> None:
    """Merge entries into the "scripts" section of package.json.

    Scripts with the same name are replaced; all other scripts and keys are
    kept in their original order.

    Args:
        scripts: Script name to command mapping
        project_dir: Project root (defaults to the current directory)
    """
    root = Path(project_dir or Path.cwd())
    package_json = read_package_json(root)

    existing = package_json.get("scripts") or {}
    if not isinstance(existing, dict):
        raise PackageJsonError(f"\"scripts\" in {root / 'package.json'} is not a JSON object")
    package_json["scripts"] = {**existing, **scripts}

    write_file(root / "package.json", json.dumps(package_json, indent=2, ensure_ascii=False) + "\n")
    log_message(f"Added scripts to package.json: {', '.join(scripts)}")


__all__ = [
    "write_file",
    "ensure_directory_exists",
    "read_package_json",
    "add_scripts_to_package_json",
]
