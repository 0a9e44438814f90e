"""External-world integrations for create-nuxt-hasura-cli.

This package contains:
- process: Shell command execution with exit-code based errors
- package_manager: npm/yarn/pnpm/bun command mapping and lockfile detection
- files: Generated file writing and package.json script merging
- env_file: dotenv file creation and key-preserving append
"""

from nuxt_hasura_cli.integrations.env_file import (
    DEFAULT_ENV_FILENAME,
    EnvFileAction,
    EnvFileResult,
    EnvVariable,
    create_or_append_env_file,
)
from nuxt_hasura_cli.integrations.files import (
    add_scripts_to_package_json,
    ensure_directory_exists,
    read_package_json,
    write_file,
)
from nuxt_hasura_cli.integrations.package_manager import (
    DEFAULT_PACKAGE_MANAGER,
    PackageManager,
    detect_package_manager,
    get_add_command,
    get_install_command,
    get_local_executor,
    get_package_executor,
    get_run_script_command,
)
from nuxt_hasura_cli.integrations.process import ExecuteOptions, OutputMode, run_command

__all__ = [
    # Process
    "ExecuteOptions",
    "OutputMode",
    "run_command",
    # Package manager
    "PackageManager",
    "DEFAULT_PACKAGE_MANAGER",
    "detect_package_manager",
    "get_add_command",
    "get_install_command",
    "get_local_executor",
    "get_package_executor",
    "get_run_script_command",
    # Files
    "write_file",
    "ensure_directory_exists",
    "read_package_json",
    "add_scripts_to_package_json",
    # Env files
    "DEFAULT_ENV_FILENAME",
    "EnvVariable",
    "EnvFileAction",
    "EnvFileResult",
    "create_or_append_env_file",
]
