"""Generated file templates and validation of values placed into them.

Templates use {{}} for literal braces and named placeholders for user input.
Every placeholder sits inside a string literal; values are validated at the
prompt and escaped for that literal's quote character before formatting.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from nuxt_hasura_cli.utils.errors import ValidationError

HASURA_ENDPOINT_ENV = "NUXT_HASURA_GRAPHQL_ENDPOINT"
HASURA_ENDPOINT_LOCAL_ENV = "NUXT_HASURA_GRAPHQL_ENDPOINT_LOCAL"
HASURA_ADMIN_SECRET_ENV = "NUXT_HASURA_GRAPHQL_ADMIN_SECRET"
ADMIN_SECRET_PLACEHOLDER = "your-admin-secret-here"

CODEGEN_CONFIG_FILENAME = "codegen.ts"

CODEGEN_CONFIG_TEMPLATE = """import type {{ CodegenConfig }} from "@graphql-codegen/cli";

const config: CodegenConfig = {{
  overwrite: true,
  schema: "{schema_path}",
  documents: ["graphql/**/*.{{graphql,gql}}"],
  generates: {{
    "{types_path}": {{
      plugins: ["typescript", "typescript-operations", "typed-document-node"],
    }},
  }},
}};

export default config;
"""

APOLLO_CLIENT_TEMPLATE = """import {{ defineApolloClient }} from "@nuxtjs/apollo/config";

export default defineApolloClient({{
  httpEndpoint: process.env.{endpoint_env}!,
  tokenName: "{token_name}",
  httpLinkOptions: {{
    credentials: "include",
  }},
}});
"""

URQL_PLUGIN_TEMPLATE = """import {{ createClient, provideClient }} from '@urql/vue';

export default defineNuxtPlugin((nuxtApp) => {{
  const runtimeConfig = useRuntimeConfig();
  const client = createClient({{
    url: runtimeConfig.public.hasuraGraphqlEndpoint,
    fetchOptions: () => {{
      const token = useCookie('{cookie_name}');

      return {{
        headers: {{
          Authorization: token.value ? `Bearer ${{token.value}}` : '',
        }},
      }};
    }},
  }});

  provideClient(client);
}});
"""

FETCH_SCHEMA_SCRIPT_TEMPLATE = (
    "dotenv -- sh -c 'get-graphql-schema "
    '-h "x-hasura-admin-secret=${admin_secret_env}" '
    '"${endpoint_env}" > {output_path}\''
)

_PROJECT_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")
# Paths end up in shell scripts as well as string literals
_SAFE_PATH = re.compile(r"^[\w./@+-]+$")
_TOKEN_NAME = re.compile(r"^[\w.:@/-]+$")
_URL = re.compile(r"^https?://[^\s'\"`\\]+$")


def escape_js_string(value: str, quote: str = '"') -> str:
    """Escape text for the inside of a JavaScript string literal."""
    return (
        value.replace("\\", "\\\\")
        .replace(quote, "\\" + quote)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def validate_project_name(value: str) -> bool | str:
    if not value:
        return "Project name is required"
    if not _PROJECT_NAME.match(value):
        return "Use letters, digits, '.', '_' or '-', starting with a letter or digit"
    return True


def validate_path(value: str) -> bool | str:
    if not value.strip():
        return "Path is required"
    if not _SAFE_PATH.match(value):
        return "Paths may only contain letters, digits and . / _ - @ +"
    return True


def validate_endpoint(value: str) -> bool | str:
    if not _URL.match(value):
        return "Enter an http:// or https:// URL without spaces or quotes"
    return True


def validate_token_name(value: str) -> bool | str:
    if not _TOKEN_NAME.match(value):
        return "Use letters, digits and . : @ / _ -"
    return True


def require_valid(validator: Callable[[str], bool | str], value: str, label: str) -> str:
    """Run a prompt validator on a value that did not come from a prompt.

    Raises:
        ValidationError: If the validator rejects the value
    """
    result = validator(value)
    if result is not True:
        raise ValidationError(f"Invalid {label} {value!r}: {result}")
    return value


def render_codegen_config(schema_path: str, output_dir: str) -> str:
    """codegen.ts generating typed documents into ``output_dir``/types.ts."""
    types_path = f"{output_dir.rstrip('/')}/types.ts"
    return CODEGEN_CONFIG_TEMPLATE.format(
        schema_path=escape_js_string(schema_path),
        types_path=escape_js_string(types_path),
    )


def render_apollo_client(token_name: str) -> str:
    return APOLLO_CLIENT_TEMPLATE.format(
        endpoint_env=HASURA_ENDPOINT_ENV,
        token_name=escape_js_string(token_name),
    )


def render_urql_plugin(cookie_name: str) -> str:
    return URQL_PLUGIN_TEMPLATE.format(cookie_name=escape_js_string(cookie_name, quote="'"))


def build_fetch_schema_script(output_path: str) -> str:
    """package.json script downloading the Hasura schema to ``output_path``.

    Raises:
        ValidationError: If the path is not safe inside a shell command
    """
    require_valid(validate_path, output_path, "schema output path")
    return FETCH_SCHEMA_SCRIPT_TEMPLATE.format(
        admin_secret_env=HASURA_ADMIN_SECRET_ENV,
        endpoint_env=HASURA_ENDPOINT_LOCAL_ENV,
        output_path=output_path,
    )


__all__ = [
    "HASURA_ENDPOINT_ENV",
    "HASURA_ENDPOINT_LOCAL_ENV",
    "HASURA_ADMIN_SECRET_ENV",
    "ADMIN_SECRET_PLACEHOLDER",
    "CODEGEN_CONFIG_FILENAME",
    "escape_js_string",
    "validate_project_name",
    "validate_path",
    "validate_endpoint",
    "validate_token_name",
    "require_valid",
    "render_codegen_config",
    "render_apollo_client",
    "render_urql_plugin",
    "build_fetch_schema_script",
]
