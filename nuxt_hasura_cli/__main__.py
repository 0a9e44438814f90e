"""Entry point for running the CLI as a module.

This allows running the application with:
    python -m nuxt_hasura_cli [COMMAND] [OPTIONS]
"""

from nuxt_hasura_cli.cli import app

if __name__ == "__main__":
    app()
