import click
import yaml

from gdocs.sdk import config

# Define the schema of allowed configuration keys
ALLOWED_CONFIG = {
    "auth.credentials_path": {"type": str},
    "auth.token_path": {"type": str},
    "auth.interactive": {"type": bool},
    "server.name": {"type": str},
}


@click.group()
def config_group():
    """Commands for managing gdocs configuration."""
    pass


@config_group.command('view')
def view_config():
    """Displays the current gdocs configuration."""
    config_data = config.load_config()
    click.echo(yaml.dump(config_data, default_flow_style=False))


@config_group.command('set')
@click.argument('key')
@click.argument('value')
def set_config(key, value):
    """
    Sets a configuration value for a supported key.

    \b
    Supported Keys:
      - auth.credentials_path: OAuth client secrets file
      - auth.token_path:       Where the user token is stored
      - auth.interactive:      Allow the browser flow (true/false)
      - server.name:           MCP server name

    \b
    Examples:
      gdocs config set auth.credentials_path ~/Downloads/client_secret.json
      gdocs config set auth.interactive false
    """
    if key not in ALLOWED_CONFIG:
        raise click.UsageError(f"Configuration key '{key}' is not supported.")

    if ALLOWED_CONFIG[key]["type"] is bool:
        if value.lower() not in ['true', 'false']:
            raise click.UsageError(f"Invalid value '{value}' for key '{key}'. Allowed values are: 'true', 'false'.")
        value = value.lower() == 'true'

    config.set_config_value(key, value)
    click.echo(f"✓ Set '{key}' to: {value}")
