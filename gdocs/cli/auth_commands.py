"""CLI commands for OAuth authorization."""

import logging

import click

from gdocs.sdk.auth import CredentialHandle
from gdocs.sdk.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


@click.group()
def auth():
    """Commands for authorizing access to Google Docs."""
    pass


@auth.command('login')
@click.option('--force', is_flag=True,
              help='Run the browser flow again; the stored token is replaced on success.')
def login(force):
    """Authorize gdocs and store the token for later runs."""
    handle = CredentialHandle.from_config()
    handle.interactive = True

    if force:
        logger.debug(f"Ignoring stored token {handle.token_path} and re-running the flow")

    try:
        handle.authorize(force=force)
    except AuthorizationError as e:
        raise click.ClickException(str(e))

    click.secho("Authorized.", fg="green")
    click.echo(f"  Token: {handle.token_path}")


@auth.command('status')
def status():
    """Show where credentials are read from and whether they exist."""
    handle = CredentialHandle.from_config()

    def _state(path):
        if path.exists():
            return click.style("present", fg="green")
        return click.style("missing", fg="red")

    click.echo(f"Client secrets: {handle.credentials_path} ({_state(handle.credentials_path)})")
    click.echo(f"Token:          {handle.token_path} ({_state(handle.token_path)})")
    click.echo(f"Interactive:    {'yes' if handle.interactive else 'no'}")

    if not handle.token_path.exists():
        click.echo("\nTo fix:")
        click.echo("  gdocs auth login")
