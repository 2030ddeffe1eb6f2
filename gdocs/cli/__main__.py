"""gdocs CLI - Command-line interface for Google Docs access."""

import logging
import os

import click
from dotenv import load_dotenv

from gdocs import __version__

from .auth_commands import auth as auth_module
from .config_commands import config_group as config_module
from .docs_commands import read_doc, create_doc, update_doc, search_docs


# Configure logging at the application level
if not logging.root.handlers:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO),
                        format='%(asctime)s - %(levelname)s - %(message)s')
# Suppress noisy INFO logs from googleapiclient and google_auth_oauthlib
logging.getLogger('googleapiclient.discovery').setLevel(logging.WARNING)
logging.getLogger('googleapiclient.discovery_cache').setLevel(logging.WARNING)
logging.getLogger('google_auth_oauthlib.flow').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name='gdocs')
def gdocs():
    """Google Docs access from the command line and over MCP.

    Documents may be given as bare IDs or as full sharing URLs.
    """
    pass


@click.command()
def serve():
    """Run the MCP server on stdio."""
    from gdocs.mcp.server import run_server
    run_server()


# Add commands to groups using add_command()
gdocs.add_command(read_doc, name='read')
gdocs.add_command(create_doc, name='create')
gdocs.add_command(update_doc, name='update')
gdocs.add_command(search_docs, name='search')
gdocs.add_command(auth_module, name='auth')
gdocs.add_command(config_module, name='config')
gdocs.add_command(serve, name='serve')


def main():
    """Entry point for the CLI."""
    load_dotenv()
    gdocs()


if __name__ == "__main__":
    main()
