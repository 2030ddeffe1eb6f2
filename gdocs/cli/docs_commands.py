"""CLI commands for Google Docs operations."""

import json
import click
from click_option_group import optgroup

from gdocs.sdk import docs as sdk_docs
from gdocs.sdk.auth import CredentialHandle
from gdocs.sdk.docs.search import DEFAULT_MAX_RESULTS
from gdocs.sdk.exceptions import GDocsError


def get_store():
    """Document store for the configured credentials."""
    return sdk_docs.GoogleDocumentStore(CredentialHandle.from_config())


@click.command('read')
@click.argument('document')
@click.option('--start', 'start_position', type=int, default=None,
              help='Character offset to start reading from.')
@click.option('--max-length', type=int, default=None,
              help='Maximum number of characters to print.')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']),
              default='text', help='Output format (default: text).')
def read_doc(document, start_position, max_length, output_format):
    """Read a Google Doc by ID or URL."""
    try:
        result = sdk_docs.read_document(get_store(), document)
        result["text"] = sdk_docs.slice_text(
            result["text"], start_position=start_position, max_length=max_length
        )
    except GDocsError as e:
        raise click.ClickException(str(e))

    if output_format == 'json':
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        click.echo(result["text"])


@click.command('create')
@click.argument('title')
@click.option('--content', '-c', default=None,
              help='Initial body text for the document.')
def create_doc(title, content):
    """Create a new Google Doc."""
    try:
        result = sdk_docs.create_document(get_store(), title, content)
    except GDocsError as e:
        raise click.ClickException(str(e))

    click.echo("Document created successfully!")
    click.echo(f"  Title: {result['title']}")
    click.echo(f"  ID: {result['id']}")
    click.echo(f"  URL: {result['url']}")


@click.command('update')
@click.argument('document')
@click.argument('content')
@optgroup.group('Range', help='Where to put the content (default: append at the end).')
@optgroup.option('--start', 'start_position', type=int, default=None,
                 help='Index to insert at.')
@optgroup.option('--end', 'end_position', type=int, default=None,
                 help='End of the range to replace (requires --start).')
def update_doc(document, content, start_position, end_position):
    """Append, insert or replace text in a Google Doc."""
    try:
        result = sdk_docs.update_document(
            get_store(), document, content,
            start_position=start_position, end_position=end_position
        )
    except GDocsError as e:
        raise click.ClickException(str(e))

    if start_position is None:
        click.echo(f"Text appended to {result['id']}.")
    elif end_position is None:
        click.echo(f"Text inserted at index {start_position} in {result['id']}.")
    else:
        click.echo(f"Replaced range [{start_position}, {end_position}) in {result['id']}.")


@click.command('search')
@click.argument('query')
@click.option('--max-results', type=int, default=DEFAULT_MAX_RESULTS,
              help='Maximum number of documents to return (default 10).')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON.')
def search_docs(query, max_results, as_json):
    """Full-text search over Google Docs."""
    try:
        results = sdk_docs.search_documents(get_store(), query, max_results)
    except GDocsError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(results, indent=2, ensure_ascii=False))
    elif not results:
        click.echo("No Google Docs found.")
    else:
        for doc in results:
            click.echo(f"- {doc['title']} (ID: {doc['id']})")
