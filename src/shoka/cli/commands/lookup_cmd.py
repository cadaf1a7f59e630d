# ABOUTME: The `shoka lookup` command for fetching book metadata by barcode.
# ABOUTME: Runs the lookup plan against Google Books, openBD, and NDL Search.

import click
from rich.console import Console

from shoka.cli.display import metadata_table
from shoka.lookup.executor import LookupService, default_lookup_service

console = Console()


def _create_lookup_service() -> LookupService:
    """Create the default lookup service (Google Books, openBD, NDL Search)."""
    return default_lookup_service()


@click.command("lookup")
@click.argument("code")
def lookup(code: str) -> None:
    """Look up book metadata for an ISBN or JAN CODE."""
    service = _create_lookup_service()
    result = service.lookup(code)

    if result is None:
        console.print(f"[yellow]No book information found for {code}.[/yellow]")
        raise SystemExit(1)

    console.print(metadata_table(result.metadata))
    console.print(
        f"\n[dim]Found via {result.provider} ({result.attempt.source.value}) "
        f"after {len(result.tried)} attempt(s)[/dim]"
    )
