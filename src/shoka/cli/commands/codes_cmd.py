# ABOUTME: Offline barcode commands: `shoka classify`, `convert`, `plan`, and `extract`.
# ABOUTME: Lets a user inspect a scanned code without touching the network.

from typing import TextIO

import click
from rich.console import Console
from rich.table import Table

from shoka.codes.checksum import is_valid_isbn13
from shoka.codes.classify import CodeKind, classify, normalize_code
from shoka.codes.extract import extract_codes, resolve_extracted
from shoka.codes.jan import convert_jan_to_isbn
from shoka.lookup.plan import resolve_lookup_plan

console = Console()


@click.command("classify")
@click.argument("code")
def classify_command(code: str) -> None:
    """Show what kind of code CODE is and, for JAN codes, its ISBN."""
    normalized = normalize_code(code)
    kind = classify(normalized)

    console.print(f"Code: [bold]{normalized}[/bold]")
    console.print(f"Kind: [cyan]{kind.value}[/cyan]")

    if kind is CodeKind.ISBN13:
        status = "[green]valid[/green]" if is_valid_isbn13(normalized) else "[red]invalid[/red]"
        console.print(f"Checksum: {status}")
    elif kind is CodeKind.JAPANESE_JAN:
        isbn = convert_jan_to_isbn(normalized)
        console.print(f"ISBN: {isbn or '[dim]none[/dim]'}")


@click.command("convert")
@click.argument("jan")
def convert(jan: str) -> None:
    """Convert a Japanese-book JAN code to an ISBN-13."""
    normalized = normalize_code(jan)
    if classify(normalized) is not CodeKind.JAPANESE_JAN:
        console.print(f"[yellow]{normalized} is not a Japanese-book JAN code.[/yellow]")

    isbn = convert_jan_to_isbn(normalized)
    if isbn is None:
        console.print(f"[red]No valid ISBN-13 found for {normalized}.[/red]")
        raise SystemExit(1)

    console.print(isbn)


@click.command("plan")
@click.argument("code")
def plan(code: str) -> None:
    """Show the lookups that would be tried for CODE, in order."""
    normalized = normalize_code(code)
    console.print(f"Code: [bold]{normalized}[/bold] ({classify(normalized).value})")

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Source", style="cyan")
    table.add_column("Code")
    for position, attempt in enumerate(resolve_lookup_plan(normalized), start=1):
        table.add_row(str(position), attempt.source.value, attempt.code)

    console.print(table)


@click.command("extract")
@click.argument("text_file", type=click.File("r", encoding="utf-8"))
def extract(text_file: TextIO) -> None:
    """List ISBN and JAN codes found in OCR text (use - for stdin)."""
    codes = extract_codes(text_file.read())
    if not codes:
        console.print("[yellow]No codes found.[/yellow]")
        raise SystemExit(1)

    for found in codes:
        console.print(f"{found.type:<4} {found.code}")

    best = resolve_extracted(codes)
    if best:
        console.print(f"\nBest ISBN: [bold]{best}[/bold]")
    else:
        console.print("\n[yellow]No usable ISBN among the codes found.[/yellow]")

