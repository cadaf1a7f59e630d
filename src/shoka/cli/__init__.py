# ABOUTME: CLI package for Shoka, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from shoka.cli.commands import (
    add_cmd,
    codes_cmd,
    edit_cmd,
    info_cmd,
    lookup_cmd,
    ls_cmd,
    search_cmd,
    transfer_cmd,
)


@click.group()
@click.version_option(package_name="shoka")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Shoka - scan, look up, and catalog your books."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


cli.add_command(codes_cmd.classify_command)
cli.add_command(codes_cmd.convert)
cli.add_command(codes_cmd.plan)
cli.add_command(codes_cmd.extract)
cli.add_command(lookup_cmd.lookup)
cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(ls_cmd.locations)
cli.add_command(ls_cmd.categories)
cli.add_command(info_cmd.info)
cli.add_command(search_cmd.search)
cli.add_command(edit_cmd.edit)
cli.add_command(edit_cmd.rm)
cli.add_command(transfer_cmd.export)
cli.add_command(transfer_cmd.import_command)
