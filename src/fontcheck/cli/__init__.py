import click

from fontcheck import __version__
from fontcheck.cli.check import check, list_checks


@click.group()
@click.version_option(version=__version__, prog_name="fontcheck")
def cli():
    """Sanity checks for font metric tables."""
    pass


# add commands here

cli.add_command(check)
cli.add_command(list_checks)
