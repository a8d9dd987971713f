"""Console entry point for the ``eliza`` command."""

import click

from eliza_cli.commands.start import start
from eliza_cli.constants import ELIZA_VERSION


@click.group()
@click.version_option(ELIZA_VERSION, prog_name="eliza")
def main() -> None:
    """Eliza agent command-line interface."""


main.add_command(start)


if __name__ == "__main__":
    main()
