"""Entry point for the ``dictum`` command."""

import click

from dictum import __version__
from dictum.cli.commands.extract import extract


@click.group()
@click.version_option(version=__version__, prog_name="dictum")
def main() -> None:
    """Dictum - extract defined terms from legal and regulatory text."""


main.add_command(extract)


if __name__ == "__main__":  # pragma: no cover
    main()
