"""CLI command for extracting definitions from a document.

Implements the 'dictum extract' command, which reads a paragraph-segmented
document, runs the definition extractor over it and writes the resulting
table as JSON, YAML or plain text.
"""

import json
import sys
from pathlib import Path

import click
import yaml

from dictum.config.loader import ConfigLoader
from dictum.lib.definition_extractor import DefinitionExtractor
from dictum.lib.errors import ConfigError, DictumError, OutputError
from dictum.lib.logging_config import get_logger, setup_logging
from dictum.lib.paragraphs import read_paragraphs
from dictum.models.config import ExtractionConfig

logger = get_logger(__name__)

EXIT_NOT_FOUND = 1
EXIT_USAGE = 2


def format_definitions(definitions: dict[str, str], output_format: str) -> str:
    """Serialize a definition table.

    JSON and YAML wrap the table under a ``terms`` key so further metadata
    can be stored next to it.

    Args:
        definitions: Term to definition text mapping
        output_format: "json", "yaml" or "text"

    Returns:
        Serialized table, without a trailing newline
    """
    ordered = dict(sorted(definitions.items()))
    if output_format == "yaml":
        return yaml.safe_dump(
            {"terms": ordered}, allow_unicode=True, sort_keys=False, width=1000
        ).rstrip("\n")
    if output_format == "text":
        return "\n".join(f"{term}: {text}" for term, text in ordered.items())
    return json.dumps({"terms": ordered}, indent=2, ensure_ascii=False)


def write_output(path: str, rendered: str) -> None:
    """Write rendered definitions to ``path``.

    Raises:
        OutputError: If the file cannot be written
    """
    try:
        Path(path).write_text(rendered + "\n", encoding="utf-8")
    except OSError as e:
        raise OutputError(path, e.strerror or str(e)) from e


@click.command(name="extract")
@click.argument("input_path", metavar="INPUT", type=click.Path(allow_dash=True))
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="YAML configuration file",
)
@click.option(
    "--quote-style",
    type=click.Choice(["auto", "straight", "directional"]),
    default=None,
    help="Quote style of the document (detected when 'auto')",
)
@click.option(
    "--split",
    "paragraph_split",
    type=click.Choice(["line", "blank_line", "json"]),
    default=None,
    help="How the input is divided into paragraphs",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "text"]),
    default=None,
    help="Output format",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Write the result to a file instead of stdout",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=None,
    help="Enable debug logging",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=None,
    help="Only log errors",
)
def extract(
    input_path: str,
    config_path: str | None,
    quote_style: str | None,
    paragraph_split: str | None,
    output_format: str | None,
    output: str | None,
    verbose: bool | None,
    quiet: bool | None,
) -> None:
    """Extract defined terms and their definitions from INPUT.

    INPUT is a text file (or '-' for stdin) holding the document's
    paragraphs.

    Example:

        dictum extract title46.txt

        dictum extract regs.json --split json --format yaml -o terms.yaml

    Exit codes: 0 when definitions were found, 1 when none were found,
    2 for configuration, input or output errors.
    """
    try:
        cli_config = ExtractionConfig(
            quote_style=quote_style,
            paragraph_split=paragraph_split,
            output_format=output_format,
            verbose=verbose or None,
            quiet=quiet or None,
        )
        config = ConfigLoader().load(config_path=config_path, cli_config=cli_config)
        setup_logging(verbose=bool(config.verbose), quiet=bool(config.quiet))
        logger.debug(f"Resolved configuration: {config.model_dump()}")

        paragraphs = read_paragraphs(input_path, config.paragraph_split or "line")
    except ConfigError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(EXIT_USAGE)
    except DictumError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_USAGE)

    extractor = DefinitionExtractor(quote_style=config.resolved_quote_style())
    definitions = extractor.extract(paragraphs)
    if definitions is None:
        click.echo("No definitions found", err=True)
        sys.exit(EXIT_NOT_FOUND)

    rendered = format_definitions(definitions, config.output_format or "json")
    if output:
        try:
            write_output(output, rendered)
        except OutputError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(EXIT_USAGE)
        logger.info(f"Wrote {len(definitions)} definitions to {output}")
    else:
        click.echo(rendered)
