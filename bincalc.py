"""Command-line front end for the step-by-step decimal/binary converter."""

import json
import logging

import click

from conversion import Base, InvalidInput, convert


@click.command()
@click.argument("number")
@click.option(
    "-b",
    "--base",
    type=click.Choice([b.value for b in Base]),
    default=Base.DECIMAL.value,
    show_default=True,
    help="Numeral system NUMBER is written in.",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def main(number: str, base: str, json_output: bool, quiet: bool, verbose: bool) -> None:
    """Convert NUMBER between decimal and binary and show the working."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    try:
        result = convert(number, base)
    except InvalidInput as e:
        raise click.ClickException(str(e)) from e

    if json_output:
        click.echo(json.dumps(result.as_dict(), ensure_ascii=False, indent=2))
        return
    if quiet:
        click.echo(result.value)
        return
    target = result.base.other
    click.echo(f"{result.base.label} {result.source} = {target.label} {result.value}")
    for step in result.steps:
        click.echo(f"  {step.index}. {step.operation}  ({step.partial})")


if __name__ == "__main__":
    main()
