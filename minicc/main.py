import logging

import click

from minicc.compiler import compile_source
from minicc.errors import ParseError
from minicc.helper import error_message

DEFAULT_EXPRESSION = "int x = (2 + 3) * 4;"


@click.command()
@click.argument("expression", default=DEFAULT_EXPRESSION)
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
def main(expression: str, quiet: bool):
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO, format="%(message)s"
    )
    try:
        result = compile_source(expression)
    except ParseError as e:
        click.echo(error_message(expression, e.location, str(e)), err=True, nl=False)
        raise SystemExit(1)

    click.echo("Tokens:")
    for token in result.tokens:
        click.echo(str(token))
    click.echo()
    click.echo("Optimized Tokens:")
    for token in result.optimized:
        click.echo(str(token))


if __name__ == "__main__":
    main()
