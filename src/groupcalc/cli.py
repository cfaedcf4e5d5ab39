import logging
from importlib.metadata import version as package_version

import typer

from .config import Settings
from .logging import get_logger, set_level
from .repl import Repl

__version__ = package_version("groupcalc")

logger = get_logger(__name__)

app = typer.Typer(help="groupcalc – interactive finite group calculator")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"groupcalc {__version__}")
        raise typer.Exit()


@app.command()
def run(
    test: bool = typer.Option(False, "--test", "-t", help="Enable test mode for debugging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """
    Start the interactive group calculator.

    Build a set of integers with `add`, pick an identity with `identity`, then
    run `create` to check whether the set forms a group under addition modulo
    its size.
    """
    settings = Settings(test_mode=test)

    if settings.test_mode:
        typer.echo("Test mode enabled.")
        set_level(logging.DEBUG)

    repl = Repl(settings=settings)
    try:
        repl.run(typer.get_text_stream("stdin", errors="replace"))
    except OSError as exc:
        logger.error(f"I/O failure: {exc}")
        raise typer.Exit(code=1) from exc

    logger.debug("Session finished")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
