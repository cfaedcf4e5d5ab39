"""
Line-oriented command loop for building and validating groups.

Each line is split on whitespace and dispatched on its first token. Every
user error is reported and the loop keeps going; only ``exit`` or the end of
the input stream stops it.
"""

from typing import Callable, List, Optional, TextIO

import typer

from .algebra import Group, GroupValidationError, GroupValidator
from .config import Settings
from .logging import get_logger
from .session import Session, SessionError

logger = get_logger(__name__)

CMD_ADD = "add"
CMD_IDENTITY = "identity"
CMD_LIST = "list"
CMD_HELP = "help"
CMD_CREATE = "create"
CMD_EXIT = "exit"

HELP_LINES = [
    "Available commands:",
    f"  {CMD_ADD} <int> [<int> ...] - Add elements to the group",
    f"  {CMD_IDENTITY} <int> - Set the identity element",
    f"  {CMD_LIST} - List current elements and identity",
    f"  {CMD_CREATE} - Validate and create the group",
    f"  {CMD_HELP} - Show this list",
    f"  {CMD_EXIT} - Exit the program",
]


def format_elements(elements) -> str:
    return "{" + ", ".join(str(e) for e in elements) + "}"


def format_group(group: Group) -> List[str]:
    pairs = ", ".join(f"{a}<->{b}" for a, b in group.inverses().items())
    return [
        f"Group created: order {group.order}, identity {group.identity}, modulus {group.modulus}",
        f"  Elements: {format_elements(sorted(group.elements))}",
        f"  Inverses: {pairs}",
    ]


class Repl:
    def __init__(self,
                 settings: Optional[Settings] = None,
                 session: Optional[Session] = None,
                 validator: Optional[GroupValidator] = None,
                 echo: Callable[..., None] = typer.echo):
        self.settings = settings or Settings()
        self.session = session or Session()
        self.validator = validator or GroupValidator(
            large_set_warning=self.settings.large_set_warning
        )
        self.echo = echo
        self._handlers = {
            CMD_ADD: self._add,
            CMD_IDENTITY: self._identity,
            CMD_LIST: self._list,
            CMD_HELP: self._help,
            CMD_CREATE: self._create,
        }

    def handle(self, line: str) -> bool:
        """Execute one command line. Returns False when the loop should stop."""
        tokens = line.split()
        if not tokens:
            return True

        command, args = tokens[0], tokens[1:]
        if command == CMD_EXIT:
            return False

        handler = self._handlers.get(command)
        if handler is None:
            logger.debug(f"Unknown command: {command!r}")
            self.echo(f"Unknown command. Type '{CMD_HELP}' for available commands.")
            return True

        handler(args)
        return True

    def run(self, stream: TextIO) -> None:
        """Prompt and dispatch until ``exit`` or end of input."""
        while True:
            self.echo(f"{self.settings.prompt}> ", nl=False)
            line = stream.readline()
            if not line:
                self.echo("")
                logger.debug("End of input reached")
                return
            if not self.handle(line):
                return

    def _add(self, args: List[str]) -> None:
        if not args:
            self.echo(f"Usage: {CMD_ADD} <int> [<int> ...]")
            return
        outcome = self.session.add(args)
        for token, value in outcome.entries:
            if value is None:
                self.echo(f"Invalid input '{token}', please enter an integer.")
            else:
                self.echo(f"Element added: {value}")

    def _identity(self, args: List[str]) -> None:
        try:
            value = self.session.set_identity(args[0] if args else None)
        except SessionError as exc:
            self.echo(str(exc))
            return
        self.echo(f"Identity set: {value}")

    def _list(self, args: List[str]) -> None:
        self.echo(f"Current elements: {format_elements(self.session.elements)}")
        if self.session.identity is None:
            self.echo("Identity element not set.")
        else:
            self.echo(f"Identity element: {self.session.identity}")

    def _help(self, args: List[str]) -> None:
        for line in HELP_LINES:
            self.echo(line)

    def _create(self, args: List[str]) -> None:
        try:
            group = self.session.create(self.validator)
        except SessionError as exc:
            self.echo(str(exc))
            return
        except GroupValidationError as exc:
            logger.info(f"Group validation failed: {[axiom.value for axiom in exc.axioms]}")
            self.echo("Error creating group:")
            for failure in exc.failures:
                self.echo(f"  {failure}")
            return

        for line in format_group(group):
            self.echo(line)
