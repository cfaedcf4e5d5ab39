from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set, Tuple

from .algebra import Group, GroupValidator
from .logging import get_logger

logger = get_logger(__name__)


class SessionError(Exception):
    """Base class for recoverable user input errors."""


class InvalidElementError(SessionError):
    """Raised when a token cannot be parsed as an integer element."""

    def __init__(self, token: Optional[str]):
        self.token = token
        if token is None:
            message = "Missing value, please enter an integer."
        else:
            message = f"Invalid input '{token}', please enter an integer."
        super().__init__(message)


class IdentityNotSetError(SessionError):
    """Raised when a group is requested before an identity was chosen."""

    def __init__(self) -> None:
        super().__init__("Identity element not set.")


def parse_element(token: Optional[str]) -> int:
    if token is None:
        raise InvalidElementError(None)
    try:
        return int(token.strip())
    except ValueError:
        raise InvalidElementError(token) from None


@dataclass
class AddOutcome:
    """Per-token results of one ``add``, in input order."""
    entries: List[Tuple[str, Optional[int]]] = field(default_factory=list)

    @property
    def added(self) -> List[int]:
        return [value for _, value in self.entries if value is not None]

    @property
    def invalid(self) -> List[str]:
        return [token for token, value in self.entries if value is None]


class Session:
    """The working element set and identity slot edited by the command loop."""

    def __init__(self) -> None:
        self._elements: Set[int] = set()
        self._identity: Optional[int] = None

    @property
    def elements(self) -> Tuple[int, ...]:
        return tuple(sorted(self._elements))

    @property
    def identity(self) -> Optional[int]:
        return self._identity

    def add(self, tokens: Iterable[str]) -> AddOutcome:
        """Insert every integer token; collect the ones that do not parse."""
        outcome = AddOutcome()
        for token in tokens:
            try:
                value = parse_element(token)
            except InvalidElementError:
                outcome.entries.append((token, None))
                continue
            self._elements.add(value)
            outcome.entries.append((token, value))

        logger.debug(f"Added {outcome.added}, rejected {outcome.invalid}; size is now {len(self._elements)}")
        return outcome

    def set_identity(self, token: Optional[str]) -> int:
        # Parse before assigning so a bad token leaves the old identity alone
        value = parse_element(token)
        self._identity = value
        return value

    def create(self, validator: GroupValidator) -> Group:
        """
        Validate the current set and identity.

        Raises:
            IdentityNotSetError: If no identity has been set.
            GroupValidationError: If the candidate is not a group.
        """
        if self._identity is None:
            raise IdentityNotSetError()
        return validator.validate(frozenset(self._elements), self._identity)
