"""Author list operations: list, add and remove."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, List
import logging

from .author_file import AuthorFile
from .errors import InvalidLoginError, MissingLoginsError
from .report import Report
from .selector import Selector, prompt_selection

logger = logging.getLogger(__name__)


def validate_logins(logins: Iterable[str]) -> List[str]:
    """Return `logins` as a list, rejecting any that the file cannot hold.

    Raises:
        InvalidLoginError: for an empty login or one containing whitespace
    """
    logins = list(logins)
    for login in logins:
        if not login or login.split() != [login]:
            raise InvalidLoginError(login)
    return logins


class ListOutcome(Enum):
    """Result of listing the authors file."""
    AUTHORS = "authors"
    EMPTY = "empty"


@dataclass
class ListResult:
    """Outcome of a list operation plus the sorted identifiers."""
    outcome: ListOutcome
    authors: List[str] = field(default_factory=list)


class AuthorManager:
    """Applies list/add/remove operations to one authors file.

    Every mutating operation is a single read-modify-write of the file and
    records what it did in the Report passed in by the caller.
    """

    def __init__(self, path: Path, selector: Selector = None):
        """Initialize manager.

        Args:
            path: Location of the authors file (need not exist yet)
            selector: Multi-select capability used by interactive remove
        """
        self.file = AuthorFile(path)
        self.selector = selector or prompt_selection

    def list_authors(self) -> ListResult:
        """Return the sorted authors, or the EMPTY outcome if there are none."""
        authors = self.file.load()
        if not authors:
            return ListResult(outcome=ListOutcome.EMPTY)
        return ListResult(outcome=ListOutcome.AUTHORS, authors=sorted(authors))

    def add(self, logins: Iterable[str], report: Report):
        """Add logins, skipping those already listed.

        Raises:
            MissingLoginsError: if `logins` is empty (nothing is read or written)
            InvalidLoginError: if a login cannot be stored (nothing is read or written)
        """
        logins = validate_logins(logins)
        if not logins:
            raise MissingLoginsError()

        authors = self.file.load()
        for login in logins:
            if login in authors:
                report.not_added.append(login)
            else:
                authors.add(login)
                report.added.append(login)

        self.file.save(authors)
        logger.info(f"Add finished: {report.get_summary()}")

    def remove(self, logins: Iterable[str], report: Report):
        """Remove logins, recording those that were not listed.

        Raises:
            InvalidLoginError: if a login cannot be stored (nothing is read or written)
        """
        logins = validate_logins(logins)
        authors = self.file.load()
        for login in logins:
            if login in authors:
                authors.discard(login)
                report.removed.append(login)
            else:
                report.not_removed.append(login)

        self.file.save(authors)
        logger.info(f"Remove finished: {report.get_summary()}")

    def remove_interactive(self, report: Report):
        """Let the operator choose which authors to remove.

        Does nothing when the list is empty or nothing is selected. Selector
        failures (e.g. click.Abort) propagate before anything is written.
        """
        authors = self.file.load()
        if not authors:
            logger.info("No authors to remove")
            return

        selected = self.selector(sorted(authors))
        if not selected:
            logger.info("Nothing selected")
            return

        self.remove(selected, report)
