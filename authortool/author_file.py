"""Reading and writing the authors file."""
from pathlib import Path
from typing import Iterable, Set
import logging

logger = logging.getLogger(__name__)


class AuthorFile:
    """The persisted authors list.

    On disk the file is whitespace-separated tokens. It is always written
    back as one sorted, space-joined line with a trailing newline, or as an
    empty file when no authors remain.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Set[str]:
        """Load the current author set.

        Returns:
            Set of identifiers (empty if the file does not exist yet)
        """
        if not self.path.exists():
            logger.debug(f"{self.path} does not exist, starting empty")
            return set()

        with open(self.path, 'r', encoding='utf-8') as f:
            authors = set(f.read().split())

        logger.debug(f"Loaded {len(authors)} authors from {self.path}")
        return authors

    @staticmethod
    def format(authors: Iterable[str]) -> str:
        """Render an author set in file format."""
        ordered = sorted(set(authors))
        if not ordered:
            return ""
        return " ".join(ordered) + "\n"

    def save(self, authors: Iterable[str]):
        """Overwrite the file with exactly `authors`.

        Parent directories are created when missing. There is no locking;
        a concurrent writer between load and save is overwritten.
        """
        content = self.format(authors)

        parent = self.path.parent
        if not parent.exists():
            parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created directory: {parent}")

        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.info(f"Wrote {len(content.split())} authors to {self.path}")
