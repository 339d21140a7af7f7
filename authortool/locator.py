"""Authors file discovery.

Walks upward from a start directory until it reaches either a
version-control root or a directory that already holds an authors file.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence
import logging

from .errors import NotInRepoError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Location:
    """Where the authors file of this invocation lives."""
    directory: Path
    path: Path
    standalone: bool = False
    marker: Optional[str] = None

    def describe(self) -> str:
        """Human-readable summary, used in verbose output."""
        if self.standalone:
            return f"standalone authors file {self.path}"
        return f"{self.marker} repository at {self.directory}"


class AuthorLocator:
    """Resolves the authors file for a start directory."""

    FILENAME = "author.txt"

    # Version-control metadata directories that mark a repository root
    VCS_MARKERS = ('.git', '.hg', '.svn')

    def __init__(self, filename: str = None, markers: Sequence[str] = None):
        """Initialize locator.

        Args:
            filename: Name of the authors file (default: author.txt)
            markers: Marker directory names that identify a repository root
        """
        self.filename = filename or self.FILENAME
        self.markers = tuple(markers) if markers is not None else self.VCS_MARKERS

    def find_marker(self, directory: Path) -> Optional[str]:
        """Return the first version-control marker directory present, if any."""
        for marker in self.markers:
            if (directory / marker).is_dir():
                return marker
        return None

    def locate(self, start: Path) -> Location:
        """Find the authors file governing `start`.

        Args:
            start: Directory the search begins in (usually the cwd)

        Returns:
            Location of the authors file; the file itself may not exist yet

        Raises:
            NotInRepoError: if the filesystem root is passed without a match
        """
        current = Path(start).resolve()

        while True:
            logger.debug(f"Checking {current}")

            marker = self.find_marker(current)
            if marker:
                logger.debug(f"Found {marker} in {current}")
                return Location(
                    directory=current,
                    path=current / self.filename,
                    marker=marker,
                )

            candidate = current / self.filename
            if candidate.is_file():
                logger.debug(f"Found standalone {candidate}")
                return Location(directory=current, path=candidate, standalone=True)

            # Path('/').parent is Path('/'), which ends the walk
            parent = current.parent
            if parent == current:
                raise NotInRepoError(start)
            current = parent
