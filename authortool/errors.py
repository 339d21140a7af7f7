"""Error kinds raised by the author tool."""
from pathlib import Path

import click


class AuthorToolError(Exception):
    """Base class for all author tool failures."""


class NotInRepoError(AuthorToolError):
    """No version-control root and no authors file above the start directory."""

    def __init__(self, start: Path):
        self.start = Path(start)
        super().__init__(f"Not inside a repository (searched upward from {self.start})")


class MissingLoginsError(AuthorToolError):
    """`add` was called without any identifiers."""

    def __init__(self):
        super().__init__("add requires at least one login")


class UnknownCommandError(AuthorToolError, click.UsageError):
    """The first argument is not a known subcommand."""

    def __init__(self, name: str, ctx: click.Context = None):
        self.name = name
        super().__init__(f"Unknown command: {name}", ctx)


class InvalidLoginError(AuthorToolError):
    """A login is empty or contains whitespace, so it cannot be stored."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"Invalid login {login!r}: logins must be non-empty and contain no whitespace")
