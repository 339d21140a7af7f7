"""Command-line interface for the author tool."""
import click
import logging
from pathlib import Path
import sys

from . import __version__
from .errors import MissingLoginsError, UnknownCommandError
from .locator import AuthorLocator
from .manager import AuthorManager, ListOutcome, validate_logins
from .report import Report

logger = logging.getLogger(__name__)


class AuthorGroup(click.Group):
    """Command group that reports unknown subcommands as UnknownCommandError."""

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            raise UnknownCommandError(cmd_name, ctx)
        return super().resolve_command(ctx, args)


def _get_manager(ctx: click.Context) -> AuthorManager:
    """Resolve the authors file for this invocation."""
    location = AuthorLocator().locate(ctx.obj['start_dir'])
    logger.debug(f"Using {location.describe()}")
    return AuthorManager(location.path, selector=ctx.obj.get('selector'))


def _run(ctx: click.Context, operation):
    """Run `operation` with a fresh Report and handle failures.

    The report is printed even when the operation fails part way, so the
    operator sees what was already applied before the error message.
    """
    report = Report()
    try:
        try:
            operation(report)
        finally:
            if not report.is_empty():
                click.echo(report.to_text())
    except Exception as e:
        message = "selection aborted" if isinstance(e, click.Abort) else str(e)
        click.secho(f"Error: {message}", fg='red', err=True)
        if ctx.obj.get('verbose'):
            raise
        sys.exit(1)


def _echo_hint(program: str):
    """Tell the operator how to add the first author."""
    click.echo(
        click.style("no authors specified, run ", italic=True)
        + click.style(f"{program} add login", bold=True)
        + click.style(" to add them", italic=True)
    )


def _list(ctx: click.Context):
    def operation(report):
        result = _get_manager(ctx).list_authors()
        if result.outcome == ListOutcome.EMPTY:
            _echo_hint(ctx.find_root().info_name)
            return
        for author in result.authors:
            click.echo(author)

    _run(ctx, operation)


@click.group(name='author', cls=AuthorGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """Maintain the author.txt list of the current repository.

    Run without a command to list the authors.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    ctx.ensure_object(dict)
    if 'start_dir' not in ctx.obj:
        ctx.obj['start_dir'] = Path.cwd()
    ctx.obj['verbose'] = verbose

    if ctx.invoked_subcommand is None:
        _list(ctx)


@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('logins', nargs=-1)
@click.pass_context
def add(ctx, logins):
    """Add one or more LOGINS to the authors list.

    LOGINS starting with a dash are taken literally; put them after `--`
    if one is spelled like --help.
    """
    def operation(report):
        if not logins:
            raise MissingLoginsError()
        validate_logins(logins)
        _get_manager(ctx).add(logins, report)

    _run(ctx, operation)


@cli.command(context_settings={'ignore_unknown_options': True})
@click.argument('logins', nargs=-1)
@click.pass_context
def remove(ctx, logins):
    """Remove LOGINS from the authors list.

    Without LOGINS, choose the authors to remove interactively. Put LOGINS
    after `--` if one is spelled like --help.
    """
    def operation(report):
        validate_logins(logins)
        manager = _get_manager(ctx)
        if logins:
            manager.remove(logins, report)
        else:
            manager.remove_interactive(report)

    _run(ctx, operation)


if __name__ == '__main__':
    cli()
