"""Interactive multi-select prompt.

AuthorManager only needs a callable that takes the available options and
returns the chosen subset; `prompt_selection` is the terminal version.
"""
from typing import Callable, List
import logging

import click

logger = logging.getLogger(__name__)

Selector = Callable[[List[str]], List[str]]


def parse_selection(response: str, options: List[str]) -> List[str]:
    """Turn an operator response into the selected options.

    Accepts 1-based numbers separated by commas or spaces, ranges such as
    ``2-4`` and the keyword ``all``. A blank response selects nothing.

    Returns:
        Selected options in list order, without repeats

    Raises:
        ValueError: if a token is not a valid number or range
    """
    response = response.strip().lower()
    if not response:
        return []
    if response in ('a', 'all'):
        return list(options)

    chosen = set()
    for token in response.replace(',', ' ').split():
        if '-' in token:
            start_text, _, end_text = token.partition('-')
            if not (start_text.isdigit() and end_text.isdigit()):
                raise ValueError(f"'{token}' is not a range")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"'{token}' is an empty range")
            indexes = range(start, end + 1)
        elif token.isdigit():
            indexes = [int(token)]
        else:
            raise ValueError(f"'{token}' is not a number")

        for index in indexes:
            if not 1 <= index <= len(options):
                raise ValueError(f"{index} is out of range (1-{len(options)})")
            chosen.add(index - 1)

    return [options[i] for i in sorted(chosen)]


def prompt_selection(options: List[str], message: str = "Select authors to remove") -> List[str]:
    """Ask the operator to pick any number of `options`.

    Raises:
        click.Abort: if input is closed or the operator interrupts
    """
    if not options:
        return []

    click.echo(f"{message}:")
    for i, option in enumerate(options, 1):
        click.echo(f"  [{i}] {option}")
    click.echo()

    while True:
        response = click.prompt(
            "Numbers or ranges (e.g. 1,3 or 2-4), 'all', or blank for none",
            type=str,
            default='',
            show_default=False,
        )
        try:
            selected = parse_selection(response, options)
        except ValueError as e:
            click.echo(f"Invalid selection: {e}")
            continue

        logger.debug(f"Selected {len(selected)} of {len(options)} options")
        return selected
