"""Stash command for Twig."""

import click
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.output import success, info, fail


@click.command('stash')
def stash_cmd():
    """
    Save the staged files to the stash log and empty the index.
    
    The stash log only grows; saved entries are kept in .twig/stash.
    """
    try:
        repo = Repository.open()
        with repo.lock():
            entry = repo.stash.push()
            total = len(repo.stash)
    except TwigError as e:
        fail('stash', e)
    
    if entry.files:
        click.echo(success(f"Changes stashed successfully ({len(entry.files)} file(s))"))
    else:
        click.echo(info("Index was empty; recorded an empty stash entry"))
    click.echo(info(f"Stash log now holds {total} entr{'y' if total == 1 else 'ies'}"))
