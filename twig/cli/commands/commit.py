"""Commit command - create a commit from staged changes."""

import click
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.output import success, info, warning, fail


@click.command('commit')
@click.argument('message', required=False)
@click.option('-m', '--message', 'message_opt', help='Commit message')
def commit_cmd(message, message_opt):
    """
    Record the staged files as a new commit.
    
    The commit stores the whole staged file list, links to the current
    HEAD as its parent, moves HEAD to the new commit and empties the index.
    
    Examples:
        twig commit "Initial commit"
        twig commit -m "Add feature"
    """
    message = message_opt or message
    if not message:
        click.echo(warning("Commit message required: twig commit \"message\""), err=True)
        raise click.exceptions.Exit(1)
    
    try:
        repo = Repository.open()
        
        with repo.lock():
            staged = len(repo.index)
            if staged == 0:
                click.echo(warning("Nothing staged; recording an empty commit"))
            
            parent = repo.commits.head()
            commit_hash = repo.commits.commit(message)
    except TwigError as e:
        fail('commit', e)
    
    click.echo(success(f"Commit successfully created: {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    click.echo(info(f"Parent: {parent[:7]}" if parent else "(root commit)"))
    click.echo(info(f"Files: {staged}"))
