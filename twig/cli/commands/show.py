"""Show command - display a commit and its per-file diff."""

import click
from colorama import Fore, Style
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.commands.log import format_timestamp
from twig.cli.output import info, fail


@click.command('show')
@click.option('--no-color', is_flag=True, help='Disable colored output')
@click.argument('commit', required=False, default='HEAD')
def show_cmd(no_color, commit):
    """
    Show a commit with the diff of each of its files against the parent.
    
    Files absent from the parent commit are reported as new files.
    
    Examples:
        twig show               # Show HEAD
        twig show 3f2a9c1e      # Show commit by digest prefix
    """
    use_color = not no_color
    
    try:
        repo = Repository.open()
        commit_hash = repo.commits.resolve(commit)
        commit_obj = repo.commits.read_commit(commit_hash)
        diffs = repo.diff.diff_commit(commit_hash)
    except TwigError as e:
        fail('show', e)
    
    header = f"commit {commit_hash}"
    click.echo(f"{Fore.YELLOW}{header}{Style.RESET_ALL}" if use_color else header)
    if commit_obj.parent:
        click.echo(f"Parent: {commit_obj.parent}")
    click.echo(f"Date:   {format_timestamp(commit_obj.timestamp)}")
    click.echo()
    for line in commit_obj.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()
    
    if not diffs:
        click.echo(info("(no files in this commit)"))
        return
    
    click.echo(repo.diff.format_diff(diffs, color=use_color))
