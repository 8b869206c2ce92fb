"""Status command - show working tree status."""

import click
from colorama import Fore
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.output import success, info, section, styled, fail


@click.command('status')
def status_cmd():
    """
    Show the working tree status.
    
    Displays:
    - Changes to be committed (everything in the index)
    - Changes not staged for commit (differs from HEAD, not staged)
    - Untracked files (not in HEAD, not staged)
    
    Examples:
        twig status
    """
    try:
        repo = Repository.open()
        report = repo.status.compute()
        head = repo.commits.head()
    except TwigError as e:
        fail('status', e)
    
    if head:
        click.echo(f"HEAD at {styled(head[:7], Fore.CYAN)}")
    else:
        click.echo("No commits yet")
    click.echo()
    
    if report.staged:
        section("Changes to be committed:", Fore.GREEN)
        for path in report.staged:
            click.echo("  " + styled(f"staged:     {path}", Fore.GREEN))
        click.echo()
    
    if report.modified:
        section("Changes not staged for commit:", Fore.YELLOW)
        click.echo(info("  (use \"twig add <file>...\" to update what will be committed)"))
        for path in report.modified:
            click.echo("  " + styled(f"modified:   {path}", Fore.YELLOW))
        click.echo()
    
    if report.untracked:
        section("Untracked files:", Fore.RED)
        click.echo(info("  (use \"twig add <file>...\" to include in what will be committed)"))
        for path in report.untracked:
            click.echo("  " + styled(f"new file:   {path}", Fore.RED))
        click.echo()
    
    if report.clean:
        click.echo(success("Nothing to commit, working tree clean"))
