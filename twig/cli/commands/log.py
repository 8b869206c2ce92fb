"""Log command - show commit history."""

import click
from datetime import datetime
from colorama import Fore, Style
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.output import info, fail


def format_timestamp(timestamp: str) -> str:
    """Format an ISO-8601 timestamp for display; unparsable values pass through."""
    try:
        dt = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
    except ValueError:
        return timestamp
    return dt.strftime("%a %b %d %H:%M:%S %Y %z")


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits')
@click.option('--oneline', is_flag=True, help='Show one commit per line')
def log_cmd(max_count, oneline):
    """
    Show commit history.
    
    Walks parent links from HEAD back to the first commit, newest first.
    
    Examples:
        twig log
        twig log -n 5
        twig log --oneline
    """
    try:
        repo = Repository.open()
        
        shown = 0
        for commit_hash, commit in repo.commits.log():
            if max_count is not None and shown >= max_count:
                break
            
            if oneline:
                subject = commit.message.split('\n')[0]
                click.echo(f"{Fore.YELLOW}{commit_hash[:7]}{Style.RESET_ALL} {subject}")
            else:
                click.echo(f"{Fore.YELLOW}commit {commit_hash}{Style.RESET_ALL}")
                click.echo(f"Date:   {format_timestamp(commit.timestamp)}")
                click.echo()
                for line in commit.message.split('\n'):
                    click.echo(f"    {line}")
                click.echo()
            shown += 1
    except TwigError as e:
        fail('log', e)
    
    if shown == 0:
        click.echo(info("No commits yet"))
