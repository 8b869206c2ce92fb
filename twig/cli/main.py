"""Main CLI entry point for Twig."""

import logging

import click
from colorama import init

from twig import __version__
from twig.cli.output import BANNER
from twig.cli.commands import (init_cmd, add_cmd, commit_cmd, log_cmd,
                               show_cmd, status_cmd, stash_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class TwigGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


def configure_logging(verbose: bool) -> None:
    """Send core log records to stderr; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('twig').setLevel(level)


def verbose_from_config() -> bool:
    from twig.core.config import get_config
    from twig.core.repository import Repository
    
    return get_config(Repository.find_repository()).get_bool('core', 'verbose')


@click.group(cls=TwigGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    configure_logging(verbose or verbose_from_config())


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(log_cmd)
cli.add_command(show_cmd)
cli.add_command(status_cmd)
cli.add_command(stash_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
