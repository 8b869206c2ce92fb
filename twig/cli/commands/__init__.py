"""CLI commands for Twig."""

from twig.cli.commands.init import init_cmd
from twig.cli.commands.add import add_cmd
from twig.cli.commands.commit import commit_cmd
from twig.cli.commands.log import log_cmd
from twig.cli.commands.show import show_cmd
from twig.cli.commands.status import status_cmd
from twig.cli.commands.stash import stash_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'show_cmd',
           'status_cmd', 'stash_cmd']
