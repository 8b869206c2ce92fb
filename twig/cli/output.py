"""CLI output utilities and formatting."""

import click
from colorama import Fore, Style

BANNER = f"""
{Fore.GREEN}{Style.BRIGHT}  twig{Style.RESET_ALL} {Fore.WHITE}- a minimal content-addressed version control system{Style.RESET_ALL}
"""


def styled(text: str, colour: str, symbol: str = '') -> str:
    """Wrap text in a colorama colour, optionally prefixed with a symbol."""
    prefix = f"{symbol} " if symbol else ''
    return f"{colour}{prefix}{text}{Style.RESET_ALL}"


def success(message: str) -> str:
    return styled(message, Fore.GREEN, '✓')


def info(message: str) -> str:
    return styled(message, Fore.CYAN, '→')


def warning(message: str) -> str:
    return styled(message, Fore.YELLOW, '⚠')


def error(message: str) -> str:
    return styled(message, Fore.RED, '✗')


def section(title: str, colour: str) -> None:
    """Print a status-style section heading."""
    click.echo(styled(title, colour))


def fail(operation: str, exc: Exception) -> None:
    """Report a failed operation on stderr and exit with status 1."""
    click.echo(error(f"{operation} failed: {exc}"), err=True)
    raise click.exceptions.Exit(1)
