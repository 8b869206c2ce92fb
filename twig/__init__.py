"""Twig - a minimal content-addressed version control system."""

__version__ = '0.1.0'

from twig.core.repository import Repository
from twig.core.objects import TwigObject, Blob, Commit

__all__ = [
    'Repository',
    'TwigObject',
    'Blob',
    'Commit',
]
