"""Utilities: ignore rules and work-tree traversal."""

from twig.utils.ignore import IgnoreMatcher, get_ignore_matcher
from twig.utils.files import list_trackable_files, make_file_lister

__all__ = [
    'IgnoreMatcher', 'get_ignore_matcher',
    'list_trackable_files', 'make_file_lister',
]
