"""Core functionality for Twig.

This module contains the core data structures:
- Twig objects (Blob, Commit)
- Object store
- Index/staging area
- Commit graph and HEAD
- Repository context, configuration and locking
- Hashing utilities

For status, diff and stash, see twig.operations
For ignore rules and work-tree listing, see twig.utils
"""

from twig.core.objects import TwigObject, Blob, Commit
from twig.core.store import ObjectStore
from twig.core.index import Index, IndexEntry
from twig.core.history import CommitGraph
from twig.core.repository import Repository
from twig.core.config import Config, get_config
from twig.core.lock import RepositoryLock
from twig.core.hash import hash_object, is_digest
from twig.core.errors import (
    TwigError,
    StoreWriteError,
    ObjectNotFound,
    RepositoryNotInitialized,
    PathNotFound,
    RepositoryLocked,
    MetadataCorrupted,
)

__all__ = [
    'TwigObject',
    'Blob',
    'Commit',
    'ObjectStore',
    'Index',
    'IndexEntry',
    'CommitGraph',
    'Repository',
    'Config',
    'get_config',
    'RepositoryLock',
    'hash_object',
    'is_digest',
    'TwigError',
    'StoreWriteError',
    'ObjectNotFound',
    'RepositoryNotInitialized',
    'PathNotFound',
    'RepositoryLocked',
    'MetadataCorrupted',
]
