"""Ignore rules for .twigignore files."""

from pathlib import Path
from typing import Iterable, List

import pathspec

IGNORE_FILE = '.twigignore'

# Always excluded, whatever the ignore file says
BUILTIN_PATTERNS = ['.twig/']


class IgnoreMatcher:
    """
    Matches work-tree paths against gitignore-style patterns.
    
    Pattern syntax (negation, anchoring, directory-only, **) is handled by
    pathspec's gitwildmatch implementation.
    """
    
    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[str] = list(BUILTIN_PATTERNS)
        self.patterns.extend(patterns)
        self._spec = self._build()
    
    def _build(self) -> pathspec.PathSpec:
        return pathspec.PathSpec.from_lines('gitwildmatch', self.patterns)
    
    def add_patterns(self, patterns: Iterable[str]) -> None:
        self.patterns.extend(patterns)
        self._spec = self._build()
    
    def load_file(self, path: Path) -> bool:
        """
        Load patterns from an ignore file.
        
        Returns:
            True if the file existed and was read
        """
        if not path.is_file():
            return False
        
        self.add_patterns(path.read_text(encoding='utf-8', errors='replace').splitlines())
        return True
    
    def is_ignored(self, path: str, is_dir: bool = False) -> bool:
        """
        Check if a path should be ignored.
        
        Args:
            path: Path relative to the work tree, '/'-separated
            is_dir: Whether the path is a directory
        """
        path = path.replace('\\', '/')
        if path.startswith('./'):
            path = path[2:]
        if is_dir and not path.endswith('/'):
            path += '/'
        return self._spec.match_file(path)


def get_ignore_matcher(repo_root: Path) -> IgnoreMatcher:
    """
    Create an IgnoreMatcher for a repository.
    
    Loads built-in patterns plus the repository's .twigignore, if any.
    """
    matcher = IgnoreMatcher()
    matcher.load_file(Path(repo_root) / IGNORE_FILE)
    return matcher
