"""Work-tree traversal."""

import os
from pathlib import Path
from typing import Callable, List

ExclusionPredicate = Callable[[str, bool], bool]
FileLister = Callable[[Path], List[str]]


def list_trackable_files(root: Path, is_excluded: ExclusionPredicate) -> List[str]:
    """
    List files under root that are not excluded.
    
    Excluded directories are pruned without descending into them.
    
    Args:
        root: Work-tree root
        is_excluded: Called with (relative posix path, is_dir)
        
    Returns:
        Sorted relative posix paths of regular files
    """
    root = Path(root)
    found = []
    
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root)
        
        kept = []
        for name in sorted(dirnames):
            rel = (rel_dir / name).as_posix()
            if not is_excluded(rel, True):
                kept.append(name)
        dirnames[:] = kept
        
        for name in filenames:
            full = Path(dirpath) / name
            rel = (rel_dir / name).as_posix()
            if full.is_file() and not is_excluded(rel, False):
                found.append(rel)
    
    return sorted(found)


def make_file_lister(is_excluded: ExclusionPredicate) -> FileLister:
    """Bind an exclusion predicate into a root -> paths lister."""
    def lister(root: Path) -> List[str]:
        return list_trackable_files(root, is_excluded)
    return lister
