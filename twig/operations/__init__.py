"""Operations module for read-side and stash logic.

This module contains:
- Status computation (work tree vs index vs HEAD)
- Diff computation (commit vs parent)
- Stash log management
"""

from twig.operations.diff import DiffEngine, FileDiff, DiffHunk, diff_lines
from twig.operations.status import StatusEngine, StatusReport
from twig.operations.stash import StashManager, StashEntry

__all__ = [
    'DiffEngine', 'FileDiff', 'DiffHunk', 'diff_lines',
    'StatusEngine', 'StatusReport',
    'StashManager', 'StashEntry',
]
