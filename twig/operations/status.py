"""Working tree status: staged, modified and untracked files."""

import logging
from dataclasses import dataclass, field
from typing import List

from twig.core.hash import hash_object

logger = logging.getLogger(__name__)


@dataclass
class StatusReport:
    """
    Classification of paths.
    
    staged: every path present in the index
    modified: in the work tree, not staged, recorded in HEAD with other content
    untracked: in the work tree, not staged, absent from HEAD
    """
    staged: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)
    
    @property
    def clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)


class StatusEngine:
    """
    Compares the work tree, the index and the HEAD commit.
    
    Read-only. The work tree is seen only through the repository's file
    lister and reader.
    """
    
    def __init__(self, repo):
        """
        Initialize status engine.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
    
    def compute(self) -> StatusReport:
        """
        Classify every staged and work-tree path.
        
        Returns:
            StatusReport
        """
        report = StatusReport()
        
        staged = self.repo.index.paths()
        report.staged = staged
        staged_set = set(staged)
        
        head_commit = self.repo.commits.head_commit()
        head_files = head_commit.file_map() if head_commit else {}
        
        for path in self.repo.list_files():
            if path in staged_set:
                continue
            
            if path not in head_files:
                report.untracked.append(path)
                continue
            
            current = hash_object(self.repo.read_working_file(path))
            if current != head_files[path]:
                report.modified.append(path)
        
        logger.debug("status: %d staged, %d modified, %d untracked",
                     len(report.staged), len(report.modified), len(report.untracked))
        return report
