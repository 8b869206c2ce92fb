"""Diff engine for comparing blobs and commits."""

from difflib import SequenceMatcher
from typing import Iterator, List, Optional

from twig.core.objects import Blob

ADDED = 'added'
REMOVED = 'removed'
UNCHANGED = 'unchanged'

FIRST_COMMIT = 'first_commit'
NEW_FILE = 'new_file'
MODIFIED = 'modified'


class DiffHunk:
    """A contiguous run of lines that were all added, removed, or kept."""
    
    def __init__(self, tag: str, lines: List[str]):
        self.tag = tag
        self.lines = lines
    
    @property
    def added(self) -> bool:
        return self.tag == ADDED
    
    @property
    def removed(self) -> bool:
        return self.tag == REMOVED
    
    @property
    def value(self) -> str:
        """The hunk's text, line endings included."""
        return ''.join(self.lines)
    
    def __eq__(self, other) -> bool:
        if not isinstance(other, DiffHunk):
            return NotImplemented
        return self.tag == other.tag and self.lines == other.lines
    
    def __repr__(self) -> str:
        return f"DiffHunk({self.tag}, {len(self.lines)} line(s))"


def diff_lines(old_text: str, new_text: str) -> Iterator[DiffHunk]:
    """
    Line-level diff of two texts.
    
    Uses difflib's longest-matching-block algorithm. A replaced block comes
    out as a removed hunk followed by an added hunk.
    
    Args:
        old_text: Previous content
        new_text: Current content
        
    Yields:
        DiffHunk objects covering both texts in order
    """
    old_lines = old_text.splitlines(keepends=True)
    new_lines = new_text.splitlines(keepends=True)
    
    matcher = SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            yield DiffHunk(UNCHANGED, old_lines[i1:i2])
            continue
        if tag in ('delete', 'replace'):
            yield DiffHunk(REMOVED, old_lines[i1:i2])
        if tag in ('insert', 'replace'):
            yield DiffHunk(ADDED, new_lines[j1:j2])


class FileDiff:
    """
    What one commit did to one path, relative to its parent commit.
    
    kind is one of:
    - first_commit: the commit has no parent
    - new_file: the parent has no entry for the path
    - modified: hunks hold the line diff against the parent's content
    """
    
    def __init__(self, path: str, kind: str, new_content: bytes,
                 old_content: Optional[bytes] = None):
        self.path = path
        self.kind = kind
        self.new_content = new_content
        self.old_content = old_content
        self.hunks: List[DiffHunk] = []
    
    @property
    def is_new(self) -> bool:
        return self.kind == NEW_FILE
    
    @property
    def is_first_commit(self) -> bool:
        return self.kind == FIRST_COMMIT
    
    @property
    def is_modified(self) -> bool:
        return self.kind == MODIFIED
    
    def compute_diff(self) -> None:
        """Compute hunks; only modified files get a line diff."""
        if not self.is_modified:
            return
        self.hunks = list(diff_lines(_decode(self.old_content), _decode(self.new_content)))
    
    @property
    def has_changes(self) -> bool:
        return any(hunk.tag != UNCHANGED for hunk in self.hunks)
    
    def __repr__(self) -> str:
        return f"FileDiff({self.path}, {self.kind}, hunks={len(self.hunks)})"


def _decode(content: Optional[bytes]) -> str:
    return Blob(content).text()


class DiffEngine:
    """
    Computes what a commit changed, file by file.
    
    Every path in the commit's file list is compared with the same path in
    the parent commit. A path missing from the parent is reported as a new
    file without any line diff.
    """
    
    def __init__(self, repo):
        """
        Initialize diff engine.
        
        Args:
            repo: Repository instance
        """
        self.repo = repo
    
    def diff_commit(self, commit_hash: str) -> List[FileDiff]:
        """
        Diff a commit against its parent.
        
        Args:
            commit_hash: Commit digest
            
        Returns:
            One FileDiff per entry of the commit's file list
            
        Raises:
            ObjectNotFound: If the commit, its parent, or a blob is missing
        """
        graph = self.repo.commits
        commit = graph.read_commit(commit_hash)
        parent = graph.read_commit(commit.parent) if commit.parent else None
        
        diffs = []
        for entry in commit.files:
            content = self.repo.store.get(entry.hash)
            
            if parent is None:
                file_diff = FileDiff(entry.path, FIRST_COMMIT, content)
            else:
                old_content = graph.resolve_file_at(parent, entry.path)
                if old_content is None:
                    file_diff = FileDiff(entry.path, NEW_FILE, content)
                else:
                    file_diff = FileDiff(entry.path, MODIFIED, content, old_content)
            
            file_diff.compute_diff()
            diffs.append(file_diff)
        
        return diffs
    
    def format_diff(self, diffs: List[FileDiff], color: bool = True) -> str:
        """
        Format diffs for the terminal.
        
        Args:
            diffs: List of FileDiff objects
            color: Whether to use color output
        
        Returns:
            Formatted diff string
        """
        from colorama import Fore, Style
        
        def paint(text, colour):
            return f"{colour}{text}{Style.RESET_ALL}" if color else text
        
        output = []
        
        for diff in diffs:
            output.append(paint(f"File: {diff.path}", Fore.CYAN))
            
            if diff.is_first_commit:
                output.append("First commit")
                output.extend(_decode(diff.new_content).splitlines())
            elif diff.is_new:
                output.append("New file in this commit")
                output.extend(_decode(diff.new_content).splitlines())
            else:
                for hunk in diff.hunks:
                    for line in hunk.lines:
                        line = line.rstrip('\r\n')
                        if hunk.added:
                            output.append(paint(f"+{line}", Fore.GREEN))
                        elif hunk.removed:
                            output.append(paint(f"-{line}", Fore.RED))
                        else:
                            output.append(paint(f" {line}", Style.DIM))
            
            output.append('')
        
        return '\n'.join(output).rstrip('\n')
