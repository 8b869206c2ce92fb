"""Unit tests for the diff engine."""

import pytest
from twig.operations.diff import (
    ADDED, REMOVED, UNCHANGED, FIRST_COMMIT, NEW_FILE, MODIFIED,
    DiffHunk, FileDiff, diff_lines,
)


def tags(hunks):
    return [(h.tag, h.value) for h in hunks]


def test_diff_lines_identical():
    assert tags(diff_lines('a\nb\n', 'a\nb\n')) == [(UNCHANGED, 'a\nb\n')]


def test_diff_lines_replacement():
    assert tags(diff_lines('hello', 'world')) == [
        (REMOVED, 'hello'),
        (ADDED, 'world'),
    ]


def test_diff_lines_insertion_in_middle():
    assert tags(diff_lines('a\nc\n', 'a\nb\nc\n')) == [
        (UNCHANGED, 'a\n'),
        (ADDED, 'b\n'),
        (UNCHANGED, 'c\n'),
    ]


def test_diff_lines_deletion_at_end():
    assert tags(diff_lines('a\nb\nc\n', 'a\n')) == [
        (UNCHANGED, 'a\n'),
        (REMOVED, 'b\nc\n'),
    ]


def test_diff_lines_groups_contiguous_runs():
    hunks = list(diff_lines('1\n2\n3\n', 'x\ny\n3\n'))
    assert [h.tag for h in hunks] == [REMOVED, ADDED, UNCHANGED]
    assert hunks[0].lines == ['1\n', '2\n']
    assert hunks[1].lines == ['x\n', 'y\n']


def test_diff_lines_empty_inputs():
    assert list(diff_lines('', '')) == []
    assert tags(diff_lines('', 'new\n')) == [(ADDED, 'new\n')]


def test_diff_lines_is_lazy():
    result = diff_lines('a', 'b')
    assert next(result).tag == REMOVED


def test_hunk_flags_and_equality():
    hunk = DiffHunk(ADDED, ['x\n'])
    assert hunk.added and not hunk.removed
    assert hunk == DiffHunk(ADDED, ['x\n'])
    assert hunk != DiffHunk(REMOVED, ['x\n'])


def test_file_diff_new_file_has_no_hunks():
    diff = FileDiff('a.txt', NEW_FILE, b'content\n')
    diff.compute_diff()
    assert diff.is_new
    assert diff.hunks == []


def test_file_diff_modified():
    diff = FileDiff('a.txt', MODIFIED, b'new\n', b'old\n')
    diff.compute_diff()
    assert diff.is_modified
    assert diff.has_changes
    assert tags(diff.hunks) == [(REMOVED, 'old\n'), (ADDED, 'new\n')]


def commit_files(repo, write_file, message, files):
    for path, content in files.items():
        write_file(path, content)
        repo.index.add_file(path)
    return repo.commits.commit(message)


def test_diff_commit_first_commit(repo, write_file):
    digest = commit_files(repo, write_file, 'first', {'a.txt': 'hello'})
    
    diffs = repo.diff.diff_commit(digest)
    
    assert len(diffs) == 1
    assert diffs[0].kind == FIRST_COMMIT
    assert diffs[0].hunks == []


def test_diff_commit_modified_file(repo, write_file):
    commit_files(repo, write_file, 'first', {'a.txt': 'hello'})
    second = commit_files(repo, write_file, 'second', {'a.txt': 'world'})
    
    diffs = repo.diff.diff_commit(second)
    
    assert diffs[0].kind == MODIFIED
    assert tags(diffs[0].hunks) == [(REMOVED, 'hello'), (ADDED, 'world')]


def test_diff_commit_new_file_not_diffed_against_empty(repo, write_file):
    commit_files(repo, write_file, 'first', {'a.txt': 'hello'})
    second = commit_files(repo, write_file, 'second', {'b.txt': 'brand new\n'})
    
    diffs = repo.diff.diff_commit(second)
    
    assert [(d.path, d.kind) for d in diffs] == [('b.txt', NEW_FILE)]
    assert diffs[0].hunks == []
    assert diffs[0].new_content == b'brand new\n'


def test_diff_commit_missing_commit(repo):
    from twig.core.errors import ObjectNotFound
    with pytest.raises(ObjectNotFound):
        repo.diff.diff_commit('a' * 40)


def test_format_diff_plain(repo, write_file):
    commit_files(repo, write_file, 'first', {'a.txt': 'hello'})
    second = commit_files(repo, write_file, 'second', {'a.txt': 'world', 'b.txt': 'b'})
    
    output = repo.diff.format_diff(repo.diff.diff_commit(second), color=False)
    
    assert output.splitlines() == [
        'File: a.txt',
        '-hello',
        '+world',
        '',
        'File: b.txt',
        'New file in this commit',
        'b',
    ]


def test_format_diff_first_commit(repo, write_file):
    digest = commit_files(repo, write_file, 'first', {'a.txt': 'hello'})
    output = repo.diff.format_diff(repo.diff.diff_commit(digest), color=False)
    assert output.splitlines() == ['File: a.txt', 'First commit', 'hello']


def test_modified_binary_content_is_decoded_with_replacement():
    diff = FileDiff('data.bin', MODIFIED, b'ok \xff\n', b'ok\n')
    diff.compute_diff()
    assert tags(diff.hunks) == [(REMOVED, 'ok\n'), (ADDED, 'ok �\n')]
