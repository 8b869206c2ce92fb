"""Tests for ignore rules and work-tree listing."""

import pytest
from twig.utils.ignore import IgnoreMatcher, get_ignore_matcher
from twig.utils.files import list_trackable_files


def test_builtin_twig_dir_ignored():
    matcher = IgnoreMatcher()
    assert matcher.is_ignored('.twig', is_dir=True)
    assert matcher.is_ignored('.twig/HEAD')
    assert not matcher.is_ignored('a.txt')


def test_glob_patterns():
    matcher = IgnoreMatcher(['*.pyc', 'build/', '/top.txt'])
    
    assert matcher.is_ignored('module.pyc')
    assert matcher.is_ignored('pkg/module.pyc')
    assert matcher.is_ignored('build', is_dir=True)
    assert matcher.is_ignored('top.txt')
    assert not matcher.is_ignored('sub/top.txt')
    assert not matcher.is_ignored('module.py')


def test_negation():
    matcher = IgnoreMatcher(['*.log', '!keep.log'])
    assert matcher.is_ignored('debug.log')
    assert not matcher.is_ignored('keep.log')


def test_comments_and_blank_lines():
    matcher = IgnoreMatcher(['# comment', '', 'secret.txt'])
    assert matcher.is_ignored('secret.txt')
    assert not matcher.is_ignored('# comment')


def test_load_ignore_file(temp_dir):
    (temp_dir / '.twigignore').write_text('*.tmp\n')
    matcher = get_ignore_matcher(temp_dir)
    assert matcher.is_ignored('x.tmp')


def test_missing_ignore_file(temp_dir):
    matcher = IgnoreMatcher()
    assert not matcher.load_file(temp_dir / '.twigignore')


def test_list_trackable_files(temp_dir):
    for rel in ('a.txt', 'src/b.py', 'src/c.pyc', 'build/out', '.twig/HEAD'):
        path = temp_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('x')
    
    matcher = IgnoreMatcher(['*.pyc', 'build/'])
    
    assert list_trackable_files(temp_dir, matcher.is_ignored) == ['a.txt', 'src/b.py']


def test_excluded_directories_are_pruned(temp_dir):
    (temp_dir / 'skip').mkdir()
    (temp_dir / 'skip' / 'f.txt').write_text('x')
    visited = []
    
    def is_excluded(path, is_dir):
        visited.append(path)
        return path == 'skip'
    
    assert list_trackable_files(temp_dir, is_excluded) == []
    assert 'skip/f.txt' not in visited
