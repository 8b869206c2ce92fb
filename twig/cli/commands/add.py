"""Add command - stage files for commit."""

import click
from pathlib import Path
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.utils.ignore import get_ignore_matcher
from twig.cli.output import success, error, info, warning, fail


def collect_paths(repo, patterns, force):
    """
    Expand command-line paths into work-tree relative file paths.
    
    '.' means every trackable file. A directory means every trackable file
    below it. A single ignored file is skipped unless force is set.
    
    Returns:
        (paths, ignored, missing)
    """
    matcher = get_ignore_matcher(repo.work_tree)
    trackable = None
    
    paths, ignored, missing = [], [], []
    
    for pattern in patterns:
        resolved = Path(pattern)
        if not resolved.is_absolute():
            resolved = Path.cwd() / resolved
        
        if pattern == '.' or resolved.is_dir():
            if trackable is None:
                trackable = repo.list_files()
            prefix = repo.relative_path(resolved) if resolved.resolve() != repo.work_tree else ''
            if prefix and prefix != '.':
                paths.extend(p for p in trackable if p.startswith(prefix + '/'))
            else:
                paths.extend(trackable)
            continue
        
        if not resolved.exists():
            missing.append(pattern)
            continue
        
        rel_path = repo.relative_path(resolved)
        if not force and matcher.is_ignored(rel_path):
            ignored.append(rel_path)
            continue
        paths.append(rel_path)
    
    return paths, ignored, missing


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
@click.option('-f', '--force', is_flag=True, help='Add ignored files')
def add_cmd(paths, force):
    """
    Add file contents to the staging area.
    
    Each file is stored in the object store and appended to the index.
    Modified files must be added again to stage the new content.
    
    Files matching patterns in .twigignore are skipped unless --force is used.
    
    Examples:
        twig add file.txt
        twig add src/
        twig add .
        twig add -f ignored_file.txt
    """
    try:
        repo = Repository.open()
        
        with repo.lock():
            rel_paths, ignored, missing = collect_paths(repo, paths, force)
            
            if missing:
                for pattern in missing:
                    click.echo(error(f"pathspec '{pattern}' did not match any files"), err=True)
                raise click.exceptions.Exit(1)
            
            added = repo.index.add_all(lambda root: rel_paths)
    except TwigError as e:
        fail('add', e)
    
    if added:
        click.echo(success(f"Added {len(added)} file(s) to staging area"))
        for entry in added:
            click.echo(info(f"  {entry.path}"))
    
    if ignored:
        click.echo(warning(f"Ignored {len(ignored)} file(s) matching .twigignore patterns"))
        for path in ignored:
            click.echo(warning(f"  {path}"))
        click.echo(info("Use 'twig add -f <file>' to force add ignored files"))
    
    if not added and not ignored:
        click.echo(info("No files matched"))
