"""Initialize a new Twig repository."""

import click
from pathlib import Path
from twig.core.errors import TwigError
from twig.core.repository import Repository
from twig.cli.output import success, info, fail


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Twig repository.
    
    Creates a .twig directory with the object store, HEAD, index and
    stash files. Running it in an existing repository changes nothing.
    
    Examples:
        twig init                    # Initialize in current directory
        twig init my-project         # Initialize in my-project directory
    """
    try:
        repo_path = Path(path).resolve()
        
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        
        repo = Repository(str(repo_path))
        created = repo.init()
    except (TwigError, OSError) as e:
        fail('init', e)
    
    if not created:
        click.echo(info(f"Twig repository already initialized in {repo.twig_dir}"))
        return
    
    click.echo(success(f"Initialized empty Twig repository in {repo.twig_dir}"))
    click.echo(info("Start tracking files with:"))
    click.echo(info("  twig add <file>"))
    click.echo(info("  twig commit \"message\""))
