"""Click command for the init workflow."""

import sys

import click

from hookwiz.init_cmd.init_command import InitCommand
from hookwiz.init_cmd.init_opts import InitOpts
from hookwiz.scaffold.command_runner import SubprocessCommandRunner
from hookwiz.scaffold.executor import ScaffoldExecutor
from hookwiz.scaffold.file_writer import LocalFileWriter


@click.command("init")
@click.option(
    "--target-dir", default=".", show_default=True,
    type=click.Path(file_okay=False),
    help="Project directory to scaffold.",
)
@click.option("--dry-run", is_flag=True, help="Show packages, files and commands without running anything.")
@click.option("--skip-git-check", is_flag=True, help="Do not require the target to be a Git repository.")
def init_cmd(target_dir, dry_run, skip_git_check):
    """Ask which tools to use and set up Git pre-commit hooks."""
    opts = InitOpts(target_dir=target_dir, dry_run=dry_run, skip_git_check=skip_git_check)
    executor = ScaffoldExecutor(LocalFileWriter(target_dir), SubprocessCommandRunner(target_dir))
    try:
        InitCommand(opts, executor).execute()
    except RuntimeError as exc:
        click.echo(str(exc), err=True)
        sys.exit(1)
