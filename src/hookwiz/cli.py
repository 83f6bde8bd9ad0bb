"""Top-level Click group for the hookwiz CLI."""

import click

from hookwiz.init_cmd.cli import init_cmd


@click.group()
def main():
    """hookwiz - set up linters and Git pre-commit hooks for a project."""


main.add_command(init_cmd)
