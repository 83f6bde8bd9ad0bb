"""ScaffoldExecutor: apply a DerivedConfig to a project."""

import sys

from hookwiz.derive.config_deriver import LINT_STAGED_PATH
from hookwiz.scaffold.command_runner import format_command

PRE_COMMIT_HOOK = ".husky/pre-commit"
PRE_COMMIT_COMMAND = "npx lint-staged"


def build_install_command(dependencies):
    return ["npm", "install", "--save-dev"] + list(dependencies)


def build_hook_commands():
    return [
        ["npx", "husky", "install"],
        ["npx", "husky", "add", PRE_COMMIT_HOOK, PRE_COMMIT_COMMAND],
    ]


class ScaffoldExecutor:
    """Writes config files and runs npm/husky for a DerivedConfig.

    Args:
        file_writer: Object with write_text(path, content).
        command_runner: Object with run(cmd) that raises RuntimeError on failure.

    Steps run in a fixed order and the first failure propagates, leaving
    later steps undone. Files already written are not removed.
    """

    def __init__(self, file_writer, command_runner):
        self._file_writer = file_writer
        self._command_runner = command_runner

    def execute(self, config):
        for spec in config.files:
            self._write(spec.path, spec.content)

        self._run(build_install_command(config.dependencies))
        for cmd in build_hook_commands():
            self._run(cmd)

        self._write(LINT_STAGED_PATH, config.lint_staged_source)

    def _write(self, path, content):
        print(f"Writing {path}", file=sys.stderr)
        self._file_writer.write_text(path, content)

    def _run(self, cmd):
        print(f"Running: {format_command(cmd)}", file=sys.stderr)
        self._command_runner.run(cmd)
