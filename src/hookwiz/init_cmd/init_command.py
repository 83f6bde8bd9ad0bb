"""InitCommand wires the question flow, the deriver and the executor together."""

import sys

from hookwiz.derive.config_deriver import LINT_STAGED_PATH, derive_config, shadowed_patterns
from hookwiz.scaffold.command_runner import format_command
from hookwiz.scaffold.executor import build_hook_commands, build_install_command
from hookwiz.scaffold.git_check import ensure_git_repository
from hookwiz.wizard.prompt import ask_questions
from hookwiz.wizard.question_flow import WORKING_STATUS, QuestionFlow


def print_plan(answers, config, output=None):
    """Print what a run would do, without doing it."""
    output = output or sys.stdout
    print(f"Docroot: {answers.docroot}", file=output)
    print(f"Packages: {' '.join(config.dependencies)}", file=output)
    print("Files:", file=output)
    for spec in config.files:
        print(f"  {spec.path}", file=output)
    print(f"  {LINT_STAGED_PATH}", file=output)
    print("Commands:", file=output)
    for cmd in [build_install_command(config.dependencies)] + build_hook_commands():
        print(f"  {format_command(cmd)}", file=output)
    print(f"{LINT_STAGED_PATH}:", file=output)
    print(config.lint_staged_source, end="", file=output)


def _warn_shadowed_rules(config):
    for pattern in shadowed_patterns(config.lint_staged_rules):
        print(
            f"Warning: several lint-staged rules use '{pattern}'; "
            "only the last one takes effect",
            file=sys.stderr,
        )


class InitCommand:
    """Asks the wizard questions, then scaffolds the project once they are answered."""

    def __init__(self, opts, executor, prompt_config=None):
        self.opts = opts
        self.executor = executor
        self.prompt_config = prompt_config
        self.config = None

    def execute(self):
        if self.opts.needs_git_check:
            ensure_git_repository(self.opts.target_dir)

        flow = QuestionFlow(on_done=self._scaffold, base_dir=self.opts.target_dir)
        return ask_questions(flow, config=self.prompt_config)

    def _scaffold(self, answers):
        print(WORKING_STATUS, end="", file=sys.stderr)
        self.config = derive_config(answers)
        _warn_shadowed_rules(self.config)

        if self.opts.dry_run:
            print_plan(answers, self.config)
            return

        print(f"Docroot: {answers.docroot}", file=sys.stderr)
        self.executor.execute(self.config)
