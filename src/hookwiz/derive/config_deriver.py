"""Derive packages, config files and the lint-staged config from Answers.

Every function here is pure: the same Answers always produce the same
output, and nothing touches the filesystem.

Note on lint-staged: eslint and prettier both register '*.js'. The rules
are emitted as two separate keys in declaration order, so when the file
is loaded as a JavaScript object the prettier rule replaces the eslint
one. shadowed_patterns() reports such collisions.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List, Tuple

from hookwiz.derive.tools import TOOLS, LintStagedRule
from hookwiz.templates.template_renderer import render_template

BASE_DEPENDENCIES = ("husky", "lint-staged")
LINT_STAGED_PATH = ".lintstagedrc.js"


@dataclass(frozen=True)
class FileSpec:
    path: str
    content: str


@dataclass(frozen=True)
class DerivedConfig:
    dependencies: Tuple[str, ...]
    files: Tuple[FileSpec, ...]
    lint_staged_rules: Tuple[LintStagedRule, ...]
    lint_staged_source: str


def _enabled_tools(answers):
    return [tool for tool in TOOLS if answers.is_enabled(tool.flag)]


def derive_dependencies(answers) -> List[str]:
    return list(BASE_DEPENDENCIES) + [tool.package for tool in _enabled_tools(answers)]


def derive_file_specs(answers) -> List[FileSpec]:
    return [
        FileSpec(tool.config_path, render_template(tool.template, **tool.template_kwargs()))
        for tool in _enabled_tools(answers)
    ]


def derive_lint_staged_rules(answers) -> List[LintStagedRule]:
    return [tool.lint_rule for tool in _enabled_tools(answers) if tool.lint_rule is not None]


def render_lint_staged(rules) -> str:
    return render_template("lintstagedrc.js.j2", rules=rules)


def shadowed_patterns(rules) -> List[str]:
    """Patterns that more than one rule uses, in first-seen order."""
    counts = Counter(rule.pattern for rule in rules)
    return [pattern for pattern in counts if counts[pattern] > 1]


def derive_config(answers) -> DerivedConfig:
    """Build the complete DerivedConfig for a finished set of answers."""
    rules = derive_lint_staged_rules(answers)
    return DerivedConfig(
        dependencies=tuple(derive_dependencies(answers)),
        files=tuple(derive_file_specs(answers)),
        lint_staged_rules=tuple(rules),
        lint_staged_source=render_lint_staged(rules),
    )
