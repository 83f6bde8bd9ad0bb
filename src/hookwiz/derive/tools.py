"""Static per-tool table: npm package, config file and lint-staged rule."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class LintStagedRule:
    pattern: str
    commands: Tuple[str, ...]


@dataclass(frozen=True)
class ToolSpec:
    """One optional development tool offered by the wizard.

    template/template_vars describe how the tool's config file content is
    rendered; lint_rule is None for tools that do not run on staged files.
    """

    flag: str
    package: str
    config_path: str
    template: str
    template_vars: Tuple[Tuple[str, str], ...] = ()
    lint_rule: Optional[LintStagedRule] = None

    def template_kwargs(self) -> Dict[str, str]:
        return dict(self.template_vars)


def _module_exports(label):
    return (("label", label),)


TOOLS = (
    ToolSpec(
        flag="eslint",
        package="eslint",
        config_path=".eslintrc.js",
        template="module_exports.js.j2",
        template_vars=_module_exports("ESLint"),
        lint_rule=LintStagedRule("*.js", ("eslint --fix",)),
    ),
    ToolSpec(
        flag="prettier",
        package="prettier",
        config_path=".prettierrc.js",
        template="module_exports.js.j2",
        template_vars=_module_exports("Prettier"),
        lint_rule=LintStagedRule("*.js", ("prettier --write",)),
    ),
    ToolSpec(
        flag="stylelint",
        package="stylelint",
        config_path=".stylelintrc.js",
        template="module_exports.js.j2",
        template_vars=_module_exports("Stylelint"),
        lint_rule=LintStagedRule("*.css", ("stylelint --fix",)),
    ),
    ToolSpec(
        flag="secretlint",
        package="secretlint",
        config_path=".secretlintrc.js",
        template="module_exports.js.j2",
        template_vars=_module_exports("Secretlint"),
        lint_rule=LintStagedRule("*.*", ("secretlint",)),
    ),
    ToolSpec(
        flag="phpcs",
        package="phpcs",
        config_path="phpcs.xml",
        template="phpcs.xml.j2",
        lint_rule=LintStagedRule("*.php", ("phpcs --standard=phpcs.xml",)),
    ),
    ToolSpec(
        flag="validate_branch_name",
        package="validate-branch-name",
        config_path=".validate-branch-namerc.js",
        template="module_exports.js.j2",
        template_vars=_module_exports("validate-branch-name"),
    ),
    ToolSpec(
        flag="jira_prepare_commit",
        package="jira-prepare-commit-msg",
        config_path=".prepare-commit-msg",
        template="prepare-commit-msg.sh.j2",
    ),
)
