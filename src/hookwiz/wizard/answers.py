"""Answers collected by the setup wizard."""

from dataclasses import dataclass, field, replace
from typing import Dict, List

TOOL_FLAGS = (
    "eslint",
    "prettier",
    "stylelint",
    "secretlint",
    "phpcs",
    "validate_branch_name",
    "jira_prepare_commit",
)


def _all_disabled():
    return dict.fromkeys(TOOL_FLAGS, False)


@dataclass(frozen=True)
class Answers:
    """User responses for one wizard run.

    Values are never mutated in place; the setters return a new Answers.
    """

    docroot: str = ""
    tool_flags: Dict[str, bool] = field(default_factory=_all_disabled)

    def with_docroot(self, docroot: str) -> "Answers":
        return replace(self, docroot=docroot)

    def with_flag(self, flag: str, enabled: bool) -> "Answers":
        """Return a copy with one tool flag set.

        Raises:
            KeyError: If flag is not one of TOOL_FLAGS.
        """
        if flag not in TOOL_FLAGS:
            raise KeyError(f"Unknown tool flag: {flag}")
        flags = dict(self.tool_flags)
        flags[flag] = enabled
        return replace(self, tool_flags=flags)

    def is_enabled(self, flag: str) -> bool:
        return self.tool_flags[flag]

    def enabled_tools(self) -> List[str]:
        """Enabled tool flags, in declaration order."""
        return [flag for flag in TOOL_FLAGS if self.tool_flags[flag]]
