"""Options dataclass for the init command."""

from dataclasses import dataclass


@dataclass
class InitOpts:
    """All options for the init command."""

    target_dir: str = "."
    dry_run: bool = False
    skip_git_check: bool = False

    @property
    def needs_git_check(self):
        return not (self.dry_run or self.skip_git_check)
