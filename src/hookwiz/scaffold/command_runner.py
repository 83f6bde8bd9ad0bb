"""Run external tools (npm, npx) with the terminal inherited."""

import shlex
import subprocess
from typing import List


def format_command(cmd: List[str]) -> str:
    return shlex.join(cmd)


class SubprocessCommandRunner:
    """Runs commands synchronously in a working directory.

    Output is not captured so npm progress is shown to the user directly.
    """

    def __init__(self, cwd: str = "."):
        self._cwd = cwd

    def run(self, cmd: List[str]) -> None:
        """Run cmd, raising RuntimeError on launch failure or non-zero exit."""
        try:
            result = subprocess.run(cmd, cwd=self._cwd)
        except OSError as e:
            raise RuntimeError(f"Error running command {format_command(cmd)}: {e}") from e
        if result.returncode != 0:
            raise RuntimeError(
                f"Error: Command failed with exit code {result.returncode}: {format_command(cmd)}"
            )
