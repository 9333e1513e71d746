"""External command execution.

Commands run synchronously with stdio inherited from the parent process so the
scaffolder and installer output reaches the user's terminal unchanged.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from eletract.errors import ExternalCommandError

logger = logging.getLogger(__name__)


def resolve_command(cmd: Sequence[str]) -> list[str]:
    """Resolve the executable of a command through PATH.

    Uses the full path found by shutil.which so that wrapper scripts such as
    npm.cmd are found on Windows. Falls back to the bare name if not found.
    """
    if not cmd:
        raise ValueError("Command must not be empty")
    executable = shutil.which(cmd[0])
    return [executable or cmd[0], *cmd[1:]]


class CommandRunner:
    """Run external commands and turn failures into ExternalCommandError."""

    def run(self, cmd: Sequence[str], cwd: Path, step: str) -> None:
        """Run a command to completion.

        Args:
            cmd: Command to execute as list of strings
            cwd: Working directory for the command
            step: Human-readable label of the pipeline step, used in errors

        Raises:
            ExternalCommandError: If the command exits non-zero or cannot start
        """
        resolved = resolve_command(cmd)
        logger.info(f"Running in {cwd}: {' '.join(cmd)}")

        try:
            result = subprocess.run(resolved, cwd=cwd)
        except OSError as e:
            raise ExternalCommandError(step, cmd, reason=f"could not be started: {e}") from e

        if result.returncode != 0:
            logger.error(f"{' '.join(cmd)} exited with status {result.returncode}")
            raise ExternalCommandError(step, cmd, returncode=result.returncode)

        logger.debug(f"{' '.join(cmd)} completed")
