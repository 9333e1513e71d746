"""Exceptions raised by the provisioning pipeline."""

from pathlib import Path
from typing import Optional, Sequence


class ProvisionError(Exception):
    """Base class for provisioning failures.

    Attributes:
        step: Label of the pipeline step that failed (None for precondition checks)
    """

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.step = step


class DestinationExistsError(ProvisionError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path):
        super().__init__(f"Destination already exists: {path}")
        self.path = path


class ExternalCommandError(ProvisionError):
    """Raised when an external command fails or cannot be started."""

    def __init__(
        self,
        step: str,
        cmd: Sequence[str],
        returncode: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        command = " ".join(cmd)
        if reason is None:
            reason = f"exited with status {returncode}"
        super().__init__(f"{step} failed: `{command}` {reason}", step=step)
        self.cmd = list(cmd)
        self.returncode = returncode


class ManifestError(ProvisionError):
    """Raised when package.json cannot be read, parsed, or updated."""

    pass


class ProvisionStepError(ProvisionError):
    """Raised when a step fails while writing to the filesystem."""

    pass


class CheckpointError(ProvisionError):
    """Raised when a previous run cannot be resumed."""

    pass
