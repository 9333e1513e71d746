"""Progress tracking for projects being provisioned.

A checkpoint file inside the project records which pipeline steps have
completed, so an interrupted run can be continued with --resume instead of
deleting the half-built project by hand. The file is removed once the
pipeline succeeds.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from eletract import __version__
from eletract.errors import CheckpointError

logger = logging.getLogger(__name__)

CHECKPOINT_DIR = ".eletract"
CHECKPOINT_FILE = ".eletract/checkpoint.json"


@dataclass
class Checkpoint:
    """Steps completed so far for one project."""

    template: Optional[str] = None
    completed: list[str] = field(default_factory=list)
    version: str = __version__

    def is_done(self, step: str) -> bool:
        return step in self.completed

    def mark_done(self, step: str) -> None:
        if step not in self.completed:
            self.completed.append(step)


def read_checkpoint(project_root: Path) -> Optional[Checkpoint]:
    """Read the checkpoint of a project.

    Args:
        project_root: Path to project directory

    Returns:
        Checkpoint or None if the project has no checkpoint file

    Raises:
        CheckpointError: If the checkpoint exists but cannot be parsed
    """
    checkpoint_file = project_root / CHECKPOINT_FILE
    if not checkpoint_file.exists():
        return None

    try:
        data = json.loads(checkpoint_file.read_text(encoding="utf-8"))
        return Checkpoint(
            template=data.get("template"),
            completed=list(data.get("completed", [])),
            version=data.get("version", __version__),
        )
    except (OSError, json.JSONDecodeError, AttributeError, TypeError) as e:
        raise CheckpointError(f"Cannot read checkpoint {checkpoint_file}: {e}") from e


def write_checkpoint(project_root: Path, checkpoint: Checkpoint) -> None:
    """Write the checkpoint file, creating its directory if needed."""
    checkpoint_dir = project_root / CHECKPOINT_DIR
    checkpoint_dir.mkdir(exist_ok=True)
    data = {
        "version": checkpoint.version,
        "template": checkpoint.template,
        "completed": checkpoint.completed,
    }
    (project_root / CHECKPOINT_FILE).write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def clear_checkpoint(project_root: Path) -> None:
    """Remove the checkpoint file, and its directory when left empty."""
    checkpoint_file = project_root / CHECKPOINT_FILE
    if checkpoint_file.exists():
        checkpoint_file.unlink()
        logger.debug(f"Removed {checkpoint_file}")

    checkpoint_dir = project_root / CHECKPOINT_DIR
    if checkpoint_dir.is_dir() and not any(checkpoint_dir.iterdir()):
        checkpoint_dir.rmdir()
