"""React + Electron project provisioning."""

from eletract.provision.checkpoint import CHECKPOINT_DIR, CHECKPOINT_FILE, read_checkpoint
from eletract.provision.provisioner import (
    ProvisionContext,
    ProvisionResult,
    Step,
    build_steps,
    provision_project,
)

__all__ = [
    "CHECKPOINT_DIR",
    "CHECKPOINT_FILE",
    "ProvisionContext",
    "ProvisionResult",
    "Step",
    "build_steps",
    "provision_project",
    "read_checkpoint",
]
