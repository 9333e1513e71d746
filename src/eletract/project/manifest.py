"""package.json handling.

The manifest is kept as a plain ordered dict so keys the provisioner does not
touch are written back unchanged and in their original order.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from eletract.errors import ManifestError
from eletract.project.sources import DEV_SERVER_URL, SHELL_ENTRY_FILE

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"

# Relative path of the Electron entry file, as referenced from package.json
SHELL_ENTRY_PATH = f"./{SHELL_ENTRY_FILE}"

DEV_SERVER_COMMAND = "npm start"
SHELL_SCRIPT = "electron ."
DEV_SCRIPT = (
    f'concurrently "{DEV_SERVER_COMMAND}" '
    f'"wait-on {DEV_SERVER_URL} && npm run electron"'
)


def load_manifest(path: Path) -> Dict[str, Any]:
    """Read and parse a package.json file.

    Args:
        path: Path to package.json

    Returns:
        Parsed manifest as an ordered dict

    Raises:
        ManifestError: If the file is missing, unreadable, or not a JSON object
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ManifestError(f"Cannot read {MANIFEST_FILE}: {path} not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read {MANIFEST_FILE}: {e}") from e

    try:
        manifest = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Cannot parse {MANIFEST_FILE}: {e}") from e

    if not isinstance(manifest, dict):
        raise ManifestError(
            f"Cannot parse {MANIFEST_FILE}: expected a JSON object, "
            f"got {type(manifest).__name__}"
        )

    return manifest


def add_desktop_scripts(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """Point the manifest at the Electron entry and add launch scripts.

    Sets ``main`` and the ``electron`` and ``dev`` scripts, overwriting any
    previous values. Applying it more than once gives the same result.

    Args:
        manifest: Parsed manifest, modified in place

    Returns:
        The same manifest object

    Raises:
        ManifestError: If ``scripts`` exists but is not a mapping
    """
    manifest["main"] = SHELL_ENTRY_PATH

    scripts = manifest.setdefault("scripts", {})
    if not isinstance(scripts, dict):
        raise ManifestError(
            f'"scripts" in {MANIFEST_FILE} must be an object, got {type(scripts).__name__}'
        )

    scripts["electron"] = SHELL_SCRIPT
    scripts["dev"] = DEV_SCRIPT

    return manifest


def write_manifest(path: Path, manifest: Dict[str, Any]) -> None:
    """Write a manifest back to disk, pretty-printed with a trailing newline."""
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug(f"Wrote {path}")
