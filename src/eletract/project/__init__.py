"""Files generated into, and patched within, the new project."""

from eletract.project.manifest import (
    DEV_SCRIPT,
    MANIFEST_FILE,
    SHELL_ENTRY_PATH,
    SHELL_SCRIPT,
    add_desktop_scripts,
    load_manifest,
    write_manifest,
)
from eletract.project.patching import (
    BOOTSTRAP_FILE,
    BootstrapPatcher,
    TextPatternBootstrapPatcher,
)
from eletract.project.sources import (
    DEV_SERVER_URL,
    SHELL_DIR,
    SHELL_ENTRY_FILE,
    SHELL_ENTRY_SOURCE,
    app_entry_candidates,
    app_entry_file,
    app_entry_source,
)

__all__ = [
    "BOOTSTRAP_FILE",
    "BootstrapPatcher",
    "DEV_SCRIPT",
    "DEV_SERVER_URL",
    "MANIFEST_FILE",
    "SHELL_DIR",
    "SHELL_ENTRY_FILE",
    "SHELL_ENTRY_PATH",
    "SHELL_ENTRY_SOURCE",
    "SHELL_SCRIPT",
    "TextPatternBootstrapPatcher",
    "add_desktop_scripts",
    "app_entry_candidates",
    "app_entry_file",
    "app_entry_source",
    "load_manifest",
    "write_manifest",
]
