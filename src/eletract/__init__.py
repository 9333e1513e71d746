"""eletract: scaffold a Create React App project wrapped in an Electron shell.

This package provides the provisioning pipeline and command-line front end that
turn an empty directory name into a runnable React + Electron project.
"""

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = ["__version__", "__license__"]
