"""Rewriting of the generated TypeScript bootstrap file (src/index.tsx)."""

import re
from typing import Protocol

BOOTSTRAP_FILE = "src/index.tsx"

_TELEMETRY_IMPORT = re.compile(
    r"^import reportWebVitals from ['\"]\./reportWebVitals['\"];?[ \t]*\r?\n?",
    re.MULTILINE,
)
_TELEMETRY_CALL = re.compile(r"^reportWebVitals\([^)\n]*\);?[ \t]*\r?\n?", re.MULTILINE)
_TELEMETRY_COMMENT = re.compile(
    r"^// If you want to start measuring performance in your app, pass a function\r?\n"
    r"// to log results \(for example: reportWebVitals\(console\.log\)\)\r?\n"
    r"// or send to an analytics endpoint\. Learn more: \S+\r?\n",
    re.MULTILINE,
)
_APP_IMPORT = re.compile(r"""(from\s+['"])\./App(['"])""")


class BootstrapPatcher(Protocol):
    """Rewrites the content of the bootstrap file."""

    def patch(self, source: str) -> str:
        """Return the patched source."""
        ...


class TextPatternBootstrapPatcher:
    """Patch the Create React App TypeScript bootstrap with fixed text patterns.

    Removes the reportWebVitals import, its explanatory comment and its call,
    and makes the App import name the .tsx file explicitly. Only the exact
    lines Create React App generates are matched; anything else is left alone.
    """

    def patch(self, source: str) -> str:
        source = _TELEMETRY_IMPORT.sub("", source)
        source = _TELEMETRY_COMMENT.sub("", source)
        source = _TELEMETRY_CALL.sub("", source)
        return _APP_IMPORT.sub(r"\1./App.tsx\2", source)
