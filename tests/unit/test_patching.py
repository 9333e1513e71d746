"""Unit tests for the TypeScript bootstrap patcher."""

import pytest
from conftest import CRA_INDEX_TSX

from eletract.project import BootstrapPatcher, TextPatternBootstrapPatcher


@pytest.fixture
def patcher() -> BootstrapPatcher:
    return TextPatternBootstrapPatcher()


@pytest.mark.unit
class TestTextPatternBootstrapPatcher:
    """Tests for TextPatternBootstrapPatcher."""

    def test_removes_web_vitals(self, patcher: BootstrapPatcher) -> None:
        """Import, comment and call of reportWebVitals are removed."""
        patched = patcher.patch(CRA_INDEX_TSX)

        assert "reportWebVitals" not in patched
        assert "bit.ly/CRA-vitals" not in patched

    def test_rewrites_app_import(self, patcher: BootstrapPatcher) -> None:
        """The App import names the .tsx file."""
        patched = patcher.patch(CRA_INDEX_TSX)

        assert "import App from './App.tsx';" in patched
        assert "import App from './App';" not in patched

    def test_keeps_everything_else(self, patcher: BootstrapPatcher) -> None:
        """Unrelated lines survive unchanged."""
        patched = patcher.patch(CRA_INDEX_TSX)

        assert patched == (
            "import React from 'react';\n"
            "import ReactDOM from 'react-dom/client';\n"
            "import './index.css';\n"
            "import App from './App.tsx';\n"
            "\n"
            "const root = ReactDOM.createRoot(\n"
            "  document.getElementById('root') as HTMLElement\n"
            ");\n"
            "root.render(\n"
            "  <React.StrictMode>\n"
            "    <App />\n"
            "  </React.StrictMode>\n"
            ");\n"
            "\n"
        )

    def test_idempotent(self, patcher: BootstrapPatcher) -> None:
        """Patching an already patched file changes nothing."""
        once = patcher.patch(CRA_INDEX_TSX)

        assert patcher.patch(once) == once

    def test_double_quotes(self, patcher: BootstrapPatcher) -> None:
        """Double-quoted imports are handled too."""
        source = 'import App from "./App";\nimport reportWebVitals from "./reportWebVitals";\n'

        assert patcher.patch(source) == 'import App from "./App.tsx";\n'

    def test_call_with_argument(self, patcher: BootstrapPatcher) -> None:
        """A reportWebVitals call with a callback is removed."""
        source = "render();\nreportWebVitals(console.log);\n"

        assert patcher.patch(source) == "render();\n"

    def test_similar_names_untouched(self, patcher: BootstrapPatcher) -> None:
        """Only the exact App module is rewritten."""
        source = "import AppShell from './AppShell';\nimport App from './components/App';\n"

        assert patcher.patch(source) == source

    def test_windows_line_endings(self, patcher: BootstrapPatcher) -> None:
        """CRLF files are patched as well."""
        source = CRA_INDEX_TSX.replace("\n", "\r\n")

        patched = patcher.patch(source)

        assert "reportWebVitals" not in patched
        assert "import App from './App.tsx';\r\n" in patched
