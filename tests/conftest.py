"""Shared pytest fixtures for eletract tests."""

import json
from pathlib import Path
from typing import Optional, Sequence

import pytest

from eletract.errors import ExternalCommandError

# src/index.tsx as generated by the create-react-app TypeScript template
CRA_INDEX_TSX = """\
import React from 'react';
import ReactDOM from 'react-dom/client';
import './index.css';
import App from './App';
import reportWebVitals from './reportWebVitals';

const root = ReactDOM.createRoot(
  document.getElementById('root') as HTMLElement
);
root.render(
  <React.StrictMode>
    <App />
  </React.StrictMode>
);

// If you want to start measuring performance in your app, pass a function
// to log results (for example: reportWebVitals(console.log))
// or send to an analytics endpoint. Learn more: https://bit.ly/CRA-vitals
reportWebVitals();
"""

CRA_INDEX_JS = CRA_INDEX_TSX.replace(" as HTMLElement", "")

CRA_APP = "function App() {\n  return <div className=\"App\">create-react-app</div>;\n}\n"


def cra_package_json(name: str) -> dict:
    """package.json as generated by create-react-app."""
    return {
        "name": name,
        "version": "0.1.0",
        "private": True,
        "dependencies": {
            "react": "^18.2.0",
            "react-dom": "^18.2.0",
            "react-scripts": "5.0.1",
        },
        "scripts": {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
            "eject": "react-scripts eject",
        },
        "eslintConfig": {"extends": ["react-app", "react-app/jest"]},
        "browserslist": {
            "production": [">0.2%", "not dead", "not op_mini all"],
            "development": ["last 1 chrome version"],
        },
    }


class FakeRunner:
    """Records commands instead of running them.

    The create-react-app invocation is simulated by writing a minimal project
    tree into the working directory.

    Args:
        fail_on: Fail any command whose text contains this substring
        create_project: Whether the scaffolder creates the project directory
        with_app: Whether the scaffolder writes src/App.(js|tsx)
        with_index: Whether the scaffolder writes src/index.(js|tsx)
        with_manifest: Whether the scaffolder writes package.json
    """

    def __init__(
        self,
        fail_on: Optional[str] = None,
        create_project: bool = True,
        with_app: bool = True,
        with_index: bool = True,
        with_manifest: bool = True,
    ):
        self.fail_on = fail_on
        self.create_project = create_project
        self.with_app = with_app
        self.with_index = with_index
        self.with_manifest = with_manifest
        self.calls: list[tuple[list[str], Path, str]] = []

    @property
    def commands(self) -> list[str]:
        return [" ".join(cmd) for cmd, _, _ in self.calls]

    def run(self, cmd: Sequence[str], cwd: Path, step: str) -> None:
        cmd = list(cmd)
        self.calls.append((cmd, Path(cwd), step))

        if self.fail_on is not None and self.fail_on in " ".join(cmd):
            raise ExternalCommandError(step, cmd, returncode=1)

        if "create-react-app" in cmd and self.create_project:
            self._scaffold(cmd, Path(cwd))

    def _scaffold(self, cmd: list[str], cwd: Path) -> None:
        target = cmd[cmd.index("create-react-app") + 1]
        typescript = "--template" in cmd and cmd[cmd.index("--template") + 1] == "typescript"
        project = cwd / target
        src = project / "src"
        src.mkdir(parents=True)

        if self.with_manifest:
            (project / "package.json").write_text(
                json.dumps(cra_package_json(target), indent=2) + "\n"
            )
        suffix = "tsx" if typescript else "js"
        if self.with_app:
            (src / f"App.{suffix}").write_text(CRA_APP)
        if self.with_index:
            (src / f"index.{suffix}").write_text(CRA_INDEX_TSX if typescript else CRA_INDEX_JS)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a recording runner that simulates create-react-app."""
    return FakeRunner()


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default configuration path at a non-existent file."""
    config_path = tmp_path / "home" / ".config" / "eletract" / "config.yaml"
    monkeypatch.setattr("eletract.config.loader.DEFAULT_CONFIG_PATH", str(config_path))
    monkeypatch.delenv("ELETRACT_CONFIG", raising=False)
    return config_path
